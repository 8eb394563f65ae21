"""Django settings for the imagecanvas service.

Every deployment-specific value is read from the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str]:
    return [item.strip() for item in os.environ.get(name, "").split(",") if item.strip()]


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = _env_bool("DJANGO_DEBUG", default=False)
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS") or ["localhost", "127.0.0.1", "testserver"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "imagecanvas",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "imagecanvas.urls"
WSGI_APPLICATION = "imagecanvas.wsgi.application"

# The service keeps no state; an in-memory database satisfies contrib apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True
TIME_ZONE = "UTC"

# Canvas pipeline
IMAGECANVAS_MAX_UPLOAD_BYTES = int(os.environ.get("IMAGECANVAS_MAX_UPLOAD_BYTES", 10 * 1024 * 1024))
IMAGECANVAS_MAX_BATCH_SIZE = int(os.environ.get("IMAGECANVAS_MAX_BATCH_SIZE", 5))
IMAGECANVAS_DEFAULT_SIZE = int(os.environ.get("IMAGECANVAS_DEFAULT_SIZE", 3000))
IMAGECANVAS_DOWNLOAD_TIMEOUT = int(os.environ.get("IMAGECANVAS_DOWNLOAD_TIMEOUT", 10))

# Uploaded files up to the per-file limit stay in memory.
FILE_UPLOAD_MAX_MEMORY_SIZE = IMAGECANVAS_MAX_UPLOAD_BYTES

# Authentication
AUTH_TOKEN = os.environ.get("AUTH_TOKEN", "")

# AWS S3
AWS_ACCESS_KEY_ID = os.environ.get("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY = os.environ.get("AWS_SECRET_ACCESS_KEY", "")
AWS_S3_REGION_NAME = os.environ.get("AWS_REGION", os.environ.get("AWS_S3_REGION_NAME", ""))
AWS_STORAGE_BUCKET_NAME = os.environ.get("S3_BUCKET_NAME", os.environ.get("AWS_STORAGE_BUCKET_NAME", ""))
S3_FOLDER_PREFIX = os.environ.get("S3_FOLDER_PREFIX", "")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "imagecanvas.api.authentication.bearer_token_authentication.BearerTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "imagecanvas.api.exceptions.api_exception_handler",
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
