"""Builders wiring the canvas pipeline collaborators from Django settings.

Views call these once per request; nothing here is cached at module level.
"""

import boto3
from django.conf import settings

from imagecanvas.services.canvas_impl.batch_orchestrator import BatchResizeOrchestrator
from imagecanvas.services.canvas_impl.codec import PillowCodec
from imagecanvas.services.canvas_impl.config import CanvasConfig
from imagecanvas.services.canvas_impl.transformer import CanvasTransformer
from imagecanvas.services.image_processing.downloader import ImageDownloader
from imagecanvas.services.image_processing.storage import StorageGateway


def build_transformer() -> CanvasTransformer:
    return CanvasTransformer(codec=PillowCodec())


def build_batch_orchestrator(config: CanvasConfig | None = None) -> BatchResizeOrchestrator:
    config = config or CanvasConfig.from_settings()
    return BatchResizeOrchestrator(transformer=build_transformer(), max_batch_size=config.max_batch_size)


def build_downloader(config: CanvasConfig | None = None) -> ImageDownloader:
    config = config or CanvasConfig.from_settings()
    return ImageDownloader(timeout=int(getattr(settings, "IMAGECANVAS_DOWNLOAD_TIMEOUT", 10)), max_size_bytes=config.max_upload_bytes)


def build_storage_gateway() -> StorageGateway:
    s3_client = boto3.client(
        "s3",
        aws_access_key_id=getattr(settings, "AWS_ACCESS_KEY_ID", None) or None,
        aws_secret_access_key=getattr(settings, "AWS_SECRET_ACCESS_KEY", None) or None,
        region_name=getattr(settings, "AWS_S3_REGION_NAME", None) or None,
    )
    return StorageGateway(
        s3_client=s3_client,
        bucket_name=getattr(settings, "AWS_STORAGE_BUCKET_NAME", None),
        region_name=getattr(settings, "AWS_S3_REGION_NAME", None),
        folder_prefix=getattr(settings, "S3_FOLDER_PREFIX", ""),
    )
