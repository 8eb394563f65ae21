from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.exceptions import ValidationError as DRFValidationError

from imagecanvas.api.exceptions import api_exception_handler
from imagecanvas.services.exceptions import (
    ConfigurationError,
    DecodeError,
    DownstreamError,
    EncodeError,
    ValidationError,
)


def test_validation_error_is_400_without_prefix():
    response = api_exception_handler(ValidationError("At least one image file must be provided"), {})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {"error": "At least one image file must be provided", "success": False}


def test_codec_errors_are_422():
    for exc in (DecodeError("cannot identify image file"), EncodeError("Failed to encode image as png: x")):
        response = api_exception_handler(exc, {})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data["error"] == f"Processing error: {exc.message}"


def test_downstream_error_is_502():
    response = api_exception_handler(DownstreamError("Remote host failed", status_code=404), {})

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert response.data == {"error": "Processing error: Remote host failed", "success": False}


def test_configuration_error_is_500():
    response = api_exception_handler(ConfigurationError("Storage bucket is not configured"), {})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


def test_drf_errors_are_flattened():
    response = api_exception_handler(DRFValidationError({"size": ["Invalid size parameter: abc"]}), {})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {"error": "size: Invalid size parameter: abc", "success": False}


def test_drf_detail_is_unwrapped():
    response = api_exception_handler(NotAuthenticated(), {})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.data == {"error": "Authentication credentials were not provided.", "success": False}


def test_unknown_exception_is_left_to_django():
    assert api_exception_handler(RuntimeError("boom"), {}) is None


def test_downstream_error_str_includes_status():
    assert str(DownstreamError("Remote host failed", status_code=404)) == "[HTTP 404] Remote host failed"
    assert str(ValidationError("bad", details={"file": "a.txt"})) == "bad (details: {'file': 'a.txt'})"
