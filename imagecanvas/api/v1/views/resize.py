"""Resize endpoints.

POST /api/v1/resize/            : one image (upload or URL) onto a square canvas.
POST /api/v1/resize-multiple/   : up to ``IMAGECANVAS_MAX_BATCH_SIZE`` uploads, processed concurrently.
"""

import logging

from django.http import HttpResponse
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from imagecanvas.api.v1.serializers.resize import ResizeQuerySerializer, ResizeSourceSerializer
from imagecanvas.services import factories
from imagecanvas.services.canvas_impl.background import resolve_background
from imagecanvas.services.canvas_impl.config import CanvasConfig
from imagecanvas.services.canvas_impl.schemas import SourceImage
from imagecanvas.services.exceptions import ValidationError

logger = logging.getLogger(__name__)

BACKGROUND_FALLBACK_HEADER = "X-Background-Fallback"


def _read_upload(upload) -> SourceImage:
    return SourceImage(content=upload.read(), name=upload.name, declared_mime_type=upload.content_type or "")


class ResizeView(APIView):
    """Normalize a single image.

    Exactly one of a multipart ``image`` file or an ``image_url`` field must be
    sent. With ``?save_to_s3=true`` the result is uploaded and described in a
    JSON body; otherwise the encoded image is returned as an attachment.
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request: Request) -> HttpResponse:
        config = CanvasConfig.from_settings()
        query = ResizeQuerySerializer(data=request.query_params, default_size=config.default_box_size)
        query.is_valid(raise_exception=True)
        body = ResizeSourceSerializer(data=request.data)
        body.is_valid(raise_exception=True)

        upload = body.validated_data.get("image")
        image_url = body.validated_data.get("image_url")
        if not upload and not image_url:
            raise ValidationError("Either 'image' file field or 'image_url' JSON field must be provided")
        if upload and image_url:
            raise ValidationError("Provide either 'image' file field OR 'image_url' JSON field, not both")

        if upload:
            source = _read_upload(upload)
        else:
            downloaded = factories.build_downloader(config).download(image_url)
            source = SourceImage(content=downloaded.content, name=downloaded.name, declared_mime_type=downloaded.content_type)

        bg_param = query.validated_data["bg"]
        background = resolve_background(bg_param)
        target = query.validated_data["target"]

        result = factories.build_transformer().transform(source, background, target)
        assert result.encoded_bytes is not None and result.output_format is not None

        if query.validated_data["save_to_s3"]:
            s3_url = factories.build_storage_gateway().upload(result.encoded_bytes, result.filename, result.output_format.content_type)
            return Response(
                {
                    "success": True,
                    "filename": result.filename,
                    "url": s3_url,
                    "size": target.label,
                    "format": result.output_format.value,
                    "background": bg_param,
                    "background_fallback": background.is_fallback,
                    "source": "file" if upload else "url",
                    "saved_to_s3": True,
                }
            )

        response = HttpResponse(result.encoded_bytes, content_type=result.output_format.content_type)
        response["Content-Disposition"] = f'attachment; filename="{result.filename}"'
        response["Content-Length"] = str(len(result.encoded_bytes))
        response[BACKGROUND_FALLBACK_HEADER] = "true" if background.is_fallback else "false"
        return response


class BatchResizeView(APIView):
    """Normalize up to the configured maximum of uploaded ``images`` concurrently.

    Results are returned inline as base64 data URLs; nothing is uploaded to S3.
    Individual failures are reported under ``errors`` without failing the request.
    """

    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request) -> Response:
        config = CanvasConfig.from_settings()
        query = ResizeQuerySerializer(data=request.query_params, default_size=config.default_box_size)
        query.is_valid(raise_exception=True)

        uploads = request.FILES.getlist("images")
        orchestrator = factories.build_batch_orchestrator(config)
        orchestrator.validate(uploads)

        for upload in uploads:
            if not (upload.content_type or "").startswith("image/"):
                raise ValidationError("Only image files are allowed", details={"file": upload.name})
            if upload.size > config.max_upload_bytes:
                raise ValidationError("File too large", details={"file": upload.name, "max_bytes": config.max_upload_bytes})

        bg_param = query.validated_data["bg"]
        background = resolve_background(bg_param)
        target = query.validated_data["target"]

        batch = orchestrator.run([_read_upload(upload) for upload in uploads], background, target)

        return Response(
            {
                "success": True,
                "totalImages": batch.total_count,
                "successfulCount": batch.success_count,
                "failedCount": batch.failure_count,
                "images": [item.to_dict() for item in batch.successes],
                "errors": [item.to_dict() for item in batch.failures],
                "settings": {
                    "size": target.label,
                    "background": bg_param,
                    "backgroundFallback": background.is_fallback,
                },
            }
        )
