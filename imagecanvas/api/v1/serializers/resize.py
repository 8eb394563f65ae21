from rest_framework import serializers

from imagecanvas.services.canvas_impl.background import WHITE_KEYWORD
from imagecanvas.services.canvas_impl.planner import DEFAULT_BOX_SIZE, ResizeTarget
from imagecanvas.services.exceptions import ValidationError


class ResizeQuerySerializer(serializers.Serializer):
    """Query parameters shared by the single and batch resize endpoints.

    ``size`` is parsed leniently: absent uses the configured default, values
    below 1 clamp to 1. The parsed target is exposed as ``validated_data["target"]``.
    """

    size = serializers.CharField(required=False, allow_blank=True)
    bg = serializers.CharField(required=False, allow_blank=True, default=WHITE_KEYWORD)
    save_to_s3 = serializers.BooleanField(required=False, default=False)

    def __init__(self, *args, default_size: int = DEFAULT_BOX_SIZE, **kwargs):
        super().__init__(*args, **kwargs)
        self.default_size = default_size

    def validate(self, attrs):
        try:
            attrs["target"] = ResizeTarget.from_param(attrs.get("size"), default=self.default_size)
        except ValidationError as e:
            raise serializers.ValidationError({"size": e.message}) from e
        attrs["bg"] = attrs.get("bg") or WHITE_KEYWORD
        return attrs


class ResizeSourceSerializer(serializers.Serializer):
    """Body of the single resize endpoint: an uploaded ``image`` or an ``image_url``."""

    image = serializers.FileField(required=False, allow_empty_file=False)
    image_url = serializers.URLField(required=False, allow_blank=True)
