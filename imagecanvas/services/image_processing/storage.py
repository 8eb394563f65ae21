import logging
from io import BytesIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from imagecanvas.services.exceptions import ConfigurationError, DownstreamError

logger = logging.getLogger(__name__)


class StorageGateway:
    """Handles image storage operations, specifically AWS S3."""

    def __init__(self, s3_client=None, bucket_name: str | None = None, region_name: str | None = None, folder_prefix: str = ""):
        """Initialize the storage gateway with S3 configuration.

        Args:
            s3_client: Optional boto3 S3 client instance.
            bucket_name: Name of the S3 bucket.
            region_name: AWS region for the S3 bucket.
            folder_prefix: Prepended verbatim to every object key.
        """
        self.s3_client = s3_client or boto3.client("s3", region_name=region_name)
        self.bucket_name = bucket_name
        self.region_name = region_name
        self.folder_prefix = folder_prefix or ""

    def build_url(self, key: str) -> str:
        region_part = f".{self.region_name}" if self.region_name else ""
        return f"https://{self.bucket_name}.s3{region_part}.amazonaws.com/{key}"

    def upload(self, image_bytes: bytes, filename: str, content_type: str) -> str:
        """Upload an image to S3 and return the public URL.

        Args:
            image_bytes: The encoded image.
            filename: Object name, placed under the folder prefix.
            content_type: MIME type stored with the object.

        Returns:
            The public S3 URL.

        Raises:
            ConfigurationError: If no bucket is configured.
            DownstreamError: If the S3 write fails. The caller still holds the bytes.
        """
        if not self.bucket_name:
            logger.error("Bucket name not configured for StorageGateway.")
            raise ConfigurationError("S3 bucket name is not configured.")

        s3_key = f"{self.folder_prefix}{filename}"
        logger.info(f"Uploading {filename} to s3://{self.bucket_name}/{s3_key}.")
        try:
            self.s3_client.upload_fileobj(
                BytesIO(image_bytes),
                self.bucket_name,
                s3_key,
                ExtraArgs={"ContentType": content_type},
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading image {filename} to S3: {e}")
            raise DownstreamError(f"Failed to upload {filename} to object storage: {e}", details={"key": s3_key}) from e

        s3_url = self.build_url(s3_key)
        logger.info(f"Successfully uploaded to {s3_url}")
        return s3_url
