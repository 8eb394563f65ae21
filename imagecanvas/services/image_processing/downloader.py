import logging
import posixpath
from dataclasses import dataclass, field
from urllib.parse import urlparse

import requests
from requests import RequestException

from imagecanvas.services.exceptions import DecodeError, DownstreamError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_NAME = "downloaded_image"


@dataclass(frozen=True)
class DownloadedImage:
    content: bytes = field(repr=False)
    content_type: str
    name: str


class ImageDownloader:
    """Handles downloading images with basic validation and error handling."""

    def __init__(self, timeout: int = 10, max_size_bytes: int = 10 * 1024 * 1024, session: requests.Session | None = None):
        self.timeout = timeout
        self.max_size_bytes = max_size_bytes
        self.session = session or requests.Session()

    @staticmethod
    def name_from_url(url: str) -> str:
        """Return the last path segment of the URL, or a generic name."""
        return posixpath.basename(urlparse(url).path) or DEFAULT_DOWNLOAD_NAME

    def download(self, url: str) -> DownloadedImage:
        """
        Downloads an image from a URL with validation.

        Raises:
            ValidationError: If the URL is not http(s) or the payload is too large.
            DownstreamError: If the remote host cannot be reached or answers with an error.
            DecodeError: If the remote host does not return an image content type.
        """
        if urlparse(url).scheme not in ("http", "https"):
            raise ValidationError(f"Unsupported image URL: {url}")

        try:
            # Use stream=True to check content-type and size before downloading full payload
            response = self.session.get(url, timeout=self.timeout, stream=True)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"Failed to download image from {url}: {e}")
            raise DownstreamError(f"Failed to download image: {e}", status_code=status_code) from e
        except RequestException as e:
            logger.error(f"Failed to download image from {url}: {e}")
            raise DownstreamError(f"Error downloading image from URL: {e}") from e

        with response:
            content_type = response.headers.get("Content-Type", "")
            if not content_type.startswith("image/"):
                logger.warning(f"URL {url} did not return an image content type: {content_type}")
                raise DecodeError("URL does not point to a valid image", details={"content_type": content_type})

            content_length = response.headers.get("Content-Length")
            if content_length and content_length.isdigit() and int(content_length) > self.max_size_bytes:
                logger.warning(f"Image at {url} exceeds maximum size: {content_length} bytes")
                raise ValidationError("Remote image exceeds maximum size", details={"max_bytes": self.max_size_bytes})

            try:
                content = response.content
            except RequestException as e:
                logger.error(f"Connection dropped while reading {url}: {e}")
                raise DownstreamError(f"Error downloading image from URL: {e}") from e

        if len(content) > self.max_size_bytes:
            logger.warning(f"Downloaded content from {url} exceeds maximum size.")
            raise ValidationError("Remote image exceeds maximum size", details={"max_bytes": self.max_size_bytes})

        return DownloadedImage(content=content, content_type=content_type.split(";")[0].strip(), name=self.name_from_url(url))
