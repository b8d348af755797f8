"""Service for turning an uploaded photo into an inline data URI."""

import asyncio
import base64
from typing import Optional
from cvstudio.config import get_settings
from cvstudio.exceptions import PhotoDecodeError


class PhotoLoader:
    """Encode uploaded image files as ``data:`` URIs."""

    def __init__(self, max_bytes: Optional[int] = None):
        """
        Initialize the photo loader.

        Args:
            max_bytes: Largest accepted upload. Defaults to settings.
        """
        self.max_bytes = max_bytes if max_bytes is not None else get_settings().cv_max_photo_bytes

    async def load_photo(self, data: bytes, mime_type: str) -> str:
        """
        Encode an uploaded photo.

        Args:
            data: Raw file content
            mime_type: MIME type reported for the upload

        Returns:
            str: ``data:<mime>;base64,...`` URI

        Raises:
            PhotoDecodeError: If the upload is empty, too large or not an image
        """
        if not mime_type or not mime_type.startswith("image/"):
            raise PhotoDecodeError(f"Unsupported photo type: {mime_type!r}")
        if not data:
            raise PhotoDecodeError("Photo file is empty")
        if len(data) > self.max_bytes:
            raise PhotoDecodeError(
                f"Photo is too large: {len(data)} bytes (limit {self.max_bytes})"
            )

        encoded = await asyncio.to_thread(base64.b64encode, data)
        return f"data:{mime_type};base64,{encoded.decode('ascii')}"
