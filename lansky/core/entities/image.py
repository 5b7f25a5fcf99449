"""Image payload entity for the product photo editor."""

import base64
import binascii
import re
from dataclasses import dataclass

DEFAULT_IMAGE_MIME = "image/png"

_DATA_URL_RE = re.compile(r"^data:([^;,]+)?(;base64)?,(.*)$", re.DOTALL)


@dataclass(frozen=True)
class ImagePayload:
    """Raw image bytes with their MIME type."""

    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME

    @classmethod
    def from_base64(cls, encoded: str, mime_type: str | None = None) -> "ImagePayload":
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid base64 image data: {e}") from e
        return cls(data=data, mime_type=mime_type or DEFAULT_IMAGE_MIME)

    @classmethod
    def from_data_url(cls, value: str) -> "ImagePayload":
        """Parse a ``data:`` URL; bare base64 is accepted as PNG."""
        match = _DATA_URL_RE.match(value.strip())
        if match is None:
            return cls.from_base64(value.strip())
        mime_type, _, encoded = match.groups()
        return cls.from_base64(encoded, mime_type)

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"
