"""Image preparation for model calls."""

import io
from pathlib import PurePosixPath

from PIL import Image

DEFAULT_MAX_EDGE = 1568
DEFAULT_QUALITY = 80
DEFAULT_MEDIA_TYPE = "image/jpeg"

_MEDIA_TYPES = {
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


def shrink(
    image_bytes: bytes,
    max_edge: int = DEFAULT_MAX_EDGE,
    quality: int = DEFAULT_QUALITY,
) -> bytes:
    """Re-encode an image as JPEG with its long edge bounded by ``max_edge``.

    Aspect ratio is preserved and images are never upscaled, so shrinking an
    already shrunk image leaves its dimensions unchanged.
    """
    with Image.open(io.BytesIO(image_bytes)) as image:
        image.load()
        resized = image.convert("RGB") if image.mode != "RGB" else image.copy()
    resized.thumbnail((max_edge, max_edge), Image.Resampling.LANCZOS)
    output = io.BytesIO()
    resized.save(output, format="JPEG", quality=quality)
    return output.getvalue()


def media_type_for_key(key: str) -> str:
    """Guess the media type from a storage key's file suffix."""
    suffix = PurePosixPath(key).suffix.lower()
    return _MEDIA_TYPES.get(suffix, DEFAULT_MEDIA_TYPE)
