"""Blob storage interface for catch photos."""

from typing import Protocol
from urllib.parse import unquote, urlparse

_OBJECT_PREFIX = "/storage/v1/object/"
_ACCESS_SEGMENTS = {"public", "sign", "authenticated"}


class AssetStore(Protocol):
    """Interface for the external blob store holding original photos."""

    def download(self, key: str) -> bytes:
        """Return the bytes stored under a key."""

    def remove(self, key: str) -> bool:
        """Delete an object and return whether anything was removed."""

    def create_signed_url(self, key: str, expires_in: int) -> str:
        """Return a time-limited read URL for a key."""


def storage_key_from_url(url: str | None, bucket: str) -> str | None:
    """Recover a storage key from a Supabase Storage object URL.

    Returns ``None`` when the URL does not point into ``bucket``.
    """
    if not url:
        return None
    path = urlparse(url).path
    _, marker, rest = path.partition(_OBJECT_PREFIX)
    if not marker:
        return None
    segments = rest.split("/")
    if segments and segments[0] in _ACCESS_SEGMENTS:
        segments = segments[1:]
    if len(segments) < 2 or segments[0] != bucket:  # noqa: PLR2004
        return None
    key = unquote("/".join(segments[1:]))
    return key or None
