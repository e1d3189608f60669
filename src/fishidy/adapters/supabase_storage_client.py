"""Supabase Storage access to catch photos."""

from dataclasses import dataclass

from supabase import Client, StorageException

from fishidy.domain.errors import AssetNotFoundError, UpstreamError
from fishidy.services.assets import AssetStore

_NOT_FOUND_MARKERS = ("not_found", "not found", "404")


@dataclass
class SupabaseAssetStore(AssetStore):
    """Supabase implementation of the photo blob store."""

    client: Client
    bucket: str

    def download(self, key: str) -> bytes:
        """Download the original photo bytes."""
        try:
            return self.client.storage.from_(self.bucket).download(key)
        except StorageException as exc:
            if _is_not_found(exc):
                raise AssetNotFoundError(key) from exc
            raise

    def remove(self, key: str) -> bool:
        """Delete a photo, returning false when nothing was stored there."""
        removed = self.client.storage.from_(self.bucket).remove([key])
        return bool(removed)

    def create_signed_url(self, key: str, expires_in: int) -> str:
        """Create a time-limited read URL for a photo."""
        try:
            result = self.client.storage.from_(self.bucket).create_signed_url(
                key, expires_in
            )
        except StorageException as exc:
            if _is_not_found(exc):
                raise AssetNotFoundError(key) from exc
            raise
        signed_url = result.get("signedURL") or result.get("signedUrl")
        if not signed_url:
            raise UpstreamError(f"Storage returned no signed URL for {key}")
        return str(signed_url)


def _is_not_found(exc: StorageException) -> bool:
    detail = str(exc).lower()
    return any(marker in detail for marker in _NOT_FOUND_MARKERS)
