"""Supabase Auth lookups for profiles and access tokens."""

from dataclasses import dataclass

from supabase import AuthError, Client

from fishidy.domain.models import UserProfile
from fishidy.services.profiles import IdentityClient


@dataclass
class SupabaseIdentityClient(IdentityClient):
    """Identity client backed by the Supabase Auth admin API."""

    client: Client

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the user's name and avatar from their auth metadata."""
        response = self.client.auth.admin.get_user_by_id(user_id)
        user = response.user if response else None
        if user is None:
            return None
        metadata = user.user_metadata or {}
        display_name = metadata.get("full_name") or metadata.get("name") or ""
        photo_url = metadata.get("avatar_url") or metadata.get("picture")
        return UserProfile(
            display_name=str(display_name),
            photo_url=str(photo_url) if photo_url else None,
        )

    def resolve_user_id(self, access_token: str) -> str | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            return None
        if response is None or response.user is None:
            return None
        return str(response.user.id)
