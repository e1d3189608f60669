"""Identity-provider lookups."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fishidy.domain.models import UserProfile

logger = logging.getLogger(__name__)


class IdentityClient(Protocol):
    """Interface for the external identity provider."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the current profile for a user id, if the user exists."""

    def resolve_user_id(self, access_token: str) -> str | None:
        """Return the user id an access token belongs to, if it is valid."""


@dataclass
class ProfileService:
    """Service that snapshots display profiles and authenticates callers."""

    client: IdentityClient
    default_display_name: str = "Angler"

    def snapshot(self, user_id: str) -> UserProfile:
        """Return the user's display profile, falling back to a default."""
        try:
            profile = self.client.get_profile(user_id)
        except Exception:
            logger.warning(
                "Profile lookup failed, using default display name",
                exc_info=True,
                extra={"user_id": user_id},
            )
            profile = None
        if profile is None or not profile.display_name:
            photo_url = profile.photo_url if profile else None
            return UserProfile(
                display_name=self.default_display_name, photo_url=photo_url
            )
        return profile

    def authenticate(self, access_token: str) -> str | None:
        """Resolve an access token to a user id."""
        if not access_token:
            return None
        return self.client.resolve_user_id(access_token)
