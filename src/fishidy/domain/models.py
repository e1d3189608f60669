"""Domain models for fishidy users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Display snapshot of an identity-provider profile."""

    display_name: str
    photo_url: str | None = None
