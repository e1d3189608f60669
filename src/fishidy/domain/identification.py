"""Models for species identification results."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Confidence(StrEnum):
    """Confidence levels the model is asked to report."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Identification(BaseModel):
    """Lenient view over the model's identification payload.

    The payload is stored exactly as the model produced it. This view never
    assumes a field is present: missing or mistyped fields read as ``None``
    and unknown keys are kept as extras.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    common_name: str | None = None
    scientific_name: str | None = None
    family: str | None = None
    confidence: str | None = None
    characteristics: list[str] | None = None
    habitat: str | None = None
    average_size: str | None = None
    notes: str | None = None

    @field_validator(
        "common_name",
        "scientific_name",
        "family",
        "confidence",
        "habitat",
        "average_size",
        "notes",
        mode="before",
    )
    @classmethod
    def _text_or_none(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("characteristics", mode="before")
    @classmethod
    def _strings_or_none(cls, value: object) -> list[str] | None:
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]

    @property
    def confidence_level(self) -> Confidence | None:
        """Return the confidence as an enum when it is one of the known levels."""
        if self.confidence is None:
            return None
        try:
            return Confidence(self.confidence.strip().lower())
        except ValueError:
            return None

    @classmethod
    def from_payload(cls, payload: object) -> "Identification":
        """Build a view from any parsed JSON value."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)
