"""Domain models for catch records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fishidy.domain.identification import Identification
from fishidy.domain.models import UserProfile


@dataclass(frozen=True)
class NewCatch:
    """Everything the identification pipeline persists for a new catch."""

    user_id: str
    profile: UserProfile
    image_url: object
    image_path: str
    identification: object
    catch_details: object


@dataclass(frozen=True)
class CatchRecord:
    """Represents a catch stored in the database."""

    id: UUID
    user_id: str
    user_display_name: str | None
    user_photo_url: str | None
    image_url: str | None
    image_path: str | None
    identification: object
    catch_details: object
    timestamp: datetime | None

    def species(self) -> Identification:
        """Return a typed view of the stored identification payload."""
        return Identification.from_payload(self.identification)


@dataclass(frozen=True)
class Angler:
    """A distinct user appearing in the community feed."""

    user_id: str
    display_name: str


class CatchDetailsEdit(BaseModel):
    """Editable catch detail fields."""

    model_config = ConfigDict(extra="forbid")

    location: str | None = None
    method: str | None = None
    date: str | None = None
    notes: str | None = None


class IdentificationEdit(BaseModel):
    """Editable identification fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    common_name: str | None = Field(default=None, alias="commonName")
    scientific_name: str | None = Field(default=None, alias="scientificName")


class CatchEdit(BaseModel):
    """Partial update an owner may apply to a catch."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    catch_details: CatchDetailsEdit | None = Field(default=None, alias="catchDetails")
    identification: IdentificationEdit | None = None

    def details_patch(self) -> dict[str, object]:
        """Return only the catch detail fields the caller supplied."""
        if self.catch_details is None:
            return {}
        return self.catch_details.model_dump(exclude_unset=True)

    def identification_patch(self) -> dict[str, object]:
        """Return only the identification fields the caller supplied."""
        if self.identification is None:
            return {}
        return self.identification.model_dump(by_alias=True, exclude_unset=True)
