"""Catch record persistence and owner edits."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from fishidy.domain.catches import Angler, CatchEdit, CatchRecord, NewCatch
from fishidy.domain.errors import CatchNotFoundError, NotCatchOwnerError
from fishidy.services.assets import AssetStore, storage_key_from_url

logger = logging.getLogger(__name__)


class CatchRepository(Protocol):
    """Persistence interface for catch records."""

    def create_catch(self, new_catch: NewCatch) -> UUID:
        """Insert a catch record and return its id."""

    def get_catch(self, catch_id: UUID) -> CatchRecord | None:
        """Return a catch record by id."""

    def list_catches(self, user_id: str | None = None) -> list[CatchRecord]:
        """Return catches, newest first, optionally for a single user."""

    def update_catch(
        self,
        catch_id: UUID,
        *,
        identification: object | None = None,
        catch_details: dict[str, object] | None = None,
    ) -> None:
        """Overwrite the identification and/or catch detail columns."""

    def delete_catch(self, catch_id: UUID) -> None:
        """Delete a catch record."""


@dataclass
class CatchService:
    """Service for reading, editing and deleting catches."""

    repository: CatchRepository
    asset_store: AssetStore
    bucket: str

    def save(self, new_catch: NewCatch) -> UUID:
        """Persist a freshly identified catch."""
        return self.repository.create_catch(new_catch)

    def list_for_user(self, user_id: str) -> list[CatchRecord]:
        """Return a user's catches, newest first."""
        return self.repository.list_catches(user_id)

    def list_all(self, angler: str | None = None) -> list[CatchRecord]:
        """Return community catches, newest first.

        ``angler`` narrows the feed to one user after the full fetch.
        """
        records = self.repository.list_catches()
        if angler:
            return [record for record in records if record.user_id == angler]
        return records

    def update(self, catch_id: UUID, user_id: str, edit: CatchEdit) -> CatchRecord:
        """Merge permitted fields into a catch owned by ``user_id``."""
        record = self._get_owned(catch_id, user_id)
        details_patch = edit.details_patch()
        identification_patch = edit.identification_patch()
        if not details_patch and not identification_patch:
            return record

        catch_details = None
        if details_patch:
            current_details = (
                record.catch_details if isinstance(record.catch_details, dict) else {}
            )
            catch_details = {**current_details, **details_patch}
        identification = None
        if identification_patch:
            current = (
                record.identification
                if isinstance(record.identification, dict)
                else {}
            )
            identification = {**current, **identification_patch}

        self.repository.update_catch(
            catch_id, identification=identification, catch_details=catch_details
        )
        return replace(
            record,
            identification=(
                identification if identification is not None else record.identification
            ),
            catch_details=(
                catch_details if catch_details is not None else record.catch_details
            ),
        )

    def delete(self, catch_id: UUID, user_id: str) -> None:
        """Delete the backing photo (best-effort) and then the record."""
        record = self._get_owned(catch_id, user_id)
        key = record.image_path or storage_key_from_url(record.image_url, self.bucket)
        if key is None:
            logger.warning(
                "No storage key for catch photo", extra={"catch_id": str(catch_id)}
            )
        else:
            try:
                removed = self.asset_store.remove(key)
            except Exception:
                logger.warning(
                    "Failed to delete catch photo",
                    exc_info=True,
                    extra={"catch_id": str(catch_id), "image_key": key},
                )
            else:
                if not removed:
                    logger.warning(
                        "Catch photo already gone",
                        extra={"catch_id": str(catch_id), "image_key": key},
                    )
        self.repository.delete_catch(catch_id)
        logger.info(
            "Deleted catch of %s",
            record.species().common_name or "unknown species",
            extra={"catch_id": str(catch_id)},
        )

    def _get_owned(self, catch_id: UUID, user_id: str) -> CatchRecord:
        record = self.repository.get_catch(catch_id)
        if record is None:
            raise CatchNotFoundError(f"Catch {catch_id} not found")
        if record.user_id != user_id:
            raise NotCatchOwnerError(f"Catch {catch_id} belongs to another user")
        return record


def list_anglers(records: list[CatchRecord]) -> list[Angler]:
    """Return distinct anglers with a display name, in feed order."""
    anglers: list[Angler] = []
    seen: set[str] = set()
    for record in records:
        if not record.user_display_name or record.user_id in seen:
            continue
        seen.add(record.user_id)
        anglers.append(
            Angler(user_id=record.user_id, display_name=record.user_display_name)
        )
    return anglers
