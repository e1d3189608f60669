"""Supabase repository for catch records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fishidy.domain.catches import CatchRecord, NewCatch
from fishidy.services.catches import CatchRepository

_COLUMNS = (
    "id, user_id, user_display_name, user_photo_url, image_url, image_path, "
    "identification, catch_details, timestamp"
)


@dataclass
class SupabaseCatchRepository(CatchRepository):
    """Supabase implementation for catch records."""

    client: Client
    table: str = "catches"

    def create_catch(self, new_catch: NewCatch) -> UUID:
        """Insert a catch row; the database assigns id and timestamp."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": new_catch.user_id,
                    "user_display_name": new_catch.profile.display_name,
                    "user_photo_url": new_catch.profile.photo_url,
                    "image_url": new_catch.image_url,
                    "image_path": new_catch.image_path,
                    "identification": new_catch.identification,
                    "catch_details": new_catch.catch_details,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create catch record")
        return UUID(response.data[0]["id"])

    def get_catch(self, catch_id: UUID) -> CatchRecord | None:
        """Return a catch row by id."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("id", str(catch_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_catch(response.data[0])

    def list_catches(self, user_id: str | None = None) -> list[CatchRecord]:
        """Return catch rows ordered by timestamp, newest first."""
        query = self.client.table(self.table).select(_COLUMNS)
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.order("timestamp", desc=True).execute()
        return [_parse_catch(row) for row in response.data or []]

    def update_catch(
        self,
        catch_id: UUID,
        *,
        identification: object | None = None,
        catch_details: dict[str, object] | None = None,
    ) -> None:
        """Overwrite the given jsonb columns of a catch row."""
        payload: dict[str, object] = {}
        if identification is not None:
            payload["identification"] = identification
        if catch_details is not None:
            payload["catch_details"] = catch_details
        if not payload:
            return
        self.client.table(self.table).update(payload).eq(
            "id", str(catch_id)
        ).execute()

    def delete_catch(self, catch_id: UUID) -> None:
        """Delete a catch row."""
        self.client.table(self.table).delete().eq("id", str(catch_id)).execute()


def _parse_catch(row: dict[str, object]) -> CatchRecord:
    raw_timestamp = row.get("timestamp")
    details = row.get("catch_details")
    return CatchRecord(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        user_display_name=row.get("user_display_name"),
        user_photo_url=row.get("user_photo_url"),
        image_url=row.get("image_url"),
        image_path=row.get("image_path"),
        identification=row.get("identification"),
        catch_details=details if details is not None else {},
        timestamp=(
            datetime.fromisoformat(str(raw_timestamp)) if raw_timestamp else None
        ),
    )
