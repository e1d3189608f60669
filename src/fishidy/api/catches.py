"""Catch browsing and owner edit endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from fishidy.domain.catches import CatchEdit, CatchRecord
from fishidy.domain.errors import CatchNotFoundError, NotCatchOwnerError
from fishidy.services.catches import list_anglers

if TYPE_CHECKING:
    from fishidy.containers import AppContainer

router = APIRouter(prefix="/catches", tags=["catches"])


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> str:
    """Resolve the bearer token on the request to a user id."""
    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    container: AppContainer = request.app.state.container
    user_id = container.profile_service.authenticate(token)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user_id


@router.get("/mine")
async def list_my_catches(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's catches, newest first."""
    container: AppContainer = request.app.state.container
    records = container.catch_service.list_for_user(user_id)
    return {"catches": [catch_payload(record) for record in records]}


@router.get("/community")
async def list_community_catches(
    request: Request, angler: str | None = None
) -> dict[str, object]:
    """Return every catch, optionally filtered to one angler."""
    container: AppContainer = request.app.state.container
    records = container.catch_service.list_all(angler=angler)
    return {"catches": [catch_payload(record) for record in records]}


@router.get("/anglers")
async def list_community_anglers(request: Request) -> dict[str, object]:
    """Return the anglers available for the community filter."""
    container: AppContainer = request.app.state.container
    anglers = list_anglers(container.catch_service.list_all())
    return {
        "anglers": [
            {"userId": angler.user_id, "displayName": angler.display_name}
            for angler in anglers
        ]
    }


@router.patch("/{catch_id}")
async def update_catch(
    catch_id: UUID,
    edit: CatchEdit,
    request: Request,
    user_id: str = Depends(require_user),
) -> dict[str, object]:
    """Apply an owner's edit to catch details or species names."""
    container: AppContainer = request.app.state.container
    try:
        record = container.catch_service.update(catch_id, user_id, edit)
    except CatchNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    except NotCatchOwnerError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN) from exc
    return catch_payload(record)


@router.delete("/{catch_id}")
async def delete_catch(
    catch_id: UUID, request: Request, user_id: str = Depends(require_user)
) -> dict[str, str]:
    """Delete an owned catch and its photo."""
    container: AppContainer = request.app.state.container
    try:
        container.catch_service.delete(catch_id, user_id)
    except CatchNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    except NotCatchOwnerError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN) from exc
    return {"status": "deleted"}


def catch_payload(record: CatchRecord) -> dict[str, object]:
    """Serialize a catch record with the client's camelCase keys."""
    return {
        "id": str(record.id),
        "userId": record.user_id,
        "userDisplayName": record.user_display_name,
        "userPhotoURL": record.user_photo_url,
        "imageUrl": record.image_url,
        "imagePath": record.image_path,
        "identification": record.identification,
        "catchDetails": record.catch_details,
        "timestamp": record.timestamp.isoformat() if record.timestamp else None,
    }


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
