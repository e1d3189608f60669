"""Pydantic models for HTTP payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IdentifyRequest(BaseModel):
    """Body of an identification request.

    Every field is optional here so the endpoint can answer missing fields
    with its own 400 message instead of a validation error. Only ``imageUrl``
    and ``userId`` are checked; the rest is stored as the client sent it.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_url: str | None = Field(default=None, alias="imageUrl")
    image_download_url: Any = Field(default=None, alias="imageDownloadUrl")
    user_id: str | None = Field(default=None, alias="userId")
    catch_details: Any = Field(default=None, alias="catchDetails")
