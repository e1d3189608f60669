"""Identification pipeline: fetch, shrink, ask the model, parse, persist."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from fishidy.domain.catches import NewCatch
from fishidy.domain.identification import Identification
from fishidy.services.assets import AssetStore
from fishidy.services.catches import CatchService
from fishidy.services.imaging import (
    DEFAULT_MAX_EDGE,
    DEFAULT_QUALITY,
    media_type_for_key,
    shrink,
)
from fishidy.services.parsing import parse_strict
from fishidy.services.profiles import ProfileService
from fishidy.services.vision import VisionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentificationResult:
    """Outcome of a successful identification request."""

    catch_id: UUID
    identification: object
    catch_details: object


@dataclass
class IdentificationService:
    """Runs one identification request from stored photo to saved catch.

    Steps run strictly in order and nothing is retried. A failure after the
    model call but before the insert loses the identification.
    """

    asset_store: AssetStore
    vision_service: VisionService
    profile_service: ProfileService
    catch_service: CatchService
    parse: Callable[[str], object] = parse_strict
    image_delivery: str = "inline"
    max_image_edge: int = DEFAULT_MAX_EDGE
    image_quality: int = DEFAULT_QUALITY
    signed_url_ttl_seconds: int = 900

    async def identify(
        self,
        *,
        image_key: str,
        image_display_url: object,
        user_id: str,
        catch_details: object,
    ) -> IdentificationResult:
        """Identify the fish stored under ``image_key`` and save the catch."""
        raw_text = await self._ask_model(image_key)
        identification = self.parse(raw_text)
        species = Identification.from_payload(identification)
        logger.info(
            "Identified %s (%s confidence)",
            species.common_name or "unknown species",
            species.confidence_level or "unreported",
            extra={"image_key": image_key, "user_id": user_id},
        )

        details = catch_details if catch_details is not None else {}
        profile = self.profile_service.snapshot(user_id)
        catch_id = self.catch_service.save(
            NewCatch(
                user_id=user_id,
                profile=profile,
                image_url=image_display_url,
                image_path=image_key,
                identification=identification,
                catch_details=details,
            )
        )
        return IdentificationResult(
            catch_id=catch_id,
            identification=identification,
            catch_details=details,
        )

    async def _ask_model(self, image_key: str) -> str:
        if self.image_delivery == "signed_url":
            signed_url = self.asset_store.create_signed_url(
                image_key, self.signed_url_ttl_seconds
            )
            return await self.vision_service.identify_url(signed_url)

        original = self.asset_store.download(image_key)
        resized = await asyncio.to_thread(
            shrink, original, self.max_image_edge, self.image_quality
        )
        logger.debug(
            "Shrunk catch photo from %d to %d bytes",
            len(original),
            len(resized),
            extra={"image_key": image_key},
        )
        return await self.vision_service.identify(
            resized, media_type_for_key(image_key)
        )
