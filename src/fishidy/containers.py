"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fishidy.adapters.openai_vision_client import OpenAIVisionClient
from fishidy.adapters.supabase_catch_repository import SupabaseCatchRepository
from fishidy.adapters.supabase_identity_client import SupabaseIdentityClient
from fishidy.adapters.supabase_storage_client import SupabaseAssetStore
from fishidy.config import Settings
from fishidy.services.catches import CatchService
from fishidy.services.identify import IdentificationService
from fishidy.services.parsing import get_parser
from fishidy.services.profiles import ProfileService
from fishidy.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    catch_service: CatchService
    identification_service: IdentificationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    asset_store = SupabaseAssetStore(
        client=supabase_client, bucket=resolved_settings.storage_bucket
    )
    catch_repository = SupabaseCatchRepository(
        client=supabase_client, table=resolved_settings.catches_table
    )
    profile_service = ProfileService(
        client=SupabaseIdentityClient(supabase_client),
        default_display_name=resolved_settings.default_display_name,
    )
    catch_service = CatchService(
        repository=catch_repository,
        asset_store=asset_store,
        bucket=resolved_settings.storage_bucket,
    )
    openai_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    vision_service = VisionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        max_output_tokens=resolved_settings.openai_max_output_tokens,
        store=resolved_settings.openai_store,
    )
    identification_service = IdentificationService(
        asset_store=asset_store,
        vision_service=vision_service,
        profile_service=profile_service,
        catch_service=catch_service,
        parse=get_parser(resolved_settings.response_parsing),
        image_delivery=resolved_settings.image_delivery,
        max_image_edge=resolved_settings.max_image_edge,
        image_quality=resolved_settings.image_quality,
        signed_url_ttl_seconds=resolved_settings.signed_url_ttl_seconds,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        catch_service=catch_service,
        identification_service=identification_service,
        close_resources=close_resources,
    )
