"""Fish identification calls against a vision-language model."""

import base64
from dataclasses import dataclass
from typing import Protocol

from fishidy.domain.errors import UpstreamError

IDENTIFY_PROMPT = (
    "Identify this fish species. "
    "Respond ONLY with valid JSON in this exact format:\n"
    "{\n"
    '  "commonName": "string",\n'
    '  "scientificName": "string",\n'
    '  "family": "string",\n'
    '  "confidence": "high|medium|low",\n'
    '  "characteristics": ["string"],\n'
    '  "habitat": "string",\n'
    '  "averageSize": "string",\n'
    '  "notes": "string"\n'
    "}\n"
    "If you cannot identify the fish with confidence, "
    "indicate that in the confidence field."
)


class VisionClient(Protocol):
    """Interface for a single multimodal model call."""

    async def describe(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        max_output_tokens: int | None,
        store: bool,
        image_url: str,
        prompt: str,
    ) -> str:
        """Return the model's text answer, or an empty string if it gave none."""


@dataclass
class VisionService:
    """Service that sends catch photos to the model with the fixed prompt."""

    client: VisionClient
    model: str
    reasoning_effort: str | None = None
    max_output_tokens: int | None = None
    store: bool = False

    async def identify(self, image_bytes: bytes, media_type: str) -> str:
        """Identify the fish in inline image bytes and return the raw answer."""
        return await self._describe(_to_data_url(image_bytes, media_type))

    async def identify_url(self, image_url: str) -> str:
        """Identify the fish behind a (signed) URL and return the raw answer."""
        return await self._describe(image_url)

    async def _describe(self, image_url: str) -> str:
        text = await self.client.describe(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            max_output_tokens=self.max_output_tokens,
            store=self.store,
            image_url=image_url,
            prompt=IDENTIFY_PROMPT,
        )
        if not text or not text.strip():
            raise UpstreamError("No text response from the vision model")
        return text


def _to_data_url(image_bytes: bytes, media_type: str) -> str:
    """Convert bytes to a base64 data URL for image input."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{media_type};base64,{encoded}"
