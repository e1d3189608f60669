"""OpenAI Responses API client for fish identification."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from fishidy.services.vision import VisionClient


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

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
        """Send one image and prompt, returning the plain text answer."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {"type": "input_image", "image_url": image_url},
                        {"type": "input_text", "text": prompt},
                    ],
                }
            ],
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}
        if max_output_tokens:
            request_payload["max_output_tokens"] = max_output_tokens

        response = await self.client.responses.create(**request_payload)
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
