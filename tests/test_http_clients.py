"""Tests for the OpenAI vision adapter."""

import asyncio

from fishidy.adapters.openai_vision_client import OpenAIVisionClient


class _FakeResponses:
    def __init__(self, output_text: str | None) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str | None = '{"commonName": "Pike"}') -> None:
        self.responses = _FakeResponses(output_text)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def _describe(client: OpenAIVisionClient, **overrides: object) -> str:
    arguments: dict[str, object] = {
        "model": "gpt-5.2",
        "reasoning_effort": None,
        "max_output_tokens": None,
        "store": False,
        "image_url": "data:image/jpeg;base64,ZmFrZQ==",
        "prompt": "Identify this fish species.",
    }
    arguments.update(overrides)
    return asyncio.run(client.describe(**arguments))


def test_openai_vision_client_returns_output_text() -> None:
    fake = _FakeOpenAI()
    client = OpenAIVisionClient(client=fake)

    result = _describe(client)

    assert result == '{"commonName": "Pike"}'
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-5.2"
    assert payload["store"] is False
    assert "reasoning" not in payload
    assert "max_output_tokens" not in payload
    content = payload["input"][0]["content"]
    assert content[0] == {
        "type": "input_image",
        "image_url": "data:image/jpeg;base64,ZmFrZQ==",
    }
    assert content[1]["type"] == "input_text"


def test_openai_vision_client_passes_optional_settings() -> None:
    fake = _FakeOpenAI()
    client = OpenAIVisionClient(client=fake)

    _describe(client, reasoning_effort="low", max_output_tokens=500)

    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["reasoning"] == {"effort": "low"}
    assert payload["max_output_tokens"] == 500


def test_openai_vision_client_maps_missing_text_to_empty_string() -> None:
    client = OpenAIVisionClient(client=_FakeOpenAI(output_text=None))

    assert _describe(client) == ""


def test_openai_vision_client_close() -> None:
    fake = _FakeOpenAI()

    asyncio.run(OpenAIVisionClient(client=fake).close())

    assert fake.closed is True
