"""Parsing of free-text model answers into JSON."""

import json
import re
from collections.abc import Callable

from fishidy.domain.errors import ResponseParseError

_FENCE_PATTERN = re.compile(r"```json\n?|```\n?")
_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def strip_code_fences(raw_text: str) -> str:
    """Remove Markdown code fences anywhere in the text and trim it."""
    return _FENCE_PATTERN.sub("", raw_text).strip()


def parse_strict(raw_text: str) -> object:
    """Strip code fences and parse the remainder as JSON."""
    return _loads(strip_code_fences(raw_text), raw_text)


def parse_extract(raw_text: str) -> object:
    """Parse the greedy ``{...}`` span of the text, tolerating prose around it.

    Text with no braces at all parses as an empty object.
    """
    match = _OBJECT_PATTERN.search(raw_text)
    return _loads(match.group(0) if match else "{}", raw_text)


def get_parser(mode: str) -> Callable[[str], object]:
    """Return the parser for a configured parsing mode."""
    parsers: dict[str, Callable[[str], object]] = {
        "strict": parse_strict,
        "extract": parse_extract,
    }
    try:
        return parsers[mode]
    except KeyError:
        raise ValueError(f"Unknown response parsing mode: {mode}") from None


def _loads(candidate: str, raw_text: str) -> object:
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(
            f"Model response is not valid JSON: {exc.msg}", raw_text
        ) from exc
