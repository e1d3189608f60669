"""Error types raised by fishidy services and adapters."""


class FishidyError(Exception):
    """Base class for application errors."""


class AssetNotFoundError(FishidyError):
    """Raised when a storage key does not resolve to an object."""

    def __init__(self, key: str) -> None:
        super().__init__(f"File not found: {key}")
        self.key = key


class UpstreamError(FishidyError):
    """Raised when an external service returns an unusable answer."""


class ResponseParseError(FishidyError):
    """Raised when model output is not valid JSON."""

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class CatchNotFoundError(FishidyError):
    """Raised when a catch record does not exist."""


class NotCatchOwnerError(FishidyError):
    """Raised when a user edits or deletes someone else's catch."""
