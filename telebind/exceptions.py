"""Exception hierarchy for the telebind Bot API binding."""

from typing import Any, Dict, Optional


class TelebindError(Exception):
    """Base class for every error raised by telebind itself."""


class InputFileError(TelebindError):
    """Raised when an attachment source cannot be turned into an input file.

    Raised eagerly by the :mod:`telebind.input_file` constructors, never
    deferred to encode or send time.
    """


class APIException(TelebindError):
    """Raised for non-2xx responses and ``ok: false`` envelopes.

    Attributes:
        status_code: HTTP status code, or the envelope ``error_code`` when
            the server answered 200 with ``ok: false``.
        response_body: Raw response body as a dict, when available.
        description: Human-readable error text from the API.
        retry_after: Seconds to wait before retrying (flood control), if sent.
        migrate_to_chat_id: New supergroup id when the chat was migrated.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        self.description: str = self.response_body.get("description", "Unknown error")
        parameters = self.response_body.get("parameters") or {}
        self.retry_after: Optional[int] = parameters.get("retry_after")
        self.migrate_to_chat_id: Optional[int] = parameters.get("migrate_to_chat_id")
        super().__init__(f"API error {status_code}: {self.description}")
