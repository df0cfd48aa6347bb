"""TelebindClient -- sends typed requests to the Telegram Bot API.

Every call goes through :meth:`TelebindClient.execute`: the request is
encoded by :func:`telebind.encoder.encode`, POSTed with ``requests`` (JSON
or multipart, as the encoder decided), and the envelope is unwrapped into
the request's ``result_type``.

The module also provides :func:`execute_async`, which offloads the blocking
call via :func:`asyncio.to_thread` using a lazily created default client
configured from :mod:`config`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from telebind.encoder import EncodedPayload, MultipartBody, encode
from telebind.envelope import ApiResponse
from telebind.exceptions import APIException
from telebind.models import File, Message, MessageEntity, ParseMode, ReplyMarkup, User
from telebind.requests import (
    BaseRequest,
    GetFileRequest,
    GetMeRequest,
    SendAudioRequest,
    SendDocumentRequest,
    SendMessageRequest,
    SendPhotoRequest,
    SendVideoNoteRequest,
    SendVideoRequest,
    SendVoiceRequest,
)

logger = logging.getLogger("telebind.client")


class TelebindClient:
    """Client-side service layer for the Telegram Bot API.

    :meth:`execute` accepts any :class:`~telebind.requests.BaseRequest`;
    the ``send_*`` / ``get_*`` methods are shortcuts that build the request
    for you.  Non-2xx replies and ``ok: false`` envelopes raise
    :class:`APIException`; ``requests`` transport errors propagate as-is.
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, base_url: str, timeout: int = _DEFAULT_TIMEOUT, bot_token: str | None = None) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Default request timeout in seconds.
            bot_token: Raw bot token, kept for callers that build file URLs.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._bot_token = bot_token

    # ------------------------------------------------------------------
    #  Transport
    # ------------------------------------------------------------------

    def _send(self, method: str, payload: EncodedPayload) -> Dict[str, Any]:
        """POST an encoded payload and return the parsed JSON body.

        Raises:
            APIException: If the response status code is not 2xx.
            requests.RequestException: On transport-level failures.
        """
        url = f"{self._base_url}/{method.lstrip('/')}"
        if isinstance(payload, MultipartBody):
            body_kwargs: Dict[str, Any] = {"files": payload.to_requests_files()}
        else:
            body_kwargs = {"json": payload.data}
        logger.debug("Dispatching request", extra={"api_method": method, "encoding": payload.content_type})
        try:
            response = requests.post(url, timeout=self._timeout, **body_kwargs)
        except requests.RequestException as exc:
            logger.error("Request error", extra={"api_method": method, "error": str(exc)})
            raise
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not response.ok:
            logger.warning(
                "API error response",
                extra={"api_method": method, "status_code": response.status_code, "api_response": body},
            )
            raise APIException(response.status_code, body)
        return body

    def execute(self, request: BaseRequest) -> Any:
        """Encode, send and unwrap *request*; return its typed result."""
        payload = encode(request)
        body = self._send(request.method, payload)
        try:
            envelope = ApiResponse.model_validate(body)
        except ValidationError as exc:
            raise APIException(200, {"description": f"Malformed API response: {exc}"}) from exc
        if not envelope.ok:
            logger.warning(
                "API call failed",
                extra={"api_method": request.method, "error_code": envelope.error_code, "api_response": body},
            )
        result = envelope.unwrap(request.result_type)
        logger.info("API call succeeded", extra={"api_method": request.method})
        return result

    # ------------------------------------------------------------------
    #  Shortcuts
    # ------------------------------------------------------------------

    def get_me(self) -> User:
        """A simple method for testing your bot's auth token."""
        return self.execute(GetMeRequest())

    def get_file(self, file_id: str) -> File:
        """Get basic info about a file and prepare it for downloading."""
        return self.execute(GetFileRequest(file_id=file_id))

    def send_message(self, chat_id: Union[int, str], text: str, parse_mode: Optional[ParseMode] = None, entities: Optional[List[MessageEntity]] = None, disable_web_page_preview: bool = False, disable_notification: bool = False, reply_to_message_id: int = 0, allow_sending_without_reply: bool = False, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a text message. On success, the sent Message is returned."""
        return self.execute(SendMessageRequest(
            chat_id=chat_id,
            text=text,
            parse_mode=parse_mode,
            entities=entities,
            disable_web_page_preview=disable_web_page_preview,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            allow_sending_without_reply=allow_sending_without_reply,
            reply_markup=reply_markup,
        ))

    def send_video_note(self, chat_id: Union[int, str], video_note: Any, duration: int = 0, length: int = 0, disable_notification: bool = False, reply_to_message_id: int = 0, reply_markup: Optional[ReplyMarkup] = None) -> Message:
        """Send a rounded square video message. On success, the sent Message is returned."""
        return self.execute(SendVideoNoteRequest(
            chat_id=chat_id,
            video_note=video_note,
            duration=duration,
            length=length,
            disable_notification=disable_notification,
            reply_to_message_id=reply_to_message_id,
            reply_markup=reply_markup,
        ))

    def send_photo(self, chat_id: Union[int, str], photo: Any, **options: Any) -> Message:
        """Send a photo. See :class:`~telebind.requests.SendPhotoRequest` for *options*."""
        return self.execute(SendPhotoRequest(chat_id=chat_id, photo=photo, **options))

    def send_audio(self, chat_id: Union[int, str], audio: Any, **options: Any) -> Message:
        """Send an audio file. See :class:`~telebind.requests.SendAudioRequest` for *options*."""
        return self.execute(SendAudioRequest(chat_id=chat_id, audio=audio, **options))

    def send_document(self, chat_id: Union[int, str], document: Any, **options: Any) -> Message:
        """Send a general file. See :class:`~telebind.requests.SendDocumentRequest` for *options*."""
        return self.execute(SendDocumentRequest(chat_id=chat_id, document=document, **options))

    def send_video(self, chat_id: Union[int, str], video: Any, **options: Any) -> Message:
        """Send a video. See :class:`~telebind.requests.SendVideoRequest` for *options*."""
        return self.execute(SendVideoRequest(chat_id=chat_id, video=video, **options))

    def send_voice(self, chat_id: Union[int, str], voice: Any, **options: Any) -> Message:
        """Send a voice message. See :class:`~telebind.requests.SendVoiceRequest` for *options*."""
        return self.execute(SendVoiceRequest(chat_id=chat_id, voice=voice, **options))


# ── Module-level async helpers ───────────────────────────────────────────────
#
# A lazily-initialised module-level :class:`TelebindClient` instance carries
# the ``BASE_URL`` / ``BOT_TOKEN`` / ``REQUEST_TIMEOUT`` values from
# :mod:`config`.  Blocking I/O is offloaded via :func:`asyncio.to_thread`.
# ─────────────────────────────────────────────────────────────────────────────

_default_client: TelebindClient | None = None


def _get_default_client() -> TelebindClient:
    """Return (and lazily create) the module-level client singleton."""
    global _default_client
    if _default_client is None:
        from config import BASE_URL, BOT_TOKEN, REQUEST_TIMEOUT  # deferred to avoid circular imports
        _default_client = TelebindClient(BASE_URL, timeout=REQUEST_TIMEOUT, bot_token=BOT_TOKEN)
    return _default_client


async def execute_async(request: BaseRequest, client: TelebindClient | None = None) -> Any:
    """Run :meth:`TelebindClient.execute` in a worker thread.

    The request is encoded inside the worker; do not mutate it until the
    awaitable completes.  Errors propagate exactly as from ``execute``.
    """
    target = client or _get_default_client()
    return await asyncio.to_thread(target.execute, request)
