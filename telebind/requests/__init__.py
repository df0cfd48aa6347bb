"""Typed request objects, one class per Bot API method."""

from telebind.requests.base import BaseRequest
from telebind.requests.bot import GetFileRequest, GetMeRequest
from telebind.requests.fields import Attachment, FieldKind, Nested, OmitIfDefault, RequestField
from telebind.requests.media import (
    SendAudioRequest,
    SendDocumentRequest,
    SendPhotoRequest,
    SendVideoNoteRequest,
    SendVideoRequest,
    SendVoiceRequest,
)
from telebind.requests.messages import SendMessageRequest

__all__ = [
    "BaseRequest",
    "Attachment",
    "FieldKind",
    "Nested",
    "OmitIfDefault",
    "RequestField",
    "GetFileRequest",
    "GetMeRequest",
    "SendAudioRequest",
    "SendDocumentRequest",
    "SendMessageRequest",
    "SendPhotoRequest",
    "SendVideoNoteRequest",
    "SendVideoRequest",
    "SendVoiceRequest",
]
