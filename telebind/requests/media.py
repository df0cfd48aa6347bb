"""Send-type requests that carry a file attachment."""

from typing import Annotated, Optional

from telebind.models import ChatId, Message
from telebind.requests.base import BaseRequest
from telebind.requests.fields import (
    AllowSendingWithoutReply,
    AttachmentField,
    Caption,
    DisableNotification,
    Duration,
    Entities,
    OmitIfDefault,
    ParseModeField,
    ReplyMarkupField,
    ReplyToMessageId,
)


class SendVideoNoteRequest(BaseRequest):
    """Send a rounded, square video message (up to one minute long).

    Attributes:
        chat_id: Target chat id or ``@channelusername``.
        video_note: The video note.  Stream uploads are sent as multipart;
            a ``file_id`` is sent as a plain value.  Sending video notes by
            URL is not supported by the Bot API.
        duration: Duration in seconds.
        length: Video width and height (the diameter of the circle).
    """

    method = "sendVideoNote"
    result_type = Message
    positional_fields = ("chat_id", "video_note")

    chat_id: ChatId
    video_note: AttachmentField
    duration: Duration = 0
    length: Annotated[int, OmitIfDefault()] = 0
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    reply_markup: ReplyMarkupField = None


class SendPhotoRequest(BaseRequest):
    """Send a photo."""

    method = "sendPhoto"
    result_type = Message
    positional_fields = ("chat_id", "photo")

    chat_id: ChatId
    photo: AttachmentField
    caption: Caption = None
    parse_mode: ParseModeField = None
    caption_entities: Entities = None
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None


class SendAudioRequest(BaseRequest):
    """Send an audio file to be shown in the music player (.MP3 or .M4A)."""

    method = "sendAudio"
    result_type = Message
    positional_fields = ("chat_id", "audio")

    chat_id: ChatId
    audio: AttachmentField
    caption: Caption = None
    parse_mode: ParseModeField = None
    caption_entities: Entities = None
    duration: Duration = 0
    performer: Annotated[Optional[str], OmitIfDefault()] = None
    title: Annotated[Optional[str], OmitIfDefault()] = None
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None


class SendDocumentRequest(BaseRequest):
    """Send a general file."""

    method = "sendDocument"
    result_type = Message
    positional_fields = ("chat_id", "document")

    chat_id: ChatId
    document: AttachmentField
    caption: Caption = None
    parse_mode: ParseModeField = None
    caption_entities: Entities = None
    disable_content_type_detection: Annotated[bool, OmitIfDefault()] = False
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None


class SendVideoRequest(BaseRequest):
    """Send an MPEG4 video."""

    method = "sendVideo"
    result_type = Message
    positional_fields = ("chat_id", "video")

    chat_id: ChatId
    video: AttachmentField
    duration: Duration = 0
    width: Annotated[int, OmitIfDefault()] = 0
    height: Annotated[int, OmitIfDefault()] = 0
    caption: Caption = None
    parse_mode: ParseModeField = None
    caption_entities: Entities = None
    supports_streaming: Annotated[bool, OmitIfDefault()] = False
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None


class SendVoiceRequest(BaseRequest):
    """Send an OGG/OPUS voice message."""

    method = "sendVoice"
    result_type = Message
    positional_fields = ("chat_id", "voice")

    chat_id: ChatId
    voice: AttachmentField
    caption: Caption = None
    parse_mode: ParseModeField = None
    caption_entities: Entities = None
    duration: Duration = 0
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None
