"""Text message requests."""

from typing import Annotated

from telebind.models import ChatId, Message
from telebind.requests.base import BaseRequest
from telebind.requests.fields import (
    AllowSendingWithoutReply,
    DisableNotification,
    Entities,
    OmitIfDefault,
    ParseModeField,
    ReplyMarkupField,
    ReplyToMessageId,
)


class SendMessageRequest(BaseRequest):
    """Send a text message. Never carries an attachment, so it is always JSON."""

    method = "sendMessage"
    result_type = Message
    positional_fields = ("chat_id", "text")

    chat_id: ChatId
    text: str
    parse_mode: ParseModeField = None
    entities: Entities = None
    disable_web_page_preview: Annotated[bool, OmitIfDefault()] = False
    disable_notification: DisableNotification = False
    reply_to_message_id: ReplyToMessageId = 0
    allow_sending_without_reply: AllowSendingWithoutReply = False
    reply_markup: ReplyMarkupField = None
