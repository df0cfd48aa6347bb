"""Field markers and reusable capability fields for request classes.

Markers are attached with :data:`typing.Annotated` and read by
:class:`~telebind.requests.base.BaseRequest` when the class is created::

    class SendThingRequest(BaseRequest):
        method = "sendThing"

        chat_id: ChatId
        thing: AttachmentField
        duration: Annotated[int, OmitIfDefault()] = 0
        disable_notification: DisableNotification = False
        reply_markup: ReplyMarkupField = None
"""

from enum import Enum
from typing import Annotated, Any, List, NamedTuple, Optional

from pydantic import AfterValidator

from telebind.input_file import InputFileValue
from telebind.models import MessageEntity, ParseMode, ReplyMarkup


class OmitIfDefault:
    """Drop the field from the payload while it equals its declared default."""

    def __repr__(self) -> str:
        return "OmitIfDefault()"


class Attachment:
    """The field carries the request's (single) file attachment."""

    def __repr__(self) -> str:
        return "Attachment()"


class Nested:
    """The field is a structured object sent as a JSON string in multipart bodies."""

    def __repr__(self) -> str:
        return "Nested()"


class FieldKind(str, Enum):
    PLAIN = "plain"
    ATTACHMENT = "attachment"
    NESTED = "nested"


class RequestField(NamedTuple):
    """One declared request parameter together with its current value."""

    name: str
    wire_key: str
    value: Any
    omit_if_default: bool
    default: Any
    kind: FieldKind

    @property
    def is_default(self) -> bool:
        return self.value == self.default


def _none_if_empty(value: Optional[List[MessageEntity]]) -> Optional[List[MessageEntity]]:
    return value or None


# ── Capability fields shared across send-type requests ──────────────────────

AttachmentField = Annotated[InputFileValue, Attachment()]
DisableNotification = Annotated[bool, OmitIfDefault()]
ReplyToMessageId = Annotated[int, OmitIfDefault()]
AllowSendingWithoutReply = Annotated[bool, OmitIfDefault()]
ReplyMarkupField = Annotated[Optional[ReplyMarkup], OmitIfDefault(), Nested()]
Caption = Annotated[Optional[str], OmitIfDefault()]
ParseModeField = Annotated[Optional[ParseMode], OmitIfDefault()]
Entities = Annotated[
    Optional[List[MessageEntity]], AfterValidator(_none_if_empty), OmitIfDefault(), Nested()
]
Duration = Annotated[int, OmitIfDefault()]
