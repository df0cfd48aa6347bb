"""Pydantic data models for the Telegram Bot API objects telebind touches.

Result types (``Message``, ``User``, ``File``) are parsed from responses;
reply markups are embedded in requests and serialized as nested JSON.
Every class mirrors the Bot API object of the same name.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, List, Optional, Union

from pydantic import AfterValidator, BaseModel, Field, StrictInt

_USERNAME_RE = re.compile(r"^@\w+$")
_NUMERIC_ID_RE = re.compile(r"^-?\d+$")


def _check_chat_id(value: Union[int, str]) -> Union[int, str]:
    """Accept integer ids, numeric strings and ``@channelusername``."""
    if isinstance(value, str) and not (_USERNAME_RE.match(value) or _NUMERIC_ID_RE.match(value)):
        raise ValueError(f"chat_id must be an integer id or '@username', got {value!r}")
    return value


# StrictInt keeps booleans from passing as 0 or 1.
ChatId = Annotated[Union[StrictInt, str], AfterValidator(_check_chat_id)]


class ParseMode(str, Enum):
    """Text formatting modes accepted by the ``parse_mode`` parameter."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ResponseParameters(BaseModel):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = {"populate_by_name": True}


class User(BaseModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class MessageEntity(BaseModel):
    """One special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None

    model_config = {"populate_by_name": True}


class PhotoSize(BaseModel):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Audio(BaseModel):
    """An audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional["PhotoSize"] = None

    model_config = {"populate_by_name": True}


class Document(BaseModel):
    """A general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Video(BaseModel):
    """This object represents a video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class VideoNote(BaseModel):
    """A rounded, square video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class Voice(BaseModel):
    """This object represents a voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"populate_by_name": True}


class File(BaseModel):
    """A file ready to be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None

    model_config = {"populate_by_name": True}


class KeyboardButtonPollType(BaseModel):
    """Type of a poll created when the corresponding button is pressed."""

    type: Optional[str] = None

    model_config = {"populate_by_name": True}


class KeyboardButton(BaseModel):
    """One button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional["KeyboardButtonPollType"] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardMarkup(BaseModel):
    """A custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class ReplyKeyboardRemove(BaseModel):
    """Asks clients to remove the current custom keyboard."""

    remove_keyboard: bool
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


class LoginUrl(BaseModel):
    """Inline keyboard button parameter used to authorize a user automatically."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None

    model_config = {"populate_by_name": True}


class CallbackGame(BaseModel):
    """A placeholder, currently holds no information."""

    model_config = {"populate_by_name": True}


class InlineKeyboardButton(BaseModel):
    """One button of an inline keyboard. Exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    login_url: Optional["LoginUrl"] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional["CallbackGame"] = None
    pay: Optional[bool] = None

    model_config = {"populate_by_name": True}


class InlineKeyboardMarkup(BaseModel):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]

    model_config = {"populate_by_name": True}


class ForceReply(BaseModel):
    """Makes clients display a reply interface to the user."""

    force_reply: bool
    selective: Optional[bool] = None

    model_config = {"populate_by_name": True}


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


def _entity_values(text: Optional[str], entities: Optional[List[MessageEntity]]) -> List[str]:
    # Entity offsets and lengths count UTF-16 code units.
    if not text or not entities:
        return []
    encoded = text.encode("utf-16-le")
    return [
        encoded[entity.offset * 2:(entity.offset + entity.length) * 2].decode("utf-16-le")
        for entity in entities
    ]


class Message(BaseModel):
    """This object represents a message."""

    message_id: int
    date: int
    chat: "Chat"
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    reply_to_message: Optional["Message"] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None

    model_config = {"populate_by_name": True}

    @property
    def entity_values(self) -> List[str]:
        """The text covered by each of :attr:`entities`, in order."""
        return _entity_values(self.text, self.entities)

    @property
    def caption_entity_values(self) -> List[str]:
        """The caption text covered by each of :attr:`caption_entities`."""
        return _entity_values(self.caption, self.caption_entities)
