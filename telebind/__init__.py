"""telebind -- typed Telegram Bot API requests, encoder and client.

Usage::

    from telebind import InputFile, TelebindClient
    from telebind.requests import SendVideoNoteRequest

    client = TelebindClient("https://api.telegram.org/bot<token>")
    request = SendVideoNoteRequest(chat_id=42, video_note=InputFile.from_path("clip.mp4"))
    message = client.execute(request)
"""

from telebind.client import TelebindClient, execute_async
from telebind.encoder import FilePart, JsonBody, MultipartBody, TextPart, encode
from telebind.envelope import ApiResponse
from telebind.exceptions import APIException, InputFileError, TelebindError
from telebind.input_file import (
    EmptyFile,
    FileType,
    InputFile,
    InputFileId,
    InputFileStream,
    InputFileUrl,
    requires_multipart,
)
from telebind.naming import to_snake_case

__all__ = [
    "TelebindClient",
    "execute_async",
    "encode",
    "JsonBody",
    "MultipartBody",
    "TextPart",
    "FilePart",
    "ApiResponse",
    "APIException",
    "InputFileError",
    "TelebindError",
    "EmptyFile",
    "FileType",
    "InputFile",
    "InputFileId",
    "InputFileStream",
    "InputFileUrl",
    "requires_multipart",
    "to_snake_case",
]
