"""Attachment values: how a piece of file content is referenced.

Every attachment collapses to exactly one of four frozen variants:

* :class:`EmptyFile` -- nothing attached.
* :class:`InputFileId` -- a ``file_id`` the Bot API already knows.
* :class:`InputFileUrl` -- an HTTP(S) URL the Bot API fetches itself.
* :class:`InputFileStream` -- raw bytes uploaded as a multipart file part.

Only the stream variant forces ``multipart/form-data``; the other three
travel as plain JSON values.  Use the :class:`InputFile` helpers to build
them from paths, URLs, ids or in-memory buffers::

    from telebind.input_file import InputFile

    note = InputFile.from_path("clip.mp4")
    same_note_again = InputFile.from_file_id("DQACAgIAAxkBAAIB...")
"""

from __future__ import annotations

import mimetypes
import os
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, BeforeValidator, Field, ValidationInfo

from telebind.exceptions import InputFileError

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_URL_SCHEMES = frozenset({"http", "https"})


class FileType(str, Enum):
    """Discriminator of the attachment variants."""

    EMPTY = "empty"
    FILE_ID = "file_id"
    URL = "url"
    STREAM = "stream"


class EmptyFile(BaseModel):
    """No attachment supplied."""

    type: Literal[FileType.EMPTY] = FileType.EMPTY

    model_config = {"frozen": True}


class InputFileId(BaseModel):
    """Content previously uploaded to the Bot API, referenced by ``file_id``."""

    type: Literal[FileType.FILE_ID] = FileType.FILE_ID
    file_id: str

    model_config = {"frozen": True}


class InputFileUrl(BaseModel):
    """Content the Bot API downloads from a public URL."""

    type: Literal[FileType.URL] = FileType.URL
    url: str

    model_config = {"frozen": True}


class InputFileStream(BaseModel):
    """Raw bytes uploaded as a ``multipart/form-data`` file part.

    *content* is an immutable copy taken at construction, so the caller's
    original buffer may be reused as soon as the constructor returns.
    Empty content or an empty *filename* are accepted as-is; the Bot API is
    the one that rejects them.
    """

    type: Literal[FileType.STREAM] = FileType.STREAM
    content: bytes = Field(repr=False)
    filename: str
    content_type: str = DEFAULT_CONTENT_TYPE

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.content)


AnyInputFile = Union[EmptyFile, InputFileId, InputFileUrl, InputFileStream]


def requires_multipart(value: Any) -> bool:
    """Return ``True`` iff *value* is a stream attachment."""
    return isinstance(value, InputFileStream)


def _guess_content_type(filename: str) -> str:
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or DEFAULT_CONTENT_TYPE


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme.lower() in _URL_SCHEMES and bool(parsed.netloc)


class InputFile:
    """Factory helpers that build one of the attachment variants.

    Every helper validates its source immediately and raises
    :class:`~telebind.exceptions.InputFileError` for unusable input.
    """

    @staticmethod
    def empty() -> EmptyFile:
        return EmptyFile()

    @staticmethod
    def from_file_id(file_id: str) -> InputFileId:
        """Reference a file already stored on the Bot API servers."""
        if not isinstance(file_id, str) or not file_id.strip():
            raise InputFileError("file_id must be a non-empty string")
        return InputFileId(file_id=file_id)

    @staticmethod
    def from_url(url: str) -> InputFileUrl:
        """Reference a file by absolute ``http``/``https`` URL."""
        if not isinstance(url, str) or not _is_url(url):
            raise InputFileError(f"Not an absolute http(s) URL: {url!r}")
        return InputFileUrl(url=url)

    @staticmethod
    def from_path(path: Union[str, os.PathLike], content_type: Optional[str] = None) -> InputFileStream:
        """Read a local file into a stream attachment.

        The whole file is read here; the filename sent to the API is the
        base name of *path* and the content type is guessed from its
        extension unless *content_type* is given.
        """
        try:
            fs_path = os.fspath(path)
        except TypeError as exc:
            raise InputFileError(f"Unsupported path type: {type(path).__name__}") from exc
        if not os.path.isfile(fs_path):
            raise InputFileError(f"No such file: {fs_path}")
        try:
            with open(fs_path, "rb") as fh:
                content = fh.read()
        except OSError as exc:
            raise InputFileError(f"Cannot read {fs_path}: {exc}") from exc
        filename = os.path.basename(fs_path)
        return InputFileStream(
            content=content,
            filename=filename,
            content_type=content_type or _guess_content_type(filename),
        )

    @staticmethod
    def from_stream(source: Any, filename: str, content_type: Optional[str] = None) -> InputFileStream:
        """Wrap an in-memory buffer or readable binary object.

        *source* may be ``bytes``, ``bytearray``, ``memoryview`` or any
        object with a ``read()`` method returning bytes (read to the end
        here).
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            content = bytes(source)
        elif callable(getattr(source, "read", None)):
            data = source.read()
            if not isinstance(data, (bytes, bytearray, memoryview)):
                raise InputFileError(
                    f"Stream {type(source).__name__} returned {type(data).__name__}, expected bytes"
                )
            content = bytes(data)
        else:
            raise InputFileError(f"Unsupported stream source: {type(source).__name__}")
        return InputFileStream(
            content=content,
            filename=filename,
            content_type=content_type or _guess_content_type(filename),
        )


def coerce_input_file(value: Any, info: ValidationInfo) -> Any:
    """Turn shorthand values assigned to an attachment field into a variant.

    ``None`` -> empty, URL strings -> URL, other strings -> file id,
    bytes-like -> stream named after the field, path objects -> file read
    from disk.  Variant instances and dicts pass through untouched.
    """
    if value is None:
        return EmptyFile()
    if isinstance(value, str):
        if _is_url(value):
            return InputFile.from_url(value)
        return InputFile.from_file_id(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return InputFile.from_stream(value, filename=info.field_name or "file")
    if isinstance(value, os.PathLike):
        return InputFile.from_path(value)
    return value


InputFileValue = Annotated[
    AnyInputFile,
    Field(discriminator="type"),
    BeforeValidator(coerce_input_file),
]
