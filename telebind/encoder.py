"""Payload encoder: request object -> JSON or multipart body.

The body format depends on the attachment variant only:

* no attachment, or a ``file_id``/URL/empty one -> :class:`JsonBody`
* an :class:`~telebind.input_file.InputFileStream` -> :class:`MultipartBody`

Both bodies list fields in the request's declared order and apply the same
inclusion rule: ``None`` and empty attachments are never sent, and fields
marked ``OmitIfDefault`` are dropped while they equal their default.

Encoding is pure (no I/O, no shared state) and does not raise for any
combination of present or absent optional fields.
"""

import json
import logging
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from telebind.input_file import EmptyFile, InputFileId, InputFileStream, InputFileUrl, requires_multipart
from telebind.requests.base import BaseRequest
from telebind.requests.fields import FieldKind, RequestField

logger = logging.getLogger("telebind.encoder")


class TextPart(BaseModel):
    """A plain form field of a multipart body."""

    name: str
    value: str

    model_config = {"frozen": True}


class FilePart(BaseModel):
    """A file field of a multipart body."""

    name: str
    filename: str
    content: bytes = Field(repr=False)
    content_type: str

    model_config = {"frozen": True}


class JsonBody(BaseModel):
    """``application/json`` body: one object keyed by wire names."""

    data: Dict[str, Any]

    model_config = {"frozen": True}

    content_type: ClassVar[str] = "application/json"

    def to_bytes(self) -> bytes:
        """Compact, deterministic UTF-8 serialization of :attr:`data`."""
        return json.dumps(self.data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class MultipartBody(BaseModel):
    """``multipart/form-data`` body: ordered text and file parts."""

    parts: Tuple[Union[TextPart, FilePart], ...]

    model_config = {"frozen": True}

    content_type: ClassVar[str] = "multipart/form-data"

    def names(self) -> List[str]:
        return [part.name for part in self.parts]

    def part(self, name: str) -> Optional[Union[TextPart, FilePart]]:
        """Return the part called *name*, or ``None``."""
        for part in self.parts:
            if part.name == name:
                return part
        return None

    def to_requests_files(self) -> List[Tuple[str, Tuple[Any, ...]]]:
        """Render the parts as an ordered ``files=`` list for :mod:`requests`.

        Text parts get a ``None`` filename, which makes :mod:`requests`
        emit them as plain form fields while keeping the declared order.
        """
        files: List[Tuple[str, Tuple[Any, ...]]] = []
        for part in self.parts:
            if isinstance(part, FilePart):
                files.append((part.name, (part.filename, part.content, part.content_type)))
            else:
                files.append((part.name, (None, part.value)))
        return files


EncodedPayload = Union[JsonBody, MultipartBody]


# ── Value rendering ──────────────────────────────────────────────────────────


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def _bare_attachment_value(value: Any) -> str:
    if isinstance(value, InputFileId):
        return value.file_id
    if isinstance(value, InputFileUrl):
        return value.url
    raise TypeError(f"{type(value).__name__} has no plain wire value")


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(_jsonable(value), ensure_ascii=False, separators=(",", ":"))
    return str(value)


def _is_included(field: RequestField) -> bool:
    if field.value is None or isinstance(field.value, EmptyFile):
        return False
    if field.omit_if_default and field.is_default:
        return False
    return True


def _json_value(field: RequestField) -> Any:
    if field.kind is FieldKind.ATTACHMENT:
        return _bare_attachment_value(field.value)
    return _jsonable(field.value)


def _part(field: RequestField) -> Union[TextPart, FilePart]:
    value = field.value
    if field.kind is FieldKind.ATTACHMENT:
        if isinstance(value, InputFileStream):
            return FilePart(
                name=field.wire_key,
                filename=value.filename,
                content=value.content,
                content_type=value.content_type,
            )
        return TextPart(name=field.wire_key, value=_bare_attachment_value(value))
    if field.kind is FieldKind.NESTED:
        return TextPart(
            name=field.wire_key,
            value=json.dumps(_jsonable(value), ensure_ascii=False, separators=(",", ":")),
        )
    return TextPart(name=field.wire_key, value=_text(value))


# ── Public API ───────────────────────────────────────────────────────────────


def encode(request: BaseRequest) -> EncodedPayload:
    """Encode *request* into a :class:`JsonBody` or :class:`MultipartBody`.

    Reads every field of *request* once; the request must not be mutated
    concurrently.
    """
    fields = [field for field in request.iter_fields() if _is_included(field)]
    payload: EncodedPayload
    if requires_multipart(request.attachment()):
        payload = MultipartBody(parts=tuple(_part(field) for field in fields))
    else:
        payload = JsonBody(data={field.wire_key: _json_value(field) for field in fields})
    logger.debug(
        "Request encoded",
        extra={
            "api_method": request.method,
            "encoding": payload.content_type,
            "field_count": len(fields),
        },
    )
    return payload
