"""Request contract shared by every Bot API operation.

A request is a pydantic model whose fields are the operation's parameters,
declared in wire order.  The class also names the remote ``method`` and the
``result_type`` the response ``result`` is parsed into.  Per-field encoding
rules come from the markers in :mod:`telebind.requests.fields`:

* :class:`~telebind.requests.fields.OmitIfDefault` -- skipped while equal to
  the declared default.
* :class:`~telebind.requests.fields.Attachment` -- the file attachment; at
  most one per request.
* :class:`~telebind.requests.fields.Nested` -- structured object, sent as a
  JSON string inside multipart bodies.

Field values are read only when :meth:`BaseRequest.iter_fields` is called,
so anything assigned after construction is encoded too.  Assignments are
validated, so a request can never hold a value its type rejects.
"""

from functools import lru_cache
from typing import Any, ClassVar, Iterator, NamedTuple, Optional, Tuple

from pydantic import BaseModel

from telebind.input_file import AnyInputFile
from telebind.naming import to_snake_case
from telebind.requests.fields import Attachment, FieldKind, Nested, OmitIfDefault, RequestField


class _FieldSpec(NamedTuple):
    name: str
    wire_key: str
    omit_if_default: bool
    default: Any
    kind: FieldKind


@lru_cache(maxsize=None)
def _field_specs(cls: type) -> Tuple[_FieldSpec, ...]:
    """Read the declared fields of a request class once, in declaration order."""
    specs = []
    for name, info in cls.model_fields.items():
        markers = info.metadata
        if any(isinstance(m, Attachment) for m in markers):
            kind = FieldKind.ATTACHMENT
        elif any(isinstance(m, Nested) for m in markers):
            kind = FieldKind.NESTED
        else:
            kind = FieldKind.PLAIN
        specs.append(_FieldSpec(
            name=name,
            wire_key=to_snake_case(info.alias or name),
            omit_if_default=any(isinstance(m, OmitIfDefault) for m in markers),
            default=None if info.is_required() else info.get_default(call_default_factory=True),
            kind=kind,
        ))
    return tuple(specs)


class BaseRequest(BaseModel):
    """Base class for a single Bot API call.

    Subclasses set ``method`` (the Bot API method name), ``result_type``
    and optionally ``positional_fields``, the parameters that may be passed
    positionally::

        SendVideoNoteRequest(42, InputFile.from_file_id("XYZ"))
    """

    method: ClassVar[str] = ""
    result_type: ClassVar[Any] = Any
    positional_fields: ClassVar[Tuple[str, ...]] = ()

    model_config = {
        "validate_assignment": True,
        "populate_by_name": True,
        "extra": "forbid",
    }

    def __init__(self, *args: Any, **data: Any) -> None:
        if len(args) > len(self.positional_fields):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(self.positional_fields)} "
                f"positional arguments ({len(args)} given)"
            )
        for name, value in zip(self.positional_fields, args):
            if name in data:
                raise TypeError(f"{type(self).__name__} got multiple values for argument '{name}'")
            data[name] = value
        super().__init__(**data)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if not cls.method:
            raise TypeError(f"{cls.__name__} must define a non-empty 'method'")
        attachments = [spec.name for spec in _field_specs(cls) if spec.kind is FieldKind.ATTACHMENT]
        if len(attachments) > 1:
            raise TypeError(f"{cls.__name__} declares more than one attachment field: {attachments}")

    @classmethod
    def attachment_field(cls) -> Optional[str]:
        """Name of the attachment-bearing field, or ``None``."""
        for spec in _field_specs(cls):
            if spec.kind is FieldKind.ATTACHMENT:
                return spec.name
        return None

    def attachment(self) -> Optional[AnyInputFile]:
        """Current value of the attachment field, or ``None`` if there is none."""
        name = self.attachment_field()
        return getattr(self, name) if name is not None else None

    def iter_fields(self) -> Iterator[RequestField]:
        """Yield every declared field with its current value, in wire order."""
        for spec in _field_specs(type(self)):
            yield RequestField(
                name=spec.name,
                wire_key=spec.wire_key,
                value=getattr(self, spec.name),
                omit_if_default=spec.omit_if_default,
                default=spec.default,
                kind=spec.kind,
            )
