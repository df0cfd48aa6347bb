"""Response envelope: ``{"ok": ..., "result": ...}`` wrapper of every reply."""

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter

from telebind.exceptions import APIException
from telebind.models import ResponseParameters


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class ApiResponse(BaseModel):
    """Decoded Bot API reply, successful or not.

    On success ``result`` holds the raw result; on failure ``description``,
    ``error_code`` and optionally ``parameters`` explain why.
    """

    ok: bool
    result: Any = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None

    model_config = {"populate_by_name": True}

    def unwrap(self, result_type: Any = Any, status_code: int = 200) -> Any:
        """Return ``result`` parsed as *result_type*.

        Raises:
            APIException: If ``ok`` is false.
            pydantic.ValidationError: If ``result`` does not match *result_type*.
        """
        if not self.ok:
            raise APIException(self.error_code or status_code, self.model_dump(exclude_none=True))
        return _adapter(result_type).validate_python(self.result)
