"""Tests for the ApiResponse envelope."""

import sys
import os
from typing import List

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.envelope import ApiResponse
from telebind.exceptions import APIException
from telebind.models import Message, User

_MESSAGE = {
    "message_id": 10,
    "date": 1700000000,
    "chat": {"id": 42, "type": "private"},
    "from": {"id": 1, "is_bot": True, "first_name": "Bot"},
    "video_note": {"file_id": "XYZ", "file_unique_id": "u1", "length": 240, "duration": 5},
}


class TestApiResponse:
    """Success/error discrimination and typed unwrapping."""

    def test_unwrap_message(self) -> None:
        envelope = ApiResponse.model_validate({"ok": True, "result": _MESSAGE})
        message = envelope.unwrap(Message)
        assert isinstance(message, Message)
        assert message.chat.id == 42
        assert message.from_field.first_name == "Bot"
        assert message.video_note.length == 240

    def test_unwrap_list(self) -> None:
        envelope = ApiResponse.model_validate({"ok": True, "result": [{"id": 1, "is_bot": False, "first_name": "A"}]})
        users = envelope.unwrap(List[User])
        assert users[0].first_name == "A"

    def test_unwrap_untyped(self) -> None:
        assert ApiResponse(ok=True, result=True).unwrap() is True

    def test_error_raises(self) -> None:
        envelope = ApiResponse.model_validate({
            "ok": False,
            "error_code": 429,
            "description": "Too Many Requests: retry after 3",
            "parameters": {"retry_after": 3},
        })
        with pytest.raises(APIException) as exc_info:
            envelope.unwrap(Message)
        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 3
        assert "Too Many Requests" in str(exc_info.value)

    def test_error_without_code_uses_status(self) -> None:
        with pytest.raises(APIException) as exc_info:
            ApiResponse(ok=False, description="Bad Request").unwrap(status_code=400)
        assert exc_info.value.status_code == 400

    def test_result_shape_mismatch(self) -> None:
        with pytest.raises(ValidationError):
            ApiResponse(ok=True, result={"unexpected": 1}).unwrap(Message)

    def test_ok_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ApiResponse.model_validate({"result": {}})
