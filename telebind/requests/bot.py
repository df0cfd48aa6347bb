"""Bot and file information requests."""

from telebind.models import File, User
from telebind.requests.base import BaseRequest


class GetMeRequest(BaseRequest):
    """Return basic information about the bot. A quick check of the token."""

    method = "getMe"
    result_type = User


class GetFileRequest(BaseRequest):
    """Resolve a ``file_id`` into a downloadable :class:`~telebind.models.File`."""

    method = "getFile"
    result_type = File
    positional_fields = ("file_id",)

    file_id: str
