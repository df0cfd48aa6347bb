"""Wire naming policy: logical identifiers to snake_case keys."""

import re
from functools import lru_cache

# A run of capitals followed by a capitalised word ("HTTPServer" -> "HTTP_Server").
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# A lower-case letter or digit followed by a capital ("chatId" -> "chat_Id").
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


@lru_cache(maxsize=1024)
def to_snake_case(name: str) -> str:
    """Render *name* as the lower-case, underscore-joined wire key.

    Consecutive capitals are kept together as one word, so ``"FileID"``
    becomes ``"file_id"`` and ``"HTTPServer"`` becomes ``"http_server"``.
    Names already in snake_case come back unchanged.

    >>> to_snake_case("ReplyToMessageId")
    'reply_to_message_id'
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()
