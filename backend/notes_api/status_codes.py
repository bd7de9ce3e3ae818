"""
Notes API — Status Envelope Table
==================================

Every response body carries a `status` object `{code, message}` drawn from
this fixed table. The code doubles as the HTTP status code of the response.
"""

from enum import Enum
from typing import Dict, Union


class StatusCodes(Enum):
    SUCCESS = (200, "Success")
    CREATED = (201, "Note created successfully")
    BAD_REQUEST = (400, "Bad Request")
    NOT_FOUND = (404, "Note not found")
    INTERNAL_SERVER_ERROR = (500, "Internal Server Error")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return {"code": self.code, "message": self.message}
