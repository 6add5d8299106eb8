# hopp/cli/core/errors.py
"""
Error taxonomy shared by metadata resolution and resource loading.

Every failure surfaced to the CLI layer is a :class:`HoppCLIError` carrying
a code and the contextual data needed to report it (the offending path,
server URL, access token or per-entry parse outcomes).
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    PARSING_ERROR = "PARSING_ERROR"
    SERVER_CONNECTION_REFUSED = "SERVER_CONNECTION_REFUSED"
    INVALID_SERVER_URL = "INVALID_SERVER_URL"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    MALFORMED_FILE = "MALFORMED_FILE"
    MALFORMED_COLLECTION = "MALFORMED_COLLECTION"
    MALFORMED_ENV_FILE = "MALFORMED_ENV_FILE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


TOKEN_ERROR_CODES = frozenset({ErrorCode.TOKEN_EXPIRED.value, ErrorCode.TOKEN_INVALID.value})

_MESSAGES: dict[str, str] = {
    ErrorCode.PARSING_ERROR.value: "Unable to parse request metadata",
    ErrorCode.SERVER_CONNECTION_REFUSED.value: "Unable to connect to the server at {data}",
    ErrorCode.INVALID_SERVER_URL.value: "Invalid server URL: {data}",
    ErrorCode.TOKEN_EXPIRED.value: "The access token has expired: {data}",
    ErrorCode.TOKEN_INVALID.value: "The access token is invalid: {data}",
    ErrorCode.INVALID_FILE_TYPE.value: "Unsupported file type, expected a .json file: {data}",
    ErrorCode.FILE_NOT_FOUND.value: "File not found: {data}",
    ErrorCode.MALFORMED_FILE.value: "File is not valid JSON: {data}",
    ErrorCode.MALFORMED_COLLECTION.value: "File is not a valid collection: {data}",
    ErrorCode.MALFORMED_ENV_FILE.value: "File is not a valid environment: {data}",
}


def _code_value(code: ErrorCode | str) -> str:
    return code.value if isinstance(code, ErrorCode) else str(code)


class HoppCLIError(Exception):
    """Tagged CLI error.

    ``code`` is either an :class:`ErrorCode` value or a reason string
    reported by the workspace server, which is passed through verbatim.
    """

    def __init__(self, code: ErrorCode | str, data: Any = None):
        self.code = _code_value(code)
        self.data = data
        super().__init__(self.message)

    @property
    def message(self) -> str:
        template = _MESSAGES.get(self.code)
        if template is None:
            return f"{self.code}: {self.data}" if self.data is not None else self.code
        return template.format(data=self.data)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "data": self.data, "message": self.message}

    def __repr__(self) -> str:
        return f"HoppCLIError(code={self.code!r}, data={self.data!r})"


def error(code: ErrorCode | str, data: Any = None) -> HoppCLIError:
    return HoppCLIError(code, data)


def is_token_error(code: ErrorCode | str) -> bool:
    return _code_value(code) in TOKEN_ERROR_CODES
