"""Error taxonomy for playlist lookups."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid-input"
    NOT_FOUND = "not-found"
    FORBIDDEN = "forbidden"
    INVALID_CREDENTIAL = "invalid-credential"
    RATE_LIMITED = "rate-limited"
    SERVER_ERROR = "generic-server-error"


STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.INVALID_CREDENTIAL: 400,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.SERVER_ERROR: 500,
}


class PlaylistInfoError(Exception):
    """A failure that is reported to the caller as {"error": message}."""

    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code or STATUS_CODES[kind]
