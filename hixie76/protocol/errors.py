# MIT License © 2025 Motohiro Suzuki
"""
protocol/errors.py

Handshake failures are values, not exceptions:
- HandshakeError(kind, detail) is returned inside Result.Err(...)
- detail is the offending line or the full header dump (LOCAL-ONLY, never sent on wire)

Exceptions below are only raised on opt-in paths (Result.unwrap, config loading).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Hixie76Error(Exception):
    pass


class ConfigError(Hixie76Error):
    pass


class HandshakeRejected(Hixie76Error):
    def __init__(self, error: "HandshakeError") -> None:
        super().__init__(f"{error.kind.value}: {error.detail}")
        self.error = error


class HandshakeErrorKind(str, Enum):
    IO_ERROR = "IOError"
    INVALID_GET_REQUEST = "InvalidGETRequest"
    INVALID_HEADER_LINE = "InvalidHeaderLine"
    MISSING_HEADER_KEYS = "MissingHeaderKeys"
    BAD_FIRST_SECURITY_KEY = "BadFirstSecurityKey"
    BAD_SECOND_SECURITY_KEY = "BadSecondSecurityKey"


@dataclass(frozen=True)
class HandshakeError:
    """
    Terminal handshake failure.
      - IOError(message)
      - InvalidGETRequest(line)
      - InvalidHeaderLine(line)
      - MissingHeaderKeys(dump)
      - BadFirstSecurityKey(dump)
      - BadSecondSecurityKey(dump)
    """
    kind: HandshakeErrorKind
    detail: str

    @staticmethod
    def io_error(message: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.IO_ERROR, message)

    @staticmethod
    def invalid_get_request(line: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.INVALID_GET_REQUEST, line)

    @staticmethod
    def invalid_header_line(line: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.INVALID_HEADER_LINE, line)

    @staticmethod
    def missing_header_keys(dump: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.MISSING_HEADER_KEYS, dump)

    @staticmethod
    def bad_first_security_key(dump: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.BAD_FIRST_SECURITY_KEY, dump)

    @staticmethod
    def bad_second_security_key(dump: str) -> "HandshakeError":
        return HandshakeError(HandshakeErrorKind.BAD_SECOND_SECURITY_KEY, dump)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.detail!r})"
