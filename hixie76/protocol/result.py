# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from hixie76.protocol.errors import HandshakeError, HandshakeRejected

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Unified return type for the handshake path:
      - Ok(value)
      - Err(error)
    """
    ok: bool
    value: Optional[T] = None
    error: Optional[HandshakeError] = None

    @staticmethod
    def Ok(v: T) -> "Result[T]":
        return Result(ok=True, value=v, error=None)

    @staticmethod
    def Err(e: HandshakeError) -> "Result[T]":
        return Result(ok=False, value=None, error=e)

    def unwrap(self) -> T:
        if not self.ok or self.value is None:
            raise HandshakeRejected(self.unwrap_err())
        return self.value

    def unwrap_err(self) -> HandshakeError:
        if self.ok or self.error is None:
            raise RuntimeError("unwrap_err() on Ok")
        return self.error
