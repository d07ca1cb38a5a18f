# MIT License © 2025 Motohiro Suzuki
"""
protocol/handshake_types.py

Three-way result of protocol/parser.read_request_or_http():
  - PlainHTTP     : no "Upgrade: WebSocket" / "Connection: Upgrade"; token bytes NOT consumed
  - BadHandshake  : upgrade request that failed parsing/validation
  - GoodHandshake : validated upgrade request (no response written yet)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from hixie76.protocol.errors import HandshakeError
from hixie76.protocol.request import Request


@dataclass(frozen=True)
class PlainHTTP:
    path: str
    headers: List[Tuple[str, str]]


@dataclass(frozen=True)
class BadHandshake:
    error: HandshakeError


@dataclass(frozen=True)
class GoodHandshake:
    request: Request


HandshakeResult = Union[PlainHTTP, BadHandshake, GoodHandshake]
