# MIT License © 2025 Motohiro Suzuki
"""
protocol/request.py

RawRequest -> Request validation.

RawRequest is the header map collected by protocol/parser.py:
  - "Path"  : requested path (from the GET line)
  - "Token" : the 8 raw bytes following the blank line
  - others  : header keys as sent ("Host", "Origin", "Sec-WebSocket-Key1", ...)

A Request only exists if all required keys are present and both
security keys contain at least one space (the divisor in crypto/token.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from hixie76.protocol.errors import HandshakeError
from hixie76.protocol.result import Result

RawRequest = Dict[str, Union[str, bytes]]

K_HOST = "Host"
K_PATH = "Path"
K_ORIGIN = "Origin"
K_TOKEN = "Token"
K_KEY1 = "Sec-WebSocket-Key1"
K_KEY2 = "Sec-WebSocket-Key2"

REQUIRED_KEYS = (K_HOST, K_PATH, K_ORIGIN, K_TOKEN, K_KEY1, K_KEY2)


@dataclass(frozen=True)
class Request:
    host: str
    path: str
    origin: str
    key1: str
    key2: str
    token: bytes

    def __repr__(self) -> str:
        # token is handshake secret material; keep it out of logs
        return (
            f"Request(host={self.host!r}, path={self.path!r}, origin={self.origin!r}, "
            f"key1={self.key1!r}, key2={self.key2!r}, token=<{len(self.token)} bytes>)"
        )


def dump_raw(req: RawRequest) -> str:
    # token is handshake secret material; error details end up in logs
    shown = {k: (f"<{len(v)} bytes>" if k == K_TOKEN else v) for k, v in req.items()}
    return repr(dict(sorted(shown.items())))


def validate_request(req: RawRequest) -> Result[Request]:
    if any(k not in req for k in REQUIRED_KEYS):
        return Result.Err(HandshakeError.missing_header_keys(dump_raw(req)))

    # key1 strictly before key2
    if " " not in str(req[K_KEY1]):
        return Result.Err(HandshakeError.bad_first_security_key(dump_raw(req)))
    if " " not in str(req[K_KEY2]):
        return Result.Err(HandshakeError.bad_second_security_key(dump_raw(req)))

    token = req[K_TOKEN]
    return Result.Ok(
        Request(
            host=str(req[K_HOST]),
            path=str(req[K_PATH]),
            origin=str(req[K_ORIGIN]),
            key1=str(req[K_KEY1]),
            key2=str(req[K_KEY2]),
            token=token if isinstance(token, bytes) else str(token).encode("latin-1"),
        )
    )


def encode_request(
    *,
    host: str,
    path: str,
    origin: str,
    key1: str,
    key2: str,
    token: bytes,
) -> bytes:
    """
    Client side opening handshake (what validate_request expects to see):
      GET <path> HTTP/1.1
      Upgrade / Connection / Host / Origin / Sec-WebSocket-Key1 / Sec-WebSocket-Key2
      <blank line>
      <8 raw token bytes>
    """
    lines = [
        f"GET {path} HTTP/1.1",
        "Upgrade: WebSocket",
        "Connection: Upgrade",
        f"{K_HOST}: {host}",
        f"{K_ORIGIN}: {origin}",
        f"{K_KEY1}: {key1}",
        f"{K_KEY2}: {key2}",
    ]
    head = "\r\n".join(lines) + "\r\n\r\n"
    return head.encode("latin-1") + bytes(token)
