# MIT License © 2025 Motohiro Suzuki
"""
protocol/parser.py

Reads the client's opening handshake from a blocking byte stream.

Wire:
    GET <path> HTTP/1.1\\r\\n
    <Key>: <Value>\\r\\n        (repeated; duplicate keys -> last write wins)
    \\r\\n
    <8 raw token bytes>       (no terminator)

Bytes are mapped 1:1 to str (latin-1) so header values survive unchanged.
Transport failures become HandshakeError.io_error(...); nothing is raised to the caller.
"""

from __future__ import annotations

from typing import Optional

from hixie76.crypto.token import TOKEN_LEN
from hixie76.protocol.errors import HandshakeError
from hixie76.protocol.handshake_types import (
    BadHandshake,
    GoodHandshake,
    HandshakeResult,
    PlainHTTP,
)
from hixie76.protocol.request import K_PATH, K_TOKEN, RawRequest, validate_request
from hixie76.protocol.result import Result
from hixie76.transport.stream import ByteStream, read_exactly

_GET_PREFIX = "GET "
_GET_SUFFIX = " HTTP/1.1"


def _decode(raw: bytes) -> str:
    line = raw.decode("latin-1")
    return line[:-1] if line.endswith("\n") else line


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _read_get_line(stream: ByteStream) -> Result[str]:
    line = _decode(stream.readline())
    first = _strip_cr(line)
    words = first.split()
    # path is the second word; anything between it and the version is ignored
    if not (first.startswith(_GET_PREFIX) and first.endswith(_GET_SUFFIX)) or len(words) < 3:
        return Result.Err(HandshakeError.invalid_get_request(line))
    return Result.Ok(words[1])


def _read_headers(stream: ByteStream, req: RawRequest) -> Optional[HandshakeError]:
    """Collect header lines into req until the blank line."""
    while True:
        raw = stream.readline()
        if not raw:
            return HandshakeError.invalid_header_line("")

        line = _strip_cr(_decode(raw))
        if line == "":
            return None

        key, sep, value = line.partition(":")
        if not sep:
            return HandshakeError.invalid_header_line(line)
        if value.startswith(" "):
            value = value[1:]
        req[key] = value


def _read_token(stream: ByteStream, req: RawRequest) -> Optional[HandshakeError]:
    token = read_exactly(stream, TOKEN_LEN)
    if len(token) != TOKEN_LEN:
        return HandshakeError.io_error(f"EOF while reading token ({len(token)}/{TOKEN_LEN} bytes)")
    req[K_TOKEN] = token
    return None


def parse_request(stream: ByteStream) -> Result[RawRequest]:
    try:
        first = _read_get_line(stream)
        if not first.ok:
            return Result.Err(first.unwrap_err())

        req: RawRequest = {K_PATH: first.unwrap()}

        err = _read_headers(stream, req)
        if err is None:
            err = _read_token(stream, req)
        if err is not None:
            return Result.Err(err)

        return Result.Ok(req)
    except (OSError, ValueError) as e:
        # ValueError: I/O on a closed file
        return Result.Err(HandshakeError.io_error(f"{type(e).__name__}: {e}"))


def _is_websocket(req: RawRequest) -> bool:
    return req.get("Upgrade") == "WebSocket" and req.get("Connection") == "Upgrade"


def read_request_or_http(stream: ByteStream) -> HandshakeResult:
    """
    Like parse_request + validate_request, but falls back to PlainHTTP when the
    request is not an upgrade. For PlainHTTP the stream is left right after the
    blank line (token bytes are not consumed).
    """
    try:
        first = _read_get_line(stream)
        if not first.ok:
            return BadHandshake(first.unwrap_err())

        req: RawRequest = {K_PATH: first.unwrap()}

        err = _read_headers(stream, req)
        if err is not None:
            return BadHandshake(err)

        if not _is_websocket(req):
            headers = [(k, str(v)) for k, v in req.items() if k != K_PATH]
            return PlainHTTP(path=str(req[K_PATH]), headers=headers)

        err = _read_token(stream, req)
        if err is not None:
            return BadHandshake(err)
    except (OSError, ValueError) as e:
        return BadHandshake(HandshakeError.io_error(f"{type(e).__name__}: {e}"))

    r = validate_request(req)
    if not r.ok:
        return BadHandshake(r.unwrap_err())
    return GoodHandshake(r.unwrap())
