# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from hixie76.crypto.token import derive_token
from hixie76.protocol.request import Request
from hixie76.transport.stream import ByteStream

DEFAULT_PROTOCOL = "sample"


def create_response(req: Request, protocol: str = DEFAULT_PROTOCOL) -> bytes:
    """
    Accepting response: fixed header block (CRLF), blank line, then the
    16-byte binary digest with no terminator.
    """
    header = (
        "HTTP/1.1 101 WebSocket Protocol Handshake\r\n"
        "Upgrade: WebSocket\r\n"
        "Connection: Upgrade\r\n"
        f"Sec-WebSocket-Origin: {req.origin}\r\n"
        f"Sec-WebSocket-Location: ws://{req.host}{req.path}\r\n"
        f"Sec-WebSocket-Protocol: {protocol}\r\n"
        "\r\n"
    )
    return header.encode("latin-1") + derive_token(req.key1, req.key2, req.token)


def put_response(stream: ByteStream, req: Request, protocol: str = DEFAULT_PROTOCOL) -> None:
    stream.write(create_response(req, protocol))
    stream.flush()
