# MIT License © 2025 Motohiro Suzuki
import io

import pytest


class DuplexStream:
    """In-memory byte-stream handle: reads from `incoming`, writes to `outgoing`."""

    def __init__(self, incoming: bytes) -> None:
        self.incoming = io.BytesIO(incoming)
        self.outgoing = io.BytesIO()
        self.flushes = 0

    def readline(self, size: int = -1) -> bytes:
        return self.incoming.readline(size)

    def read(self, size: int = -1) -> bytes:
        return self.incoming.read(size)

    def write(self, data: bytes) -> int:
        return self.outgoing.write(data)

    def flush(self) -> None:
        self.flushes += 1

    def written(self) -> bytes:
        return self.outgoing.getvalue()

    def remaining(self) -> bytes:
        return self.incoming.read()


class BrokenStream(DuplexStream):
    def readline(self, size: int = -1) -> bytes:
        raise ConnectionResetError("connection reset by peer")


@pytest.fixture
def duplex():
    return DuplexStream


@pytest.fixture
def broken():
    return BrokenStream


@pytest.fixture
def key1():
    return "4 @1  46546xW%0l 1 5"


@pytest.fixture
def key2():
    return "12998 5 Y3 1  .P00"


@pytest.fixture
def token():
    return b"^n:ds[4U"


@pytest.fixture
def opening(key1, key2, token):
    return (
        b"GET /demo HTTP/1.1\r\n"
        b"Host: example.com\r\n"
        b"Connection: Upgrade\r\n"
        b"Sec-WebSocket-Key2: " + key2.encode() + b"\r\n"
        b"Sec-WebSocket-Protocol: sample\r\n"
        b"Upgrade: WebSocket\r\n"
        b"Sec-WebSocket-Key1: " + key1.encode() + b"\r\n"
        b"Origin: http://example.com\r\n"
        b"\r\n" + token
    )
