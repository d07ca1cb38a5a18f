# MIT License © 2025 Motohiro Suzuki
"""
transport/stream.py

The protocol layer only needs a blocking byte-stream handle:
  - readline() -> bytes   (includes b"\\n"; b"" on EOF)
  - read(n)    -> bytes   (up to n bytes; b"" on EOF)
  - write(b)
  - flush()

socket.makefile("rwb") and io.BytesIO both satisfy it.
"""

from __future__ import annotations

import socket
from typing import Protocol


class ByteStream(Protocol):
    def readline(self, size: int = -1) -> bytes: ...

    def read(self, size: int = -1) -> bytes: ...

    def write(self, data: bytes) -> int: ...

    def flush(self) -> None: ...


def read_exactly(stream: ByteStream, n: int) -> bytes:
    """Read n bytes; short result only on EOF."""
    buf = b""
    while len(buf) < n:
        chunk = stream.read(n - len(buf))
        if not chunk:
            break
        buf += chunk
    return buf


def open_stream(sock: socket.socket) -> ByteStream:
    return sock.makefile("rwb")
