# MIT License © 2025 Motohiro Suzuki
"""
transport/frame.py

Draft-76 data frames:
    0x00 <payload bytes> 0xFF

- No length field, no escaping of 0x00/0xFF inside the payload.
- read_frame() never raises on malformed input:
    - EOF before any byte       -> b""
    - EOF before 0xFF           -> b"" (partial payload is dropped)
    - first byte is not 0x00    -> lenient, byte becomes part of the payload
  So b"" is the only close signal (an empty frame reads the same way).
"""

from __future__ import annotations

from typing import Iterator

from hixie76.transport.stream import ByteStream

FRAME_START = 0x00
FRAME_END = 0xFF


def encode_frame(payload: bytes) -> bytes:
    return bytes([FRAME_START]) + bytes(payload) + bytes([FRAME_END])


def put_frame(stream: ByteStream, payload: bytes) -> None:
    stream.write(encode_frame(payload))
    stream.flush()


def read_frame(stream: ByteStream) -> bytes:
    first = stream.read(1)
    if not first:
        return b""

    buf = bytearray()
    if first[0] != FRAME_START:
        buf += first

    while True:
        b = stream.read(1)
        if not b:
            return b""
        if b[0] == FRAME_END:
            return bytes(buf)
        buf += b


def iter_frames(stream: ByteStream) -> Iterator[bytes]:
    """Yield frames until the stream reports EOF (empty result)."""
    while True:
        msg = read_frame(stream)
        if not msg:
            return
        yield msg
