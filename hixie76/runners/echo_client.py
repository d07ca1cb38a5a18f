# MIT License © 2025 Motohiro Suzuki
"""
runners/echo_client.py

Talks to runners/echo_server.py using the classic draft-76 test keys:
  - send opening handshake, check the 16-byte digest
  - read greeting, send one frame, print the echo
"""

from __future__ import annotations

import argparse
import socket
from typing import Optional

from hixie76.crypto.token import DIGEST_LEN, derive_token
from hixie76.protocol.request import encode_request
from hixie76.transport.frame import put_frame, read_frame
from hixie76.transport.stream import open_stream, read_exactly

KEY1 = "4 @1  46546xW%0l 1 5"
KEY2 = "12998 5 Y3 1  .P00"
TOKEN = b"^n:ds[4U"


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="draft-76 WebSocket echo client")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8088)
    ap.add_argument("--path", default="/demo")
    ap.add_argument("--message", default="hello")
    ap.add_argument("--no-greeting", action="store_true", help="server sends no greeting frame")
    args = ap.parse_args(argv)

    with socket.create_connection((args.host, args.port), timeout=5.0) as sock:
        stream = open_stream(sock)
        stream.write(
            encode_request(
                host=f"{args.host}:{args.port}",
                path=args.path,
                origin="http://localhost",
                key1=KEY1,
                key2=KEY2,
                token=TOKEN,
            )
        )
        stream.flush()

        status = stream.readline()
        while stream.readline() not in (b"\r\n", b"\n", b""):
            pass
        digest = read_exactly(stream, DIGEST_LEN)

        if digest != derive_token(KEY1, KEY2, TOKEN):
            print("[client76] handshake FAILED:", status.decode("latin-1").strip())
            return 1
        print("[client76] handshake OK")

        if not args.no_greeting:
            greeting = read_frame(stream)
            print("[client76] greeting =", greeting.decode("utf-8", "replace"))

        put_frame(stream, args.message.encode("utf-8"))
        print("[client76] reply =", read_frame(stream).decode("utf-8", "replace"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
