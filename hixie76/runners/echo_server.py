# MIT License © 2025 Motohiro Suzuki
"""
runners/echo_server.py

Accepts clients, one thread per connection:
  - shake hands (anything well-formed is accepted)
  - send the configured greeting frame
  - echo every frame back with reply_suffix appended
  - close on EOF (empty frame)

  python -m hixie76.runners.echo_server --config config/server.yml
"""

from __future__ import annotations

import argparse
import socket
import threading
from typing import Optional

from hixie76.protocol.audit import HandshakeAudit
from hixie76.protocol.config import ServerConfig, load_config
from hixie76.protocol.handshake import shake_hands
from hixie76.transport.frame import iter_frames, put_frame
from hixie76.transport.stream import ByteStream, open_stream


def talk_loop(stream: ByteStream, cfg: ServerConfig) -> int:
    suffix = cfg.reply_suffix.encode("utf-8")
    n = 0
    for msg in iter_frames(stream):
        put_frame(stream, msg + suffix)
        n += 1
    return n


def talk_to(stream: ByteStream, cfg: ServerConfig, audit: Optional[HandshakeAudit] = None) -> bool:
    r = shake_hands(stream, protocol=cfg.protocol, audit=audit)
    if not r.ok:
        print("[server76] handshake FAILED")
        print("error =", r.unwrap_err())
        return False

    if cfg.greeting:
        put_frame(stream, cfg.greeting.encode("utf-8"))
        print("[server76] shook hands, sent welcome message")

    n = talk_loop(stream, cfg)
    print(f"[server76] EOF encountered after {n} frames. Closing.")
    return True


def handle_connection(client_socket: socket.socket, client_address, cfg: ServerConfig, audit: HandshakeAudit) -> None:
    print(f"[server76] connection from {client_address}")
    stream = open_stream(client_socket)
    try:
        talk_to(stream, cfg, audit)
    except OSError as e:
        print("[server76] connection error =", f"{type(e).__name__}: {e}")
    finally:
        try:
            stream.close()
        finally:
            client_socket.close()


def run_server(cfg: ServerConfig) -> None:
    audit = HandshakeAudit(cfg.audit_log_path)

    server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server_socket.bind((cfg.host, cfg.port))
    server_socket.listen(5)
    print(f"[server76] listening on ws://{cfg.host}:{cfg.port}")

    try:
        while True:
            client_socket, client_address = server_socket.accept()
            t = threading.Thread(
                target=handle_connection,
                args=(client_socket, client_address, cfg, audit),
                daemon=True,
            )
            t.start()
    except KeyboardInterrupt:
        print("\n[server76] shutting down")
    finally:
        server_socket.close()


def main(argv: Optional[list[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="draft-76 WebSocket echo server")
    ap.add_argument("--config", help="YAML config (see config/server.yml)")
    ap.add_argument("--host")
    ap.add_argument("--port", type=int)
    args = ap.parse_args(argv)

    cfg = load_config(args.config) if args.config else ServerConfig()
    if args.host or args.port is not None:
        cfg = ServerConfig(
            host=args.host or cfg.host,
            port=cfg.port if args.port is None else args.port,
            protocol=cfg.protocol,
            greeting=cfg.greeting,
            reply_suffix=cfg.reply_suffix,
            audit_log_path=cfg.audit_log_path,
        )
    run_server(cfg)


if __name__ == "__main__":
    main()
