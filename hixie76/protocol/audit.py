# MIT License © 2025 Motohiro Suzuki
"""
protocol/audit.py

Handshake evidence:
  - one grep-able print line per decision ("[handshake76] accepted ..." / "[handshake76] rejected ...")
  - optional JSONL sink (audit_log_path), one record per handshake

NO secret logging: the client token and the derived digest never appear here.
"""

from __future__ import annotations

import json
import threading
import time
import uuid
from pathlib import Path
from typing import Optional

from hixie76.protocol.errors import HandshakeError
from hixie76.protocol.request import Request


class HandshakeAudit:
    def __init__(self, path: Optional[str] = None, *, tag: str = "handshake76", echo: bool = True) -> None:
        self.path = Path(path) if isinstance(path, str) and path.strip() else None
        self.tag = tag
        self.echo = echo
        # one instance is shared by every connection thread of the echo server
        self._lock = threading.Lock()

    def _emit(self, record: dict) -> None:
        if self.path is None:
            return
        line = json.dumps(record, ensure_ascii=False) + "\n"
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)

    def accepted(self, req: Request) -> None:
        if self.echo:
            print(f"[{self.tag}] accepted host={req.host} path={req.path} origin={req.origin}")
        self._emit(
            {
                "event": "HANDSHAKE_ACCEPTED",
                "id": str(uuid.uuid4()),
                "ts": time.time(),
                "host": req.host,
                "path": req.path,
                "origin": req.origin,
            }
        )

    def rejected(self, err: HandshakeError) -> None:
        if self.echo:
            print(f"[{self.tag}] rejected kind={err.kind.value} detail={err.detail!r}")
        self._emit(
            {
                "event": "HANDSHAKE_REJECTED",
                "id": str(uuid.uuid4()),
                "ts": time.time(),
                "kind": err.kind.value,
                "detail": err.detail,
            }
        )
