# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from hixie76.protocol.errors import ConfigError


@dataclass(frozen=True)
class ServerConfig:
    """
    Echo server settings (config/server.yml).

    protocol     : value sent in Sec-WebSocket-Protocol
    greeting     : first frame sent after a successful handshake (None -> no greeting)
    reply_suffix : appended to every echoed frame
    audit_log_path : JSONL handshake audit (None -> print lines only)
    """
    host: str = "127.0.0.1"
    port: int = 8088
    protocol: str = "sample"
    greeting: Optional[str] = "Do you read me, Lieutenant Bowie?"
    reply_suffix: str = ", meow."
    audit_log_path: Optional[str] = None

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "ServerConfig":
        if not isinstance(data, Mapping):
            raise ConfigError("config root must be a mapping")

        d = ServerConfig()

        def _str(key: str, default: Optional[str], *, optional: bool = False) -> Optional[str]:
            v = data.get(key, default)
            if v is None and optional:
                return None
            if not isinstance(v, str):
                raise ConfigError(f"{key} must be a string")
            return v

        port = data.get("port", d.port)
        if isinstance(port, bool) or not isinstance(port, int) or not (0 <= port <= 65535):
            raise ConfigError("port must be an integer in 0..65535")

        return ServerConfig(
            host=_str("host", d.host),
            port=port,
            protocol=_str("protocol", d.protocol),
            greeting=_str("greeting", d.greeting, optional=True),
            reply_suffix=_str("reply_suffix", d.reply_suffix),
            audit_log_path=_str("audit_log_path", d.audit_log_path, optional=True),
        )


def load_config(path: str | Path) -> ServerConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"config not found: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e
    return ServerConfig.from_mapping(data or {})
