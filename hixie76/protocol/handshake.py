# MIT License © 2025 Motohiro Suzuki
"""
protocol/handshake.py

Server-side draft-76 handshake:

    ParsingRequest -> Validating -> Responding -> Done
          |               |
          +---> Failed <--+

- Linear, no retries.
- Nothing is written to the stream unless validation fully succeeds.
- get_request() stops before Responding, so callers can filter by
  host/origin/path and then call protocol.response.put_response() themselves.
"""

from __future__ import annotations

from typing import Optional

from hixie76.protocol.audit import HandshakeAudit
from hixie76.protocol.errors import HandshakeError
from hixie76.protocol.parser import parse_request
from hixie76.protocol.request import Request, validate_request
from hixie76.protocol.response import DEFAULT_PROTOCOL, put_response
from hixie76.protocol.result import Result
from hixie76.transport.stream import ByteStream


def get_request(stream: ByteStream) -> Result[Request]:
    raw = parse_request(stream)
    if not raw.ok:
        return Result.Err(raw.unwrap_err())
    return validate_request(raw.unwrap())


def _audit(audit: Optional[HandshakeAudit], r: Result[Request]) -> None:
    if audit is None:
        return
    try:
        if r.ok:
            audit.accepted(r.unwrap())
        else:
            audit.rejected(r.unwrap_err())
    except Exception as e:
        # Must NOT break the handshake due to logging
        print(f"[{audit.tag}] audit write failed: {e}")


def shake_hands(
    stream: ByteStream,
    *,
    protocol: str = DEFAULT_PROTOCOL,
    audit: Optional[HandshakeAudit] = None,
) -> Result[Request]:
    """
    Accept any well-formed request and answer it.

    Returns Err(HandshakeError) without writing anything, or Ok(Request) after
    the response was written and flushed. The Request is informational only.
    """
    r = get_request(stream)
    if r.ok:
        try:
            put_response(stream, r.unwrap(), protocol)
        except (OSError, ValueError) as e:
            r = Result.Err(HandshakeError.io_error(f"{type(e).__name__}: {e}"))
    _audit(audit, r)
    return r
