# MIT License © 2025 Motohiro Suzuki
"""
crypto/token.py

Draft-76 challenge response:
    digest = MD5( u32(key1) || u32(key2) || token[8] )

where u32(key) = (digits of key as integer) // (spaces in key), low 32 bits, big-endian.
"""

from __future__ import annotations

import hashlib

TOKEN_LEN = 8
DIGEST_LEN = 16


def _u32(x: int) -> bytes:
    # the digit string may exceed 32 bits; only the quotient's low word goes on wire
    return (x & 0xFFFFFFFF).to_bytes(4, "big")


def key_number(key: str) -> int:
    """Digits of the key as one integer, divided by the key's space count."""
    digits = "".join(c for c in key if "0" <= c <= "9")
    spaces = key.count(" ")
    if spaces == 0:
        raise ValueError("security key has no spaces")
    return int(digits or "0") // spaces


def derive_token(key1: str, key2: str, token: bytes) -> bytes:
    t = bytes(token)
    if len(t) != TOKEN_LEN:
        raise ValueError(f"token must be {TOKEN_LEN} bytes, got {len(t)}")
    challenge = _u32(key_number(key1)) + _u32(key_number(key2)) + t
    return hashlib.md5(challenge).digest()
