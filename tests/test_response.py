# MIT License © 2025 Motohiro Suzuki
from hixie76.protocol.request import Request
from hixie76.protocol.response import create_response, put_response

EXPECTED_HEAD = (
    b"HTTP/1.1 101 WebSocket Protocol Handshake\r\n"
    b"Upgrade: WebSocket\r\n"
    b"Connection: Upgrade\r\n"
    b"Sec-WebSocket-Origin: http://example.com\r\n"
    b"Sec-WebSocket-Location: ws://example.com/demo\r\n"
    b"Sec-WebSocket-Protocol: sample\r\n"
    b"\r\n"
)


def _req(key1, key2, token):
    return Request(
        host="example.com",
        path="/demo",
        origin="http://example.com",
        key1=key1,
        key2=key2,
        token=token,
    )


def test_response_is_header_block_then_raw_digest(key1, key2, token):
    assert create_response(_req(key1, key2, token)) == EXPECTED_HEAD + b"8jKS'y:G*Co,Wxa-"


def test_binary_digest_not_escaped(key1, key2):
    out = create_response(_req(key1, key2, b"\x00\x01\x02\x03\x04\x05\x06\x07"))
    assert out.startswith(EXPECTED_HEAD)
    assert len(out) == len(EXPECTED_HEAD) + 16


def test_custom_protocol_name(key1, key2, token):
    out = create_response(_req(key1, key2, token), protocol="chat")
    assert b"Sec-WebSocket-Protocol: chat\r\n\r\n" in out


def test_put_response_writes_and_flushes(duplex, key1, key2, token):
    s = duplex(b"")
    put_response(s, _req(key1, key2, token))
    assert s.written() == EXPECTED_HEAD + b"8jKS'y:G*Co,Wxa-"
    assert s.flushes == 1
