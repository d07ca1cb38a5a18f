# MIT License © 2025 Motohiro Suzuki
import pytest

from hixie76.protocol.errors import HandshakeErrorKind, HandshakeRejected
from hixie76.protocol.request import REQUIRED_KEYS, Request, validate_request


@pytest.fixture
def raw(key1, key2, token):
    return {
        "Path": "/chat",
        "Host": "example.com",
        "Origin": "http://example.com",
        "Upgrade": "WebSocket",
        "Sec-WebSocket-Key1": key1,
        "Sec-WebSocket-Key2": key2,
        "Token": token,
    }


def test_valid_request_copies_fields(raw, key1, key2, token):
    r = validate_request(raw)
    assert r.ok
    assert r.unwrap() == Request(
        host="example.com",
        path="/chat",
        origin="http://example.com",
        key1=key1,
        key2=key2,
        token=token,
    )


def test_token_preserved_byte_for_byte(raw):
    raw["Token"] = b"\x00\xff\r\n:\x80 a"
    assert validate_request(raw).unwrap().token == b"\x00\xff\r\n:\x80 a"


@pytest.mark.parametrize("missing", REQUIRED_KEYS)
def test_missing_any_required_key(raw, missing):
    del raw[missing]
    r = validate_request(raw)
    assert not r.ok
    assert r.unwrap_err().kind == HandshakeErrorKind.MISSING_HEADER_KEYS


def test_missing_origin_dumps_map(raw):
    del raw["Origin"]
    err = validate_request(raw).unwrap_err()
    assert err.kind == HandshakeErrorKind.MISSING_HEADER_KEYS
    assert "Sec-WebSocket-Key1" in err.detail
    assert "Origin" not in err.detail


def test_spaceless_first_key(raw):
    raw["Sec-WebSocket-Key1"] = "12345"
    assert validate_request(raw).unwrap_err().kind == HandshakeErrorKind.BAD_FIRST_SECURITY_KEY


def test_spaceless_second_key(raw):
    raw["Sec-WebSocket-Key2"] = "12345"
    assert validate_request(raw).unwrap_err().kind == HandshakeErrorKind.BAD_SECOND_SECURITY_KEY


def test_first_key_checked_before_second(raw):
    raw["Sec-WebSocket-Key1"] = "111"
    raw["Sec-WebSocket-Key2"] = "222"
    assert validate_request(raw).unwrap_err().kind == HandshakeErrorKind.BAD_FIRST_SECURITY_KEY


def test_missing_keys_checked_before_security_keys(raw):
    raw["Sec-WebSocket-Key1"] = "111"
    del raw["Host"]
    assert validate_request(raw).unwrap_err().kind == HandshakeErrorKind.MISSING_HEADER_KEYS


def test_unwrap_on_err_raises(raw):
    del raw["Host"]
    with pytest.raises(HandshakeRejected) as ei:
        validate_request(raw).unwrap()
    assert ei.value.error.kind == HandshakeErrorKind.MISSING_HEADER_KEYS


def test_repr_hides_token(raw):
    assert "^n:ds" not in repr(validate_request(raw).unwrap())


def test_error_dump_redacts_token(raw, token):
    raw["Sec-WebSocket-Key1"] = "111"
    err = validate_request(raw).unwrap_err()
    assert "'Token': '<8 bytes>'" in err.detail
    assert repr(token) not in err.detail
