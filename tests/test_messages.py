import asyncio

import pytest

from lights.messages import (
    LENGTH_FIELD_WIDTH,
    AccountLoggedInElsewhere,
    AuthenticationFailed,
    AuthenticationRequest,
    AuthenticationSuccessful,
    ClientMessageType,
    ServerMessageType,
)

EMAIL = "player@example.com"
PASSWORD = "password"


def _prefixed(text: str) -> bytes:
    raw = text.encode("utf-8")
    return len(raw).to_bytes(LENGTH_FIELD_WIDTH, "little") + raw


def test_failed_wire_bytes():
    assert bytes(AuthenticationFailed()) == b"\x01"


def test_logged_in_elsewhere_wire_bytes():
    assert bytes(AccountLoggedInElsewhere()) == b"\x03"


def test_request_layout():
    data = bytes(AuthenticationRequest(EMAIL, PASSWORD))
    assert data[0] == ClientMessageType.AUTHENTICATION_REQUEST
    assert data[1:] == _prefixed(EMAIL) + _prefixed(PASSWORD)


def test_request_round_trip():
    message = AuthenticationRequest(EMAIL, PASSWORD)
    assert AuthenticationRequest.decode(bytes(message)) == message


def test_request_str():
    text = str(AuthenticationRequest(EMAIL, PASSWORD))
    assert text == f"ConnectionRequestMessage: {EMAIL} | {PASSWORD}"


def test_request_empty_fields_round_trip():
    message = AuthenticationRequest("", "")
    data = bytes(message)
    assert len(data) == 1 + 2 * LENGTH_FIELD_WIDTH
    assert AuthenticationRequest.decode(data) == message


def test_successful_layout_and_round_trip():
    message = AuthenticationSuccessful(EMAIL)
    data = bytes(message)
    assert data[0] == ServerMessageType.AUTHENTICATION_SUCCESSFUL
    assert data[1:] == _prefixed(EMAIL)
    assert AuthenticationSuccessful.decode(data).username == EMAIL


def test_successful_str():
    assert str(AuthenticationSuccessful(EMAIL)) == f"ClientConnectedMessage: {EMAIL}"


def test_decode_rejects_wrong_tag():
    data = bytes(AuthenticationSuccessful(EMAIL))
    with pytest.raises(ValueError):
        AuthenticationRequest.decode(data)


def test_decode_rejects_truncated():
    data = bytes(AuthenticationRequest(EMAIL, PASSWORD))
    with pytest.raises(ValueError):
        AuthenticationRequest.decode(data[:-1])


def test_decode_rejects_trailing_bytes():
    data = bytes(AuthenticationSuccessful(EMAIL))
    with pytest.raises(ValueError):
        AuthenticationSuccessful.decode(data + b"\x00")


def test_decode_rejects_empty():
    with pytest.raises(ValueError):
        AuthenticationSuccessful.decode(b"")


@pytest.mark.asyncio
async def test_request_read_from_stream():
    reader = asyncio.StreamReader()
    reader.feed_data(bytes(AuthenticationRequest(EMAIL, PASSWORD))[1:])
    reader.feed_eof()
    message = await AuthenticationRequest.read_from(reader)
    assert message.email == EMAIL
    assert message.password == PASSWORD


@pytest.mark.asyncio
async def test_successful_read_from_stream():
    reader = asyncio.StreamReader()
    reader.feed_data(bytes(AuthenticationSuccessful(EMAIL))[1:])
    reader.feed_eof()
    message = await AuthenticationSuccessful.read_from(reader)
    assert message == AuthenticationSuccessful(EMAIL)


@pytest.mark.asyncio
async def test_read_from_truncated_stream():
    reader = asyncio.StreamReader()
    reader.feed_data(bytes(AuthenticationRequest(EMAIL, PASSWORD))[1:-2])
    reader.feed_eof()
    with pytest.raises(asyncio.IncompleteReadError):
        await AuthenticationRequest.read_from(reader)