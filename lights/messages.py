"""Messages exchanged between game clients and the server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Protocol

from lights.binary import read_string, read_value

__all__ = [
    "LENGTH_FIELD_WIDTH",
    "ClientMessageType",
    "ServerMessageType",
    "AuthenticationRequest",
    "AuthenticationSuccessful",
    "AuthenticationFailed",
    "AccountLoggedInElsewhere",
]

LENGTH_FIELD_WIDTH = 8


class ClientMessageType(IntEnum):
    """Tag byte of a message sent by a client."""

    UNKNOWN = 0
    AUTHENTICATION_REQUEST = 1


class ServerMessageType(IntEnum):
    """Tag byte of a message sent by the server."""

    UNKNOWN = 0
    AUTHENTICATION_FAILED = 1
    AUTHENTICATION_SUCCESSFUL = 2
    ACCOUNT_LOGGED_IN_ELSEWHERE = 3


class _Reader(Protocol):
    async def readexactly(self, n: int) -> bytes: ...


def _encode_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return len(raw).to_bytes(LENGTH_FIELD_WIDTH, "little") + raw


def _decode_text(data: bytes, offset: int) -> tuple[str, int]:
    length = read_value(data, offset, LENGTH_FIELD_WIDTH)
    offset += LENGTH_FIELD_WIDTH
    text = read_string(data, offset, length)
    return text, offset + length


async def _read_text(reader: _Reader) -> str:
    length = int.from_bytes(await reader.readexactly(LENGTH_FIELD_WIDTH), "little")
    return (await reader.readexactly(length)).decode("utf-8")


def _check_tag(data: bytes, expected: int) -> None:
    if not data:
        raise ValueError("message is empty")
    if data[0] != expected:
        raise ValueError(f"expected message type {expected}, got {data[0]}")


def _check_consumed(data: bytes, offset: int) -> None:
    if offset != len(data):
        raise ValueError(f"{len(data) - offset} trailing bytes after message")


@dataclass(frozen=True)
class AuthenticationRequest:
    """A client asking to log in with an e-mail address and a password."""

    message_type: ClassVar[ClientMessageType] = ClientMessageType.AUTHENTICATION_REQUEST

    email: str
    password: str

    def __bytes__(self) -> bytes:
        return (
            bytes([self.message_type])
            + _encode_text(self.email)
            + _encode_text(self.password)
        )

    def __str__(self) -> str:
        return f"ConnectionRequestMessage: {self.email} | {self.password}"

    @classmethod
    def decode(cls, data: bytes) -> AuthenticationRequest:
        """Decode a whole message, tag byte included."""
        data = bytes(data)
        _check_tag(data, cls.message_type)
        email, offset = _decode_text(data, 1)
        password, offset = _decode_text(data, offset)
        _check_consumed(data, offset)
        return cls(email, password)

    @classmethod
    async def read_from(cls, reader: _Reader) -> AuthenticationRequest:
        """Read the body of the message from a stream whose tag byte was already read."""
        email = await _read_text(reader)
        password = await _read_text(reader)
        return cls(email, password)


@dataclass(frozen=True)
class AuthenticationSuccessful:
    """The server accepting a login, naming the user that logged in."""

    message_type: ClassVar[ServerMessageType] = ServerMessageType.AUTHENTICATION_SUCCESSFUL

    username: str

    def __bytes__(self) -> bytes:
        return bytes([self.message_type]) + _encode_text(self.username)

    def __str__(self) -> str:
        return f"ClientConnectedMessage: {self.username}"

    @classmethod
    def decode(cls, data: bytes) -> AuthenticationSuccessful:
        """Decode a whole message, tag byte included."""
        data = bytes(data)
        _check_tag(data, cls.message_type)
        username, offset = _decode_text(data, 1)
        _check_consumed(data, offset)
        return cls(username)

    @classmethod
    async def read_from(cls, reader: _Reader) -> AuthenticationSuccessful:
        """Read the body of the message from a stream whose tag byte was already read."""
        return cls(await _read_text(reader))


@dataclass(frozen=True)
class AuthenticationFailed:
    """The server rejecting a login."""

    message_type: ClassVar[ServerMessageType] = ServerMessageType.AUTHENTICATION_FAILED

    def __bytes__(self) -> bytes:
        return bytes([self.message_type])


@dataclass(frozen=True)
class AccountLoggedInElsewhere:
    """The server telling a client that its account logged in from another connection."""

    message_type: ClassVar[ServerMessageType] = ServerMessageType.ACCOUNT_LOGGED_IN_ELSEWHERE

    def __bytes__(self) -> bytes:
        return bytes([self.message_type])