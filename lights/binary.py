"""Tagged little-endian binary values and packets built from them."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

__all__ = [
    "TypeIdentifier",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "String",
    "Packet",
    "read_value",
    "read_string",
]

_SIZE_FIELD_WIDTH = 8


class TypeIdentifier(IntEnum):
    """The tag byte that leads every serialized value."""

    INT8 = 0x00
    INT16 = 0x01
    INT32 = 0x02
    INT64 = 0x03
    UINT8 = 0x04
    UINT16 = 0x05
    UINT32 = 0x06
    UINT64 = 0x07
    FLOAT = 0x08
    DOUBLE = 0x09
    STRING = 0x0A
    BOOLEAN = 0x0B
    ARRAY = 0x0C
    PACKET = 0x0C


class _Integer:
    """A fixed-width integer serialized as its tag followed by little-endian bytes."""

    _identifier: ClassVar[TypeIdentifier]
    _width: ClassVar[int]
    _signed: ClassVar[bool]

    __slots__ = ("_payload",)

    def __init__(self, value: int = 0) -> None:
        mask = (1 << (8 * self._width)) - 1
        self._payload = (int(value) & mask).to_bytes(self._width, "little")

    def __bytes__(self) -> bytes:
        return bytes([self._identifier]) + self._payload

    def __int__(self) -> int:
        return int.from_bytes(self._payload, "little", signed=self._signed)

    def __len__(self) -> int:
        return 1 + self._width

    def identifier(self) -> TypeIdentifier:
        """Return the tag this value is written with."""
        return self._identifier

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Int8(_Integer):
    """Signed 8-bit integer."""

    _identifier = TypeIdentifier.INT8
    _width = 1
    _signed = True

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)

    def __bytes__(self) -> bytes:
        return super().__bytes__()

    def __int__(self) -> int:
        return super().__int__()

    def identifier(self) -> TypeIdentifier:
        return super().identifier()


class Int16(_Integer):
    """Signed 16-bit integer."""

    _identifier = TypeIdentifier.INT16
    _width = 2
    _signed = True


class Int32(_Integer):
    """Signed 32-bit integer."""

    _identifier = TypeIdentifier.INT32
    _width = 4
    _signed = True


class Int64(_Integer):
    """Signed 64-bit integer."""

    _identifier = TypeIdentifier.INT64
    _width = 8
    _signed = True


class UInt8(_Integer):
    """Unsigned 8-bit integer."""

    _identifier = TypeIdentifier.UINT8
    _width = 1
    _signed = False


class UInt16(_Integer):
    """Unsigned 16-bit integer."""

    _identifier = TypeIdentifier.UINT16
    _width = 2
    _signed = False


class UInt32(_Integer):
    """Unsigned 32-bit integer."""

    _identifier = TypeIdentifier.UINT32
    _width = 4
    _signed = False


class UInt64(_Integer):
    """Unsigned 64-bit integer."""

    _identifier = TypeIdentifier.UINT64
    _width = 8
    _signed = False


class String:
    """A text value serialized as its tag followed by the UTF-8 bytes of the text."""

    __slots__ = ("_text",)

    def __init__(self, value: str = "") -> None:
        self._text = str(value)

    def __bytes__(self) -> bytes:
        return bytes([TypeIdentifier.STRING]) + self._text.encode("utf-8")

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(bytes(self))

    def identifier(self) -> TypeIdentifier:
        """Return the tag this value is written with."""
        return TypeIdentifier.STRING

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, String):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(("String", self._text))

    def __repr__(self) -> str:
        return f"String({self._text!r})"


class Packet:
    """An ordered group of serializable values, written with a size header."""

    def __init__(self, *args: Any) -> None:
        for arg in args:
            if isinstance(arg, (bytes, bytearray, str)) or not hasattr(type(arg), "__bytes__"):
                raise TypeError(f"{type(arg).__name__} is not a serializable value")
        self._values = tuple(args)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __bytes__(self) -> bytes:
        body = b"".join(bytes(value) for value in self._values)
        header = bytes([TypeIdentifier.PACKET]) + len(body).to_bytes(_SIZE_FIELD_WIDTH, "little")
        return header + body

    def __repr__(self) -> str:
        return f"Packet({', '.join(repr(v) for v in self._values)})"


def _checked_slice(data: bytes, offset: int, size: int) -> bytes:
    end = offset + size
    if offset < 0 or size < 0 or end > len(data):
        raise ValueError(
            f"cannot read {size} bytes at offset {offset} from {len(data)} bytes"
        )
    return bytes(data[offset:end])


def read_value(data: bytes, offset: int, size: int) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes at ``offset``."""
    return int.from_bytes(_checked_slice(data, offset, size), "little")


def read_string(data: bytes, offset: int, length: int) -> str:
    """Read ``length`` bytes at ``offset`` as UTF-8 text."""
    return _checked_slice(data, offset, length).decode("utf-8")