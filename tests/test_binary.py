import pytest

from lights.binary import (
    Int8,
    Int16,
    Int32,
    Int64,
    Packet,
    String,
    TypeIdentifier,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    read_string,
    read_value,
)

SIGNED = [
    (Int8, TypeIdentifier.INT8, 1, 0xF1),
    (Int16, TypeIdentifier.INT16, 2, 0xF1F1),
    (Int32, TypeIdentifier.INT32, 4, 0xF1F1F1F1),
    (Int64, TypeIdentifier.INT64, 8, 0xF1F1F1F1F1F1F1F1),
]


@pytest.mark.parametrize("cls, ident, width, raw", SIGNED)
def test_proper_identifier(cls, ident, width, raw):
    value = cls(raw)
    assert value.identifier() == ident
    assert TypeIdentifier(bytes(value)[0]) == ident


def test_can_assign_integers_int8():
    assert int(Int8()) == 0
    assert int(Int8(127)) == 127
    assert int(Int8(-128)) == -128


def test_can_assign_integers_int16():
    assert int(Int16()) == 0
    assert int(Int16(32767)) == 32767
    assert int(Int16(-32768)) == -32768


def test_can_assign_integers_int32():
    assert int(Int32()) == 0
    assert int(Int32(2147483647)) == 2147483647
    assert int(Int32(-2147483648)) == -2147483648


def test_can_assign_integers_int64():
    assert int(Int64()) == 0
    assert int(Int64(9223372036854775807)) == 9223372036854775807
    assert int(Int64(-9223372036854775808)) == -9223372036854775808


def test_serializes_to_bytes_int8():
    assert bytes(Int8(-1)) == bytes([TypeIdentifier.INT8]) + b"\xff"


def test_serializes_to_bytes_int16():
    assert bytes(Int16(-1)) == bytes([TypeIdentifier.INT16]) + b"\xff" * 2


def test_serializes_to_bytes_int32():
    assert bytes(Int32(-1)) == bytes([TypeIdentifier.INT32]) + b"\xff" * 4


def test_serializes_to_bytes_int64():
    assert bytes(Int64(-1)) == bytes([TypeIdentifier.INT64]) + b"\xff" * 8


def test_int8_bytes_pinned():
    assert bytes(Int8(-1)) == b"\x00\xff"


@pytest.mark.parametrize(
    "cls, ident, width",
    [
        (UInt8, TypeIdentifier.UINT8, 1),
        (UInt16, TypeIdentifier.UINT16, 2),
        (UInt32, TypeIdentifier.UINT32, 4),
        (UInt64, TypeIdentifier.UINT64, 8),
    ],
)
def test_unsigned_round_trip(cls, ident, width):
    maximum = (1 << (8 * width)) - 1
    value = cls(maximum)
    assert int(value) == maximum
    assert bytes(value)[0] == int(ident)
    assert len(bytes(value)) == width + 1
    assert int(cls(0)) == 0


def test_uint64_high_bytes_round_trip():
    number = 0x80FF80FF80FF80FF
    assert int(UInt64(number)) == number


def test_little_endian_order():
    assert bytes(Int16(0x0102)) == bytes([TypeIdentifier.INT16, 0x02, 0x01])


def test_integer_truncates_like_a_cast():
    assert int(Int8(0xF1)) == -15
    assert int(UInt8(256 + 7)) == 7


def test_string_proper_identifier():
    text = String("Hello World!")
    assert text.identifier() == TypeIdentifier.STRING
    assert TypeIdentifier(bytes(text)[0]) == TypeIdentifier.STRING


def test_string_can_assign():
    text = String()
    assert str(text) == ""
    text = String("Ozz World!")
    assert str(text) == "Ozz World!"


def test_string_serializes_to_bytes():
    text = String("Hello World!")
    data = bytes(text)
    assert len(data) == len(text)
    assert data[0] == int(TypeIdentifier.STRING)
    assert data[1:] == b"Hello World!"


def test_packet_layout():
    packet = Packet(Int8(-1), String("hi"))
    data = bytes(packet)
    assert data[0] == int(TypeIdentifier.PACKET)
    body_size = read_value(data, 1, 8)
    assert body_size == len(bytes(Int8(-1))) + len(bytes(String("hi")))
    assert data[9:] == bytes(Int8(-1)) + bytes(String("hi"))


def test_packet_indexing():
    packet = Packet(Int32(5), String("x"))
    assert int(packet[0]) == 5
    assert str(packet[1]) == "x"
    assert len(packet) == 2


def test_empty_packet():
    assert bytes(Packet()) == bytes([TypeIdentifier.PACKET]) + bytes(8)


def test_packet_rejects_non_serializable():
    with pytest.raises(TypeError):
        Packet(Int8(1), 3.5)


def test_packet_header_uses_array_identifier():
    assert bytes(Packet())[0] == 0x0C
    assert TypeIdentifier(bytes(Packet())[0]) is TypeIdentifier.ARRAY


def test_read_value_little_endian():
    assert read_value(b"\x00\x34\x12\x00", 1, 2) == 0x1234


def test_read_value_round_trip_with_integer():
    data = bytes(UInt32(0xDEADBEEF))
    assert read_value(data, 1, 4) == 0xDEADBEEF


def test_read_value_out_of_range():
    with pytest.raises(ValueError):
        read_value(b"\x01\x02", 1, 4)


def test_read_string():
    data = bytes(String("Hello World!"))
    assert read_string(data, 1, 5) == "Hello"


def test_read_string_out_of_range():
    with pytest.raises(ValueError):
        read_string(b"abc", 2, 5)