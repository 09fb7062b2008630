import pytest

from tp0net.protocol import OpCode, Packet, decode_values, encode_message, serialize


def test_op_codes_follow_enum_order():
    assert serialize(OpCode.MESSAGE, b"")[:4] == b"\x00\x00\x00\x00"
    assert serialize(OpCode.PACKET, b"")[:4] == b"\x01\x00\x00\x00"


def test_encode_message_wire_bytes():
    assert encode_message("hola") == (
        b"\x00\x00\x00\x00" b"\x05\x00\x00\x00" b"hola\x00"
    )


def test_serialize_header_length():
    payload = b"abcdef"
    frame = serialize(OpCode.PACKET, payload)
    assert len(frame) == 8 + len(payload)
    assert frame.endswith(payload)
    assert frame[:4] == b"\x01\x00\x00\x00"


def test_packet_round_trip():
    packet = Packet()
    for value in ["uno", "dos", ""]:
        packet.add(value)
    assert decode_values(bytes(packet.payload)) == ["uno", "dos", ""]


def test_packet_serialize_starts_with_packet_opcode():
    packet = Packet()
    packet.add("x")
    frame = packet.serialize()
    assert frame[:4] == serialize(OpCode.PACKET, b"")[:4]
    assert frame[8:] == bytes(packet.payload)


def test_add_bytes_kept_verbatim():
    packet = Packet()
    packet.add(b"raw")
    assert decode_values(bytes(packet.payload)) == ["raw"]


def test_decode_empty_payload():
    assert decode_values(b"") == []


def test_decode_truncated_prefix():
    with pytest.raises(ValueError):
        decode_values(b"\x01\x00")


def test_decode_entry_past_end():
    packet = Packet()
    packet.add("hello")
    with pytest.raises(ValueError):
        decode_values(bytes(packet.payload)[:-2])