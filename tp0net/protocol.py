"""Wire format shared by the client and the server.

Every frame is ``op_code`` (int32) followed by ``size`` (int32) and ``size``
bytes of payload. A packet payload is a run of ``length`` (int32) + bytes
entries. Strings travel NUL-terminated.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

_INT = struct.Struct("<i")
_HEADER = struct.Struct("<ii")


class OpCode(IntEnum):
    """Operation carried by a frame."""

    MESSAGE = 0
    PACKET = 1


def _to_c_string(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8") + b"\0"
    return bytes(value)


def _from_c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def serialize(op_code: int, payload: bytes) -> bytes:
    """Frame ``payload`` with its operation code and size."""
    return _HEADER.pack(int(op_code), len(payload)) + bytes(payload)


def encode_message(message: str) -> bytes:
    """Build a complete MESSAGE frame holding ``message``."""
    return serialize(OpCode.MESSAGE, _to_c_string(message))


def decode_values(payload: bytes) -> list[str]:
    """Split a packet payload into its string values."""
    values = []
    offset = 0
    size = len(payload)
    while offset < size:
        if offset + _INT.size > size:
            raise ValueError("truncated length prefix in packet payload")
        (length,) = _INT.unpack_from(payload, offset)
        offset += _INT.size
        if length < 0 or offset + length > size:
            raise ValueError("packet entry runs past the end of the payload")
        values.append(_from_c_string(payload[offset:offset + length]))
        offset += length
    return values


@dataclass
class Packet:
    """A packet of length-prefixed values."""

    op_code: OpCode = OpCode.PACKET
    payload: bytearray = field(default_factory=bytearray)

    def add(self, value: str | bytes) -> None:
        """Append a value; strings are stored NUL-terminated."""
        data = _to_c_string(value)
        self.payload += _INT.pack(len(data)) + data

    def serialize(self) -> bytes:
        """Return the full frame for this packet."""
        return serialize(self.op_code, bytes(self.payload))