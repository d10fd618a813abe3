"""Length-prefixed framing for the serialized ISV and Server state.

Every field is a 2-byte big-endian length followed by that many raw bytes:

    [len_hi len_lo][body ...][len_hi len_lo][body ...]...

Readers must consume exactly the fields they expect. A truncated length or
body raises UnexpectedEndOfInput, and any byte left over after the last
field raises TrailingData.
"""

import struct
from .errors import ValueTooLarge, UnexpectedEndOfInput, TrailingData

MAX_FIELD_LENGTH = 0xffff
_LENGTH = struct.Struct(">H")

def check_length(b):
    if len(b) > MAX_FIELD_LENGTH:
        raise ValueTooLarge("value exceeds %d bytes" % MAX_FIELD_LENGTH)

def write_bytes(buf, b):
    check_length(b)
    buf.extend(_LENGTH.pack(len(b)))
    buf.extend(b)

def encode_fields(fields):
    # validate everything first so a failure leaves no partial output
    for f in fields:
        check_length(f)
    buf = bytearray()
    for f in fields:
        write_bytes(buf, f)
    return bytes(buf)

class Reader:
    def __init__(self, data):
        self._data = memoryview(bytes(data))
        self._offset = 0

    def remaining(self):
        return len(self._data) - self._offset

    def _take(self, count, what):
        if self.remaining() < count:
            raise UnexpectedEndOfInput("unable to read %s: wanted %d bytes,"
                                       " %d left"
                                       % (what, count, self.remaining()))
        chunk = self._data[self._offset:self._offset+count].tobytes()
        self._offset += count
        return chunk

    def read_bytes(self):
        (length,) = _LENGTH.unpack(self._take(_LENGTH.size, "length"))
        return self._take(length, "bytes")

    def finish(self):
        if self.remaining():
            raise TrailingData("%d trailing bytes" % self.remaining())

def decode_fields(data, count):
    r = Reader(data)
    fields = [r.read_bytes() for i in range(count)]
    r.finish()
    return fields
