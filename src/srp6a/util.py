import os, re, hmac, binascii, math
from .errors import DecodeError, RandomnessError

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num):
    """Minimal big-endian encoding. Zero encodes as the empty string."""
    if num < 0:
        raise ValueError("SRP values are unsigned")
    if num == 0:
        return b""
    return num.to_bytes(size_bytes(num), "big")

def bytes_to_number(s):
    if not isinstance(s, (bytes, bytearray)):
        raise TypeError
    return int.from_bytes(s, "big")

def pad(num, width):
    """Fixed-width big-endian encoding, left-filled with zeros. Values that
    are already wider than 'width' are returned unpadded, as RFC 5054
    PAD() does."""
    s = number_to_bytes(num)
    if len(s) < width:
        s = b"\x00" * (width - len(s)) + s
    return s

_NON_HEX = re.compile(r"[^0-9a-fA-F]")

def bytes_from_hex_string(s):
    # RFC listings break the primes into whitespace-separated words
    cleaned = _NON_HEX.sub("", s)
    if not cleaned:
        raise DecodeError("no hex digits in %r" % (s[:32],))
    try:
        return binascii.unhexlify(cleaned.encode("ascii"))
    except (binascii.Error, ValueError) as e:
        raise DecodeError("unable to decode hex string: %s" % e) from e

def number_from_hex_string(s):
    return bytes_to_number(bytes_from_hex_string(s))

def xor_bytes(x, y):
    if len(x) != len(y):
        raise ValueError("xor operands differ in length (%d != %d)"
                         % (len(x), len(y)))
    return bytes(a ^ b for a, b in zip(x, y))

def constant_time_equal(a, b):
    return hmac.compare_digest(bytes(a), bytes(b))

def random_bytes(count, entropy_f=os.urandom):
    try:
        b = entropy_f(count)
    except (OSError, NotImplementedError) as e:
        raise RandomnessError("unable to read random bytes: %s" % e) from e
    if not isinstance(b, bytes) or len(b) != count:
        raise RandomnessError("entropy source gave a short read, wanted %d"
                              " bytes" % count)
    return b

def random_number(count, entropy_f=os.urandom):
    return bytes_to_number(random_bytes(count, entropy_f))
