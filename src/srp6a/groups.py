import logging
from .errors import GroupNotFound
from .util import number_from_hex_string, number_to_bytes, pad
from .parameters import rfc5054

"""A Group holds the public SRP parameters: the safe prime N, the generator
g, and the size of N in bytes (which is also the width that RFC 5054's PAD()
fills values out to).

    g = get_group(2048)
    g.N, g.g, g.size
    g.N_bytes(), g.g_bytes()   # minimal big-endian encodings
    g.pad(i)                   # i encoded to exactly g.size bytes

Groups are never modified after construction, so a single instance can be
shared by any number of concurrent handshakes. The generator is taken on
trust: nothing here checks that it actually generates anything.
"""

logger = logging.getLogger(__name__)

class Group:
    def __init__(self, g, size, s):
        # 'size' is the nominal bit length of the prime
        self.g = g
        self.N = number_from_hex_string(s)
        self.size = size >> 3

    def N_bytes(self):
        return number_to_bytes(self.N)

    def g_bytes(self):
        return number_to_bytes(self.g)

    def pad(self, i):
        return pad(i, self.size)

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return (self.g, self.N, self.size) == (other.g, other.N, other.size)

    def __hash__(self):
        return hash((self.g, self.N, self.size))

    def __repr__(self):
        return "<Group %d-bit g=%d>" % (self.size * 8, self.g)


def make_registry(entries):
    return dict((bits, Group(g, bits, s)) for (g, bits, s) in entries)

def lookup(registry, bits):
    try:
        return registry[bits]
    except KeyError:
        raise GroupNotFound("no group for a %r-bit prime" % (bits,)) from None


RFC5054_GROUPS = make_registry([
    (2, 1024, rfc5054.Hex1024),
    (2, 1536, rfc5054.Hex1536),
    (2, 2048, rfc5054.Hex2048),
    (5, 3072, rfc5054.Hex3072),
    (5, 4096, rfc5054.Hex4096),
    (5, 6144, rfc5054.Hex6144),
    (19, 8192, rfc5054.Hex8192),
    ])

def get_group(bits):
    """Return the RFC 5054 group whose prime is 'bits' long."""
    group = lookup(RFC5054_GROUPS, bits)
    logger.debug("using RFC 5054 group %r", group)
    return group
