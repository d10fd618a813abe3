import logging
from .errors import ProofMismatch, SessionNotReady
from .encoding import encode_fields, decode_fields
from .util import bytes_to_number, number_to_bytes, constant_time_equal

logger = logging.getLogger(__name__)

# The server state is serialized as eight length-prefixed fields, in this
# order. Integers use their minimal big-endian encoding.
#
#   A b B S salt K M1 M2
#
# Nothing in it identifies the group or hash: whoever restores the state is
# expected to know which SRP parameters it was created with, since check()
# only needs the stored values.

class Server:
    """This class manages the server (verifier-holding) side of one SRP
    handshake.

        server = srp.new_server(isv, A)
        send(server.salt(), server.B())
        data = server.serialize()          # store between requests
        ...
        server = Server.from_serialized(data)
        send(server.check(receive()))      # M1 in, M2 out
        key = server.key()
    """

    def __init__(self):
        self.xA = None
        self.b = None
        self.xB = None
        self.xS = None
        self._salt = None
        self.xK = None
        self.m1 = None
        self.m2 = None

    def reset(self, srp, isv, A):
        """Populate this server from the user's ISV and the client's public
        value A. This draws a new ephemeral secret and computes every value
        the handshake needs, including the expected client proof."""
        xA = bytes_to_number(A)
        srp.check_public_value(xA, "A")

        b = srp.random_exponent()
        v = bytes_to_number(isv.verifier)
        xB = srp.compute_B(b, srp.multiplier(), v)
        u = srp.compute_u(xA, xB)
        xS = srp.compute_server_S(xA, b, u, v)
        xK = srp.compute_K(xS)
        m1 = srp.compute_M1(xA, xB, xK, isv.identity, isv.salt)
        m2 = srp.compute_M2(xA, m1, xK)

        self.xA, self.b, self.xB, self.xS = xA, b, xB, xS
        self._salt = isv.salt
        self.xK, self.m1, self.m2 = xK, m1, m2
        logger.debug("server session populated for identity %r",
                     isv.identity)

    def _require_populated(self):
        if self.m1 is None:
            raise SessionNotReady("call .reset() before using the server")

    def salt(self):
        self._require_populated()
        return self._salt

    def B(self):
        self._require_populated()
        return number_to_bytes(self.xB)

    def check(self, m1):
        """Compare the client's M1 proof with ours. If they match, return
        our M2 proof to send back to the client."""
        self._require_populated()
        if not constant_time_equal(m1, self.m1):
            logger.warning("client proof does not match")
            raise ProofMismatch("client proof does not match: the client"
                                " does not know the password")
        return self.m2

    def key(self):
        self._require_populated()
        return self.xK

    def _state(self):
        return (self.xA, self.b, self.xB, self.xS,
                self._salt, self.xK, self.m1, self.m2)

    def _fields(self):
        return [number_to_bytes(self.xA), number_to_bytes(self.b),
                number_to_bytes(self.xB), number_to_bytes(self.xS),
                self._salt, self.xK, self.m1, self.m2]

    def serialize(self):
        self._require_populated()
        data = encode_fields(self._fields())
        logger.debug("serialized server session (%d bytes)", len(data))
        return data

    @classmethod
    def from_serialized(klass, data):
        (xA, b, xB, xS, salt, xK, m1, m2) = decode_fields(data, 8)
        self = klass()
        self.xA = bytes_to_number(xA)
        self.b = bytes_to_number(b)
        self.xB = bytes_to_number(xB)
        self.xS = bytes_to_number(xS)
        self._salt, self.xK, self.m1, self.m2 = salt, xK, m1, m2
        return self

    def __eq__(self, other):
        if not isinstance(other, Server):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None
