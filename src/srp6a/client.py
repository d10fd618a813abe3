from .errors import ProofMismatch, SessionNotReady, SessionAlreadyComputed
from .util import bytes_to_number, number_to_bytes, constant_time_equal

class Client:
    """This class manages the client (password-holding) side of one SRP
    handshake.

        client = srp.new_client(b"alice", b"password123")
        send(client.A())
        salt, B = receive()
        send(client.compute(salt, B))   # M1
        client.check(receive())         # M2, raises ProofMismatch
        key = client.key()

    A Client is good for exactly one handshake.
    """

    def __init__(self, srp, identity, password):
        assert isinstance(identity, bytes), repr(identity)
        assert isinstance(password, bytes), repr(password)
        self._srp = srp
        self.identity = identity
        self.password = password
        self.a = srp.random_exponent()
        self.xA = srp.compute_A(self.a)

        self.salt = None
        self.xB = None
        self.u = None
        self.xS = None
        self.xK = None
        self.m1 = None
        self.m2 = None

    def A(self):
        return number_to_bytes(self.xA)

    def set_identity(self, identity):
        """Replace the identity, for flows where the username is only known
        after the client was created. Call this before compute()."""
        assert isinstance(identity, bytes), repr(identity)
        self.identity = identity

    def compute(self, salt, B):
        """Process the server's salt and public value, and return the M1
        proof to send back."""
        if self.xS is not None:
            raise SessionAlreadyComputed("compute() can only be called once")
        srp = self._srp

        xB = bytes_to_number(B)
        srp.check_public_value(xB, "B")
        u = srp.compute_u(self.xA, xB)

        x = srp.compute_x(self.identity, self.password, salt)
        xS = srp.compute_client_S(self.a, xB, srp.multiplier(), u, x)
        xK = srp.compute_K(xS)
        m1 = srp.compute_M1(self.xA, xB, xK, self.identity, salt)
        m2 = srp.compute_M2(self.xA, m1, xK)

        # nothing is stored until every step has succeeded
        self.salt, self.xB, self.u = salt, xB, u
        self.xS, self.xK, self.m1, self.m2 = xS, xK, m1, m2
        return m1

    def _require_computed(self):
        if self.xS is None:
            raise SessionNotReady("call .compute() with the server's"
                                  " public value first")

    def S(self):
        self._require_computed()
        return number_to_bytes(self.xS)

    def U(self):
        self._require_computed()
        return number_to_bytes(self.u)

    def check(self, m2):
        """Compare the server's M2 proof with ours."""
        self._require_computed()
        if not constant_time_equal(m2, self.m2):
            raise ProofMismatch("server proof does not match: the server"
                                " does not know our verifier")

    def key(self):
        self._require_computed()
        return self.xK
