import os, hashlib, logging
from .errors import InvalidPublicKey
from .util import (bytes_to_number, number_to_bytes, pad, xor_bytes,
                   random_bytes, random_number)
from .isv import ISV
from .client import Client
from .server import Server

logger = logging.getLogger(__name__)

# N    a large safe prime, all arithmetic is done modulo N
# g    a generator modulo N
# k    multiplier, k = H(N | PAD(g))
# s    the user's salt
# I    identity (username)
# P    cleartext password
# x    private key, x = H(s | H(I | ":" | P))
# v    password verifier, v = g^x
# a,b  secret ephemeral values
# A,B  public ephemeral values, A = g^a, B = k*v + g^b
# u    scrambling parameter, u = H(PAD(A) | PAD(B))
# S    premaster secret: client (B - k*g^x)^(a + u*x), server (A*v^u)^b
# K    session key, K = H(S)
# M1   client proof, H(H(N) XOR H(g) | H(I) | s | A | B | K)
# M2   server proof, H(A | M1 | K)
#
# k, u and x may be replaced by vendor-specific derivations. Each hook is
# called with the SRP instance as its first argument:
#
#   k_func(srp) -> int
#   u_func(srp, A, B) -> int                   (A, B as ints)
#   x_func(srp, identity, password, salt) -> int


def _hash_constructor(h):
    if callable(h):
        return h
    # a name like "sha256": hashlib.new raises ValueError if it is unknown
    hashlib.new(h)
    return lambda data=b"": hashlib.new(h, data)

class SRP:
    "This class holds the parameters and computations shared by both sides."

    def __init__(self, hash, group, k_func=None, u_func=None, x_func=None,
                 entropy_f=os.urandom):
        self._new_hash = _hash_constructor(hash)
        self.hash_size = self._new_hash().digest_size
        self.group = group
        self.entropy_f = entropy_f
        self._k_func = k_func
        self._u_func = u_func
        self._x_func = x_func

    # the setters exist for building vendor variants; an SRP that is already
    # shared between sessions must not be modified
    def set_k(self, f):
        self._k_func = f
    def set_u(self, f):
        self._u_func = f
    def set_x(self, f):
        self._x_func = f

    def hash_bytes(self, *parts):
        """Feed each byte string through a single hash instance, in order,
        and return the digest."""
        h = self._new_hash()
        for p in parts:
            h.update(p)
        return h.digest()

    def hash_int(self, *parts):
        return bytes_to_number(self.hash_bytes(*parts))

    def random_bytes(self, count=None):
        if count is None:
            count = self.group.size
        return random_bytes(count, self.entropy_f)

    def random_exponent(self):
        return random_number(self.group.size, self.entropy_f)

    def multiplier(self):
        if self._k_func is not None:
            return self._k_func(self)
        g = self.group
        return self.hash_int(g.N_bytes(), g.pad(g.g))

    def compute_x(self, identity, password, salt):
        if self._x_func is not None:
            return self._x_func(self, identity, password, salt)
        return self.hash_int(salt, self.hash_bytes(identity, b":", password))

    def compute_v(self, x):
        return pow(self.group.g, x, self.group.N)

    def compute_u(self, xA, xB):
        if self._u_func is not None:
            u = self._u_func(self, xA, xB)
        else:
            size = self.group.size
            u = self.hash_int(pad(xA, size), pad(xB, size))
        if u == 0:
            logger.warning("rejecting handshake: scrambling parameter is zero")
            raise InvalidPublicKey("scrambling parameter u is zero")
        return u

    def compute_A(self, a):
        return pow(self.group.g, a, self.group.N)

    def compute_B(self, b, k, v):
        N = self.group.N
        return (k * v + pow(self.group.g, b, N)) % N

    def compute_client_S(self, a, xB, k, u, x):
        N = self.group.N
        base = (xB - k * pow(self.group.g, x, N)) % N
        return pow(base, a + u * x, N)

    def compute_server_S(self, xA, b, u, v):
        N = self.group.N
        return pow(xA * pow(v, u, N) % N, b, N)

    def compute_K(self, xS):
        return self.hash_bytes(number_to_bytes(xS))

    def compute_M1(self, xA, xB, xK, identity, salt):
        g = self.group
        mixed = xor_bytes(self.hash_bytes(g.N_bytes()),
                          self.hash_bytes(g.g_bytes()))
        return self.hash_bytes(mixed, self.hash_bytes(identity), salt,
                               number_to_bytes(xA), number_to_bytes(xB), xK)

    def compute_M2(self, xA, m1, xK):
        return self.hash_bytes(number_to_bytes(xA), m1, xK)

    def check_public_value(self, value, which):
        # a public value of 0 mod N would force S to a known value
        if value % self.group.N == 0:
            logger.warning("rejecting handshake: %s is 0 mod N", which)
            raise InvalidPublicKey("%s is 0 mod N" % which)

    def new_isv(self, identity, password):
        """Enroll a user: return an ISV holding the identity, a fresh salt,
        and the verifier. Store it; never store the password."""
        salt = self.random_bytes()
        v = self.compute_v(self.compute_x(identity, password, salt))
        return ISV(identity, salt, number_to_bytes(v))

    def new_client(self, identity, password):
        return Client(self, identity, password)

    def new_server(self, isv, xA):
        server = Server()
        server.reset(self, isv, xA)
        return server

    def __repr__(self):
        return "<SRP %s %r>" % (self._new_hash().name, self.group)
