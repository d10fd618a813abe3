"""The SRP derivations used by AWS Cognito user pools, where they differ from
RFC 5054.

Cognito hashes N, A, B and the salt in their minimal encodings, except that
a value whose top bit is set gets a single zero byte prepended (so that a
signed big-integer parser would read it as positive). It also uses g = 2
with the 3072-bit prime, where RFC 5054 uses g = 5.

    srp = cognito.new_srp()
    client = srp.new_client(pool_name + username, password)
    M1 = client.compute(salt, B)
    key = cognito.password_authentication_key(client)

The identity passed to the client must already be the pool name (the part
of the user pool id after the underscore) concatenated with the username:
that is what Cognito hashes into x.
"""

import hashlib
from hkdf import Hkdf
from .groups import Group, make_registry, lookup
from .parameters import rfc5054
from .srp import SRP
from .util import number_to_bytes

AUTH_KEY_INFO = b"Caldera Derived Key"
AUTH_KEY_LENGTH = 16

COGNITO_GROUPS = make_registry([
    (2, 3072, rfc5054.Hex3072),
    ])

def get_group(bits):
    return lookup(COGNITO_GROUPS, bits)

def pad(b):
    """Prepend a zero byte if the top bit of b is set."""
    if b and b[0] >= 0x80:
        b = b"\x00" + b
    return b

def multiplier(srp):
    g = srp.group
    return srp.hash_int(pad(g.N_bytes()), g.g_bytes())

def compute_u(srp, xA, xB):
    return srp.hash_int(pad(number_to_bytes(xA)), pad(number_to_bytes(xB)))

def compute_x(srp, identity, password, salt):
    return srp.hash_int(pad(salt), srp.hash_bytes(identity, b":", password))

def new_srp(**kwargs):
    return SRP(hashlib.sha256, get_group(3072), k_func=multiplier,
               u_func=compute_u, x_func=compute_x, **kwargs)

def password_authentication_key(client):
    """Derive the 16-byte key Cognito uses to sign the PASSWORD_VERIFIER
    challenge response. The client must have computed already."""
    h = Hkdf(salt=pad(client.U()), input_key_material=pad(client.S()),
             hash=hashlib.sha256)
    return h.expand(AUTH_KEY_INFO, AUTH_KEY_LENGTH)
