class SRPError(Exception):
    pass
class DecodeError(SRPError, ValueError):
    """A group modulus could not be decoded from its hex representation."""
class GroupNotFound(SRPError):
    """There is no standard group for the requested prime size."""
class InvalidPublicKey(SRPError):
    """The peer's public value is 0 mod N, or the scrambling parameter u
    came out as zero. Either one lets an attacker force a known shared
    secret, so the handshake must be abandoned."""
class ProofMismatch(SRPError):
    """The peer's proof did not match ours: they do not know the password
    (or the verifier)."""
class RandomnessError(SRPError):
    """The entropy source failed or returned a short read."""
class SessionNotReady(SRPError):
    """The session has not computed its shared values yet."""
class SessionAlreadyComputed(SRPError):
    """Client.compute() may only be called once. Each Client belongs to
    exactly one handshake."""

class SerializationError(SRPError, ValueError):
    pass
class ValueTooLarge(SerializationError):
    """A field exceeds the 65535 bytes a 16-bit length prefix can hold."""
class UnexpectedEndOfInput(SerializationError):
    """The serialized data was truncated inside a length or a field."""
class TrailingData(SerializationError):
    """The serialized data carried bytes after the last field."""
