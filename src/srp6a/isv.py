from .encoding import encode_fields, decode_fields

class ISV:
    """The (Identity, Salt, Verifier) triple produced at enrollment.

    This is what a server stores for each user instead of the password. It
    can be serialized to bytes for storage:

        data = isv.serialize()
        isv = ISV.from_serialized(data)

    Each field must be at most 65535 bytes long to be serialized.
    """

    def __init__(self, identity=b"", salt=b"", verifier=b""):
        assert isinstance(identity, bytes), repr(identity)
        assert isinstance(salt, bytes), repr(salt)
        assert isinstance(verifier, bytes), repr(verifier)
        self.identity = identity
        self.salt = salt
        self.verifier = verifier

    def serialize(self):
        return encode_fields([self.identity, self.salt, self.verifier])

    @classmethod
    def from_serialized(klass, data):
        identity, salt, verifier = decode_fields(data, 3)
        return klass(identity, salt, verifier)

    def __eq__(self, other):
        if not isinstance(other, ISV):
            return NotImplemented
        return ((self.identity, self.salt, self.verifier)
                == (other.identity, other.salt, other.verifier))

    def __repr__(self):
        return "<ISV identity=%r>" % (self.identity,)
