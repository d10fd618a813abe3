import unittest
import hashlib
from multiprocessing.dummy import Pool as ThreadPool
from srp6a import SRP, ISV, Server, get_group
from srp6a.errors import (InvalidPublicKey, ProofMismatch, RandomnessError,
                          SessionNotReady, SessionAlreadyComputed,
                          UnexpectedEndOfInput, TrailingData)
from srp6a.util import number_to_bytes
from .common import PRG, failing_entropy

IDENTITY = b"alice"
PASSWORD = b"password123"

def handshake(srp, identity=IDENTITY, password=PASSWORD,
              enrolled_password=PASSWORD):
    isv = srp.new_isv(identity, enrolled_password)
    client = srp.new_client(identity, password)
    server = srp.new_server(isv, client.A())
    m1 = client.compute(server.salt(), server.B())
    return client, server, m1

class Basic(unittest.TestCase):
    def test_success(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp)
        m2 = server.check(m1)
        client.check(m2)
        self.assertEqual(client.key(), server.key())
        self.assertEqual(len(client.key()), 20)

    def test_groups_and_hashes(self):
        for bits, hash in [(1536, hashlib.sha1), (2048, hashlib.sha256),
                           (3072, hashlib.sha512), (4096, "sha384")]:
            srp = SRP(hash, get_group(bits))
            client, server, m1 = handshake(srp)
            client.check(server.check(m1))
            self.assertEqual(client.key(), server.key(), bits)
            self.assertEqual(len(client.key()), srp.hash_size)

    def test_large_group(self):
        srp = SRP(hashlib.sha256, get_group(8192))
        client, server, m1 = handshake(srp)
        client.check(server.check(m1))
        self.assertEqual(client.key(), server.key())

    def test_public_value_sizes(self):
        srp = SRP(hashlib.sha1, get_group(1024), entropy_f=PRG(b"sizes"))
        client = srp.new_client(IDENTITY, PASSWORD)
        self.assertLessEqual(len(client.A()), srp.group.size)
        server = srp.new_server(srp.new_isv(IDENTITY, PASSWORD), client.A())
        self.assertLessEqual(len(server.B()), srp.group.size)
        self.assertEqual(len(server.salt()), srp.group.size)

    def test_wrong_password(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp, password=b"password124")
        self.assertRaises(ProofMismatch, server.check, m1)
        self.assertNotEqual(client.key(), server.key())

    def test_wrong_identity(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        isv = srp.new_isv(IDENTITY, PASSWORD)
        client = srp.new_client(b"mallory", PASSWORD)
        server = srp.new_server(isv, client.A())
        m1 = client.compute(server.salt(), server.B())
        self.assertRaises(ProofMismatch, server.check, m1)

    def test_late_identity(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        isv = srp.new_isv(IDENTITY, PASSWORD)
        client = srp.new_client(b"", PASSWORD)
        server = srp.new_server(isv, client.A())
        client.set_identity(IDENTITY)
        m1 = client.compute(server.salt(), server.B())
        client.check(server.check(m1))

    def test_corrupt_client_proof(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp)
        for i in range(len(m1)):
            for bit in [0x01, 0x80]:
                bad = bytearray(m1)
                bad[i] ^= bit
                self.assertRaises(ProofMismatch, server.check, bytes(bad))
        self.assertRaises(ProofMismatch, server.check, m1[:-1])
        self.assertRaises(ProofMismatch, server.check, b"")
        # the genuine proof still works afterwards
        client.check(server.check(m1))

    def test_corrupt_server_proof(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp)
        m2 = bytearray(server.check(m1))
        m2[-1] ^= 0x01
        self.assertRaises(ProofMismatch, client.check, bytes(m2))

    def test_impostor_server(self):
        # a server holding a verifier for a different password
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp, enrolled_password=b"hunter2")
        self.assertRaises(ProofMismatch, server.check, m1)


class PublicValues(unittest.TestCase):
    def setUp(self):
        self.srp = SRP(hashlib.sha1, get_group(1024))
        self.isv = self.srp.new_isv(IDENTITY, PASSWORD)
        self.N = self.srp.group.N

    def test_zero_A(self):
        for bad in [0, self.N, 2 * self.N]:
            self.assertRaises(InvalidPublicKey, self.srp.new_server,
                              self.isv, number_to_bytes(bad))
        self.assertRaises(InvalidPublicKey, self.srp.new_server,
                          self.isv, b"\x00" * 128)

    def test_zero_B(self):
        for bad in [0, self.N, 2 * self.N]:
            client = self.srp.new_client(IDENTITY, PASSWORD)
            self.assertRaises(InvalidPublicKey, client.compute,
                              self.isv.salt, number_to_bytes(bad))
            # a rejected compute() leaves the client unpopulated
            self.assertRaises(SessionNotReady, client.S)

    def test_zero_u(self):
        srp = SRP(hashlib.sha1, get_group(1024),
                  u_func=lambda srp, xA, xB: 0)
        client = srp.new_client(IDENTITY, PASSWORD)
        self.assertRaises(InvalidPublicKey, srp.new_server,
                          self.isv, client.A())
        self.assertRaises(InvalidPublicKey, client.compute,
                          self.isv.salt, number_to_bytes(5))


class State(unittest.TestCase):
    def test_client_not_ready(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client = srp.new_client(IDENTITY, PASSWORD)
        self.assertRaises(SessionNotReady, client.S)
        self.assertRaises(SessionNotReady, client.U)
        self.assertRaises(SessionNotReady, client.key)
        self.assertRaises(SessionNotReady, client.check, b"")

    def test_client_compute_once(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp)
        self.assertRaises(SessionAlreadyComputed, client.compute,
                          server.salt(), server.B())

    def test_client_accessors(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        client, server, m1 = handshake(srp)
        self.assertEqual(client.S(), number_to_bytes(server.xS))
        u = srp.compute_u(server.xA, server.xB)
        self.assertEqual(client.U(), number_to_bytes(u))
        self.assertEqual(client.key(), srp.hash_bytes(client.S()))

    def test_server_not_ready(self):
        server = Server()
        self.assertRaises(SessionNotReady, server.salt)
        self.assertRaises(SessionNotReady, server.B)
        self.assertRaises(SessionNotReady, server.key)
        self.assertRaises(SessionNotReady, server.check, b"")
        self.assertRaises(SessionNotReady, server.serialize)

    def test_server_reset(self):
        srp = SRP(hashlib.sha1, get_group(1024))
        isv = srp.new_isv(IDENTITY, PASSWORD)
        client = srp.new_client(IDENTITY, PASSWORD)
        server = Server()
        server.reset(srp, isv, client.A())
        m1 = client.compute(server.salt(), server.B())
        client.check(server.check(m1))


class Entropy(unittest.TestCase):
    def test_deterministic(self):
        def run(seed):
            srp = SRP(hashlib.sha256, get_group(2048), entropy_f=PRG(seed))
            client, server, m1 = handshake(srp)
            return (client.A(), server.B(), server.salt(), m1,
                    server.check(m1), client.key())
        first = run(b"seed")
        self.assertEqual(first, run(b"seed"))
        self.assertNotEqual(first, run(b"other seed"))

    def test_failing_entropy(self):
        srp = SRP(hashlib.sha1, get_group(1024), entropy_f=failing_entropy)
        self.assertRaises(RandomnessError, srp.new_isv, IDENTITY, PASSWORD)
        self.assertRaises(RandomnessError, srp.new_client, IDENTITY, PASSWORD)
        good = SRP(hashlib.sha1, get_group(1024))
        isv = good.new_isv(IDENTITY, PASSWORD)
        A = good.new_client(IDENTITY, PASSWORD).A()
        self.assertRaises(RandomnessError, srp.new_server, isv, A)

    def test_short_entropy(self):
        srp = SRP(hashlib.sha1, get_group(1024), entropy_f=lambda n: b"\x01")
        self.assertRaises(RandomnessError, srp.new_client, IDENTITY, PASSWORD)


class Serialize(unittest.TestCase):
    def setUp(self):
        self.srp = SRP(hashlib.sha1, get_group(1024))
        self.isv = self.srp.new_isv(IDENTITY, PASSWORD)
        self.client = self.srp.new_client(IDENTITY, PASSWORD)
        self.server = self.srp.new_server(self.isv, self.client.A())

    def test_roundtrip(self):
        data = self.server.serialize()
        restored = Server.from_serialized(data)
        self.assertEqual(restored, self.server)
        self.assertEqual(restored.serialize(), data)
        self.assertEqual(restored.salt(), self.server.salt())
        self.assertEqual(restored.B(), self.server.B())
        self.assertEqual(restored.key(), self.server.key())
        self.assertEqual((restored.xA, restored.b, restored.xS),
                         (self.server.xA, self.server.b, self.server.xS))

    def test_resume(self):
        # issue the challenge in one place, check the proof in another
        data = self.server.serialize()
        m1 = self.client.compute(self.server.salt(), self.server.B())
        restored = Server.from_serialized(data)
        self.client.check(restored.check(m1))
        self.assertEqual(self.client.key(), restored.key())

    def test_layout(self):
        s = self.server
        expected = b""
        for field in [number_to_bytes(s.xA), number_to_bytes(s.b),
                      s.B(), number_to_bytes(s.xS), s.salt(), s.key(),
                      s.m1, s.m2]:
            expected += len(field).to_bytes(2, "big") + field
        self.assertEqual(s.serialize(), expected)

    def test_truncated(self):
        data = self.server.serialize()
        for cut in [0, 1, 2, 3, len(data) // 2, len(data) - 1]:
            self.assertRaises(UnexpectedEndOfInput, Server.from_serialized,
                              data[:cut])

    def test_trailing(self):
        data = self.server.serialize()
        self.assertRaises(TrailingData, Server.from_serialized,
                          data + b"\x00")

    def test_not_equal(self):
        other = self.srp.new_server(self.isv, self.client.A())
        self.assertNotEqual(other, self.server)
        self.assertNotEqual(self.server, "server")


class Threads(unittest.TestCase):
    def test_shared_context(self):
        # one SRP instance serving many handshakes at once
        srp = SRP(hashlib.sha256, get_group(1024))
        isv = srp.new_isv(IDENTITY, PASSWORD)

        def _run(i):
            client = srp.new_client(IDENTITY, PASSWORD)
            server = Server.from_serialized(
                srp.new_server(isv, client.A()).serialize())
            m1 = client.compute(isv.salt, server.B())
            client.check(server.check(m1))
            return client.key() == server.key()

        pool = ThreadPool(4)
        try:
            results = pool.map(_run, range(16))
        finally:
            pool.terminate()
        self.assertEqual(results, [True] * 16)

if __name__ == '__main__':
    unittest.main()
