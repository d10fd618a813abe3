#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(0, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for bits in [1024, 2048, 3072, 4096, 8192]:
            S1 = "import hashlib; from srp6a import SRP, Server, get_group"
            S2 = "srp = SRP(hashlib.sha256, get_group(%d))" % bits
            S3 = "isv = srp.new_isv(b'alice', b'password')"
            S4 = "c = srp.new_client(b'alice', b'password')"
            S5 = "s = srp.new_server(isv, c.A())"
            S6 = "m1 = c.compute(s.salt(), s.B())"
            S7 = "c.check(s.check(m1))"

            full = do([S1, S2, S3], ";".join([S4, S5, S6, S7]))
            server = do([S1, S2, S3, S4], S5)
            # how large are the messages and the stored server state?
            import hashlib
            from srp6a import SRP, get_group
            srp = SRP(hashlib.sha256, get_group(bits))
            isv = srp.new_isv(b"alice", b"password")
            c = srp.new_client(b"alice", b"password")
            s = srp.new_server(isv, c.A())
            print("%5d: msglen=%4d, statelen=%4d, full=%7s, server=%7s"
                  % (bits, len(s.B()), len(s.serialize()),
                     abbrev(full), abbrev(server)))

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.parameters", "srp6a.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )
