from .srp import SRP
from .groups import Group, get_group
from .isv import ISV
from .client import Client
from .server import Server
from .errors import (SRPError, DecodeError, GroupNotFound, InvalidPublicKey,
                     ProofMismatch, RandomnessError, SessionNotReady,
                     SessionAlreadyComputed, SerializationError, ValueTooLarge,
                     UnexpectedEndOfInput, TrailingData)
_hush_pyflakes = [SRP, Group, get_group, ISV, Client, Server,
                  SRPError, DecodeError, GroupNotFound, InvalidPublicKey,
                  ProofMismatch, RandomnessError, SessionNotReady,
                  SessionAlreadyComputed, SerializationError, ValueTooLarge,
                  UnexpectedEndOfInput, TrailingData]
del _hush_pyflakes

__version__ = "0.1.0"
