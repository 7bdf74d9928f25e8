"""
Key Derivation Package

This package implements PBKDF2 (RFC 2898) on top of an injected keyed
pseudorandom function, together with its INT and XOR primitives.
"""

from .pbkdf2 import KeyDeriver, derive_key, generate_salt
from .primitives import encode_int32, xor_into

__all__ = ['KeyDeriver', 'derive_key', 'generate_salt', 'encode_int32', 'xor_into']
