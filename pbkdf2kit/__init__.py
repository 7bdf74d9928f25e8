"""
pbkdf2kit - Password-Based Key Derivation Function 2

This library implements PBKDF2 as documented in RFC 2898 and verified
against the RFC 6070 test vectors. A password and a salt are stretched
into a derived key of arbitrary length by iterating a keyed pseudorandom
function.

Key Features:
- Any keyed PRF with a fixed output length (HMAC-SHA1 by default)
- HMAC providers from hashlib or PyCryptodome
- Configurable password charset
- Thread-safe derivers with no state shared between calls

"""

from .exceptions import (
    PBKDF2Error,
    AlgorithmUnavailableError,
    UnsupportedEncodingError,
    DerivedKeyTooLongError,
    InvalidParameterError,
    NullArgumentError,
)
from .encoding import PasswordEncoder, get_encoder
from .prf import PseudoRandomFunction, HashlibHMAC, CryptodomeHMAC, available_algorithms, get_prf
from .kdf import KeyDeriver, derive_key, generate_salt, encode_int32, xor_into

__version__ = '0.1.0'
__author__ = 'pbkdf2kit Team'

__all__ = [
    'KeyDeriver', 'derive_key', 'generate_salt', 'encode_int32', 'xor_into',
    'PseudoRandomFunction', 'HashlibHMAC', 'CryptodomeHMAC', 'available_algorithms', 'get_prf',
    'PasswordEncoder', 'get_encoder',
    'PBKDF2Error', 'AlgorithmUnavailableError', 'UnsupportedEncodingError',
    'DerivedKeyTooLongError', 'InvalidParameterError', 'NullArgumentError',
]
