"""
PBKDF2 Key Derivation

This module implements PBKDF2 (Password-Based Key Derivation Function 2)
as documented in RFC 2898. A keyed pseudorandom function is iterated over
the salt to stretch a password into a derived key of arbitrary length.

    DK = T_1 || T_2 || ... || T_l    (truncated to dkLen octets)
    T_i = U_1 ^ U_2 ^ ... ^ U_c
    U_1 = PRF(P, S || INT(i)),  U_n = PRF(P, U_{n-1})
"""

import logging
import operator
import secrets
import threading
from typing import Optional

from ..config import KDF_DEFAULT_PARAMS
from ..encoding import get_encoder
from ..exceptions import DerivedKeyTooLongError, InvalidParameterError, NullArgumentError
from ..prf import resolve_prf
from .primitives import UINT32_MAX, encode_int32, xor_into

logger = logging.getLogger(__name__)


def generate_salt(length: int = KDF_DEFAULT_PARAMS['salt_len']) -> bytes:
    """
    Generate a cryptographically secure random salt.

    Args:
        length: Length of the salt in bytes

    Returns:
        Random salt as bytes
    """
    if length < 0:
        raise InvalidParameterError("Salt length must not be negative")
    return secrets.token_bytes(length)


def _check_count(value, name: str, minimum: int) -> int:
    """Validate an integer parameter against a lower bound."""
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(value)
    except TypeError as e:
        raise InvalidParameterError(f"{name} must be an integer, got {type(value).__name__}") from e
    if value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    return value


class KeyDeriver:
    """
    PBKDF2 bound to one pseudorandom function and one password charset.

    The deriver keeps no state between calls. Every derive_key() call keys
    its own clone of the PRF, so one instance can be shared between threads.
    Injected PRFs without clone() are used under a lock instead.
    """

    def __init__(self, algorithm=None, charset=None, backend: Optional[str] = None):
        """
        Initialize the deriver.

        Args:
            algorithm: PRF name (e.g. 'HmacSHA1', 'HmacSHA256') or a PRF
                instance providing initialize(), compute() and digest_size
            charset: Charset name, codecs.CodecInfo or encoder object used
                to turn passwords into bytes
            backend: HMAC provider used for named algorithms ('hashlib' or
                'cryptodome')

        Raises:
            AlgorithmUnavailableError: If the PRF cannot be instantiated
            UnsupportedEncodingError: If the charset is unknown
        """
        self._prf = resolve_prf(algorithm, backend)
        self._encoder = get_encoder(charset)

        # Shared injected PRFs must not be keyed by two calls at once
        self._lock = None if callable(getattr(self._prf, 'clone', None)) else threading.Lock()

        logger.debug("KeyDeriver bound to %s (hLen=%d), charset %s",
                     self.algorithm, self.digest_size, self.charset)

    @property
    def algorithm(self) -> str:
        return getattr(self._prf, 'name', type(self._prf).__name__)

    @property
    def charset(self) -> str:
        return getattr(self._encoder, 'name', type(self._encoder).__name__)

    @property
    def digest_size(self) -> int:
        """Output length of the PRF in bytes (hLen)."""
        return self._prf.digest_size

    @property
    def max_key_length(self) -> int:
        """Largest derivable key, (2^32 - 1) * hLen bytes."""
        return UINT32_MAX * self.digest_size

    def derive_key(self, password, salt: bytes, iterations: int, key_length: int) -> bytes:
        """
        Derive a key from a password.

        Args:
            password: The password, as a str or sequence of characters;
                bytes are taken as already encoded
            salt: The cryptographic salt (may be empty)
            iterations: Number of PRF iterations per block, at least 1
            key_length: Desired length of the derived key in bytes

        Returns:
            The derived key, exactly key_length bytes

        Raises:
            NullArgumentError: If password or salt is None
            InvalidParameterError: If iterations < 1 or key_length < 0
            DerivedKeyTooLongError: If key_length > (2^32 - 1) * hLen
        """
        if password is None:
            raise NullArgumentError("Password must not be None")
        if salt is None:
            raise NullArgumentError("Salt must not be None")
        if isinstance(salt, str):
            raise TypeError("Salt must be bytes, not str")

        iterations = _check_count(iterations, 'iterations', minimum=1)
        key_length = _check_count(key_length, 'key_length', minimum=0)

        h_len = self.digest_size
        if key_length > self.max_key_length:
            raise DerivedKeyTooLongError(
                f"derived key too long: {key_length} > (2^32 - 1) * {h_len}")
        if key_length == 0:
            return b''

        # Number of hLen-octet blocks in the derived key
        num_blocks = -(-key_length // h_len)

        if isinstance(password, (bytes, bytearray, memoryview)):
            password_bytes = bytes(password)
        else:
            password_bytes = self._encoder.encode(password)
        salt = bytes(salt)

        logger.debug("Deriving %d bytes with %s: %d block(s), %d iteration(s)",
                     key_length, self.algorithm, num_blocks, iterations)

        if self._lock is None:
            return self._derive(self._prf.clone(), password_bytes, salt,
                                iterations, key_length, num_blocks)
        with self._lock:
            return self._derive(self._prf, password_bytes, salt,
                                iterations, key_length, num_blocks)

    def _derive(self, prf, password: bytes, salt: bytes, iterations: int,
                key_length: int, num_blocks: int) -> bytes:
        # Key the PRF once; the key is reused for every block and iteration
        prf.initialize(password)

        derived = bytearray()
        for i in range(1, num_blocks + 1):
            derived += self._block(prf, salt, iterations, i)

        # Bytes past key_length in the last block are dropped
        return bytes(derived[:key_length])

    @staticmethod
    def _block(prf, salt: bytes, iterations: int, index: int) -> bytearray:
        """
        Compute block T_index, the XOR of U_1 .. U_iterations.

        Args:
            prf: Keyed pseudorandom function
            salt: The cryptographic salt
            iterations: Number of PRF applications
            index: 1-based block index

        Returns:
            The block as a bytearray of hLen bytes
        """
        u = salt + encode_int32(index)  # U_0
        result = bytearray(prf.digest_size)
        for _ in range(iterations):
            u = prf.compute(u)
            xor_into(result, u)
        return result

    def __repr__(self) -> str:
        return f"KeyDeriver(algorithm={self.algorithm!r}, charset={self.charset!r})"


def derive_key(password, salt: bytes,
               iterations: int = KDF_DEFAULT_PARAMS['iterations'],
               key_length: int = KDF_DEFAULT_PARAMS['key_length'],
               algorithm=None, charset=None,
               backend: Optional[str] = None) -> bytes:
    """
    Convenience function to derive a single key.

    Args:
        password: The password to derive the key from
        salt: Salt value
        iterations: Number of PRF iterations
        key_length: Length of the derived key in bytes
        algorithm: PRF name or instance (default: configured algorithm)
        charset: Password charset (default: configured charset)
        backend: HMAC provider (default: configured backend)

    Returns:
        Derived key as bytes
    """
    deriver = KeyDeriver(algorithm=algorithm, charset=charset, backend=backend)
    return deriver.derive_key(password, salt, iterations, key_length)


if __name__ == "__main__":
    # Check the RFC 6070 test vectors
    logging.basicConfig(level=logging.INFO)

    vectors = [
        ("password", b"salt", 1, 20, "0c60c80f961f0e71f3a9b524af6012062fe037a6"),
        ("password", b"salt", 2, 20, "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"),
        ("password", b"salt", 4096, 20, "4b007901b765489abead49d926f721d065a429c1"),
        ("passwordPASSWORDpassword", b"saltSALTsaltSALTsaltSALTsaltSALTsalt", 4096, 25,
         "3d2eec4fe41c849b80c8d83662c0e44a8b291a964cf2f07038"),
        ("pass\0word", b"sa\0lt", 4096, 16, "56fa6aa75548099dcc37d7f03425e0c3"),
    ]

    deriver = KeyDeriver("HmacSHA1", "UTF-8")
    for password, salt, c, dk_len, expected in vectors:
        dk = deriver.derive_key(password, salt, c, dk_len)
        print(f"c={c:<5} dkLen={dk_len:<3} {dk.hex()}")
        assert dk.hex() == expected

    print("PBKDF2 test vectors passed!")
