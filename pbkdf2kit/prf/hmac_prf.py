"""
HMAC Pseudorandom Functions

This module implements the keyed pseudorandom functions used by PBKDF2.
A PRF is keyed once with the encoded password and then maps each message
to a fixed-length output of digest_size bytes.

Two HMAC providers are available: the standard library (hmac/hashlib) and
PyCryptodome (Cryptodome.Hash). Both precompute the keyed HMAC state in
initialize() and copy it for every compute() call.
"""

import abc
import hmac
import hashlib
import importlib
import logging
from typing import Dict, List, Optional, Tuple

from ..config import default_algorithm, default_backend
from ..exceptions import AlgorithmUnavailableError

logger = logging.getLogger(__name__)

BACKENDS = ('hashlib', 'cryptodome')

# Normalized name -> (canonical name, hashlib name, Cryptodome.Hash module)
_ALGORITHMS: Dict[str, Tuple[str, str, str]] = {
    'md5': ('HmacMD5', 'md5', 'MD5'),
    'sha1': ('HmacSHA1', 'sha1', 'SHA1'),
    'sha224': ('HmacSHA224', 'sha224', 'SHA224'),
    'sha256': ('HmacSHA256', 'sha256', 'SHA256'),
    'sha384': ('HmacSHA384', 'sha384', 'SHA384'),
    'sha512': ('HmacSHA512', 'sha512', 'SHA512'),
    'sha3224': ('HmacSHA3-224', 'sha3_224', 'SHA3_224'),
    'sha3256': ('HmacSHA3-256', 'sha3_256', 'SHA3_256'),
    'sha3384': ('HmacSHA3-384', 'sha3_384', 'SHA3_384'),
    'sha3512': ('HmacSHA3-512', 'sha3_512', 'SHA3_512'),
}


def _normalize_name(algorithm: str) -> str:
    """
    Reduce an algorithm name to its lookup key.

    "HmacSHA256", "hmac-sha256", "HMAC_SHA256" and "sha256" all map to
    "sha256".
    """
    key = algorithm.lower()
    for sep in ('-', '_', '/', ' '):
        key = key.replace(sep, '')
    if key.startswith('hmac'):
        key = key[4:]
    return key


class PseudoRandomFunction(abc.ABC):
    """
    Keyed pseudorandom function with a fixed output length.

    Attributes:
        name: Canonical algorithm name
        digest_size: Output length in bytes (hLen)
    """

    name: str
    digest_size: int

    @abc.abstractmethod
    def initialize(self, key: bytes) -> None:
        """Key the function. The key is reused for every compute() call."""

    @abc.abstractmethod
    def compute(self, message: bytes) -> bytes:
        """Return PRF(key, message), exactly digest_size bytes."""

    @abc.abstractmethod
    def clone(self) -> 'PseudoRandomFunction':
        """Return a fresh, un-keyed instance of the same algorithm."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class HashlibHMAC(PseudoRandomFunction):
    """HMAC built on the standard library hmac and hashlib modules."""

    def __init__(self, hash_name: str, name: Optional[str] = None):
        """
        Args:
            hash_name: hashlib digest name (e.g. 'sha1', 'sha256')
            name: Canonical name reported by the PRF

        Raises:
            AlgorithmUnavailableError: If hashlib does not provide the digest
        """
        try:
            self.digest_size = hashlib.new(hash_name).digest_size
        except (ValueError, TypeError) as e:
            raise AlgorithmUnavailableError(
                f"hashlib does not provide digest '{hash_name}'") from e
        self.hash_name = hash_name
        self.name = name or f"Hmac{hash_name.upper()}"
        self._keyed = None

    def initialize(self, key: bytes) -> None:
        self._keyed = hmac.new(bytes(key), digestmod=self.hash_name)

    def compute(self, message: bytes) -> bytes:
        if self._keyed is None:
            raise RuntimeError(f"{self.name} used before initialize()")
        mac = self._keyed.copy()
        mac.update(message)
        return mac.digest()

    def clone(self) -> 'HashlibHMAC':
        return HashlibHMAC(self.hash_name, self.name)


class CryptodomeHMAC(PseudoRandomFunction):
    """HMAC built on PyCryptodome's Cryptodome.Hash package."""

    def __init__(self, module_name: str, name: Optional[str] = None):
        """
        Args:
            module_name: Module under Cryptodome.Hash (e.g. 'SHA1', 'SHA256')
            name: Canonical name reported by the PRF

        Raises:
            AlgorithmUnavailableError: If the hash module cannot be imported
        """
        try:
            self._digestmod = importlib.import_module(f"Cryptodome.Hash.{module_name}")
            self._hmac = importlib.import_module("Cryptodome.Hash.HMAC")
        except ImportError as e:
            raise AlgorithmUnavailableError(
                f"Cryptodome.Hash does not provide '{module_name}'") from e
        self.module_name = module_name
        self.digest_size = self._digestmod.digest_size
        self.name = name or f"Hmac{module_name}"
        self._keyed = None

    def initialize(self, key: bytes) -> None:
        self._keyed = self._hmac.new(bytes(key), digestmod=self._digestmod)

    def compute(self, message: bytes) -> bytes:
        if self._keyed is None:
            raise RuntimeError(f"{self.name} used before initialize()")
        mac = self._keyed.copy()
        mac.update(bytes(message))
        return mac.digest()

    def clone(self) -> 'CryptodomeHMAC':
        return CryptodomeHMAC(self.module_name, self.name)


def available_algorithms(backend: Optional[str] = None) -> List[str]:
    """
    List the canonical PRF names a backend can provide.

    Args:
        backend: 'hashlib' or 'cryptodome' (default: configured backend)

    Returns:
        Sorted list of canonical algorithm names
    """
    if backend is None:
        backend = default_backend()
    if backend not in BACKENDS:
        raise AlgorithmUnavailableError(f"Unknown PRF backend '{backend}'")

    names = []
    for canonical, hashlib_name, _ in _ALGORITHMS.values():
        if backend == 'cryptodome' or hashlib_name in hashlib.algorithms_available:
            names.append(canonical)
    return sorted(names)


def get_prf(algorithm: str, backend: Optional[str] = None) -> PseudoRandomFunction:
    """
    Instantiate a named HMAC pseudorandom function.

    Args:
        algorithm: Algorithm name, e.g. 'HmacSHA1', 'hmac-sha256' or 'sha512'
        backend: 'hashlib' or 'cryptodome' (default: configured backend)

    Returns:
        An un-keyed PRF instance

    Raises:
        AlgorithmUnavailableError: If the name or backend is unknown
    """
    if not isinstance(algorithm, str):
        raise AlgorithmUnavailableError(f"Algorithm name must be a string, got {type(algorithm).__name__}")
    if backend is None:
        backend = default_backend()

    entry = _ALGORITHMS.get(_normalize_name(algorithm))
    if entry is None:
        raise AlgorithmUnavailableError(f"Unknown PRF algorithm '{algorithm}'")
    canonical, hashlib_name, module_name = entry

    if backend == 'hashlib':
        prf = HashlibHMAC(hashlib_name, canonical)
    elif backend == 'cryptodome':
        prf = CryptodomeHMAC(module_name, canonical)
    else:
        raise AlgorithmUnavailableError(f"Unknown PRF backend '{backend}'")

    logger.debug("Resolved PRF %s via %s backend (hLen=%d)", canonical, backend, prf.digest_size)
    return prf


def resolve_prf(algorithm=None, backend: Optional[str] = None):
    """
    Turn a name or an injected object into a usable PRF.

    Injected objects only need initialize(), compute() and a positive
    integer digest_size; clone() is optional.

    Raises:
        AlgorithmUnavailableError: If the name is unknown or the object
            lacks the PRF capability
    """
    if algorithm is None:
        algorithm = default_algorithm()
    if isinstance(algorithm, str):
        return get_prf(algorithm, backend)

    for attr in ('initialize', 'compute'):
        if not callable(getattr(algorithm, attr, None)):
            raise AlgorithmUnavailableError(f"{algorithm!r} does not provide {attr}()")
    digest_size = getattr(algorithm, 'digest_size', None)
    if not isinstance(digest_size, int) or isinstance(digest_size, bool) or digest_size <= 0:
        raise AlgorithmUnavailableError(f"{algorithm!r} does not declare a positive digest_size")
    return algorithm


if __name__ == "__main__":
    # Test HMAC PRFs
    logging.basicConfig(level=logging.INFO)

    for backend in BACKENDS:
        print(f"{backend}: {', '.join(available_algorithms(backend))}")

    # RFC 2202 test case 2
    for backend in BACKENDS:
        prf = get_prf('HmacSHA1', backend)
        prf.initialize(b"Jefe")
        tag = prf.compute(b"what do ya want for nothing?")
        print(f"{backend} HMAC-SHA1: {tag.hex()}")
        assert tag.hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"

    print("PRF tests completed successfully!")
