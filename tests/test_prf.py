import hashlib
import hmac

import pytest

from pbkdf2kit import AlgorithmUnavailableError, CryptodomeHMAC, HashlibHMAC, available_algorithms, get_prf
from pbkdf2kit.prf import resolve_prf

# RFC 2202 test case 2
KEY = b"Jefe"
DATA = b"what do ya want for nothing?"
HMAC_SHA1 = "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"


@pytest.mark.parametrize("backend", ["hashlib", "cryptodome"])
def test_hmac_sha1_known_answer(backend):
    prf = get_prf("HmacSHA1", backend)
    prf.initialize(KEY)
    assert prf.compute(DATA).hex() == HMAC_SHA1


@pytest.mark.parametrize("backend", ["hashlib", "cryptodome"])
@pytest.mark.parametrize("name, digest, size", [
    ("HmacSHA1", "sha1", 20),
    ("HmacSHA224", "sha224", 28),
    ("HmacSHA256", "sha256", 32),
    ("HmacSHA384", "sha384", 48),
    ("HmacSHA512", "sha512", 64),
])
def test_backends_match_stdlib_hmac(backend, name, digest, size):
    prf = get_prf(name, backend)
    assert prf.name == name
    assert prf.digest_size == size
    prf.initialize(b"secret key")
    for message in (b"", b"abc", bytes(range(200))):
        assert prf.compute(message) == hmac.new(b"secret key", message, digest).digest()


@pytest.mark.parametrize("alias", ["HmacSHA256", "hmacsha256", "HMAC-SHA256", "hmac_sha256", "sha256", "SHA-256"])
def test_name_aliases(alias):
    assert get_prf(alias, "hashlib").name == "HmacSHA256"


def test_sha3_from_hashlib():
    prf = get_prf("hmac-sha3-256", "hashlib")
    assert prf.name == "HmacSHA3-256"
    assert prf.digest_size == 32
    prf.initialize(b"k")
    assert prf.compute(b"m") == hmac.new(b"k", b"m", hashlib.sha3_256).digest()


@pytest.mark.parametrize("name, digest, size", [
    ("HmacSHA3-224", "sha3_224", 28),
    ("HmacSHA3-256", "sha3_256", 32),
    ("HmacSHA3-384", "sha3_384", 48),
    ("HmacSHA3-512", "sha3_512", 64),
])
def test_sha3_from_cryptodome(name, digest, size):
    assert name in available_algorithms("cryptodome")
    prf = get_prf(name, "cryptodome")
    assert isinstance(prf, CryptodomeHMAC)
    assert prf.digest_size == size
    prf.initialize(b"k")
    assert prf.compute(b"m") == hmac.new(b"k", b"m", digest).digest()


def test_unknown_algorithm():
    with pytest.raises(AlgorithmUnavailableError):
        get_prf("HmacWhirlpool9000")
    # AlgorithmUnavailableError is also a ValueError
    with pytest.raises(ValueError):
        get_prf("PBKDF2WithHmacSHA1")


def test_unknown_backend():
    with pytest.raises(AlgorithmUnavailableError):
        get_prf("HmacSHA1", "openssl-engine")
    with pytest.raises(AlgorithmUnavailableError):
        available_algorithms("openssl-engine")


def test_non_string_name():
    with pytest.raises(AlgorithmUnavailableError):
        get_prf(42)


def test_hashlib_missing_digest():
    with pytest.raises(AlgorithmUnavailableError):
        HashlibHMAC("no-such-digest")


def test_cryptodome_missing_module():
    with pytest.raises(AlgorithmUnavailableError):
        CryptodomeHMAC("NoSuchHash")


@pytest.mark.parametrize("backend", ["hashlib", "cryptodome"])
def test_compute_before_initialize(backend):
    with pytest.raises(RuntimeError):
        get_prf("HmacSHA1", backend).compute(b"data")


@pytest.mark.parametrize("backend", ["hashlib", "cryptodome"])
def test_clone_is_unkeyed_and_independent(backend):
    prf = get_prf("HmacSHA256", backend)
    prf.initialize(b"first")
    twin = prf.clone()
    assert type(twin) is type(prf)
    assert twin.name == prf.name
    with pytest.raises(RuntimeError):
        twin.compute(b"x")
    twin.initialize(b"second")
    assert prf.compute(b"x") != twin.compute(b"x")


def test_compute_does_not_consume_keyed_state():
    prf = get_prf("HmacSHA1")
    prf.initialize(KEY)
    assert prf.compute(DATA) == prf.compute(DATA)


def test_available_algorithms_default_backend():
    names = available_algorithms()
    assert "HmacSHA1" in names
    assert "HmacSHA256" in names
    assert names == sorted(names)


def test_default_backend_from_environment(monkeypatch):
    monkeypatch.setenv("PBKDF2KIT_BACKEND", "cryptodome")
    assert isinstance(get_prf("HmacSHA1"), CryptodomeHMAC)


class _BareMac:
    digest_size = 20

    def initialize(self, key):
        self.key = key

    def compute(self, message):
        return hmac.new(self.key, message, "sha1").digest()


def test_resolve_prf_accepts_injected_object():
    mac = _BareMac()
    assert resolve_prf(mac) is mac


def test_resolve_prf_default_name():
    assert resolve_prf().name == "HmacSHA1"


@pytest.mark.parametrize("obj", [object(), b"HmacSHA1", 20])
def test_resolve_prf_rejects_objects_without_capability(obj):
    with pytest.raises(AlgorithmUnavailableError):
        resolve_prf(obj)


def test_resolve_prf_requires_digest_size():
    class NoSize:
        def initialize(self, key):
            pass

        def compute(self, message):
            return b""

    with pytest.raises(AlgorithmUnavailableError):
        resolve_prf(NoSize())
