"""Agreement with independent PBKDF2 implementations for sampled inputs."""
import hashlib

from Cryptodome.Hash import SHA1, SHA256
from Cryptodome.Protocol.KDF import PBKDF2
from hypothesis import given, settings
from hypothesis import strategies as st

from pbkdf2kit import KeyDeriver

passwords = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=24)
salts = st.binary(max_size=32)
iteration_counts = st.integers(min_value=1, max_value=40)
key_lengths = st.integers(min_value=1, max_value=90)

SHA1_DERIVER = KeyDeriver("HmacSHA1", "UTF-8")
SHA1_CRYPTODOME_DERIVER = KeyDeriver("HmacSHA1", "UTF-8", backend="cryptodome")
SHA256_DERIVER = KeyDeriver("HmacSHA256", "UTF-8", backend="cryptodome")


@settings(max_examples=60, deadline=None)
@given(passwords, salts, iteration_counts, key_lengths)
def test_sha1_matches_hashlib(password, salt, iterations, key_length):
    expected = hashlib.pbkdf2_hmac("sha1", password.encode("utf-8"), salt, iterations, key_length)
    assert SHA1_DERIVER.derive_key(password, salt, iterations, key_length) == expected


@settings(max_examples=60, deadline=None)
@given(passwords, salts, iteration_counts, key_lengths)
def test_sha1_matches_cryptodome(password, salt, iterations, key_length):
    expected = PBKDF2(password.encode("utf-8"), salt, dkLen=key_length, count=iterations,
                      hmac_hash_module=SHA1)
    assert SHA1_CRYPTODOME_DERIVER.derive_key(password, salt, iterations, key_length) == expected


@settings(max_examples=40, deadline=None)
@given(passwords, salts, iteration_counts, key_lengths)
def test_sha256_matches_cryptodome(password, salt, iterations, key_length):
    expected = PBKDF2(password.encode("utf-8"), salt, dkLen=key_length, count=iterations,
                      hmac_hash_module=SHA256)
    assert SHA256_DERIVER.derive_key(password, salt, iterations, key_length) == expected


@settings(max_examples=40, deadline=None)
@given(st.binary(max_size=64), salts, iteration_counts, key_lengths)
def test_backends_agree_on_raw_bytes(password, salt, iterations, key_length):
    assert SHA1_DERIVER.derive_key(password, salt, iterations, key_length) == \
        SHA1_CRYPTODOME_DERIVER.derive_key(password, salt, iterations, key_length)
