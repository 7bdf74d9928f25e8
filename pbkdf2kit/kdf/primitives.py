"""
PBKDF2 Primitives

Pure helper functions used by the derivation loop: the big-endian block
index encoding INT(i) and the in-place XOR accumulation.
"""

import operator

import numpy as np

from ..exceptions import InvalidParameterError, NullArgumentError

INT32_MIN = -(1 << 31)
UINT32_MAX = (1 << 32) - 1


def encode_int32(value: int) -> bytes:
    """
    Convert an integer to its 4-byte big-endian representation.

    Negative values encode their two's-complement bit pattern. Values up to
    2^32 - 1 are accepted so that every PBKDF2 block index can be encoded.

    Args:
        value: Integer in [-2^31, 2^32 - 1]

    Returns:
        The 4-byte big-endian encoding

    Raises:
        InvalidParameterError: If the value does not fit in 32 bits
    """
    try:
        value = operator.index(value)
    except TypeError as e:
        raise InvalidParameterError(f"Expected an integer, got {type(value).__name__}") from e
    if value < INT32_MIN or value > UINT32_MAX:
        raise InvalidParameterError(f"{value} does not fit in 32 bits")
    return (value & UINT32_MAX).to_bytes(4, byteorder='big')


def _as_uint8(buffer) -> np.ndarray:
    """View a bytes-like object (or array) as a flat uint8 array."""
    if isinstance(buffer, np.ndarray):
        return buffer
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    return np.asarray(buffer, dtype=np.uint8)


def xor_into(dest, src) -> None:
    """
    XOR src into dest, element by element, in place.

    Args:
        dest: Mutable destination buffer (bytearray, writable memoryview or
            uint8 numpy array), included in the XOR
        src: Source buffer of the same length

    Raises:
        NullArgumentError: If one buffer is None and the other is non-empty
        InvalidParameterError: If the lengths differ
        TypeError: If dest is not a mutable byte buffer
    """
    if dest is None or src is None:
        other = src if dest is None else dest
        # None against None or against an empty buffer is a no-op
        if other is None or len(other) == 0:
            return
        raise NullArgumentError("Cannot XOR a non-empty buffer with None")

    # Other sequences would be copied by numpy and the result lost
    if not isinstance(dest, (bytearray, memoryview, np.ndarray)):
        raise TypeError(f"Destination must be a bytearray, memoryview or numpy array, "
                        f"got {type(dest).__name__}")
    if isinstance(dest, memoryview) and dest.readonly:
        raise TypeError("Destination buffer must be mutable")
    if len(dest) != len(src):
        raise InvalidParameterError(
            f"Buffer lengths differ: dest has {len(dest)} bytes, src has {len(src)}")
    if len(dest) == 0:
        return

    target = _as_uint8(dest)
    np.bitwise_xor(target, _as_uint8(src), out=target)
