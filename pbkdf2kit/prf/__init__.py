"""
Pseudorandom Function Package

This package implements the keyed pseudorandom functions (HMAC over
hashlib or PyCryptodome) that PBKDF2 iterates.
"""

from .hmac_prf import (
    PseudoRandomFunction,
    HashlibHMAC,
    CryptodomeHMAC,
    available_algorithms,
    get_prf,
    resolve_prf,
)

__all__ = ['PseudoRandomFunction', 'HashlibHMAC', 'CryptodomeHMAC',
           'available_algorithms', 'get_prf', 'resolve_prf']
