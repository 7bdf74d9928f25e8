"""
Exceptions

Errors raised by the key derivation package. Each class also derives from
the closest built-in exception, so callers catching ValueError or
LookupError keep working.
"""


class PBKDF2Error(Exception):
    """Base class for all pbkdf2kit errors."""


class AlgorithmUnavailableError(PBKDF2Error, ValueError):
    """The requested pseudorandom function cannot be instantiated."""


class UnsupportedEncodingError(PBKDF2Error, LookupError):
    """The requested password charset is unknown."""


class DerivedKeyTooLongError(PBKDF2Error, ValueError):
    """The requested key length exceeds (2^32 - 1) * hLen octets."""


class InvalidParameterError(PBKDF2Error, ValueError):
    """A numeric parameter or buffer length is out of range."""


class NullArgumentError(PBKDF2Error, TypeError):
    """A required buffer was passed as None."""
