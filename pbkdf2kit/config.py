"""
Default Parameters

Package-wide defaults for key derivation. The algorithm, charset and HMAC
backend can be overridden through environment variables, which are read
each time a default is needed.
"""

import os

# Default parameters for PBKDF2
KDF_DEFAULT_PARAMS = {
    'algorithm': 'HmacSHA1',  # PRF used when none is given
    'charset': 'utf-8',       # Password encoding
    'backend': 'hashlib',     # HMAC provider ('hashlib' or 'cryptodome')
    'iterations': 4096,       # Iteration count for convenience helpers
    'key_length': 20,         # Derived key size in bytes
    'salt_len': 16            # Salt size in bytes
}

ENV_ALGORITHM = 'PBKDF2KIT_ALGORITHM'
ENV_CHARSET = 'PBKDF2KIT_CHARSET'
ENV_BACKEND = 'PBKDF2KIT_BACKEND'


def default_algorithm() -> str:
    """Return the PRF name used when a deriver is built without one."""
    return os.environ.get(ENV_ALGORITHM) or KDF_DEFAULT_PARAMS['algorithm']


def default_charset() -> str:
    """Return the charset name used to encode passwords by default."""
    return os.environ.get(ENV_CHARSET) or KDF_DEFAULT_PARAMS['charset']


def default_backend() -> str:
    """Return the HMAC backend used to resolve named algorithms."""
    return os.environ.get(ENV_BACKEND) or KDF_DEFAULT_PARAMS['backend']
