"""
Password Charsets

This module turns a password, given as a sequence of characters, into the
bytes used to key the PRF.
"""

import codecs
import logging

from ..config import default_charset
from ..exceptions import NullArgumentError, UnsupportedEncodingError

logger = logging.getLogger(__name__)


class PasswordEncoder:
    """
    Encodes passwords with a fixed charset.

    Encoding is strict: characters the charset cannot represent raise
    UnicodeEncodeError instead of being replaced.
    """

    def __init__(self, charset):
        """
        Args:
            charset: Charset name (e.g. 'UTF-8', 'latin-1') or codecs.CodecInfo

        Raises:
            UnsupportedEncodingError: If the charset is unknown or is not a
                text encoding
        """
        if isinstance(charset, codecs.CodecInfo):
            self._codec = charset
        else:
            if not isinstance(charset, str):
                raise UnsupportedEncodingError(f"Charset must be a name, got {type(charset).__name__}")
            try:
                self._codec = codecs.lookup(charset)
            except LookupError as e:
                raise UnsupportedEncodingError(f"Unsupported charset '{charset}'") from e
        # Reject bytes-to-bytes and str-to-str codecs such as hex or rot13
        if not getattr(self._codec, '_is_text_encoding', True):
            raise UnsupportedEncodingError(f"'{self._codec.name}' is not a text encoding")
        self.name = self._codec.name

        # Plain UTF-16 is always big-endian with a BOM, whatever the host order
        self._bom = b''
        if self.name == 'utf-16':
            self._codec = codecs.lookup('utf-16-be')
            self._bom = codecs.BOM_UTF16_BE

    def encode(self, chars) -> bytes:
        """
        Encode a password.

        Args:
            chars: A str or any iterable of one-character strings

        Returns:
            The encoded password
        """
        if chars is None:
            raise NullArgumentError("Password must not be None")
        if not isinstance(chars, str):
            chars = ''.join(chars)
        encoded, _ = self._codec.encode(chars, 'strict')
        return self._bom + bytes(encoded)

    def __repr__(self) -> str:
        return f"PasswordEncoder({self.name!r})"


def get_encoder(charset=None):
    """
    Resolve a charset into an encoder.

    Args:
        charset: None (configured default), a charset name, a
            codecs.CodecInfo, or an object providing encode(chars) -> bytes

    Returns:
        An object with an encode() method

    Raises:
        UnsupportedEncodingError: If the charset is unknown
    """
    if charset is None:
        charset = default_charset()
    if isinstance(charset, (str, codecs.CodecInfo)):
        encoder = PasswordEncoder(charset)
        logger.debug("Resolved password charset %s", encoder.name)
        return encoder
    if callable(getattr(charset, 'encode', None)):
        return charset
    raise UnsupportedEncodingError(f"{charset!r} is not a charset")
