"""Percent codec for pattern and path text.

Both the pattern and every path tested against it are percent-encoded before
they reach the regex engine, so non-ASCII text and control bytes never leak
into regex syntax. Decoding only happens when producing parameter values.

Text is encoded as UTF-8. Alphanumerics and the printable ASCII punctuation
in ``SAFE_PUNCTUATION`` pass through unchanged; every other byte becomes
``%XX`` with uppercase hex digits.
"""

from __future__ import annotations

import string

SAFE_PUNCTUATION = "!\"#$%&'()*+,-./:;<=>?@[\\]^_{|}~`"

_SAFE_BYTES = frozenset(
    (string.ascii_letters + string.digits + SAFE_PUNCTUATION).encode("ascii")
)
_HEX_DIGITS = frozenset(string.hexdigits)


def percent_encode(text: str) -> str:
    """Encode text into the restricted ASCII form used for matching.

    Lone surrogates are encoded as their UTF-8 byte sequences instead of
    raising, so encoding is total over ``str``.

    >>> percent_encode("/café")
    '/caf%C3%A9'
    """
    encoded: list[str] = []
    for byte in text.encode("utf-8", "surrogatepass"):
        if byte in _SAFE_BYTES:
            encoded.append(chr(byte))
        else:
            encoded.append(f"%{byte:02X}")
    return "".join(encoded)


def percent_decode(text: str) -> str:
    """Decode ``%XX`` escapes back into text.

    Decoding is lenient: a ``%`` that is not followed by two hex digits is
    copied through literally. Byte sequences that are not valid UTF-8 after
    unescaping decode to U+FFFD.

    >>> percent_decode("caf%C3%A9")
    'café'
    >>> percent_decode("100%")
    '100%'
    """
    decoded = bytearray()
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if (
            ch == "%"
            and i + 2 < n
            and text[i + 1] in _HEX_DIGITS
            and text[i + 2] in _HEX_DIGITS
        ):
            decoded.append(int(text[i + 1 : i + 3], 16))
            i += 3
        else:
            decoded += ch.encode("utf-8", "surrogatepass")
            i += 1
    return decoded.decode("utf-8", "replace")
