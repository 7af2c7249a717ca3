#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2term/utils/encoding.py
"""Text decoding helpers.

Literal content in the document tree may arrive as bytes or as strings that
carry lone surrogates (for example text decoded with ``surrogateescape``).
Neither is fatal: invalid sequences are replaced with U+FFFD.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

REPLACEMENT_CHARACTER = "\ufffd"


def decode_literal(value: str | bytes | bytearray) -> str:
    """Return ``value`` as valid UTF-8 text.

    Parameters
    ----------
    value : str, bytes or bytearray
        Literal node content

    Returns
    -------
    str
        Decoded text; invalid byte sequences and lone surrogates are replaced
        with the Unicode replacement character

    Examples
    --------
    >>> decode_literal(b"caf\\xc3\\xa9")
    'café'
    >>> decode_literal(b"bad \\xff byte")
    'bad � byte'

    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Replacing unencodable characters in literal of length %d", len(value))
        return value.encode("utf-8", errors="surrogatepass").decode("utf-8", errors="replace")
    return value
