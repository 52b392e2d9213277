"""RFC 4648 base32 codec for human-typable secrets.

Encoding is strict RFC 4648 output. Decoding is lenient about the way people
type secrets in: whitespace and dashes are ignored, case does not matter and
the trailing ``=`` padding may be left off.
"""

from __future__ import annotations

import base64
import binascii
import re

from otpkit.errors import InvalidBase32String

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_SEPARATORS = re.compile(r"[\s\-]+")
_VALID = frozenset(ALPHABET + ALPHABET.lower())
# Valid lengths of the final 8-char group once padding is removed
_VALID_REMAINDERS = frozenset({0, 2, 4, 5, 7})


def encode(data: bytes) -> str:
    """Encode bytes as padded base32 text (empty input gives ``""``)."""
    return base64.b32encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decode base32 text, raising InvalidBase32String on malformed input."""
    stripped = _SEPARATORS.sub("", text).rstrip("=")

    # Checked before upper(), which folds some non-ASCII letters onto A-Z
    bad = sorted(set(stripped) - _VALID)
    if bad:
        raise InvalidBase32String(f"unexpected character(s) {''.join(bad)!r}")
    normalized = stripped.upper()

    remainder = len(normalized) % 8
    if remainder not in _VALID_REMAINDERS:
        raise InvalidBase32String(f"a final group of {remainder} characters cannot be decoded")

    padded = normalized + "=" * (-len(normalized) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error as e:
        raise InvalidBase32String(str(e)) from e


def strip_padding(text: str) -> str:
    """Drop trailing ``=``, the form authenticator apps expect in URIs."""
    return text.rstrip("=")
