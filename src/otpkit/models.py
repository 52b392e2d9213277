"""Value types shared by the HOTP and TOTP engines."""

from __future__ import annotations

from enum import StrEnum

from otpkit.errors import InvalidCounter, UnsupportedAlgorithm

MIN_DIGITS = 6
MAX_DIGITS = 8
MAX_COUNTER = 2**64 - 1


class Algorithm(StrEnum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes the HMAC provider must return."""
        return _DIGEST_SIZES[self]

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """Accept an Algorithm or a case-insensitive name like ``"sha256"``."""
        if isinstance(value, Algorithm):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnsupportedAlgorithm(value) from None


_DIGEST_SIZES = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
}


def check_counter(counter: int) -> None:
    """Raise InvalidCounter unless ``counter`` is an int in ``[0, MAX_COUNTER]``."""
    if isinstance(counter, bool) or not isinstance(counter, int) or not 0 <= counter <= MAX_COUNTER:
        raise InvalidCounter(counter)
