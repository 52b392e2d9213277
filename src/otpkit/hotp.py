"""HOTP: counter-based one-time passwords (RFC 4226)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from otpkit import base32
from otpkit.errors import DigestTooShort, EmptySecret, InvalidDigits
from otpkit.hmac_provider import HMACProvider, resolve
from otpkit.models import MAX_DIGITS, MIN_DIGITS, Algorithm, check_counter
from otpkit.uri import build_uri
from otpkit.validator import validate_counter

logger = logging.getLogger(__name__)


def counter_bytes(counter: int) -> bytes:
    """Serialize a counter as the 8-byte big-endian HMAC message."""
    check_counter(counter)
    return counter.to_bytes(8, "big")


def truncate(digest: bytes, digits: int) -> str:
    """Dynamic truncation (RFC 4226 section 5.3) to a zero-padded code."""
    if not digest:
        raise DigestTooShort(0, 1)
    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        logger.warning("HMAC digest too short: %d bytes, offset %d", len(digest), offset)
        raise DigestTooShort(len(digest), offset + 4)

    binary = int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF
    code = binary % (10**digits)
    return f"{code:0{digits}d}"


def _check_secret(secret: bytes) -> None:
    if not secret:
        raise EmptySecret()


def _check_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int) or not MIN_DIGITS <= digits <= MAX_DIGITS:
        raise InvalidDigits(digits)


@dataclass(frozen=True)
class HOTP:
    """Immutable HOTP configuration.

    Validated once on construction; generate/validate take the counter and an
    optional HMAC provider (``None`` means the cryptography-backed default).
    """

    secret: bytes = field(repr=False)
    digits: int = 6
    algorithm: Algorithm = Algorithm.SHA1

    def __post_init__(self) -> None:
        _check_secret(self.secret)
        _check_digits(self.digits)
        object.__setattr__(self, "secret", bytes(self.secret))
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))

    @classmethod
    def from_base32(
        cls,
        secret: str,
        digits: int = 6,
        algorithm: Algorithm | str = Algorithm.SHA1,
    ) -> HOTP:
        return cls(base32.decode(secret), digits=digits, algorithm=algorithm)

    def generate(self, counter: int, provider: HMACProvider | None = None) -> str:
        digest = resolve(provider).hmac(self.algorithm, self.secret, counter_bytes(counter))
        return truncate(digest, self.digits)

    def validate(
        self,
        candidate: str,
        counter: int,
        window: int = 0,
        provider: HMACProvider | None = None,
    ) -> bool:
        """Check ``candidate`` against counters ``counter .. counter + window``."""
        return validate_counter(self, candidate, counter, window=window, provider=provider)

    def provisioning_uri(self, label: str, issuer: str, initial_count: int = 0) -> str:
        return build_uri(
            "hotp",
            label,
            self.secret,
            issuer,
            self.algorithm,
            self.digits,
            counter=initial_count,
        )
