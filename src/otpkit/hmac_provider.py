"""Keyed-hash capability used by the OTP engines.

The engines only depend on the HMACProvider protocol. CryptographyHMACProvider
is the stock implementation, built on the ``cryptography`` package.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC

from otpkit.models import Algorithm


@runtime_checkable
class HMACProvider(Protocol):
    def hmac(self, algorithm: Algorithm, key: bytes, message: bytes) -> bytes:
        """Return HMAC(key, message); 20/32/64 bytes for SHA1/SHA256/SHA512."""
        ...


_HASHES: dict[Algorithm, type[hashes.HashAlgorithm]] = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA512: hashes.SHA512,
}


class CryptographyHMACProvider:
    """HMAC over the ``cryptography`` hash primitives.

    Holds no state, so one instance can serve any number of threads.
    """

    def hmac(self, algorithm: Algorithm, key: bytes, message: bytes) -> bytes:
        h = HMAC(key, _HASHES[Algorithm.parse(algorithm)]())
        h.update(message)
        return h.finalize()


_default = CryptographyHMACProvider()


def default_provider() -> HMACProvider:
    return _default


def resolve(provider: HMACProvider | None) -> HMACProvider:
    return _default if provider is None else provider
