"""Shared fixtures: RFC 6238 secrets and a fixed-digest HMAC provider."""

from __future__ import annotations

import pytest

from otpkit.models import Algorithm

SECRET_SHA1 = b"12345678901234567890"
SECRET_SHA256 = b"12345678901234567890123456789012"
SECRET_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"

# RFC 6238 Appendix B: HMAC-SHA1 digests of the counters behind the test times
SHA1_DIGESTS = {
    0x0000000000000001: "75a48a19d4cbe100644e8ac1397eea747a2d33ab",
    0x00000000023523EC: "278c02e53610f84c40bd9135acd4101012410a14",
    0x00000000023523ED: "b0092b21d048af209da0a1ddd498ade8a79487ed",
    0x000000000273EF07: "907cd1a9116564ecb9d5d1780325f246173fe703",
    0x0000000003F940AA: "25a326d31fc366244cad054976020c7b56b13d5f",
    0x0000000027BC86AA: "ab07e97e2c1278769dbcd75783aabde75ed8550a",
}


class FixedDigestProvider:
    """Returns canned digests; records every call it receives."""

    def __init__(self, digests: dict[int, str], default: bytes | None = None) -> None:
        self.digests = {counter: bytes.fromhex(h) for counter, h in digests.items()}
        self.default = default
        self.calls: list[tuple[Algorithm, bytes, bytes]] = []

    def hmac(self, algorithm: Algorithm, key: bytes, message: bytes) -> bytes:
        self.calls.append((algorithm, key, message))
        counter = int.from_bytes(message, "big")
        if counter in self.digests:
            return self.digests[counter]
        if self.default is not None:
            return self.default
        raise KeyError(f"no canned digest for counter {counter}")


@pytest.fixture
def sha1_provider() -> FixedDigestProvider:
    return FixedDigestProvider(SHA1_DIGESTS)
