"""TOTP: time-based one-time passwords (RFC 6238).

A TOTP is an HOTP whose counter is the number of whole time steps elapsed
since ``t0``. Times are POSIX timestamps in seconds or aware datetimes; when
omitted, the current time is read once at the call boundary.
"""

from __future__ import annotations

import math
import time as _time
from dataclasses import dataclass, field
from datetime import datetime

from otpkit import base32
from otpkit.errors import InvalidTime, InvalidTimeStep
from otpkit.hmac_provider import HMACProvider
from otpkit.hotp import HOTP
from otpkit.models import Algorithm
from otpkit.uri import build_uri
from otpkit.validator import validate_time

DEFAULT_TIME_STEP = 30


def _is_finite(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def to_timestamp(value: float | datetime | None) -> float:
    """Seconds since the Unix epoch; ``None`` means now."""
    if value is None:
        return _time.time()
    if isinstance(value, datetime):
        return value.timestamp()
    if not _is_finite(value):
        raise InvalidTime(value)
    return value


@dataclass(frozen=True)
class TOTP:
    secret: bytes = field(repr=False)
    time_step: float = DEFAULT_TIME_STEP
    digits: int = 6
    algorithm: Algorithm = Algorithm.SHA1
    t0: float = 0
    hotp: HOTP = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        hotp = HOTP(self.secret, digits=self.digits, algorithm=self.algorithm)
        if not (_is_finite(self.time_step) and self.time_step > 0):
            raise InvalidTimeStep(self.time_step)
        if not _is_finite(self.t0):
            raise InvalidTime(self.t0)
        object.__setattr__(self, "secret", hotp.secret)
        object.__setattr__(self, "algorithm", hotp.algorithm)
        object.__setattr__(self, "hotp", hotp)

    @classmethod
    def from_base32(
        cls,
        secret: str,
        time_step: float = DEFAULT_TIME_STEP,
        digits: int = 6,
        algorithm: Algorithm | str = Algorithm.SHA1,
        t0: float = 0,
    ) -> TOTP:
        return cls(base32.decode(secret), time_step=time_step, digits=digits, algorithm=algorithm, t0=t0)

    def counter_at(self, time: float | datetime | None = None) -> int:
        """Index of the time step containing ``time``, floored toward -inf."""
        return int((to_timestamp(time) - self.t0) // self.time_step)

    def time_remaining(self, time: float | datetime | None = None) -> float:
        """Seconds left in the current step, always in ``(0, time_step]``."""
        elapsed = (to_timestamp(time) - self.t0) % self.time_step
        remaining = self.time_step - elapsed
        return remaining if remaining > 0 else self.time_step

    def generate(self, time: float | datetime | None = None, provider: HMACProvider | None = None) -> str:
        """Code for the step containing ``time``.

        Raises InvalidCounter when ``time`` is before ``t0``.
        """
        return self.hotp.generate(self.counter_at(time), provider)

    def validate(
        self,
        candidate: str,
        time: float | datetime | None = None,
        window: int = 0,
        provider: HMACProvider | None = None,
    ) -> bool:
        return validate_time(self, candidate, time=time, window=window, provider=provider)

    def provisioning_uri(self, label: str, issuer: str) -> str:
        return build_uri(
            "totp",
            label,
            self.secret,
            issuer,
            self.algorithm,
            self.digits,
            period=self.time_step,
        )
