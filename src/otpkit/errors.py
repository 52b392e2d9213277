"""Exceptions raised by the OTP engines and the base32 codec."""

from __future__ import annotations


class OTPError(ValueError):
    """Base class for every error raised by otpkit."""


class EmptySecret(OTPError):
    def __init__(self) -> None:
        super().__init__("secret must not be empty")


class InvalidDigits(OTPError):
    def __init__(self, digits: object) -> None:
        super().__init__(f"digits must be an integer between 6 and 8, got {digits!r}")
        self.digits = digits


class InvalidTimeStep(OTPError):
    def __init__(self, time_step: object) -> None:
        super().__init__(f"time step must be a positive number of seconds, got {time_step!r}")
        self.time_step = time_step


class InvalidBase32String(OTPError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid base32 string: {reason}")


class UnsupportedAlgorithm(OTPError):
    def __init__(self, algorithm: object) -> None:
        super().__init__(f"unsupported algorithm {algorithm!r} (expected SHA1, SHA256 or SHA512)")
        self.algorithm = algorithm


class InvalidWindow(OTPError):
    def __init__(self, window: object) -> None:
        super().__init__(f"window must be a non-negative integer, got {window!r}")
        self.window = window


class InvalidCounter(OTPError):
    """Counter outside the unsigned 64-bit range, e.g. a time before t0."""

    def __init__(self, counter: object) -> None:
        super().__init__(f"counter must be between 0 and 2**64 - 1, got {counter!r}")
        self.counter = counter


class DigestTooShort(OTPError):
    """The HMAC provider returned fewer bytes than truncation needs."""

    def __init__(self, length: int, required: int) -> None:
        super().__init__(f"HMAC digest of {length} bytes is too short, need at least {required}")
        self.length = length
        self.required = required


class InvalidTime(OTPError):
    """A time or epoch offset that is NaN or infinite."""

    def __init__(self, value: object) -> None:
        super().__init__(f"time must be a finite number of seconds, got {value!r}")
        self.value = value
