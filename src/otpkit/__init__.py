"""otpkit: HOTP/TOTP one-time passwords (RFC 4226 / RFC 6238)."""

from otpkit.errors import (
    DigestTooShort,
    EmptySecret,
    InvalidBase32String,
    InvalidCounter,
    InvalidDigits,
    InvalidTime,
    InvalidTimeStep,
    InvalidWindow,
    OTPError,
    UnsupportedAlgorithm,
)
from otpkit.hmac_provider import CryptographyHMACProvider, HMACProvider, default_provider
from otpkit.hotp import HOTP
from otpkit.models import Algorithm
from otpkit.totp import TOTP
from otpkit.validator import constant_time_equals

__version__ = "0.1.0"

__all__ = [
    "HOTP",
    "TOTP",
    "Algorithm",
    "CryptographyHMACProvider",
    "DigestTooShort",
    "EmptySecret",
    "HMACProvider",
    "InvalidBase32String",
    "InvalidCounter",
    "InvalidDigits",
    "InvalidTime",
    "InvalidTimeStep",
    "InvalidWindow",
    "OTPError",
    "UnsupportedAlgorithm",
    "constant_time_equals",
    "default_provider",
]
