"""Tests for window validation and constant-time comparison."""

from __future__ import annotations

import logging

import pytest

from conftest import SECRET_SHA1
from otpkit.errors import InvalidCounter, InvalidWindow
from otpkit.hotp import HOTP
from otpkit.totp import TOTP
from otpkit.validator import constant_time_equals, validate_counter, validate_time

T = 1111111111


def test_constant_time_equals():
    assert constant_time_equals("", "")
    assert constant_time_equals("123456", "123456")
    assert not constant_time_equals("123456", "123457")
    assert not constant_time_equals("023456", "123456")
    assert not constant_time_equals("12345", "123456")
    assert not constant_time_equals("123456", "1234567")


def test_exact_time_window_zero(sha1_provider):
    totp = TOTP(SECRET_SHA1, digits=8)
    assert totp.validate("14050471", T, window=0, provider=sha1_provider)
    assert totp.validate("14050471", T, window=1, provider=sha1_provider)


def test_wrong_code_fails_regardless_of_window():
    totp = TOTP(SECRET_SHA1, digits=8)
    for window in (0, 1, 5):
        assert not totp.validate("00000000", T, window=window)


def test_drift_needs_window():
    totp = TOTP(SECRET_SHA1, digits=8)
    code = totp.generate(T)
    assert not totp.validate(code, T + 30, window=0)
    assert totp.validate(code, T + 30, window=1)
    assert totp.validate(code, T - 30, window=1)
    assert not totp.validate(code, T + 60, window=1)


def test_window_sweeps_in_ascending_order(sha1_provider):
    totp = TOTP(SECRET_SHA1, digits=8)
    # 1111111109 sits in step 0x23523EC, one before T
    assert validate_time(totp, "07081804", T, window=1, provider=sha1_provider)
    steps = [int.from_bytes(msg, "big") for _, _, msg in sha1_provider.calls]
    assert steps == [0x23523EC]


def test_negative_steps_are_skipped():
    totp = TOTP(SECRET_SHA1, digits=8)
    code = totp.generate(0)
    assert totp.validate(code, 0, window=3)
    assert totp.validate(totp.generate(59), 10, window=1)


def test_negative_steps_never_reach_provider():
    calls = []

    class Recorder:
        def hmac(self, algorithm, key, message):
            calls.append(int.from_bytes(message, "big"))
            return b"\x00" * 20

    totp = TOTP(SECRET_SHA1, t0=100)
    assert not validate_time(totp, "999999", 100, window=2, provider=Recorder())
    assert calls == [0, 1, 2]


def test_counter_window_is_forward_only():
    hotp = HOTP(SECRET_SHA1)
    assert validate_counter(hotp, "969429", 3)
    assert validate_counter(hotp, "969429", 1, window=2)
    assert not validate_counter(hotp, "969429", 4, window=10)


def test_counter_window_stops_at_max_counter():
    hotp = HOTP(SECRET_SHA1)
    top = 2**64 - 1
    code = hotp.generate(top)
    assert validate_counter(hotp, code, top, window=3)


@pytest.mark.parametrize("window", [-1, 1.0, True])
def test_invalid_window(window):
    with pytest.raises(InvalidWindow):
        TOTP(SECRET_SHA1).validate("123456", T, window=window)
    with pytest.raises(InvalidWindow):
        HOTP(SECRET_SHA1).validate("123456", 0, window=window)


@pytest.mark.parametrize("counter", [-2, -1, 1.0, True, 2**64])
def test_invalid_counter_on_validate(counter):
    hotp = HOTP(SECRET_SHA1)
    with pytest.raises(InvalidCounter):
        hotp.validate("755224", counter, window=2)
    with pytest.raises(InvalidCounter):
        validate_counter(hotp, "755224", counter)


def test_malformed_candidates_just_fail():
    totp = TOTP(SECRET_SHA1, digits=8)
    for candidate in ("", "1405047", "140504711", "1405047a", "１４０５０４７１"):
        assert not totp.validate(candidate, T, window=1)


def test_logs_never_contain_codes(caplog):
    totp = TOTP(SECRET_SHA1, digits=8)
    with caplog.at_level(logging.DEBUG, logger="otpkit.validator"):
        assert totp.validate("14050471", T, window=1)
        assert not totp.validate("00000000", T, window=1)
    assert "matched at step offset 0" in caplog.text
    assert "rejected" in caplog.text
    assert "14050471" not in caplog.text
