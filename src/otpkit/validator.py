"""Window-based OTP validation.

Each candidate is compared against the locally generated code with
``constant_time_equals``, so rejecting a candidate takes the same time
whichever character differs. The sweep over the window itself returns on
the first match; only the individual comparison is constant time.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from otpkit.errors import InvalidWindow
from otpkit.hmac_provider import HMACProvider, resolve
from otpkit.models import MAX_COUNTER, check_counter

if TYPE_CHECKING:
    from otpkit.hotp import HOTP
    from otpkit.totp import TOTP

logger = logging.getLogger(__name__)


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two strings without stopping at the first mismatch."""
    if len(a) != len(b):
        return False
    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)
    return result == 0


def _check_window(window: int) -> None:
    if isinstance(window, bool) or not isinstance(window, int) or window < 0:
        raise InvalidWindow(window)


def _sweep(hotp: HOTP, candidate: str, counters: range, provider: HMACProvider) -> int | None:
    for counter in counters:
        if counter < 0 or counter > MAX_COUNTER:
            continue
        if constant_time_equals(candidate, hotp.generate(counter, provider)):
            return counter
    return None


def validate_counter(
    hotp: HOTP,
    candidate: str,
    counter: int,
    window: int = 0,
    provider: HMACProvider | None = None,
) -> bool:
    """HOTP validation over ``counter .. counter + window``.

    The window only looks forward: a counter that was already used must
    never be accepted again.
    """
    _check_window(window)
    check_counter(counter)
    matched = _sweep(hotp, candidate, range(counter, counter + window + 1), resolve(provider))
    if matched is None:
        logger.debug("HOTP candidate rejected (counter=%d, window=%d)", counter, window)
        return False
    logger.debug("HOTP candidate matched at counter offset %d", matched - counter)
    return True


def validate_time(
    totp: TOTP,
    candidate: str,
    time: float | datetime | None = None,
    window: int = 0,
    provider: HMACProvider | None = None,
) -> bool:
    """TOTP validation over the time steps ``c0 - window .. c0 + window``.

    Steps that fall before t0 (negative counters) never match.
    """
    _check_window(window)
    current = totp.counter_at(time)
    counters = range(current - window, current + window + 1)
    matched = _sweep(totp.hotp, candidate, counters, resolve(provider))
    if matched is None:
        logger.debug("TOTP candidate rejected (window=%d)", window)
        return False
    logger.debug("TOTP candidate matched at step offset %d", matched - current)
    return True
