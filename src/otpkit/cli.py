"""CLI entry point for otpkit."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import click
from rich.console import Console

from otpkit import base32
from otpkit.config import settings
from otpkit.errors import OTPError
from otpkit.hotp import HOTP
from otpkit.models import Algorithm
from otpkit.totp import TOTP

console = Console()


@contextmanager
def _report_errors() -> Iterator[None]:
    try:
        yield
    except OTPError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(2) from e


def _otp_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    fn = click.option("--algorithm", "-a", type=click.Choice([a.value for a in Algorithm], case_sensitive=False),
                      default=lambda: settings.algorithm.value, help="HMAC hash algorithm")(fn)
    fn = click.option("--digits", "-d", type=int, default=lambda: settings.digits, help="Code length (6-8)")(fn)
    return fn


def _period_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    return click.option("--period", "-p", type=float, default=lambda: settings.time_step,
                        help="TOTP time step in seconds")(fn)


@click.group()
def main() -> None:
    """otpkit: HOTP/TOTP one-time password tool."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )


@main.command()
@click.argument("secret")
@click.option("--time", "-t", "at", type=float, default=None, help="Unix timestamp (default: now)")
@_period_option
@_otp_options
def totp(secret: str, at: float | None, period: float, digits: int, algorithm: str) -> None:
    """Print the TOTP code for a base32 SECRET."""
    with _report_errors():
        otp = TOTP.from_base32(secret, time_step=period, digits=digits, algorithm=algorithm)
        code = otp.generate(at)
        remaining = otp.time_remaining(at)
    console.print(f"[bold]{code}[/bold]  ({remaining:.0f}s remaining)")


@main.command()
@click.argument("secret")
@click.option("--counter", "-c", type=int, required=True, help="HOTP counter value")
@_otp_options
def hotp(secret: str, counter: int, digits: int, algorithm: str) -> None:
    """Print the HOTP code for a base32 SECRET at COUNTER."""
    with _report_errors():
        code = HOTP.from_base32(secret, digits=digits, algorithm=algorithm).generate(counter)
    console.print(f"[bold]{code}[/bold]")


@main.command()
@click.argument("secret")
@click.argument("code")
@click.option("--time", "-t", "at", type=float, default=None, help="Unix timestamp (default: now)")
@click.option("--counter", "-c", type=int, default=None, help="Validate as HOTP at this counter")
@click.option("--window", "-w", type=int, default=lambda: settings.window, help="Steps of drift to accept")
@_period_option
@_otp_options
def verify(
    secret: str,
    code: str,
    at: float | None,
    counter: int | None,
    window: int,
    period: float,
    digits: int,
    algorithm: str,
) -> None:
    """Check CODE against a base32 SECRET; exit status 1 if it does not match."""
    if at is not None and counter is not None:
        raise click.UsageError("--time and --counter cannot be used together")
    with _report_errors():
        if counter is not None:
            otp = HOTP.from_base32(secret, digits=digits, algorithm=algorithm)
            ok = otp.validate(code, counter, window=window)
        else:
            totp_ = TOTP.from_base32(secret, time_step=period, digits=digits, algorithm=algorithm)
            ok = totp_.validate(code, at, window=window)
    if ok:
        console.print("[green]valid[/green]")
    else:
        console.print("[red]invalid[/red]")
        raise SystemExit(1)


@main.command()
@click.argument("secret")
@click.argument("label")
@click.option("--issuer", "-i", default=lambda: settings.issuer, help="Issuer shown in the authenticator app")
@click.option("--hotp", "as_hotp", is_flag=True, help="Counter-based URI instead of time-based")
@click.option("--counter", "-c", type=int, default=0, help="Initial HOTP counter")
@_period_option
@_otp_options
def uri(
    secret: str,
    label: str,
    issuer: str,
    as_hotp: bool,
    counter: int,
    period: float,
    digits: int,
    algorithm: str,
) -> None:
    """Print the otpauth:// provisioning URI for a base32 SECRET."""
    with _report_errors():
        if as_hotp:
            text = HOTP.from_base32(secret, digits=digits, algorithm=algorithm).provisioning_uri(
                label, issuer, initial_count=counter
            )
        else:
            text = TOTP.from_base32(secret, time_step=period, digits=digits, algorithm=algorithm).provisioning_uri(
                label, issuer
            )
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@main.command()
@click.argument("text")
def encode(text: str) -> None:
    """Base32-encode UTF-8 TEXT."""
    console.print(base32.encode(text.encode()), markup=False, highlight=False, soft_wrap=True)


@main.command()
@click.argument("text")
@click.option("--hex", "as_hex", is_flag=True, help="Print the decoded bytes as hex")
def decode(text: str, as_hex: bool) -> None:
    """Decode base32 TEXT (spaces, dashes and missing padding are accepted)."""
    with _report_errors():
        raw = base32.decode(text)
    out = raw.hex() if as_hex else raw.decode("utf-8", errors="replace")
    console.print(out, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
