"""``otpauth://`` provisioning URIs for authenticator apps (Key Uri Format)."""

from __future__ import annotations

from urllib.parse import quote

from otpkit import base32
from otpkit.models import Algorithm


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def build_uri(
    kind: str,
    label: str,
    secret: bytes,
    issuer: str,
    algorithm: Algorithm,
    digits: int,
    **extra: float,
) -> str:
    """Assemble an otpauth URI.

    ``kind`` is ``"totp"`` or ``"hotp"``; ``extra`` carries ``period`` or
    ``counter``. The label may contain an ``Issuer:account`` prefix, so ``:``
    and ``@`` are left readable.
    """
    params = [
        ("secret", base32.strip_padding(base32.encode(secret))),
        ("issuer", quote(issuer, safe="")),
        ("algorithm", algorithm.value),
        ("digits", str(digits)),
    ]
    params.extend((key, _format_number(value)) for key, value in extra.items())
    query = "&".join(f"{key}={value}" for key, value in params)
    return f"otpauth://{kind}/{quote(label, safe='@:')}?{query}"
