"""Comprobaciones de email y senha.

No son algoritmos de dígito verificador: solo patrones. Se mantienen aparte
del motor de checksum y lanzan las mismas excepciones internas.
"""

from __future__ import annotations

import re

from core.errors import EmptyInputError, MalformedEmailError, WeakPasswordError

EMAIL_PATTERN = re.compile(
    r"(?=.{1,64}@)[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*@"
    r"[^-][A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*(\.[A-Za-z]{2,})"
)

PASSWORD_CLASSES: dict[str, re.Pattern[str]] = {
    "special": re.compile(r"[^A-Za-z0-9]"),
    "uppercase": re.compile(r"[A-Z]"),
    "lowercase": re.compile(r"[a-z]"),
    "digit": re.compile(r"[0-9]"),
}


def check_email(raw: str | None) -> str:
    if not raw:
        raise EmptyInputError("empty input")
    if EMAIL_PATTERN.fullmatch(raw) is None:
        raise MalformedEmailError(raw)
    return raw


def missing_password_classes(password: str) -> list[str]:
    return [name for name, pattern in PASSWORD_CLASSES.items() if pattern.search(password) is None]


def check_password(raw: str | None) -> str:
    """Exige al menos un carácter especial, una mayúscula, una minúscula y un dígito."""

    if not raw:
        raise EmptyInputError("empty input")
    missing = missing_password_classes(raw)
    if missing:
        raise WeakPasswordError("weak password", missing=missing)
    return raw
