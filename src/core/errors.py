"""Excepciones internas de validación.

Por qué excepciones internas:
- Cada paso (normalizar, medir, comparar dígitos) corta el flujo en cuanto
  detecta un problema, sin propagar `None` entre funciones.
- Se capturan una sola vez, en el borde de cada llamada pública
  (`core.validators`), y se convierten en `ValidationOutcome`.
"""

from __future__ import annotations

from typing import Any

from core.domain.models import FailureKind


class ValidationError(Exception):
    """Base de los fallos esperados; nunca cruza el borde público."""

    kind: FailureKind = FailureKind.CHECKSUM_MISMATCH

    def __init__(self, detail: str = "", **details: Any) -> None:
        super().__init__(detail or self.kind.value)
        self.details = details


class EmptyInputError(ValidationError):
    kind = FailureKind.EMPTY_INPUT


class InvalidLengthError(ValidationError):
    kind = FailureKind.INVALID_LENGTH


class ChecksumMismatchError(ValidationError):
    kind = FailureKind.CHECKSUM_MISMATCH


class NotFoundError(ValidationError):
    kind = FailureKind.NOT_FOUND


class WeakPasswordError(ValidationError):
    kind = FailureKind.WEAK_PASSWORD


class MalformedEmailError(ValidationError):
    kind = FailureKind.MALFORMED_EMAIL


class PostalTransportError(Exception):
    """Fallo de transporte del resolvedor de CEP (red, status != 200, cuerpo inválido).

    No hereda de `ValidationError`: lo lanzan los adaptadores, no el Core.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
