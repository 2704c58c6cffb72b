"""Llamadas públicas de validación.

Cada función recibe una cadena cruda y devuelve SIEMPRE un
`ValidationOutcome`: el valor normalizado si es válido, o un fallo
clasificado. Es el único sitio donde las `ValidationError` internas se
capturan y se convierten en resultado; nada se imprime ni se registra.

Sin `language`, los mensajes usan `AppSettings.language`
(`VALIDA_BR_LANGUAGE`, portugués por defecto) vía `get_settings()`.

Ejemplo:

    >>> validate_cpf("529.982.247-25").value
    '52998224725'
"""

from __future__ import annotations

from typing import Any, Callable

from core.credentials import check_email, check_password
from core.config import get_settings
from core.domain.language import Language
from core.domain.models import (
    FailureKind,
    IdentifierKind,
    ValidationFailure,
    ValidationOutcome,
)
from core.errors import NotFoundError, PostalTransportError, ValidationError
from core.interfaces.postal_resolver import PostalResolver
from core.messages import failure_message
from core.normalizer import normalize
from core.rules import get_rule


def _language(language: Language | None) -> Language:
    return language or get_settings().language


def _failure(kind: IdentifierKind, failure: FailureKind, language: Language) -> ValidationFailure:
    return ValidationFailure(kind=failure, message=failure_message(failure, kind, language))


def _run(
    kind: IdentifierKind,
    raw: str | None,
    check: Callable[[], tuple[str, dict[str, Any]]],
    language: Language | None,
) -> ValidationOutcome:
    language = _language(language)
    try:
        value, details = check()
    except ValidationError as exc:
        return ValidationOutcome.failed(kind, raw, _failure(kind, exc.kind, language), exc.details)
    return ValidationOutcome.success(kind, raw, value, details)


def _checksum(kind: IdentifierKind, raw: str | None, language: Language | None) -> ValidationOutcome:
    rule = get_rule(kind)

    def check() -> tuple[str, dict[str, Any]]:
        return rule.verify(normalize(raw, kind)), {}

    return _run(kind, raw, check, language)


def validate_cpf(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    return _checksum(IdentifierKind.CPF, raw, language)


def validate_cnpj(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    return _checksum(IdentifierKind.CNPJ, raw, language)


def validate_rg(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    """Valida un RG de São Paulo. El verificador puede ser el carácter `X`."""

    return _checksum(IdentifierKind.RG, raw, language)


def validate_ie(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    """Valida una IE de São Paulo (forma común de 12 dígitos o produtor rural con `P`)."""

    return _checksum(IdentifierKind.IE, raw, language)


def validate_cep(
    raw: str | None,
    resolver: PostalResolver,
    *,
    language: Language | None = None,
) -> ValidationOutcome:
    """Valida el formato de un CEP y confirma su existencia con `resolver`.

    - Respuesta "no encontrado" -> `NOT_FOUND`.
    - `PostalTransportError` -> `TRANSPORT_ERROR` (sin reintentos).
    """

    kind = IdentifierKind.CEP
    rule = get_rule(kind)

    def check() -> tuple[str, dict[str, Any]]:
        cep = rule.verify(normalize(raw, kind))
        address = resolver.resolve(cep)
        if not address.found:
            raise NotFoundError(cep)
        return cep, {"address": address.model_dump(mode="json", exclude_none=True)}

    try:
        return _run(kind, raw, check, language)
    except PostalTransportError as exc:
        return ValidationOutcome.failed(
            kind,
            raw,
            _failure(kind, FailureKind.TRANSPORT_ERROR, _language(language)),
            {"error": str(exc), "status_code": exc.status_code},
        )


def validate_email(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    return _run(IdentifierKind.EMAIL, raw, lambda: (check_email(raw), {}), language)


def validate_password(raw: str | None, *, language: Language | None = None) -> ValidationOutcome:
    return _run(IdentifierKind.PASSWORD, raw, lambda: (check_password(raw), {}), language)


_SIMPLE_VALIDATORS: dict[IdentifierKind, Callable[..., ValidationOutcome]] = {
    IdentifierKind.CPF: validate_cpf,
    IdentifierKind.CNPJ: validate_cnpj,
    IdentifierKind.RG: validate_rg,
    IdentifierKind.IE: validate_ie,
    IdentifierKind.EMAIL: validate_email,
    IdentifierKind.PASSWORD: validate_password,
}


def validate(
    kind: IdentifierKind,
    raw: str | None,
    *,
    resolver: PostalResolver | None = None,
    language: Language | None = None,
) -> ValidationOutcome:
    """Despacha a la validación de `kind`.

    Raises:
        ValueError: si `kind` es CEP y no se pasó `resolver`.
    """

    if kind is IdentifierKind.CEP:
        if resolver is None:
            raise ValueError("CEP validation requires a postal resolver")
        return validate_cep(raw, resolver, language=language)
    return _SIMPLE_VALIDATORS[kind](raw, language=language)


def compute_check_digits(kind: IdentifierKind, data: str) -> str:
    """Devuelve los dígitos verificadores esperados para la parte de datos `data`.

    `data` se normaliza primero. Lanza `ValueError` si el tipo no tiene
    dígito verificador o si `data` no tiene la longitud de la parte de datos.
    """

    rule = get_rule(kind)
    if rule.check_digits is None:
        raise ValueError(f"{kind.value} has no check digits")
    try:
        return rule.check_digits(normalize(data, kind))
    except ValidationError as exc:
        raise ValueError(f"cannot compute {kind.value} check digits: {exc}") from exc
