"""Catálogo de mensajes de fallo (pt/en)."""

from __future__ import annotations

from core.domain.language import Language
from core.domain.models import FailureKind, IdentifierKind

_MESSAGES: dict[Language, dict[FailureKind, str]] = {
    Language.PORTUGUESE: {
        FailureKind.EMPTY_INPUT: "O valor de entrada não pode ser vazio!",
        FailureKind.INVALID_LENGTH: "O valor de entrada não é válido para {art} {label}!",
        FailureKind.CHECKSUM_MISMATCH: "{Art} {label} inserid{art} não é válid{art}!",
        FailureKind.NOT_FOUND: "{Art} {label} inserid{art} não existe!",
        FailureKind.TRANSPORT_ERROR: "Falha ao consultar {art} {label}, tente novamente mais tarde.",
        FailureKind.WEAK_PASSWORD: "A senha inserida é fraca!",
        FailureKind.MALFORMED_EMAIL: "O email inserido não é válido!",
    },
    Language.ENGLISH: {
        FailureKind.EMPTY_INPUT: "The input value must not be empty.",
        FailureKind.INVALID_LENGTH: "The input value has an invalid length for {label}.",
        FailureKind.CHECKSUM_MISMATCH: "The {label} check digits do not match.",
        FailureKind.NOT_FOUND: "The {label} does not exist.",
        FailureKind.TRANSPORT_ERROR: "Could not reach the {label} lookup service, try again later.",
        FailureKind.WEAK_PASSWORD: "The password is weak.",
        FailureKind.MALFORMED_EMAIL: "The email address is malformed.",
    },
}


def failure_message(failure: FailureKind, kind: IdentifierKind, language: Language) -> str:
    art = "a" if kind.is_feminine() else "o"
    return _MESSAGES[language][failure].format(label=kind.label(), art=art, Art=art.upper())
