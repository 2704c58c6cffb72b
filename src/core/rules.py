"""Tabla de despacho por tipo de identificador.

Por qué una tabla:
- Cada tipo es una variante independiente: alfabeto permitido y funciones
  de verificación/cálculo. No hace falta herencia.
- Añadir un tipo nuevo es añadir una entrada, sin tocar los validadores.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from core import checksum
from core.domain.models import IdentifierKind


@dataclass(frozen=True)
class IdentifierRule:
    """Reglas de un identificador numérico."""

    kind: IdentifierKind
    strip_pattern: re.Pattern[str]
    verify: Callable[[str], str]
    check_digits: Callable[[str], str] | None = None

    def strip(self, raw: str) -> str:
        return self.strip_pattern.sub("", raw)


_DIGITS_ONLY = re.compile(r"[^0-9]")

RULES: dict[IdentifierKind, IdentifierRule] = {
    IdentifierKind.CEP: IdentifierRule(
        kind=IdentifierKind.CEP,
        strip_pattern=_DIGITS_ONLY,
        verify=checksum.verify_cep,
    ),
    IdentifierKind.CPF: IdentifierRule(
        kind=IdentifierKind.CPF,
        strip_pattern=_DIGITS_ONLY,
        verify=checksum.verify_cpf,
        check_digits=checksum.cpf_check_digits,
    ),
    IdentifierKind.CNPJ: IdentifierRule(
        kind=IdentifierKind.CNPJ,
        strip_pattern=_DIGITS_ONLY,
        verify=checksum.verify_cnpj,
        check_digits=checksum.cnpj_check_digits,
    ),
    IdentifierKind.RG: IdentifierRule(
        kind=IdentifierKind.RG,
        strip_pattern=re.compile(r"[^0-9Xx]"),
        verify=checksum.verify_rg,
        check_digits=checksum.rg_check_digits,
    ),
    IdentifierKind.IE: IdentifierRule(
        kind=IdentifierKind.IE,
        strip_pattern=re.compile(r"[^0-9Pp]"),
        verify=checksum.verify_ie,
        check_digits=checksum.ie_check_digits,
    ),
}


def get_rule(kind: IdentifierKind) -> IdentifierRule:
    try:
        return RULES[kind]
    except KeyError:
        raise ValueError(f"{kind.value} is not a checksum identifier") from None
