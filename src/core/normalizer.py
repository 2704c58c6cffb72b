"""Normalización de identificadores.

Elimina todo carácter fuera del alfabeto del tipo, conservando el orden.
No valida la longitud: eso lo hace el motor de dígitos después, como un
fallo distinto (`INVALID_LENGTH`).
"""

from __future__ import annotations

from core.domain.models import IdentifierKind
from core.errors import EmptyInputError
from core.rules import get_rule


def normalize(raw: str | None, kind: IdentifierKind) -> str:
    """Devuelve `raw` sin caracteres ilegales para `kind`.

    Ejemplo: `normalize("529.982.247-25", IdentifierKind.CPF)` -> `"52998224725"`.

    Raises:
        EmptyInputError: si `raw` es `None` o vacío.
        ValueError: si `kind` no es un identificador con alfabeto propio.
    """

    rule = get_rule(kind)
    if not raw:
        raise EmptyInputError("empty input")
    return rule.strip(raw)
