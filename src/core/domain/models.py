"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da objetos de valor inmutables (`frozen`) con validación y
  serialización JSON sin acoplar el Core a librerías de I/O.
- Un único contrato de resultado para validadores, pipeline, CLI y exportadores.

Nota:
- Estos modelos describen *qué* es un resultado de validación, no *cómo*
  se calcula.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic.config import ConfigDict


class IdentifierKind(str, Enum):
    """Tipos de dato soportados por los validadores."""

    CEP = "cep"
    CPF = "cpf"
    CNPJ = "cnpj"
    RG = "rg"
    IE = "ie"
    EMAIL = "email"
    PASSWORD = "password"

    def label(self) -> str:
        return _KIND_LABELS[self]

    def is_feminine(self) -> bool:
        """Género gramatical del nombre en portugués (concordancia de mensajes)."""

        return self in _FEMININE_KINDS


_KIND_LABELS: dict[IdentifierKind, str] = {
    IdentifierKind.CEP: "CEP",
    IdentifierKind.CPF: "CPF",
    IdentifierKind.CNPJ: "CNPJ",
    IdentifierKind.RG: "RG",
    IdentifierKind.IE: "Inscrição Estadual",
    IdentifierKind.EMAIL: "Email",
    IdentifierKind.PASSWORD: "Senha",
}

_FEMININE_KINDS: frozenset[IdentifierKind] = frozenset({IdentifierKind.IE, IdentifierKind.PASSWORD})

REDACTED_VALUE = "********"


class FailureKind(str, Enum):
    """Clasificación cerrada de fallos de validación."""

    EMPTY_INPUT = "empty_input"
    INVALID_LENGTH = "invalid_length"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    WEAK_PASSWORD = "weak_password"
    MALFORMED_EMAIL = "malformed_email"


class ValidationFailure(BaseModel):
    """Fallo clasificado de una llamada de validación."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = Field(
        ...,
        description="Tipo de fallo.",
    )
    message: str = Field(
        ...,
        min_length=1,
        description="Mensaje legible en el idioma configurado.",
    )


class PostalAddress(BaseModel):
    """Respuesta normalizada de un resolvedor de CEP.

    Los alias siguen los nombres de campo de ViaCEP para poder hacer
    `model_validate(response.json())` directamente.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    found: bool = Field(
        default=True,
        description="False cuando el servicio responde que el CEP no existe.",
    )
    cep: str | None = Field(default=None, description="CEP formateado por el servicio.")
    street: str | None = Field(default=None, alias="logradouro")
    complement: str | None = Field(default=None, alias="complemento")
    district: str | None = Field(default=None, alias="bairro")
    city: str | None = Field(default=None, alias="localidade")
    state: str | None = Field(default=None, alias="uf")
    ibge: str | None = Field(default=None, description="Código IBGE del municipio.")


class ValidationOutcome(BaseModel):
    """Resultado de validar un único valor.

    Exactamente uno de `value` / `failure` está presente.
    """

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind = Field(
        ...,
        description="Tipo de identificador validado.",
    )
    raw: str | None = Field(
        default=None,
        description="Entrada original tal como la pasó el llamador.",
    )
    value: str | None = Field(
        default=None,
        description="Valor normalizado (solo si es válido).",
    )
    failure: ValidationFailure | None = Field(
        default=None,
        description="Fallo clasificado (solo si no es válido).",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Datos auxiliares (dirección del CEP, clases faltantes de la senha, etc.).",
    )

    @model_validator(mode="after")
    def _value_xor_failure(self) -> "ValidationOutcome":
        if (self.value is None) == (self.failure is None):
            raise ValueError("exactly one of value or failure must be set")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(
        cls,
        kind: IdentifierKind,
        raw: str | None,
        value: str,
        details: dict[str, Any] | None = None,
    ) -> "ValidationOutcome":
        return cls(kind=kind, raw=raw, value=value, details=details or {})

    @classmethod
    def failed(
        cls,
        kind: IdentifierKind,
        raw: str | None,
        failure: ValidationFailure,
        details: dict[str, Any] | None = None,
    ) -> "ValidationOutcome":
        return cls(kind=kind, raw=raw, failure=failure, details=details or {})

    def redacted(self) -> "ValidationOutcome":
        """Copia con la senha enmascarada, para mostrar o exportar."""

        if self.kind is not IdentifierKind.PASSWORD:
            return self
        return self.model_copy(update={"raw": None, "value": REDACTED_VALUE if self.ok else None})
