"""Contrato del resolvedor de CEP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La validación de CEP depende de esta abstracción, no de HTTP: los tests
  inyectan un stub y el Core sigue siendo testeable sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PostalAddress


@runtime_checkable
class PostalResolver(Protocol):
    """Contrato mínimo para confirmar la existencia de un CEP.

    Reglas de diseño:
    - `resolve` es síncrono: una única petición bloqueante, sin reintentos.
    - Un CEP inexistente se devuelve como `PostalAddress(found=False)`.
    - Los fallos de transporte se lanzan como `core.errors.PostalTransportError`.
    """

    def resolve(self, cep: str) -> PostalAddress:
        """Consulta un CEP de 8 dígitos ya normalizado."""

        ...
