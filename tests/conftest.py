from __future__ import annotations

import pytest

from core.domain.models import PostalAddress
from core.config import get_settings
from core.errors import PostalTransportError


class StubResolver:
    """Resolvedor en memoria: `known` existe, `broken` falla en transporte."""

    def __init__(self, known: dict[str, PostalAddress] | None = None, broken: set[str] | None = None) -> None:
        self.known = known or {}
        self.broken = broken or set()
        self.calls: list[str] = []

    def resolve(self, cep: str) -> PostalAddress:
        self.calls.append(cep)
        if cep in self.broken:
            raise PostalTransportError("viacep_http_503", status_code=503)
        return self.known.get(cep, PostalAddress(found=False, cep=cep))


@pytest.fixture
def se_address() -> PostalAddress:
    return PostalAddress(
        cep="01001-000",
        street="Praça da Sé",
        district="Sé",
        city="São Paulo",
        state="SP",
        ibge="3550308",
    )


@pytest.fixture
def resolver(se_address: PostalAddress) -> StubResolver:
    return StubResolver(known={"01001000": se_address}, broken={"99999999"})


@pytest.fixture(autouse=True)
def _idioma_padrao(monkeypatch):
    """Cada teste começa com a configuração padrão (mensagens em português)."""

    monkeypatch.delenv("VALIDA_BR_LANGUAGE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
