import httpx
import pytest

from adapters.viacep import ViaCepResolver
from core.config import AppSettings
from core.domain.models import FailureKind
from core.errors import PostalTransportError
from core.interfaces.postal_resolver import PostalResolver
from core.validators import validate_cep

VIACEP_SE = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


@pytest.fixture
def settings():
    return AppSettings(viacep_base_url="https://viacep.test/", http_timeout_seconds=2)


def _resolver(settings, handler):
    return ViaCepResolver(settings, transport=httpx.MockTransport(handler))


def test_resolver_cumpre_o_protocolo(settings):
    assert isinstance(ViaCepResolver(settings), PostalResolver)


def test_resolve_encontrado(settings):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=VIACEP_SE)

    address = _resolver(settings, handler).resolve("01001000")

    assert address.found
    assert address.street == "Praça da Sé"
    assert address.city == "São Paulo"
    assert address.state == "SP"
    assert str(seen[0].url) == "https://viacep.test/ws/01001000/json/"
    assert seen[0].headers["User-Agent"] == settings.user_agent


@pytest.mark.parametrize("erro", [True, "true"])
def test_resolve_nao_encontrado(settings, erro):
    address = _resolver(settings, lambda request: httpx.Response(200, json={"erro": erro})).resolve("99999000")
    assert not address.found
    assert address.cep == "99999000"


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_resolve_status_diferente_de_200(settings, status):
    with pytest.raises(PostalTransportError) as exc_info:
        _resolver(settings, lambda request: httpx.Response(status)).resolve("01001000")
    assert exc_info.value.status_code == status


def test_resolve_erro_de_rede(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PostalTransportError):
        _resolver(settings, handler).resolve("01001000")


def test_resolve_json_invalido(settings):
    with pytest.raises(PostalTransportError):
        _resolver(settings, lambda request: httpx.Response(200, text="<html>")).resolve("01001000")


def test_resolve_payload_nao_objeto(settings):
    with pytest.raises(PostalTransportError):
        _resolver(settings, lambda request: httpx.Response(200, json=["01001000"])).resolve("01001000")


def test_validate_cep_com_viacep(settings):
    resolver = _resolver(settings, lambda request: httpx.Response(200, json=VIACEP_SE))
    outcome = validate_cep("01001-000", resolver)
    assert outcome.ok
    assert outcome.details["address"]["district"] == "Sé"
    assert "gia" not in outcome.details["address"]


def test_validate_cep_timeout_vira_transport_error(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    outcome = validate_cep("01001000", _resolver(settings, handler))
    assert outcome.failure.kind is FailureKind.TRANSPORT_ERROR
    assert outcome.details["status_code"] is None
