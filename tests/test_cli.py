import json

import httpx
import pytest
from typer.testing import CliRunner

from adapters import viacep
from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _sem_rede(monkeypatch):
    """Substitui o transporte do ViaCEP por um fake (nenhum teste acessa a rede)."""

    def handler(request: httpx.Request) -> httpx.Response:
        if "/01001000/" in str(request.url):
            return httpx.Response(200, json={"cep": "01001-000", "localidade": "São Paulo", "uf": "SP"})
        return httpx.Response(200, json={"erro": True})

    original_init = viacep.ViaCepResolver.__init__

    def patched_init(self, settings=None, *, transport=None):
        original_init(self, settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(viacep.ViaCepResolver, "__init__", patched_init)


def test_cpf_valido_exit_0():
    result = runner.invoke(app, ["cpf", "529.982.247-25"])
    assert result.exit_code == 0
    assert "52998224725" in result.output


def test_cpf_invalido_exit_1():
    result = runner.invoke(app, ["cpf", "52998224726"])
    assert result.exit_code == 1


def test_cnpj_json():
    result = runner.invoke(app, ["cnpj", "11444777000161", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["ok"] is True
    assert data["value"] == "11444777000161"


def test_mensagem_em_ingles():
    result = runner.invoke(app, ["--english", "rg", "133456780", "--json"])
    assert result.exit_code == 1
    assert json.loads(result.output)["failure"]["message"] == "The RG check digits do not match."


def test_cep_encontrado():
    result = runner.invoke(app, ["cep", "01001-000", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["details"]["address"]["city"] == "São Paulo"


def test_cep_nao_encontrado():
    result = runner.invoke(app, ["cep", "12345678", "--json"])
    assert result.exit_code == 1
    assert json.loads(result.output)["failure"]["kind"] == "not_found"


def test_password_nao_ecoa_senha():
    result = runner.invoke(app, ["password", "--value", "Aa1!", "--json"])
    assert result.exit_code == 0
    assert "Aa1!" not in result.output


def test_password_painel_nao_mostra_senha():
    result = runner.invoke(app, ["password", "--value", "Segredo1!"])
    assert result.exit_code == 0
    assert "Segredo1!" not in result.output
    assert "Senha válida" in result.output


def test_password_fraca_painel_nao_mostra_senha():
    result = runner.invoke(app, ["password", "--value", "segredo1"])
    assert result.exit_code == 1
    assert "segredo1" not in result.output
    assert "Senha inválida" in result.output


def test_password_lida_do_prompt_oculto():
    result = runner.invoke(app, ["password", "--json"], input="Aa1!\n")
    assert result.exit_code == 0
    assert "Aa1!" not in result.output
    assert '"ok": true' in result.output


def test_ie_titulo_no_feminino():
    result = runner.invoke(app, ["ie", "110.042.490.114"])
    assert result.exit_code == 0
    assert "Inscrição Estadual válida" in result.output


def test_batch_json_e_export(tmp_path):
    entrada = tmp_path / "entrada.csv"
    entrada.write_text(
        "cpf,529.982.247-25\ncep,01001-000\nie,110.042.491.114\n",
        encoding="utf-8",
    )
    out = tmp_path / "saida.json"

    result = runner.invoke(app, ["batch", str(entrada), "--json", "--export-json", str(out)])

    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["valid"] == 2
    assert data["failures_by_kind"] == {"checksum_mismatch": 1}
    assert json.loads(out.read_text(encoding="utf-8")) == data


def test_batch_arquivo_mal_formado(tmp_path):
    entrada = tmp_path / "entrada.csv"
    entrada.write_text("nis,123\n", encoding="utf-8")
    result = runner.invoke(app, ["batch", str(entrada), "--quiet"])
    assert result.exit_code == 2
