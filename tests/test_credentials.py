import pytest

from core.domain.models import REDACTED_VALUE, FailureKind
from core.validators import validate_email, validate_password


@pytest.mark.parametrize(
    "email",
    ["fulano@exemplo.com", "fulano.silva@mail.exemplo.com.br", "user_01-x@dominio.org"],
)
def test_email_valido(email):
    outcome = validate_email(email)
    assert outcome.ok
    assert outcome.value == email


@pytest.mark.parametrize(
    "email",
    ["fulano", "fulano@", "@exemplo.com", "fulano@exemplo", "fulano@exemplo.c", "ful ano@exemplo.com"],
)
def test_email_malformado(email):
    assert validate_email(email).failure.kind is FailureKind.MALFORMED_EMAIL


def test_email_parte_local_longa():
    assert validate_email("a" * 65 + "@exemplo.com").failure.kind is FailureKind.MALFORMED_EMAIL


def test_email_nao_aceita_quebra_de_linha():
    assert not validate_email("fulano@exemplo.com\n").ok


def test_senha_forte():
    outcome = validate_password("Aa1!")
    assert outcome.ok
    assert outcome.value == "Aa1!"


def test_senha_fraca_lista_classes_faltantes():
    outcome = validate_password("aaaa1111")
    assert outcome.failure.kind is FailureKind.WEAK_PASSWORD
    assert outcome.details["missing"] == ["special", "uppercase"]


@pytest.mark.parametrize("password", ["AAAA1111!", "aaaa!!!!B", "Abcdefg1"])
def test_senha_sem_uma_classe(password):
    assert validate_password(password).failure.kind is FailureKind.WEAK_PASSWORD


def test_senha_redacted():
    outcome = validate_password("Aa1!").redacted()
    assert outcome.raw is None
    assert outcome.value == REDACTED_VALUE
    assert outcome.ok
