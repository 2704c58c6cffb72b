import pytest

from adapters.batch_loader import BatchFileError, load_batch_file, parse_batch_lines
from core.domain.models import IdentifierKind


def test_parse_ignora_comentarios_e_linhas_vazias():
    items = parse_batch_lines(
        [
            "# tipo,valor",
            "cpf,529.982.247-25",
            "",
            "  CNPJ , 11.444.777/0001-61 ",
            '"email","fulano@exemplo.com"',
        ]
    )
    assert [(i.kind, i.value, i.line_no) for i in items] == [
        (IdentifierKind.CPF, "529.982.247-25", 2),
        (IdentifierKind.CNPJ, "11.444.777/0001-61", 4),
        (IdentifierKind.EMAIL, "fulano@exemplo.com", 5),
    ]


def test_parse_tipo_desconhecido():
    with pytest.raises(BatchFileError) as exc_info:
        parse_batch_lines(["cpf,52998224725", "nis,12345678901"])
    assert exc_info.value.line_no == 2


def test_parse_sem_valor():
    with pytest.raises(BatchFileError):
        parse_batch_lines(["cpf"])


def test_load_batch_file(tmp_path):
    path = tmp_path / "entrada.csv"
    path.write_text("rg,13.345.678-X\nie,110.042.490.114\n", encoding="utf-8")
    items = load_batch_file(path)
    assert [i.kind for i in items] == [IdentifierKind.RG, IdentifierKind.IE]
