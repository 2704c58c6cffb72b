"""Motor de dígitos verificadores (módulo 11).

Cada identificador comparte el mismo esqueleto:
1) separar la parte de datos de los dígitos verificadores,
2) suma ponderada con un vector de pesos fijo,
3) reducir con la variante de módulo 11 propia del tipo,
4) comparar con los caracteres finales literales.

Con dos verificadores, el segundo se calcula sobre los datos más el primero
YA calculado: un error en el primer verificador solo marca esa posición.

Las funciones `verify_*` reciben un valor YA normalizado (ver
`core.normalizer`), devuelven el mismo valor si es consistente y lanzan
`ValidationError` en caso contrario. Las funciones `*_check_digits` calculan
los dígitos esperados a partir de la parte de datos.

RG e IE siguen las reglas del Estado de São Paulo.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import ChecksumMismatchError, InvalidLengthError

CPF_LENGTH = 11
CNPJ_LENGTH = 14
RG_LENGTH = 9
IE_LENGTH = 12
IE_RURAL_LENGTH = 14
CEP_LENGTH = 8

CPF_WEIGHTS_1: tuple[int, ...] = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_WEIGHTS_2: tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

CNPJ_WEIGHTS_1: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

RG_WEIGHTS: tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9)

IE_WEIGHTS_1: tuple[int, ...] = (1, 3, 4, 5, 6, 7, 8, 10)
IE_WEIGHTS_2: tuple[int, ...] = (3, 2, 10, 9, 8, 7, 6, 5, 4, 3, 2)

RG_TEN_MARKER = "X"
IE_RURAL_MARKER = "P"


def _to_ints(chars: str) -> list[int]:
    if not chars.isdigit() or not chars.isascii():
        raise ChecksumMismatchError(f"non-digit character in {chars!r}")
    return [int(c) for c in chars]


def _weighted_sum(chars: str, weights: Sequence[int]) -> int:
    return sum(n * w for n, w in zip(_to_ints(chars), weights))


def _require_length(value: str, *lengths: int) -> None:
    if len(value) not in lengths:
        raise InvalidLengthError(f"length {len(value)}", expected=list(lengths), actual=len(value))


def _compare(value: str, expected: str, positions: Sequence[int]) -> str:
    actual = "".join(value[p] for p in positions)
    if actual.upper() != expected:
        mismatched = [p for p, e in zip(positions, expected) if value[p].upper() != e]
        raise ChecksumMismatchError(
            f"expected {expected}, found {actual}",
            expected=expected,
            actual=actual,
            mismatched_positions=mismatched,
        )
    return value


# ==========================
#  CPF
#  d = (soma * 10) mod 11, 10 -> 0
# ==========================
def _cpf_digit(chars: str, weights: Sequence[int]) -> int:
    r = (_weighted_sum(chars, weights) * 10) % 11
    return 0 if r == 10 else r


def cpf_check_digits(data: str) -> str:
    """Calcula los 2 dígitos verificadores para los 9 dígitos base de un CPF."""

    _require_length(data, CPF_LENGTH - 2)
    d1 = _cpf_digit(data, CPF_WEIGHTS_1)
    d2 = _cpf_digit(data + str(d1), CPF_WEIGHTS_2)
    return f"{d1}{d2}"


def verify_cpf(value: str) -> str:
    _require_length(value, CPF_LENGTH)
    return _compare(value, cpf_check_digits(value[:9]), (9, 10))


# ==========================
#  CNPJ
#  r = soma mod 11; DV = 0 si r < 2, si no 11 - r
# ==========================
def _cnpj_digit(chars: str, weights: Sequence[int]) -> int:
    r = _weighted_sum(chars, weights) % 11
    return 0 if r < 2 else 11 - r


def cnpj_check_digits(data: str) -> str:
    """Calcula los 2 dígitos verificadores para los 12 dígitos base de un CNPJ."""

    _require_length(data, CNPJ_LENGTH - 2)
    d1 = _cnpj_digit(data, CNPJ_WEIGHTS_1)
    d2 = _cnpj_digit(data + str(d1), CNPJ_WEIGHTS_2)
    return f"{d1}{d2}"


def verify_cnpj(value: str) -> str:
    _require_length(value, CNPJ_LENGTH)
    return _compare(value, cnpj_check_digits(value[:12]), (12, 13))


# ==========================
#  RG (SP)
#  r = 11 - (soma mod 11), 11 -> 0; r == 10 se escribe "X"
# ==========================
def _rg_digit(chars: str) -> int:
    r = 11 - (_weighted_sum(chars, RG_WEIGHTS) % 11)
    return 0 if r == 11 else r


def rg_check_digits(data: str) -> str:
    """Calcula el carácter verificador (0-9 o "X") para los 8 dígitos base de un RG."""

    _require_length(data, RG_LENGTH - 1)
    r = _rg_digit(data)
    return RG_TEN_MARKER if r == 10 else str(r)


def verify_rg(value: str) -> str:
    _require_length(value, RG_LENGTH)
    return _compare(value, rg_check_digits(value[:8]), (8,))


# ==========================
#  IE (SP)
#  Industrial/comercial: 12 dígitos, DV en posiciones 8 y 11.
#  Produtor rural: "P" + 13 caracteres, DV en posición 9.
#  r = soma mod 11, 10 -> 0
# ==========================
def _ie_digit(chars: str, weights: Sequence[int]) -> int:
    r = _weighted_sum(chars, weights) % 11
    return 0 if r == 10 else r


def is_rural_ie(value: str) -> bool:
    return IE_RURAL_MARKER in value.upper()


def ie_check_digits(data: str) -> str:
    """Calcula los dígitos verificadores de una IE.

    - 10 dígitos base (forma común): devuelve 2 dígitos, el primero va en la
      posición 8 y el segundo al final.
    - "P" + 8 dígitos (produtor rural): devuelve 1 dígito.
    """

    if is_rural_ie(data):
        _require_length(data, 9)
        if data[0].upper() != IE_RURAL_MARKER:
            raise ChecksumMismatchError("rural marker must be the first character")
        return str(_ie_digit(data[1:9], IE_WEIGHTS_1))

    _require_length(data, IE_LENGTH - 2)
    d1 = _ie_digit(data[:8], IE_WEIGHTS_1)
    full = f"{data[:8]}{d1}{data[8:]}"
    d2 = _ie_digit(full, IE_WEIGHTS_2)
    return f"{d1}{d2}"


def verify_ie(value: str) -> str:
    if is_rural_ie(value):
        _require_length(value, IE_RURAL_LENGTH)
        if value[0].upper() != IE_RURAL_MARKER or not value[1:].isdigit():
            raise ChecksumMismatchError("rural marker must be the first character")
        return _compare(value, ie_check_digits(value[:9]), (9,))

    _require_length(value, IE_LENGTH)
    return _compare(value, ie_check_digits(value[:8] + value[9:11]), (8, 11))


def verify_cep(value: str) -> str:
    """El CEP no tiene dígito verificador: solo se comprueba la longitud."""

    _require_length(value, CEP_LENGTH)
    _to_ints(value)
    return value
