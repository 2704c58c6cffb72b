"""Carga de ficheros batch (`tipo,valor` por línea).

Formato:
- Una entrada por línea: `cpf,529.982.247-25`.
- Líneas vacías y las que empiezan por `#` se ignoran.
- El valor puede contener comas si va entre comillas (CSV estándar).
"""

from __future__ import annotations

import csv
from pathlib import Path

from core.domain.models import IdentifierKind
from core.services.batch_pipeline import BatchItem


class BatchFileError(ValueError):
    """Línea con formato o tipo desconocido."""

    def __init__(self, path: Path, line_no: int, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no


def parse_batch_lines(lines: list[str], *, path: Path = Path("<stdin>")) -> list[BatchItem]:
    items: list[BatchItem] = []
    for line_no, row in enumerate(csv.reader(lines), start=1):
        if not row or not "".join(row).strip():
            continue
        if row[0].lstrip().startswith("#"):
            continue
        if len(row) != 2:
            raise BatchFileError(path, line_no, "expected 'kind,value'")
        kind_raw, value = row[0].strip().lower(), row[1].strip()
        try:
            kind = IdentifierKind(kind_raw)
        except ValueError:
            raise BatchFileError(path, line_no, f"unknown kind {kind_raw!r}") from None
        items.append(BatchItem(kind=kind, value=value, line_no=line_no))
    return items


def load_batch_file(path: Path) -> list[BatchItem]:
    raw = path.read_text(encoding="utf-8")
    return parse_batch_lines(raw.splitlines(), path=path)
