"""Entry point de desarrollo equivalente al script `valida-br`.

Permite ejecutar la CLI desde un checkout sin instalar el paquete:
- `python main.py cpf 529.982.247-25`
- `python main.py password` (pide la senha sin eco)

Motivo:
- El código vive en `src/` (layout tipo "src"), así que sin un editable
  install Python no encuentra `cli`, `core`, etc. Este archivo añade `src/`
  a `sys.path` y delega en `cli.main:run`, el mismo objetivo que
  `[project.scripts] valida-br` en `pyproject.toml`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
