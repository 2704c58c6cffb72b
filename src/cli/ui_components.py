"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ValidationOutcome
from core.services.batch_pipeline import BatchResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("VALIDA-BR", style="bold green")
    subtitle = Text("CPF • CNPJ • RG • IE • CEP", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_outcome_panel(outcome: ValidationOutcome) -> Panel:
    """Panel para presentar un único `ValidationOutcome`.

    Senhas se muestran siempre enmascaradas (`redacted()`).
    """

    outcome = outcome.redacted()
    label = outcome.kind.label()
    suffix = "a" if outcome.kind.is_feminine() else "o"
    body = Text()
    if outcome.ok:
        title = Text(f"{label} válid{suffix}", style="bold green")
        if outcome.value is not None:
            body.append(f"{outcome.value}\n")
        address = outcome.details.get("address")
        if isinstance(address, dict):
            for key in ("street", "district", "city", "state"):
                if address.get(key):
                    body.append(f"\n{key}: {address[key]}", style="dim")
        border = "green"
    else:
        assert outcome.failure is not None
        title = Text(f"{label} inválid{suffix}", style="bold red")
        body.append(outcome.failure.message + "\n")
        body.append(f"\n{outcome.failure.kind.value}", style="dim")
        for key, value in outcome.details.items():
            body.append(f"\n{key}: {value}", style="dim")
        border = "red"

    return Panel(body, title=title, border_style=border)


def build_batch_table(result: BatchResult) -> Table:
    """Tabla Rich con un resultado por fila, en orden de entrada."""

    table = Table(title=f"Batch ({result.valid_count}/{len(result.outcomes)} válidos)")
    table.add_column("Line", style="dim", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Valid", style="green")
    table.add_column("Failure", style="red")

    for item, outcome in zip(result.items, result.outcomes):
        shown = outcome.redacted()
        table.add_row(
            str(item.line_no or ""),
            outcome.kind.value,
            shown.value or shown.raw or "",
            "yes" if outcome.ok else "no",
            outcome.failure.kind.value if outcome.failure else "",
        )
    return table
