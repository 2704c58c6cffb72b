"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.viacep import ViaCepResolver
from core.config import AppSettings
from core.domain.models import IdentifierKind
from core.errors import PostalTransportError
from core.validators import validate

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Praça da Sé, São Paulo.
_PROBE_CEP = "01001000"

_SELF_CHECKS: tuple[tuple[IdentifierKind, str], ...] = (
    (IdentifierKind.CPF, "52998224725"),
    (IdentifierKind.CNPJ, "11444777000161"),
    (IdentifierKind.RG, "13345678X"),
    (IdentifierKind.IE, "110042490114"),
)


def _check_viacep(settings: AppSettings) -> tuple[bool, str]:
    try:
        address = ViaCepResolver(settings).resolve(_PROBE_CEP)
    except PostalTransportError as exc:
        return False, str(exc)
    if not address.found:
        return False, f"{_PROBE_CEP} reported as not found"
    return True, f"{address.city or '?'} / {address.state or '?'}"


def _check_algorithms() -> tuple[bool, str]:
    broken = [kind.value for kind, value in _SELF_CHECKS if not validate(kind, value).ok]
    if broken:
        return False, "failed: " + ", ".join(broken)
    return True, f"{len(_SELF_CHECKS)} known identifiers verified"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="VALIDA-BR Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("ViaCEP base_url", "OK", settings.viacep_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Language", "OK", settings.language.label())

    ok_algo, detail_algo = _check_algorithms()
    table.add_row("Check digits", "OK" if ok_algo else "FAIL", detail_algo)

    # Connectivity (best-effort)
    ok_http, detail_http = _check_viacep(settings)
    table.add_row("ViaCEP lookup", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] CEP validation reports `transport_error` until ViaCEP is reachable."
        )
    if not (ok_algo and ok_http):
        raise typer.Exit(code=1)
