"""CLI principal (Typer).

Por qué Typer + Rich:
- Un comando por tipo de identificador, con ayuda y validación de flags gratis.
- La salida humana (paneles/tablas) vive en `cli.ui_components`; con
  `--json` se imprime el `ValidationOutcome` tal cual para pipelines.

Códigos de salida: 0 si el valor es válido, 1 si no lo es, 2 para errores
de uso (fichero batch mal formado, etc.).
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress

from adapters.batch_loader import BatchFileError, load_batch_file
from adapters.json_exporter import batch_payload, export_batch_json
from adapters.viacep import ViaCepResolver
from cli.doctor import app as doctor_app
from cli.ui_components import build_batch_table, build_outcome_panel, print_banner
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import IdentifierKind, ValidationOutcome
from core.services.batch_pipeline import PipelineHooks, run_batch
from core.validators import validate

app = typer.Typer(
    no_args_is_help=True,
    help="Validação de CPF, CNPJ, RG, IE (SP), CEP, email e senha.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()

_JSON_OPTION = typer.Option(False, "--json", help="Imprime o resultado em JSON.")


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if isinstance(settings, AppSettings):
        return settings
    return AppSettings()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuração (HTTP, batch)."),
    english: bool = typer.Option(False, "--english", help="Mensagens de falha em inglês."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    settings = AppSettings()
    if english:
        settings = settings.model_copy(update={"language": Language.from_bool(english)})
    ctx.obj = settings


def _emit(outcome: ValidationOutcome, as_json: bool) -> None:
    if as_json:
        typer.echo(outcome.redacted().model_dump_json(indent=2))
    else:
        _console.print(build_outcome_panel(outcome.redacted()))
    if not outcome.ok:
        raise typer.Exit(code=1)


def _check(ctx: typer.Context, kind: IdentifierKind, value: str, as_json: bool) -> None:
    settings = _settings(ctx)
    resolver = ViaCepResolver(settings) if kind is IdentifierKind.CEP else None
    _emit(validate(kind, value, resolver=resolver, language=settings.language), as_json)


@app.command()
def cpf(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida um CPF (11 dígitos)."""

    _check(ctx, IdentifierKind.CPF, value, as_json)


@app.command()
def cnpj(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida um CNPJ (14 dígitos)."""

    _check(ctx, IdentifierKind.CNPJ, value, as_json)


@app.command()
def rg(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida um RG de São Paulo (9 caracteres, verificador 0-9 ou X)."""

    _check(ctx, IdentifierKind.RG, value, as_json)


@app.command()
def ie(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida uma Inscrição Estadual de São Paulo (comum ou produtor rural)."""

    _check(ctx, IdentifierKind.IE, value, as_json)


@app.command()
def cep(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida um CEP e confirma a existência no ViaCEP."""

    _check(ctx, IdentifierKind.CEP, value, as_json)


@app.command()
def email(ctx: typer.Context, value: str, as_json: bool = _JSON_OPTION) -> None:
    """Valida o formato de um email."""

    _check(ctx, IdentifierKind.EMAIL, value, as_json)


@app.command()
def password(
    ctx: typer.Context,
    value: str = typer.Option(..., "--value", prompt="Senha", hide_input=True),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Verifica a força de uma senha (especial, maiúscula, minúscula e dígito)."""

    _check(ctx, IdentifierKind.PASSWORD, value, as_json)


@app.command()
def batch(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    export_json: Path | None = typer.Option(None, "--export-json", help="Grava o resultado em JSON."),
    as_json: bool = _JSON_OPTION,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Sem banner nem barra de progresso."),
) -> None:
    """Valida um arquivo `tipo,valor` (uma entrada por linha)."""

    settings = _settings(ctx)
    try:
        items = load_batch_file(path)
    except BatchFileError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    resolver = ViaCepResolver(settings)
    show_ui = not (quiet or as_json)

    if show_ui:
        print_banner(_console)
        with Progress(console=_console, transient=True) as progress:
            task = progress.add_task("Validando", total=len(items))
            hooks = PipelineHooks(progress=lambda done, total, _o: progress.update(task, completed=done))
            result = asyncio.run(run_batch(settings=settings, items=items, resolver=resolver, hooks=hooks))
    else:
        result = asyncio.run(run_batch(settings=settings, items=items, resolver=resolver))

    if as_json:
        typer.echo(json.dumps(batch_payload(result), ensure_ascii=False, indent=2, sort_keys=True))
    else:
        _console.print(build_batch_table(result))

    if export_json is not None:
        out = export_batch_json(result=result, output_path=export_json)
        if not as_json:
            _console.print(f"[green]JSON exportado:[/green] {out}")

    if result.invalid_count:
        raise typer.Exit(code=1)


def run() -> None:
    app()
