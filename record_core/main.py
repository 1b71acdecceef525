from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

from record_core.config import get_settings
from record_core.replay import run_script
from record_core.reporter import print_field_specs, print_outcomes
from record_core.service import build_service
from record_core.utils.logging import configure_logging

app = typer.Typer(help="record-core CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"order_unit_price={settings.order_unit_price} seed_users={settings.seed_users} "
        f"projection_strict={settings.projection_strict}"
    )


@app.command()
def resources() -> None:
    """
    List registered resource types and their field tables.
    """
    service = build_service(get_settings())
    print_field_specs(service.spec(name) for name in service.resources())


@app.command()
def replay(
    script: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON-lines file of create/read operations.",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Render a summary table instead of JSON.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject unknown projection fields instead of dropping them.",
    ),
) -> None:
    """
    Run a script of operations against a fresh in-memory service.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if strict:
        settings = settings.model_copy(update={"projection_strict": True})

    service = build_service(settings)
    with script.open("r", encoding="utf-8") as f:
        outcomes = run_script(service, f)

    if table:
        print_outcomes(outcomes)
    else:
        typer.echo(json.dumps(outcomes, indent=2, ensure_ascii=False))

    if any(not outcome["ok"] for outcome in outcomes):
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
