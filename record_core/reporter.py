from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from record_core.domain.field_spec import FieldSpec


def _field_table(spec: FieldSpec) -> Table:
    table = Table(
        title=f"[bold]{spec.resource}[/bold]",
        box=box.ROUNDED,
        caption=spec.description or None,
    )
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("Required", justify="center", style="blue")
    table.add_column("Checks", style="green")

    for rule in spec.rules:
        checks = "; ".join(check.message for check in rule.checks) or "-"
        table.add_row(rule.name, rule.kind.value, "yes" if rule.required else "no", checks)
    for derived in spec.derived:
        table.add_row(derived.name, "derived", "-", "[dim]computed at creation[/dim]")
    return table


def print_field_specs(specs: Iterable[FieldSpec], console: Optional[Console] = None) -> None:
    """
    Render each resource's field table, in Record field order.
    """
    console = console or Console()
    for spec in specs:
        console.print(_field_table(spec))


def print_outcomes(outcomes: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render replay outcomes as a rich table, one row per operation.
    """
    console = console or Console()

    if not outcomes:
        console.print("[yellow]No operations to display.[/yellow]")
        return

    failed = sum(1 for o in outcomes if not o.get("ok"))
    table = Table(
        title="Replay Results",
        box=box.ROUNDED,
        caption=f"{len(outcomes) - failed} succeeded, {failed} failed",
    )
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Op", style="cyan", no_wrap=True)
    table.add_column("Resource", style="magenta")
    table.add_column("Id", justify="right", style="blue")
    table.add_column("Outcome")

    for outcome in outcomes:
        record_id = outcome.get("record_id")
        if outcome.get("ok"):
            fields = ", ".join(outcome.get("record", {}))
            result = f"[green]ok[/green] [dim]{fields}[/dim]"
        else:
            error = outcome.get("error", {})
            record_id = record_id or error.get("record_id")
            result = f"[red]{error.get('code', 'ERROR')}[/red] {error.get('message', '')}"
        table.add_row(
            str(outcome.get("line", "")),
            outcome.get("op", "?"),
            outcome.get("resource", "?"),
            "" if record_id is None else str(record_id),
            result,
        )

    console.print(table)


__all__ = ["print_field_specs", "print_outcomes"]
