"""
Replay script generator for record-core.

Emits deterministic pseudo-random create/read operations (JSON lines) for the
`record-core replay` command, mixing valid orders with a configurable share of
deliberately invalid ones.
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate a JSON-lines replay script of order operations.")

_STREETS = ["Sakura-dori", "Main St", "Harbor Rd", "Elm Ave"]
_SELECTORS = [None, "total_amount", "products,quantity", "id,created_at", "quantity,unknown"]


def _valid_order(rng: random.Random) -> Dict[str, Any]:
    return {
        "products": [rng.randint(1, 500) for _ in range(rng.randint(1, 4))],
        "quantity": rng.randint(1, 10),
        "shipping_address": f"{rng.randint(1, 999)} {rng.choice(_STREETS)}",
    }


def _invalid_order(rng: random.Random) -> Dict[str, Any]:
    payload = _valid_order(rng)
    defect = rng.choice(["empty_products", "zero_quantity", "missing_address", "string_quantity"])
    if defect == "empty_products":
        payload["products"] = []
    elif defect == "zero_quantity":
        payload["quantity"] = 0
    elif defect == "missing_address":
        del payload["shipping_address"]
    else:
        payload["quantity"] = str(payload["quantity"])
    return payload


def _generate_operations(count: int, invalid_ratio: float, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    operations: List[Dict[str, Any]] = []
    created = 0
    for _ in range(count):
        if rng.random() < invalid_ratio:
            operations.append({"op": "create", "resource": "orders", "payload": _invalid_order(rng)})
            continue
        operations.append({"op": "create", "resource": "orders", "payload": _valid_order(rng)})
        created += 1
        operation: Dict[str, Any] = {"op": "read", "resource": "orders", "id": created}
        selector = rng.choice(_SELECTORS)
        if selector is not None:
            operation["fields"] = selector
        operations.append(operation)
    return operations


def _write_script(path: Path, operations: List[Dict[str, Any]]) -> None:
    with path.open("w", encoding="utf-8") as f:
        for operation in operations:
            f.write(json.dumps(operation) + "\n")


@app.command()
def main(
    count: int = typer.Option(
        20,
        "--count",
        "-n",
        help="Number of create operations to generate.",
    ),
    invalid_ratio: float = typer.Option(
        0.2,
        "--invalid-ratio",
        min=0.0,
        max=1.0,
        help="Share of create operations with a deliberate validation defect.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("replay.jsonl"),
        "--output",
        "-o",
        help="Destination JSON-lines file.",
    ),
) -> None:
    """
    Generate a replay script and write it to OUTPUT.
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    operations = _generate_operations(count, invalid_ratio, seed)
    _write_script(output, operations)
    typer.echo(f"Wrote {len(operations)} operations -> {output} (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
