from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer

from .api import SubmissionClient
from ..config.settings import AppConfig
from ..core.domain.errors import ConfigurationError, RemoteRejectionError


app = typer.Typer(help="CRPT document submission client")


def _load_document(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path}: expected a JSON object")
    return data


@app.command(help="Submit one or more JSON document files, respecting the request rate limit.")
def submit(
    files: list[Path] = typer.Argument(..., help="Document JSON files", metavar="FILE", exists=True, dir_okay=False),
    signature: str = typer.Option(..., "--signature", "-s", help="Signature header value"),
    request_limit: int | None = typer.Option(None, help="Max requests per window (default: from config)"),
    period_unit: str | None = typer.Option(None, help="Window unit, e.g. seconds, minutes"),
    period_count: int | None = typer.Option(None, help="Units per window"),
    workers: int = typer.Option(4, min=1, help="Concurrent submitting threads"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        documents = [_load_document(p) for p in files]
    except (OSError, ValueError) as e:
        typer.echo(f"Cannot read document: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        client = SubmissionClient(request_limit=request_limit, period_unit=period_unit, period_count=period_count)
    except ConfigurationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    with client:
        results = client.submit_many(documents, signature, max_workers=workers)

    failed = 0
    for path, item in zip(files, results):
        if item.ok and item.result is not None:
            typer.echo(f"{path}: OK {item.result.status_code} {item.result.document_id or ''}".rstrip())
            continue
        failed += 1
        if isinstance(item.error, RemoteRejectionError):
            typer.echo(f"{path}: FAILED HTTP {item.error.status_code}")
        else:
            typer.echo(f"{path}: FAILED {item.error}")
    if failed:
        raise typer.Exit(code=1)


@app.command("show-config", help="Print the effective configuration.")
def show_config() -> None:
    config = AppConfig()
    print(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
