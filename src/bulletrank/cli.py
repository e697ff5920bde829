"""bulletrank CLI: typer entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
import typer

# Load .env from cwd (project root) before anything reads env vars
load_dotenv(Path.cwd() / ".env")
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler
from rich.table import Table

from bulletrank import tools
from bulletrank.config import Settings
from bulletrank.errors import BulletRankError
from bulletrank.records import get_field, score_of
from bulletrank.strategies import list_strategies

app = typer.Typer(
    name="bulletrank",
    help="Rank resume bullets by relevance score and keep the best ones per company.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Enable debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    err_console.print(f"[bold red]Error:[/] {escape(message)}")
    raise typer.Exit(1)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except (OSError, ValueError) as exc:
        _fail(f"Could not read {path}: {exc}")


def _load_payload(path: Path) -> Any:
    """Read a resume payload; a bare list of bullets is wrapped into one."""
    raw = _load_json(path)
    if isinstance(raw, list):
        return {"data": {"bullets": raw}}
    return raw


def _print_json(obj: Any) -> None:
    console.print_json(data=obj, default=str)


# ── select ────────────────────────────────────────────────

@app.command()
def select(
    file: Annotated[Path, typer.Argument(help="JSON resume payload or list of bullets")],
    top_k: Annotated[int, typer.Option("-k", "--top-k", help="Bullets to keep per company")] = 5,
    min_score: Annotated[float, typer.Option("--min-score", help="Minimum relevance score")] = 0.0,
    strategy: Annotated[Optional[str], typer.Option("-s", "--strategy", help="Selection strategy")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
) -> None:
    """Keep the top K bullets of each company."""
    payload = _load_payload(file)
    try:
        strategy = strategy or Settings.from_env().default_strategy
        groups = tools.filter_bullets_by_company(payload, top_k=top_k, min_score=min_score, strategy=strategy)
    except (BulletRankError, KeyError) as exc:
        _fail(str(exc))

    if as_json:
        _print_json(groups)
        return

    if not groups:
        console.print("[yellow]No bullets found.[/]")
        return

    for company, bullets in groups.items():
        table = Table(title=escape(f"{company} — {len(bullets)} bullet(s) ({strategy})"))
        table.add_column("ID", style="cyan")
        table.add_column("Score", justify="right", style="bold")
        table.add_column("Text")
        for b in bullets:
            text = str(get_field(b, "text") or get_field(b, "bullet") or "")
            table.add_row(
                escape(str(get_field(b, "id") or "")), f"{score_of(b):g}",
                escape(text[:80] + ("..." if len(text) > 80 else "")),
            )
        console.print(table)


# ── payload tools ─────────────────────────────────────────

@app.command(name="assign-ids")
def assign_ids(
    file: Annotated[Path, typer.Argument(help="JSON resume payload")],
) -> None:
    """Assign A1, A2, B1, ... IDs to every bullet."""
    try:
        _print_json(tools.assign_bullet_ids(_load_payload(file)))
    except BulletRankError as exc:
        _fail(str(exc))


@app.command()
def delete(
    file: Annotated[Path, typer.Argument(help="JSON resume payload")],
    bullet_ids: Annotated[list[str], typer.Argument(help="Bullet IDs to delete")],
) -> None:
    """Remove bullets by ID."""
    try:
        _print_json(tools.delete_bullets_by_id(_load_payload(file), bullet_ids))
    except BulletRankError as exc:
        _fail(str(exc))


@app.command(name="filter")
def filter_cmd(
    file: Annotated[Path, typer.Argument(help="JSON resume payload")],
    min_score: Annotated[float, typer.Option("--min-score", help="Minimum relevance score")] = 75.0,
    per_company: Annotated[int, typer.Option("--per-company", help="Max bullets per company")] = 5,
) -> None:
    """Flat-filter bullets by score with a per-company cap."""
    try:
        _print_json(tools.filter_bullets_by_score(_load_payload(file), min_score, per_company))
    except BulletRankError as exc:
        _fail(str(exc))


@app.command()
def fetch(
    job_number: Annotated[int, typer.Argument(help="Job application number")],
    url: Annotated[Optional[str], typer.Option(envvar="N8N_WEBHOOK_URL", help="Webhook URL")] = None,
) -> None:
    """Fetch scored bullets for a job from the webhook."""
    from bulletrank.providers.webhook import fetch_resume_data

    try:
        _print_json(fetch_resume_data(job_number, url=url))
    except BulletRankError as exc:
        _fail(str(exc))


# ── list-strategies ──────────────────────────────────────

@app.command(name="list-strategies")
def list_strategies_cmd() -> None:
    """List available selection strategies."""
    table = Table(title="Strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, cls in sorted(list_strategies().items()):
        table.add_row(name, cls.description)
    console.print(table)


# ── serve ────────────────────────────────────────────────

@app.command()
def serve() -> None:
    """Run the MCP tool server over stdio."""
    from bulletrank.server import main as run_server

    run_server()
