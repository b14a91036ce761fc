"""CLI interface for TalentMatch using Typer."""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..ai.service import AiService
from ..candidates.service import CandidateNotFoundError, CandidatesService
from ..core.config.loader import load_config
from ..core.config.settings import GatewaySettings
from ..core.models.assist import BulletRequest, SummaryRequest
from ..core.models.candidate import CandidateResult
from ..core.storage.candidate_store import CandidateStore
from ..integrations.ollama_client import GatewayError, OllamaClient
from ..observability.logger import get_logger, setup_logging

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="talentmatch",
    help="TalentMatch - AI resume assistance and candidate matching",
    add_completion=False,
)

StoreOption = Annotated[
    Path | None,
    typer.Option("--store", "-s", help="Candidate store directory (defaults to config storage.store_dir)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print raw JSON instead of a table")]


@app.callback()
def main(
    log_level: Annotated[str | None, typer.Option("--log-level", help="Override logging level")] = None,
):
    """Configure logging from config before any command runs."""
    log_config = load_config().get("logging", {}) or {}
    setup_logging(
        log_level=log_level or log_config.get("level", "INFO"),
        log_format=log_config.get("format", "json"),
        log_file=log_config.get("file"),
    )


def _get_store(store_dir: Path | None) -> CandidateStore:
    """Get file-based candidate store from option or config."""
    if store_dir is None:
        store_dir = load_config().get("storage", {}).get("store_dir", "data/store")
    return CandidateStore(store_dir)


def _get_ai_service() -> AiService:
    settings = GatewaySettings.from_config(load_config())
    return AiService(OllamaClient(settings))


def _get_candidates_service(store_dir: Path | None) -> CandidatesService:
    return CandidatesService(_get_store(store_dir), _get_ai_service())


def _print_json(data) -> None:
    console.print_json(json.dumps(data))


def _print_candidates(results: list[CandidateResult], scored: bool = False) -> None:
    if not results:
        console.print("[yellow]No candidates found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name")
    table.add_column("Title")
    table.add_column("Experience")
    table.add_column("Location")
    if scored:
        table.add_column("Score", justify="right")
        table.add_column("Insight")
    else:
        table.add_column("Skills")

    for result in results:
        row = [str(result.id), result.name, result.title, result.experience, result.location]
        if scored:
            row += [str(result.match_score), result.ai_insight]
        else:
            skills = ", ".join(result.skills)
            row.append(skills[:60] + "..." if len(skills) > 60 else skills)
        table.add_row(*row)

    console.print(table)


@app.command("import")
def import_candidates(
    source: Annotated[
        Path,
        typer.Argument(help="JSON file with a list of candidate profiles", exists=True, dir_okay=False),
    ],
    store_dir: StoreOption = None,
):
    """Import candidate profiles into the store."""
    store = _get_store(store_dir)
    try:
        count = store.import_file(source)
    except ValueError as e:
        logger.warning("candidate_import_failed", source=str(source), error=str(e))
        console.print(f"[red]! Error importing candidates:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Imported {count} candidate profiles into[/green] {store.base_dir}")


@app.command()
def summary(
    title: Annotated[str | None, typer.Option("--title", "-t", help="Current title")] = None,
    desired_role: Annotated[str | None, typer.Option("--desired-role", "-r", help="Role sought")] = None,
    experience_years: Annotated[str | None, typer.Option("--years", "-y", help="Years of experience")] = None,
    skills: Annotated[list[str] | None, typer.Option("--skill", "-k", help="Skill (repeatable)")] = None,
    current_summary: Annotated[str | None, typer.Option("--current", "-c", help="Existing summary")] = None,
):
    """Draft a professional summary."""
    request = SummaryRequest(
        title=title,
        desired_role=desired_role,
        experience_years=experience_years,
        skills=skills or [],
        current_summary=current_summary,
    )
    try:
        response = asyncio.run(_get_ai_service().generate_summary(request))
    except GatewayError as e:
        logger.warning("summary_generation_failed", error=str(e))
        console.print(f"[red]! Model unavailable:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(response.summary, markup=False)


@app.command()
def bullet(
    text: Annotated[str, typer.Argument(help="Resume bullet to improve")],
    role_context: Annotated[str | None, typer.Option("--role", "-r", help="Target role context")] = None,
):
    """Rewrite a resume bullet to be action-oriented and impact-focused."""
    request = BulletRequest(bullet=text, role_context=role_context)
    try:
        response = asyncio.run(_get_ai_service().improve_bullet(request))
    except GatewayError as e:
        logger.warning("bullet_rewrite_failed", error=str(e))
        console.print(f"[red]! Model unavailable:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(response.bullet, markup=False)


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Keywords matched against resume text")] = "",
    experience_level: Annotated[str | None, typer.Option("--experience", "-e", help="Experience filter")] = None,
    location: Annotated[str | None, typer.Option("--location", "-l", help="Location filter")] = None,
    store_dir: StoreOption = None,
    as_json: JsonOption = False,
):
    """Keyword search over public candidate profiles."""
    service = _get_candidates_service(store_dir)
    results = service.search(query, experience_level, location)

    if as_json:
        _print_json([r.to_wire() for r in results])
    else:
        _print_candidates(results)


@app.command("list")
def list_candidates(
    store_dir: StoreOption = None,
    as_json: JsonOption = False,
):
    """List public candidate profiles."""
    results = _get_candidates_service(store_dir).find_all()

    if as_json:
        _print_json([r.to_wire() for r in results])
    else:
        _print_candidates(results)


@app.command()
def compare(
    role_description: Annotated[str, typer.Option("--role", "-r", help="Role description")],
    candidate_ids: Annotated[list[int], typer.Argument(help="Candidate ids to compare")],
    store_dir: StoreOption = None,
    as_json: JsonOption = False,
):
    """Score a shortlist against a role description, best match first."""
    service = _get_candidates_service(store_dir)
    results = asyncio.run(service.compare_candidates(role_description, candidate_ids))

    if as_json:
        _print_json([r.to_wire() for r in results])
    else:
        _print_candidates(results, scored=True)


@app.command()
def insight(
    candidate_id: Annotated[int, typer.Argument(help="Candidate id")],
    role_description: Annotated[str | None, typer.Option("--role", "-r", help="Role description")] = None,
    store_dir: StoreOption = None,
    as_json: JsonOption = False,
):
    """One-sentence fit insight for a single candidate."""
    service = _get_candidates_service(store_dir)
    result = asyncio.run(service.get_insight_for_candidate(candidate_id, role_description))

    if as_json:
        _print_json(result.to_wire())
        return

    console.print(f"[bold]Match score:[/bold] {result.match_score}")
    if result.insight:
        console.print(result.insight, markup=False)
    else:
        console.print("[dim]No insight[/dim]")


@app.command()
def show(
    candidate_id: Annotated[int, typer.Argument(help="Candidate id")],
    store_dir: StoreOption = None,
):
    """Show a public candidate profile."""
    try:
        record = _get_candidates_service(store_dir).get_public_candidate(candidate_id)
    except CandidateNotFoundError as e:
        console.print(f"[red]! {e}[/red]")
        raise typer.Exit(code=1)

    _print_json(record.to_wire())


if __name__ == "__main__":
    app()
