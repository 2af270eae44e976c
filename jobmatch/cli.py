"""
jobmatch Command Line Interface

Runs the matching engine against JSON exports of candidate profiles and
job postings, and exposes the text utilities (skill extraction, resume
analysis, skill suggestions).
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="jobmatch",
    help="Keyword-based job and candidate matching",
    add_completion=False,
)
console = Console()


def _load_json(path: Path) -> Any:
    """Read a JSON file, exiting with an error message on failure."""
    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)


def _load_jobs(path: Path) -> list[Any]:
    data = _load_json(path)
    # Accept either a bare list or an API style {"data": [...]} envelope
    if isinstance(data, dict):
        data = data.get("data", data.get("jobs"))
    if not isinstance(data, list):
        console.print(f"[red]Error: {path} must contain a list of jobs[/red]")
        raise typer.Exit(1)
    return data


def _load_candidate(path: Path) -> dict[str, Any]:
    data = _load_json(path)
    if not isinstance(data, dict):
        console.print(f"[red]Error: {path} must contain a candidate profile object[/red]")
        raise typer.Exit(1)
    return data


def _read_text(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    """Configure logging before running a command."""
    from jobmatch.utils.config import get_settings
    from jobmatch.utils.logger import setup_logging

    if verbose:
        get_settings().logging.level = "DEBUG"
    setup_logging()


@app.command()
def version():
    """Show application version."""
    from jobmatch import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from jobmatch.utils.config import get_settings

    settings = get_settings()
    matching = settings.matching

    table = Table(title="jobmatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Skill Weight", str(matching.skill_weight))
    table.add_row("Experience Bonus", str(matching.experience_bonus))
    table.add_row("Location Bonus", str(matching.location_bonus))
    table.add_row("AI Jobs Limit", str(matching.ai_jobs_limit))
    table.add_row("Suggestions Limit", str(matching.suggestions_limit))
    table.add_row("Vocabulary Size", str(len(matching.skill_vocabulary)))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def rank(
    candidate_file: Path = typer.Argument(..., help="JSON file with the candidate profile"),
    jobs_file: Path = typer.Argument(..., help="JSON file with a list of job postings"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Maximum results"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Rank job postings for a candidate."""
    from jobmatch.core.matching import InvalidInputShape, get_matching_engine

    candidate = _load_candidate(candidate_file)
    jobs = _load_jobs(jobs_file)

    try:
        results = get_matching_engine().rank_jobs_for_candidate(jobs, candidate, limit=limit)
    except InvalidInputShape as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        _print_json({
            "data": [r.to_dict() for r in results],
            "totalMatches": len(results),
        })
        return

    if not results:
        console.print("[yellow]No matching jobs found.[/yellow]")
        return

    table = Table(title=f"Top {len(results)} matching jobs")
    table.add_column("#", style="dim")
    table.add_column("Job", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Relevance", justify="right")
    table.add_column("Matching Skills")

    for i, r in enumerate(results, 1):
        table.add_row(
            str(i),
            r.job.title or str(r.job.id),
            str(r.match_score),
            f"{r.relevance_percentage}%",
            ", ".join(r.matching_skills),
        )

    console.print(table)


@app.command()
def suggest(
    candidate_file: Path = typer.Argument(..., help="JSON file with the candidate profile"),
    jobs_file: Path = typer.Argument(..., help="JSON file with a list of job postings"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Maximum results"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Suggest jobs covering the candidate's skills."""
    from jobmatch.core.matching import InvalidInputShape, get_matching_engine
    from jobmatch.data.models import CandidateProfile

    candidate = CandidateProfile.model_validate(_load_candidate(candidate_file))
    jobs = _load_jobs(jobs_file)

    try:
        suggestions = get_matching_engine().suggest_jobs(jobs, candidate.skills, limit=limit)
    except InvalidInputShape as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        _print_json({
            "suggestions": [s.to_dict() for s in suggestions],
            "totalSuggestions": len(suggestions),
        })
        return

    if not suggestions:
        console.print("[yellow]No job suggestions found.[/yellow]")
        return

    table = Table(title="Job suggestions")
    table.add_column("Job", style="cyan")
    table.add_column("Match", justify="right", style="green")
    table.add_column("Skills")
    for s in suggestions:
        table.add_row(s.job.title or str(s.job.id), f"{s.match_score}%", ", ".join(s.matched_skills))
    console.print(table)


@app.command()
def score(
    job_file: Path = typer.Argument(..., help="Text file with the job description"),
    skills: list[str] = typer.Option([], "--skill", "-s", help="Candidate skill (repeatable)"),
    bio: Optional[str] = typer.Option(None, "--bio", help="Candidate bio"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
):
    """Score one job description against explicit skills."""
    from jobmatch.core.matching import get_matching_engine

    description = _read_text(job_file)
    if not description.strip():
        console.print("[red]Error: Job description is required[/red]")
        raise typer.Exit(1)

    result = get_matching_engine().score_job_description_against_skills(description, skills, bio)

    if as_json:
        _print_json(result.to_dict())
        return

    console.print(f"Match score: [bold green]{result.score}%[/bold green]")
    console.print(f"  Skill matches: [cyan]{result.skill_matches}[/cyan] of {len(skills)}")
    console.print(f"  Bio matches: [cyan]{result.bio_matches}[/cyan]")


@app.command("extract-skills")
def extract_skills_command(
    text_file: Path = typer.Argument(..., help="Text file to extract skills from"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
):
    """Extract known skills from free text."""
    from jobmatch.nlp import extract_skills

    text = _read_text(text_file)
    if not text.strip():
        console.print("[red]Error: Text is required[/red]")
        raise typer.Exit(1)

    skills = extract_skills(text)

    if as_json:
        _print_json({"skills": skills, "count": len(skills)})
        return

    if not skills:
        console.print("[yellow]No skills found.[/yellow]")
        return
    console.print(f"Found [cyan]{len(skills)}[/cyan] skill(s): {', '.join(skills)}")


@app.command("analyze-resume")
def analyze_resume_command(
    resume_file: Path = typer.Argument(..., help="Plain-text resume"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
):
    """Analyze a plain-text resume."""
    from jobmatch.nlp import analyze_resume

    try:
        analysis = analyze_resume(_read_text(resume_file))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        _print_json(analysis.to_dict())
        return

    table = Table(title="Resume Analysis")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Skills", ", ".join(analysis.skills) or "-")
    table.add_row("Experience", f"{analysis.experience_years} years")
    table.add_row("Education", "yes" if analysis.has_education else "no")
    table.add_row("Confidence", f"{analysis.confidence:.0%}")
    console.print(table)


@app.command("suggest-skills")
def suggest_skills_command(
    skills: list[str] = typer.Option([], "--skill", "-s", help="Current skill (repeatable)"),
    title: str = typer.Option("", "--title", "-t", help="Target job title"),
):
    """Suggest skills to add for a target role."""
    from jobmatch.core.profile import suggest_skills

    suggestions = suggest_skills(skills, title)
    console.print(f"Suggested skills: [green]{', '.join(suggestions) or '-'}[/green]")


@app.command("analyze-profile")
def analyze_profile_command(
    candidate_file: Path = typer.Argument(..., help="JSON file with the candidate profile"),
    statuses: list[str] = typer.Option([], "--status", help="Application status (repeatable)"),
):
    """Analyze profile completeness and application outcomes."""
    from jobmatch.core.profile import analyze_profile

    analysis = analyze_profile(_load_candidate(candidate_file), statuses)
    _print_json(analysis.to_dict())


if __name__ == "__main__":
    app()
