"""
Practice Scheduler CLI.

Inspect scheduling decisions from the terminal:
- practice-scheduler plan         - Build an interleaved session
- practice-scheduler mix          - Show mastery-weighted mix ratio
- practice-scheduler break-check  - Evaluate a session snapshot for a break
- practice-scheduler recovery     - Score a break from response times
- practice-scheduler retrieval    - Retrieval-vs-restudy decision and prompts
"""
from __future__ import annotations

import json
import random
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from practice_scheduler.attention import (
    detect_attention_fatigue,
    get_break_recommendation,
    get_break_type_name,
    get_random_exercise,
    measure_post_break_recovery,
)
from practice_scheduler.config import get_settings
from practice_scheduler.models import BreakUrgency, SessionState, Skill
from practice_scheduler.practice import (
    calculate_optimal_mix_ratio,
    generate_interleaved_session,
    generate_retrieval_prompts,
    should_use_retrieval,
)

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="practice-scheduler",
    help="Adaptive practice scheduling: interleaving, microbreaks, retrieval",
    no_args_is_help=True,
)
console = Console()

URGENCY_STYLES = {
    BreakUrgency.NONE: "green",
    BreakUrgency.SUGGESTED: "cyan",
    BreakUrgency.RECOMMENDED: "yellow",
    BreakUrgency.STRONGLY_RECOMMENDED: "bold red",
}


# =============================================================================
# Input Schemas
# =============================================================================

class SkillRecord(BaseModel):
    id: str
    name: str
    bloom_level: int = Field(default=1, ge=1, le=6)
    difficulty: float = Field(default=0.5, ge=0, le=1)
    p_mastery: Optional[float] = Field(default=None, ge=0, le=1)
    last_practiced: Optional[datetime] = None
    interleave_count: Optional[int] = Field(default=None, ge=0)

    def to_skill(self) -> Skill:
        return Skill(**self.model_dump())


class SessionSnapshot(BaseModel):
    session_start_time: datetime
    last_break_time: Optional[datetime] = None
    total_breaks_taken: int = Field(default=0, ge=0)
    total_breaks_skipped: int = Field(default=0, ge=0)
    recent_response_times: List[float] = Field(default_factory=list)
    recent_correctness: List[bool] = Field(default_factory=list)
    current_cognitive_load: float = Field(default=0.5, ge=0, le=1)

    def to_state(self) -> SessionState:
        if len(self.recent_response_times) != len(self.recent_correctness):
            raise ValueError("recent_response_times and recent_correctness differ in length")
        return SessionState(
            session_start_time=_naive_utc(self.session_start_time),
            last_break_time=_naive_utc(self.last_break_time),
            total_breaks_taken=self.total_breaks_taken,
            total_breaks_skipped=self.total_breaks_skipped,
            recent_response_times=tuple(self.recent_response_times),
            recent_correctness=tuple(self.recent_correctness),
            current_cognitive_load=self.current_cognitive_load,
        )


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware timestamps become naive UTC so they compare with naive ones."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


def _load_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _fail(f"File not found: {path}")
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {path}: {e}")


def _load_skills(path: Path) -> list[Skill]:
    data = _load_json(path)
    if not isinstance(data, list):
        _fail("Skills file must contain a JSON list")
    try:
        return [SkillRecord.model_validate(item).to_skill() for item in data]
    except ValidationError as e:
        _fail(f"Invalid skill record: {e}")


def _make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed if seed is not None else get_settings().random_seed)


# =============================================================================
# Commands
# =============================================================================

@app.command()
def plan(
    skills_file: Path = typer.Argument(..., help="JSON list of skills"),
    per_skill: Optional[int] = typer.Option(None, "--per-skill", "-n", help="Questions per skill"),
    total: Optional[int] = typer.Option(None, "--total", "-t", help="Total questions"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Build and display an interleaved practice session."""
    skills = _load_skills(skills_file)
    per_skill = per_skill or get_settings().questions_per_skill
    session = generate_interleaved_session(skills, per_skill, total, rng=_make_rng(seed))

    table = Table(title="Interleaved Session")
    table.add_column("#", justify="right")
    table.add_column("Question")
    table.add_column("Skill")
    table.add_column("Switch")

    for q in session.questions:
        switch = "[green]yes[/green]" if q.is_switch_point else "[dim]-[/dim]"
        table.add_row(str(q.position + 1), q.question_id, q.skill_name, switch)

    console.print(table)

    mix_text = ", ".join(f"{skill_id} {ratio:.0%}" for skill_id, ratio in session.skill_mix_ratio.items())
    console.print(f"Mix: {mix_text or '-'}")
    console.print(f"Switches: {session.switch_count}  |  Blocking prevented: {session.blocking_prevented}")
    console.print(f"Estimated retention boost: [bold cyan]{session.estimated_retention_boost:.1%}[/bold cyan]")


@app.command()
def mix(
    skills_file: Path = typer.Argument(..., help="JSON list of skills"),
) -> None:
    """Show mastery-weighted practice share per skill."""
    skills = _load_skills(skills_file)
    ratios = calculate_optimal_mix_ratio(skills)

    table = Table(title="Optimal Mix Ratio")
    table.add_column("Skill")
    table.add_column("Mastery", justify="right")
    table.add_column("Share", justify="right")

    for skill in skills:
        mastery = f"{skill.p_mastery:.0%}" if skill.p_mastery is not None else "[dim]unknown[/dim]"
        table.add_row(skill.name, mastery, f"{ratios[skill.id]:.1%}")

    console.print(table)


@app.command("break-check")
def break_check(
    state_file: Path = typer.Argument(..., help="JSON session snapshot"),
    at: Optional[datetime] = typer.Option(None, "--at", help="Evaluation time (ISO 8601)"),
) -> None:
    """Evaluate whether the learner should take a microbreak."""
    try:
        snapshot = SessionSnapshot.model_validate(_load_json(state_file))
        state = snapshot.to_state()
    except (ValidationError, ValueError) as e:
        _fail(f"Invalid session snapshot: {e}")

    settings = get_settings()
    if at is not None:
        now = _naive_utc(at)
    elif snapshot.session_start_time.tzinfo is not None:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
    else:
        now = datetime.now()
    recommendation = get_break_recommendation(state, settings.get_microbreak_config(), now=now)
    assessment = detect_attention_fatigue(state, now=now)

    style = URGENCY_STYLES[recommendation.urgency]
    lines = [
        f"Urgency: [{style}]{recommendation.urgency.value}[/{style}]",
        f"Reason: {recommendation.reason}",
        f"Fatigue: {assessment.fatigue_level:.2f}",
    ]
    for indicator in assessment.indicators:
        lines.append(f"  - {indicator}")

    if recommendation.should_break:
        content = get_random_exercise(
            recommendation.suggested_break_type,
            seated_only=settings.seated_only,
            rng=_make_rng(None),
        )
        lines.append(
            f"Suggested: {get_break_type_name(recommendation.suggested_break_type)} - "
            f"{content.exercise.name} ({recommendation.suggested_duration_ms / 1000:.0f}s)"
        )

    lines.append(f"[dim]Next check in {recommendation.time_until_next_check / 1000:.0f}s[/dim]")
    console.print(Panel("\n".join(lines), title="Microbreak Check", border_style=style))


@app.command()
def recovery(
    pre: List[float] = typer.Option(..., "--pre", help="Response time (ms) before the break"),
    post: List[float] = typer.Option(..., "--post", help="Response time (ms) after the break"),
) -> None:
    """Score how well a break restored response speed."""
    result = measure_post_break_recovery(pre, post)
    console.print(f"Recovery score: [bold]{result.recovery_score:.1f}[/bold]")
    console.print(f"Improvement: {result.improvement:+.1%}")
    console.print(result.recommendation)


@app.command()
def retrieval(
    mastery: float = typer.Argument(..., min=0.0, max=1.0, help="Current mastery (0-1)"),
    attempts: int = typer.Argument(..., min=0, help="Attempts so far"),
    last_test: Optional[datetime] = typer.Option(None, "--last-test", help="Last retrieval test (ISO 8601)"),
    skill: str = typer.Option("this skill", "--skill", help="Skill name for prompts"),
    concept: List[str] = typer.Option([], "--concept", "-c", help="Key concept (repeatable)"),
) -> None:
    """Decide between retrieval practice and restudy."""
    decision = should_use_retrieval(mastery, last_test, attempts)

    verdict = "[green]retrieval[/green]" if decision.use_retrieval else "[yellow]restudy[/yellow]"
    console.print(f"Use: {verdict}")
    console.print(f"[dim]{decision.reason}[/dim]")

    if decision.use_retrieval:
        console.print()
        for i, prompt in enumerate(generate_retrieval_prompts(skill, concept, attempts), start=1):
            console.print(f"  {i}. {prompt}")


# =============================================================================
# Entry Point
# =============================================================================

@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for every command."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{message}</level>",
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
