"""Typer CLI application for progressive question selection."""

import logging
import random
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from progressive_quiz.config.settings import get_settings
from progressive_quiz.export.docx_generator import export_to_docx, export_with_separate_answers
from progressive_quiz.graph.workflow import generate_progressive_quiz
from progressive_quiz.models.quiz import DifficultyLevel, Question, SequenceRequest
from progressive_quiz.repository.certification_catalog import CertificationCatalog
from progressive_quiz.repository.question_bank import QuestionBank, QuestionBankError
from progressive_quiz.selection.practice import generate_practice_session
from progressive_quiz.selection.sequence import generate_progressive_sequence, simulated_answers

app = typer.Typer(
    name="progressive-quiz",
    help="Adaptive interview question sequences with progressive difficulty",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


def make_rng(seed: Optional[int]) -> random.Random:
    """Random source seeded from the option or the settings."""
    if seed is None:
        seed = get_settings().random_seed
    return random.Random(seed)


def load_bank(questions_dir: Optional[str]) -> QuestionBank:
    """Load the question bank or exit with an error."""
    directory = questions_dir or get_settings().questions_dir
    try:
        return QuestionBank.from_directory(directory)
    except QuestionBankError as e:
        fail(str(e))


@app.command()
def sequence(
    channels: Optional[List[str]] = typer.Option(
        None,
        "--channel",
        "-c",
        help="Channels to draw from (repeatable; all channels when omitted)",
    ),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        help="Number of questions to select",
        min=0,
        max=500,
    ),
    sub_channel: Optional[str] = typer.Option(
        None,
        "--sub-channel",
        help="Only use questions of this sub-channel",
    ),
    difficulty: Optional[DifficultyLevel] = typer.Option(
        None,
        "--difficulty",
        "-d",
        help="Only use questions of this tier",
        case_sensitive=False,
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    questions_dir: Optional[str] = typer.Option(
        None,
        "--questions-dir",
        help="Directory of channel JSON files",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (without extension)",
    ),
    export: bool = typer.Option(
        False,
        "--export/--no-export",
        help="Export the sequence as a DOCX practice sheet",
    ),
    separate_answers: bool = typer.Option(
        True,
        "--separate-answers/--include-answers",
        help="Generate separate answer key file vs include answers in the sheet",
    ),
) -> None:
    """
    Select a progressive sequence of questions from the question bank.

    Example:
        progressive-quiz sequence -c system-design -c devops -n 10 --seed 7
    """
    settings = get_settings()

    try:
        request = SequenceRequest(
            channels=channels or [],
            count=count if count is not None else settings.default_question_count,
            sub_channel=sub_channel,
            difficulty=difficulty,
            seed=seed,
        )
    except ValidationError as e:
        fail(str(e))

    bank = load_bank(questions_dir)

    unknown = [c for c in request.channels if c not in bank.get_available_channel_ids()]
    if unknown:
        fail(f"Unknown channel(s): {', '.join(unknown)}")

    channel_ids = request.channels or bank.get_available_channel_ids()
    pool: list[Question] = []
    for channel_id in channel_ids:
        pool.extend(bank.get_questions(channel_id, request.sub_channel, request.difficulty))

    rng = make_rng(request.seed)
    questions = generate_progressive_sequence(
        pool,
        request.count,
        rng=rng,
        answer_fn=simulated_answers(rng, settings.simulated_success_rate),
        top_n=settings.top_candidates,
        weights=settings.similarity_weights(),
    )

    if not questions:
        console.print("[yellow]No questions matched the request.[/yellow]")
        return

    display_sequence(questions, title="Progressive Sequence")
    console.print(f"\n[green]Selected {len(questions)} question(s)[/green]")

    if export:
        export_questions(
            questions,
            output or settings.default_output_path,
            "Interview Practice",
            separate_answers,
        )


@app.command()
def quiz(
    channels: Optional[List[str]] = typer.Option(
        None,
        "--channel",
        "-c",
        help="Channels to turn into tests (repeatable; all channels when omitted)",
    ),
    count: int = typer.Option(10, "--count", "-n", help="Maximum questions", min=0, max=500),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    questions_dir: Optional[str] = typer.Option(
        None,
        "--questions-dir",
        help="Directory of channel JSON files",
    ),
) -> None:
    """
    Run a simulated progressive quiz across channel tests.
    """
    settings = get_settings()
    bank = load_bank(questions_dir)

    tests = bank.as_tests(channels or None)
    if not tests:
        fail("No tests available for the selected channels")

    rng = make_rng(seed)
    questions = generate_progressive_quiz(
        tests,
        count,
        rng=rng,
        answer_fn=simulated_answers(rng, settings.simulated_success_rate),
    )

    display_sequence(questions, title="Progressive Quiz")
    console.print(f"\n[green]Quiz finished with {len(questions)} question(s)[/green]")


@app.command()
def practice(
    certification_id: str = typer.Argument(..., help="Certification id, e.g. terraform"),
    count: int = typer.Option(10, "--count", "-n", help="Session length", min=1, max=500),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    certifications_file: Optional[str] = typer.Option(
        None,
        "--certifications-file",
        help="JSON file with certification exams and questions",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (without extension)",
    ),
    export: bool = typer.Option(
        False,
        "--export/--no-export",
        help="Export the session as a DOCX practice sheet",
    ),
) -> None:
    """
    Generate a certification practice session weighted by exam domain.
    """
    settings = get_settings()
    path = certifications_file or settings.certifications_file

    try:
        catalog = CertificationCatalog.from_file(path)
    except QuestionBankError as e:
        fail(str(e))

    if certification_id not in catalog.get_certification_ids():
        fail(f"Unknown certification: {certification_id}")

    questions = generate_practice_session(catalog, certification_id, count, make_rng(seed))

    if not questions:
        console.print("[yellow]No questions available for this certification.[/yellow]")
        return

    table = Table(title=f"Practice Session: {certification_id}", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Domain", style="white")
    table.add_column("Difficulty", style="white")
    table.add_column("Question", style="white")

    for i, question in enumerate(questions, 1):
        table.add_row(str(i), question.domain, question.difficulty.value, question.question)

    console.print()
    console.print(table)
    console.print(f"\n[green]Selected {len(questions)} question(s)[/green]")

    if export:
        export_questions(
            questions,
            output or settings.default_output_path,
            f"{certification_id} Practice",
            separate_answers=True,
        )


@app.command()
def stats(
    questions_dir: Optional[str] = typer.Option(
        None,
        "--questions-dir",
        help="Directory of channel JSON files",
    ),
) -> None:
    """Display question counts per channel and difficulty."""
    bank = load_bank(questions_dir)

    table = Table(title="Question Bank", border_style="cyan")
    table.add_column("Channel", style="cyan")
    table.add_column("Total", style="white")
    table.add_column("Beginner", style="green")
    table.add_column("Intermediate", style="yellow")
    table.add_column("Advanced", style="red")

    for channel in bank.get_channel_stats():
        table.add_row(
            channel.id,
            str(channel.total),
            str(channel.beginner),
            str(channel.intermediate),
            str(channel.advanced),
        )

    console.print()
    console.print(table)
    console.print(f"\nTotal questions: {len(bank)}")


@app.command()
def info() -> None:
    """Display information about the question selector."""
    info_text = """
[bold cyan]Progressive Quiz[/bold cyan]
Version: 0.1.0

[bold]Selection:[/bold]
  • Cold start - first two questions are beginner
  • Difficulty controller - moves one tier on recent accuracy
  • Relevance ranking - keyword overlap, tier and length similarity
  • Random pick among the top candidates
  • No question is ever repeated within a session

[bold]Features:[/bold]
  • Channel question bank with statistics
  • Certification practice weighted by exam domain
  • DOCX practice sheets with answer keys
    """
    console.print(Panel(info_text, title="Progressive Quiz Info", border_style="cyan"))


def display_sequence(questions: list[Question], title: str) -> None:
    """Display selected questions in order."""
    table = Table(title=title, border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Id", style="white")
    table.add_column("Difficulty", style="white")
    table.add_column("Question", style="white")

    for i, question in enumerate(questions, 1):
        difficulty = question.difficulty.value if question.difficulty else "-"
        table.add_row(str(i), question.id, difficulty, question.question)

    console.print()
    console.print(table)


def export_questions(
    questions: list[Question], output: str, title: str, separate_answers: bool
) -> None:
    """Export questions to DOCX and report the created files."""
    console.print("\n[cyan]Exporting to DOCX...[/cyan]")

    try:
        if separate_answers:
            questions_file, answers_file = export_with_separate_answers(questions, output, title)
            console.print("\n[green]✓[/green] Practice sheet exported successfully!")
            console.print(f"  Questions: {questions_file}")
            console.print(f"  Answers:   {answers_file}")
        else:
            output_file = export_to_docx(
                questions, f"{Path(output).stem}.docx", title, include_answers=True
            )
            console.print(f"\n[green]✓[/green] Practice sheet exported to: {output_file}")
    except OSError as e:
        fail(f"Export failed: {e}")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Progressive Quiz - Adaptive interview question selection.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        fail(f"Invalid configuration: {e}")

    setup_logging("DEBUG" if verbose else settings.log_level)


if __name__ == "__main__":
    app()
