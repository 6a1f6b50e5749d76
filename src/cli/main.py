"""
Typer CLI for the code-learner study tool.

Commands:
    codelearner modules              - List curriculum modules and completion
    codelearner lessons MODULE_ID    - List a module's lessons
    codelearner lesson LESSON_ID     - Read a lesson (--complete to finish it)
    codelearner quiz MODULE_ID       - Take a generated quiz for a module
    codelearner explore              - Search and filter the corpus
    codelearner learn                - Flash-card pass over a shuffled deck
    codelearner stats                - Level, XP, streak and counters
    codelearner achievements         - Achievement list with unlock status

Usage:
    codelearner --help
    codelearner quiz python-fundamentals --count 5
    codelearner explore --search docker --kind tool
    codelearner explore --project api --options
"""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import get_settings
from src.content.loader import load_items
from src.core.exceptions import CodeLearnerError
from src.core.logging import configure_logging
from src.core.models import QuestionType, QuizQuestion, StudyItem, has_content
from src.curriculum.builder import module_completion
from src.progress.achievements import ACHIEVEMENTS, Achievement
from src.progress.engine import LESSON_XP
from src.progress.store import create_progress_store
from src.quiz.grading import check_answer, score_quiz
from src.study.explore import ItemFilter, filter_items, filter_options, visible_categories
from src.study.learning import LearningSession
from src.study.study_service import StudyService

app = typer.Typer(
    name="codelearner",
    help="Code Learner: study your project's concepts through lessons and quizzes",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

EXPLORE_LIMIT = 100


def _get_service() -> StudyService:
    """Load corpus and progress; exit with a message when the corpus is unusable."""
    settings = get_settings()
    try:
        items = load_items(settings.data_path)
    except CodeLearnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    return StudyService(items, create_progress_store(settings))


def _print_unlocked(unlocked: list[Achievement]) -> None:
    for achievement in unlocked:
        console.print(
            f"[bold yellow]{achievement.icon} Achievement unlocked: {achievement.title}[/bold yellow]"
            f" [dim](+{achievement.xp_reward} XP)[/dim]"
        )


def _item_panel(item: StudyItem, mastery_label: str | None = None) -> Panel:
    sections = [
        ("What it is", item.what_it_is),
        ("Why it exists", item.why_it_exists),
        ("Where it runs", item.where_it_runs),
        ("What it touches", item.what_it_touches),
        ("What breaks", item.what_breaks),
        ("Used in your project", item.project_usage),
        ("Common confusion", item.common_confusion),
    ]
    lines = [item.definition] if item.definition else []
    for label, text in sections:
        if has_content(text) and text != item.definition:
            lines.append(f"[cyan]{label}:[/cyan] {text}")

    subtitle = f"{item.kind.value} · {item.category}"
    if item.project:
        subtitle += f" · {item.project}"
    if mastery_label:
        subtitle += f" · {mastery_label}"

    return Panel(
        "\n".join(lines) or "[dim]No details[/dim]",
        title=f"[bold]{item.term}[/bold]",
        subtitle=f"[dim]{subtitle}[/dim]",
        border_style="cyan",
        box=box.ROUNDED,
        padding=(1, 2),
    )


# =============================================================================
# Curriculum Commands
# =============================================================================


@app.command()
def modules() -> None:
    """List curriculum modules."""
    service = _get_service()

    table = Table(title="Modules", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Module", style="white")
    table.add_column("Items", justify="right")
    table.add_column("Lessons", justify="right")
    table.add_column("Complete", justify="right", style="green")
    table.add_column("Best Quiz", justify="right", style="yellow")

    for module in service.modules:
        done, total, percent = module_completion(module, service.progress.completed_lessons)
        best = service.best_score(module.id)
        table.add_row(
            module.id,
            f"{module.icon} {module.title}",
            str(len(module.items)),
            f"{done}/{total}",
            f"{percent}%",
            f"{best}%" if best is not None else "-",
        )

    console.print(table)


@app.command()
def lessons(
    module_id: Annotated[str, typer.Argument(help="Module id (see 'modules')")],
) -> None:
    """List the lessons of a module."""
    service = _get_service()
    try:
        module = service.get_module(module_id)
    except CodeLearnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"{module.icon} {module.title}", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Lesson", style="white")
    table.add_column("Items", justify="right")
    table.add_column("Status", justify="center")

    for lesson in module.lessons:
        status = "[green]✓[/green]" if service.is_lesson_completed(lesson.id) else "[dim]○[/dim]"
        table.add_row(lesson.id, lesson.title, str(len(lesson.items)), status)

    console.print(table)


@app.command()
def lesson(
    lesson_id: Annotated[str, typer.Argument(help="Lesson id (see 'lessons')")],
    complete: Annotated[
        bool, typer.Option("--complete", "-c", help="Mark the lesson as completed")
    ] = False,
) -> None:
    """Read a lesson, optionally marking it complete."""
    service = _get_service()
    try:
        selected = service.get_lesson(lesson_id)
    except CodeLearnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold cyan]{selected.title}[/bold cyan]  [dim]{selected.id}[/dim]")
    for item in selected.items:
        level = service.item_mastery(item.id)
        console.print(_item_panel(item, f"[{level.color}]{level.display_name}[/{level.color}]"))

    if not complete:
        return

    if service.is_lesson_completed(selected.id):
        console.print("[dim]Lesson already completed.[/dim]")
        return

    unlocked = service.complete_lesson(selected.id)
    console.print(f"[green]Lesson complete! +{LESSON_XP} XP[/green] (total {service.progress.xp} XP)")
    _print_unlocked(unlocked)


# =============================================================================
# Quiz
# =============================================================================


def _ask(question: QuizQuestion, number: int, total: int) -> int | bool | None:
    console.print(
        Panel(
            question.question,
            title=f"[bold cyan]QUESTION {number}/{total}[/bold cyan]",
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        )
    )

    if question.type is QuestionType.TRUE_FALSE:
        choice = Prompt.ask("Answer (t/f, s to skip)", choices=["t", "f", "s"], show_choices=False)
        return None if choice == "s" else choice == "t"

    options = question.options or []
    for index, option in enumerate(options):
        console.print(f"  [cyan][{index + 1}][/cyan] {option}")
    choices = [str(i + 1) for i in range(len(options))] + ["s"]
    choice = Prompt.ask(f"Answer (1-{len(options)}, s to skip)", choices=choices, show_choices=False)
    return None if choice == "s" else int(choice) - 1


@app.command()
def quiz(
    module_id: Annotated[str, typer.Argument(help="Module id (see 'modules')")],
    count: Annotated[
        int | None, typer.Option("--count", "-n", help="Number of questions", min=1)
    ] = None,
) -> None:
    """Take a quiz on one module."""
    settings = get_settings()
    service = _get_service()
    count = count or settings.quiz_question_count

    try:
        module = service.get_module(module_id)
    except CodeLearnerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if len(module.items) < settings.quiz_min_module_items:
        console.print(
            f"[yellow]{module.title} has too few items for a quiz "
            f"(needs {settings.quiz_min_module_items}).[/yellow]"
        )
        raise typer.Exit(code=1)

    questions = service.start_quiz(module.id, count)
    if not questions:
        console.print("[yellow]Could not generate any questions for this module.[/yellow]")
        raise typer.Exit(code=1)

    best = service.best_score(module.id)
    console.print(f"[bold]{module.icon} {module.title} quiz[/bold]  [dim]best: {best if best is not None else '-'}%[/dim]")

    answers: list[int | bool | None] = []
    for number, question in enumerate(questions, start=1):
        answer = _ask(question, number, len(questions))
        answers.append(answer)
        result = check_answer(question, answer)
        if result.correct:
            console.print(f"[green]{result.feedback}[/green]")
        else:
            console.print(f"[red]{result.feedback}[/red] Correct answer: [bold]{result.correct_answer}[/bold]")
        if result.explanation:
            console.print(f"[dim]{result.explanation}[/dim]")

    outcome = score_quiz(questions, answers)
    unlocked = service.record_quiz(module.id, outcome)

    console.print(
        Panel(
            f"{outcome.correct}/{outcome.total} correct  ·  {outcome.score}%\n"
            f"Total XP: {service.progress.xp}",
            title="[bold]Quiz Complete[/bold]",
            border_style="green" if outcome.score == 100 else "yellow",
        )
    )
    _print_unlocked(unlocked)


# =============================================================================
# Explore & Learn
# =============================================================================


def _print_filter_options(items: list[StudyItem], item_filter: ItemFilter) -> None:
    choices = filter_options(items)

    table = Table(title="Filter options", show_header=True)
    table.add_column("Filter", style="cyan")
    table.add_column("Values", style="white")
    table.add_row("--kind", ", ".join(choices.kinds))
    table.add_row("--project", ", ".join(choices.projects))

    # Only categories still reachable under the other filters
    categories = visible_categories(items, item_filter) if item_filter.is_active else choices.categories
    table.add_row("--category", ", ".join(categories))

    console.print(table)


@app.command()
def explore(
    search: Annotated[str, typer.Option("--search", "-s", help="Match term, definition or category")] = "",
    kind: Annotated[str, typer.Option("--kind", "-k", help="Item kind, e.g. tool")] = "",
    project: Annotated[str, typer.Option("--project", "-p", help="Project name substring")] = "",
    category: Annotated[str, typer.Option("--category", "-c", help="Exact category")] = "",
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum rows shown", min=1)] = EXPLORE_LIMIT,
    options: Annotated[
        bool, typer.Option("--options", "-o", help="List available kinds, projects and categories")
    ] = False,
) -> None:
    """Search and filter the item corpus."""
    service = _get_service()
    item_filter = ItemFilter(search=search, kind=kind, project=project, category=category)

    if options:
        _print_filter_options(service.items, item_filter)
        return

    matches = filter_items(service.items, item_filter)

    table = Table(title=f"{len(matches)} of {len(service.items)} items", show_header=True)
    table.add_column("Term", style="cyan")
    table.add_column("Kind", style="dim")
    table.add_column("Category", style="white")
    table.add_column("Definition", style="white", max_width=60)

    for item in matches[:limit]:
        table.add_row(item.term, item.kind.value, item.category, item.definition)

    console.print(table)
    if len(matches) > limit:
        console.print(f"[dim]Showing first {limit} of {len(matches)} results. Use filters to narrow down.[/dim]")
    elif not matches:
        console.print("[yellow]No items match your filters.[/yellow]")


@app.command()
def learn(
    kind: Annotated[str, typer.Option("--kind", "-k", help="Item kind, e.g. tool")] = "",
    project: Annotated[str, typer.Option("--project", "-p", help="Project name substring")] = "",
) -> None:
    """Flip through a shuffled deck of items."""
    service = _get_service()
    deck_items = filter_items(service.items, ItemFilter(kind=kind, project=project))
    if not deck_items:
        console.print("[yellow]No items in this set.[/yellow]")
        raise typer.Exit(code=1)

    session = LearningSession(deck_items)
    console.print(f"[dim]{session.total} items in this set[/dim]")

    while not session.is_complete:
        item = session.current
        console.print(f"[bold]{session.position + 1}/{session.total}[/bold]  [cyan]{item.term}[/cyan]")
        Prompt.ask("[dim]Enter to reveal[/dim]", default="", show_default=False)
        console.print(_item_panel(item))
        choice = Prompt.ask("Got it (g), review again (r) or quit (q)", choices=["g", "r", "q"], default="g")
        if choice == "q":
            break
        if choice == "g":
            session.got_it()
        else:
            session.review_again()

    console.print(
        f"[green]{session.got_count} got it[/green]  [yellow]{session.review_count} to review[/yellow]"
    )
    for item in session.flagged_items:
        console.print(f"  • {item.term} [dim]({item.category})[/dim]")


# =============================================================================
# Progress
# =============================================================================


@app.command()
def stats() -> None:
    """Show level, XP, streak and study counters."""
    service = _get_service()
    summary = service.dashboard()
    level = summary.level

    table = Table(title=f"Level {level.level} · {level.title}", show_header=False, box=box.MINIMAL)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("XP", f"{summary.xp:,}")
    table.add_row("Next level", f"{level.current_xp}/{level.required_xp} ({level.percent}%)")
    table.add_row("Streak", f"{summary.streak} days")
    table.add_row("Items studied", f"{summary.items_studied}/{summary.items_total}")
    table.add_row("Items mastered", str(summary.items_mastered))
    table.add_row("Lessons", f"{summary.lessons_completed}/{summary.lessons_total}")
    table.add_row("Quizzes taken", str(summary.quizzes_taken))
    table.add_row("Correct answers", str(summary.correct_answers))
    table.add_row("Achievements", f"{summary.achievements_unlocked}/{len(ACHIEVEMENTS)}")

    console.print(table)


@app.command()
def achievements() -> None:
    """List achievements and which are unlocked."""
    service = _get_service()
    unlocked = set(service.progress.achievements)

    table = Table(title="Achievements", show_header=True)
    table.add_column("", justify="center")
    table.add_column("Achievement", style="white")
    table.add_column("Description", style="dim")
    table.add_column("XP", justify="right", style="yellow")

    for achievement in ACHIEVEMENTS:
        done = achievement.id in unlocked
        table.add_row(
            achievement.icon if done else "🔒",
            f"[bold]{achievement.title}[/bold]" if done else achievement.title,
            achievement.description,
            str(achievement.xp_reward),
        )

    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    configure_logging(get_settings())
    logger.debug("codelearner CLI starting")
    app()


if __name__ == "__main__":
    main()
