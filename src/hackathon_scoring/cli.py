"""CLI for Hackathon Scoring."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import Awaitable, Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, TypeVar

import pydantic
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.table import Table

from hackathon_scoring import __version__
from hackathon_scoring.core.config import ScoringConfig, SettingsConfig, load_config
from hackathon_scoring.core.errors import ConfigurationError, ScoringError
from hackathon_scoring.core.log import configure_logging
from hackathon_scoring.leaderboard import CRITERION_FIELDS, CRITERION_NAMES, compute_from_source
from hackathon_scoring.models import Evaluation, EvaluationScores, LeaderboardEntry
from hackathon_scoring.services.reporting import compute_performance_stats, top_performers
from hackathon_scoring.services.scoring import ScoringService
from hackathon_scoring.services.storage import ReportStore, ScoringStore, load_snapshot_file

T = TypeVar("T")

app = typer.Typer(
    name="hackathon-scoring",
    help="Hackathon Scoring - weighted judge evaluations and a live leaderboard",
    add_completion=False,
)
console = Console()

_verbose = False

ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Path to config YAML file")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"hackathon-scoring v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Hackathon Scoring CLI."""
    global _verbose
    _verbose = verbose
    load_dotenv()
    configure_logging(console, verbose)


@contextmanager
def _command_errors() -> Iterator[None]:
    """Turn known failures into a red message and exit code 1."""
    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e
    except ScoringError as e:
        console.print(f"[red]Rejected:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except pydantic.ValidationError as e:
        console.print(f"[red]Validation error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if _verbose:
            console.print_exception()
        raise typer.Exit(1) from e


def _load_config(config_path: Path | None) -> ScoringConfig:
    if config_path is None:
        return ScoringConfig()
    return load_config(config_path)


def _run_with_store(
    config: ScoringConfig, fn: Callable[[ScoringStore], Awaitable[T]]
) -> T:
    """Open the store, run an async operation against it, and close it."""

    async def _run() -> T:
        store = ScoringStore(config)
        try:
            await store.init()
            return await fn(store)
        finally:
            await store.close()

    return asyncio.run(_run())


def _run_with_service(
    config: ScoringConfig, fn: Callable[[ScoringService], Awaitable[T]]
) -> T:
    return _run_with_store(config, lambda store: fn(ScoringService(store, config)))


def build_leaderboard_table(entries: Sequence[LeaderboardEntry], title: str) -> Table:
    """Render entries as a rich table."""
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="bold")
    table.add_column("Code")
    table.add_column("Name")
    table.add_column("Project")
    for field in CRITERION_FIELDS:
        table.add_column(CRITERION_NAMES[field], justify="right")
    table.add_column("Total", justify="right", style="bold green")

    for e in entries:
        table.add_row(
            str(e.rank),
            e.participant_code,
            e.name,
            e.project,
            *(f"{getattr(e, f):.1f}" for f in CRITERION_FIELDS),
            f"{e.total:.1f}",
        )
    return table


def build_evaluations_table(evaluations: Sequence[Evaluation]) -> Table:
    table = Table(title="Evaluations")
    table.add_column("ID", justify="right")
    table.add_column("Participant", justify="right")
    table.add_column("Judge", justify="right")
    for field in CRITERION_FIELDS:
        table.add_column(CRITERION_NAMES[field], justify="right")
    table.add_column("Comments")

    for e in evaluations:
        table.add_row(
            str(e.id),
            str(e.participant_id),
            str(e.judge_id),
            *(f"{getattr(e, f):g}" for f in CRITERION_FIELDS),
            escape(e.comments or ""),
        )
    return table


@app.command()
def leaderboard(
    config_path: ConfigOption = None,
    snapshot: Annotated[
        Path | None,
        typer.Option("--snapshot", "-s", help="Compute from a YAML/JSON snapshot file"),
    ] = None,
    export: Annotated[
        bool, typer.Option("--export", help="Write leaderboard.md/csv/json to output_dir")
    ] = False,
    watch: Annotated[
        bool, typer.Option("--watch", "-w", help="Recompute and redraw on an interval")
    ] = False,
    interval: Annotated[
        float | None,
        typer.Option("--interval", min=0.1, help="Refresh interval in seconds"),
    ] = None,
) -> None:
    """Show the ranked leaderboard.

    Args:
        config_path: Optional configuration file.
        snapshot: Snapshot file to use instead of the database.
        export: Also write report files.
        watch: Keep polling and redrawing until interrupted.
        interval: Override leaderboard_refresh_seconds.
    """
    with _command_errors():
        config = _load_config(config_path)

        def _compute() -> list[LeaderboardEntry]:
            if snapshot is not None:
                source = load_snapshot_file(snapshot, config.criteria)
                return asyncio.run(compute_from_source(source))
            return _run_with_store(config, lambda store: store.get_leaderboard())

        entries = _compute()
        title = f"{config.event_name} Leaderboard"

        if export:
            paths = asyncio.run(ReportStore(config.output_dir).save_leaderboard(entries, title))
            for path in paths:
                console.print(f"[green]Saved[/green] {path}")

        if not watch:
            console.print(build_leaderboard_table(entries, title))
            return

        refresh = interval if interval is not None else config.leaderboard_refresh_seconds
        with Live(build_leaderboard_table(entries, title), console=console) as live:
            try:
                while True:
                    time.sleep(refresh)
                    live.update(build_leaderboard_table(_compute(), title))
            except KeyboardInterrupt:
                pass


@app.command()
def stats(config_path: ConfigOption = None) -> None:
    """Show judging progress and the top three participants."""
    with _command_errors():
        config = _load_config(config_path)

        async def _stats(store: ScoringStore):
            entries = await store.get_leaderboard()
            participants = await store.list_participants()
            judges = await store.list_judges()
            evaluations = await store.list_evaluations()
            summary = compute_performance_stats(
                entries, len(participants), len(judges), len(evaluations)
            )
            return entries, summary

        entries, summary = _run_with_store(config, _stats)

    console.print(f"[bold]{escape(config.event_name)}[/bold]")
    console.print(f"  Participants: {summary.participants}")
    console.print(f"  Judges: {summary.judges}")
    console.print(f"  Evaluations: {summary.evaluations}")
    console.print(f"  Evaluated participants: {summary.evaluated_participants}")
    console.print(f"  Completion: {summary.completion_percentage:.1f}%")
    if summary.highest_total is not None:
        console.print(f"  Average total: {summary.average_total:.1f}")
        console.print(f"  Highest total: {summary.highest_total:.1f}")

    top = top_performers(entries)
    if top:
        console.print(build_leaderboard_table(top, "Top Performers"))


@app.command(name="add-participant")
def add_participant(
    code: Annotated[str, typer.Argument(help="Unique participant code, e.g. ARDC-001")],
    name: Annotated[str, typer.Argument(help="Participant or team name")],
    project: Annotated[str, typer.Argument(help="Project title")],
    config_path: ConfigOption = None,
) -> None:
    """Register a participant."""
    with _command_errors():
        config = _load_config(config_path)
        participant = _run_with_service(
            config, lambda service: service.register_participant(code, name, project)
        )
    console.print(f"[green]Registered[/green] {participant.participant_code} (id {participant.id})")


@app.command(name="remove-participant")
def remove_participant(
    participant_id: Annotated[int, typer.Argument(help="Participant id")],
    config_path: ConfigOption = None,
) -> None:
    """Delete a participant and all of their evaluations."""
    with _command_errors():
        config = _load_config(config_path)
        _run_with_service(config, lambda service: service.remove_participant(participant_id))
    console.print(f"[yellow]Removed[/yellow] participant {participant_id}")


@app.command(name="add-judge")
def add_judge(
    username: Annotated[str, typer.Argument(help="Unique judge username")],
    name: Annotated[str, typer.Argument(help="Display name")],
    config_path: ConfigOption = None,
) -> None:
    """Register a judge."""
    with _command_errors():
        config = _load_config(config_path)
        judge = _run_with_service(config, lambda service: service.register_judge(username, name))
    console.print(f"[green]Registered judge[/green] {judge.username} (id {judge.id})")


@app.command(name="remove-judge")
def remove_judge(
    judge_id: Annotated[int, typer.Argument(help="Judge id")],
    config_path: ConfigOption = None,
) -> None:
    """Delete a judge and every evaluation they submitted."""
    with _command_errors():
        config = _load_config(config_path)
        _run_with_service(config, lambda service: service.remove_judge(judge_id))
    console.print(f"[yellow]Removed[/yellow] judge {judge_id}")


@app.command()
def evaluate(
    judge_id: Annotated[int, typer.Argument(help="Judge id")],
    participant_id: Annotated[int, typer.Argument(help="Participant id")],
    project_design: Annotated[float, typer.Option("--project-design")],
    functionality: Annotated[float, typer.Option("--functionality")],
    presentation: Annotated[float, typer.Option("--presentation")],
    web_design: Annotated[float, typer.Option("--web-design")],
    impact: Annotated[float, typer.Option("--impact")],
    comments: Annotated[str | None, typer.Option("--comments")] = None,
    config_path: ConfigOption = None,
) -> None:
    """Submit (or update) a judge's evaluation of a participant."""
    scores = EvaluationScores(
        project_design=project_design,
        functionality=functionality,
        presentation=presentation,
        web_design=web_design,
        impact=impact,
    )
    with _command_errors():
        config = _load_config(config_path)
        evaluation, created = _run_with_service(
            config,
            lambda service: service.submit_evaluation(judge_id, participant_id, scores, comments),
        )
    verb = "Submitted" if created else "Updated"
    console.print(f"[green]{verb}[/green] evaluation {evaluation.id}")


@app.command()
def evaluations(
    participant: Annotated[
        int | None, typer.Option("--participant", "-p", help="Only this participant id")
    ] = None,
    judge: Annotated[int | None, typer.Option("--judge", "-j", help="Only this judge id")] = None,
    config_path: ConfigOption = None,
) -> None:
    """List submitted evaluations, optionally for one participant and/or judge."""
    with _command_errors():
        config = _load_config(config_path)

        async def _list(store: ScoringStore) -> list[Evaluation]:
            if participant is not None:
                rows = await store.evaluations.list_by_participant(participant)
                if judge is not None:
                    rows = [e for e in rows if e.judge_id == judge]
                return rows
            if judge is not None:
                return await store.evaluations.list_by_judge(judge)
            return await store.evaluations.list_all()

        rows = _run_with_store(config, _list)

    if rows:
        console.print(build_evaluations_table(rows))
    console.print(f"{len(rows)} evaluation(s)")


@app.command()
def weights(
    assignments: Annotated[
        list[str], typer.Argument(help='Criterion weights as "Name=weight" pairs')
    ],
    config_path: ConfigOption = None,
) -> None:
    """Reweight criteria. Weights must sum to 100."""
    parsed: dict[str, float] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep:
            console.print(
                f"[red]Invalid weight:[/red] expected Name=weight, got {escape(assignment)}"
            )
            raise typer.Exit(1)
        try:
            parsed[name.strip()] = float(value)
        except ValueError as e:
            console.print(f"[red]Invalid weight:[/red] {escape(str(e))}")
            raise typer.Exit(1) from e

    with _command_errors():
        config = _load_config(config_path)
        criteria = _run_with_service(
            config, lambda service: service.update_criteria_weights(parsed)
        )

    for criterion in criteria:
        console.print(f"  {criterion.name}: {criterion.weight:g}%")


@app.command()
def settings(
    allow_edit: Annotated[
        bool | None,
        typer.Option("--allow-edit/--no-allow-edit", help="Let judges resubmit evaluations"),
    ] = None,
    show_scores: Annotated[
        bool | None,
        typer.Option("--show-scores/--hide-scores", help="Show scores to participants"),
    ] = None,
    require_comments: Annotated[
        bool | None,
        typer.Option("--require-comments/--no-require-comments", help="Require comments"),
    ] = None,
    auto_logout: Annotated[
        bool | None, typer.Option("--auto-logout/--no-auto-logout", help="Auto logout")
    ] = None,
    config_path: ConfigOption = None,
) -> None:
    """Show settings, or change the switches given."""
    changes = {
        name: value
        for name, value in (
            ("allow_edit_evaluations", allow_edit),
            ("show_scores_to_participants", show_scores),
            ("require_comments", require_comments),
            ("auto_logout", auto_logout),
        )
        if value is not None
    }

    with _command_errors():
        config = _load_config(config_path)
        if changes:
            current = _run_with_service(config, lambda service: service.update_settings(**changes))
        else:
            current = _run_with_store(config, lambda store: store.settings.get())

    for name in SettingsConfig.model_fields:
        console.print(f"  {name}: {getattr(current, name)}")


@app.command()
def load(
    snapshot: Annotated[Path, typer.Argument(help="YAML/JSON snapshot to import")],
    config_path: ConfigOption = None,
) -> None:
    """Import participants, judges, criteria and evaluations from a snapshot."""
    with _command_errors():
        config = _load_config(config_path)
        data = load_snapshot_file(snapshot, config.criteria)
        _run_with_store(config, lambda store: store.load_snapshot(data))
    console.print(
        f"[green]Loaded[/green] {len(data.participants)} participants, "
        f"{len(data.evaluations)} evaluations"
    )


@app.command(name="export")
def export_data(
    config_path: ConfigOption = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print instead of writing")] = False,
) -> None:
    """Export all participants, evaluations, criteria and settings as JSON."""
    with _command_errors():
        config = _load_config(config_path)
        data = _run_with_store(config, lambda store: store.export_all_data())
        if stdout:
            console.print_json(json.dumps(data, default=str))
            return
        path = asyncio.run(ReportStore(config.output_dir).save_export(data))
    console.print(f"[green]Exported[/green] to {path}")


@app.command()
def reset(
    config_path: ConfigOption = None,
    yes: Annotated[bool, typer.Option("--yes", help="Skip confirmation")] = False,
) -> None:
    """Delete all participants and evaluations. Judges, criteria and settings are kept."""
    if not yes:
        typer.confirm("Delete all participants and evaluations?", abort=True)
    with _command_errors():
        config = _load_config(config_path)
        _run_with_store(config, lambda store: store.reset_all_data())
    console.print("[yellow]Data reset[/yellow]")


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to config YAML file")],
) -> None:
    """Validate a configuration file without touching the database.

    Args:
        config_path: Path to YAML configuration file.
    """
    try:
        config = load_config(config_path)
        console.print("[green]Configuration is valid![/green]")
        console.print(f"  Event: {escape(config.event_name)}")
        console.print(f"  Database: {config.get_database_path()}")
        console.print(f"  Criteria: {len(config.criteria)}")
        for criterion in config.criteria:
            console.print(f"    {escape(criterion.name)}: {criterion.weight:g}%")
        if abs(config.total_weight - 100.0) > config.weight_tolerance:
            console.print(
                f"[yellow]Warning:[/yellow] weights sum to {config.total_weight:g}, not 100"
            )

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Validation error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    console.print("[bold]Hackathon Scoring[/bold]")
    console.print(f"Version: {__version__}\n")

    console.print("[bold]Example Commands:[/bold]")
    console.print("  # Leaderboard from a snapshot file (no database)")
    console.print("  hackathon-scoring leaderboard --snapshot snapshot.yaml\n")

    console.print("  # Live leaderboard, refreshed every 5 seconds")
    console.print("  hackathon-scoring leaderboard --watch --interval 5\n")

    console.print("  # Submit an evaluation")
    console.print(
        "  hackathon-scoring evaluate 1 3 --project-design 80 --functionality 70 "
        "--presentation 60 --web-design 50 --impact 40 --comments 'Solid demo'\n"
    )

    console.print("  # Reweight criteria")
    console.print(
        '  hackathon-scoring weights "Project Design=20" "Functionality=35"\n'
    )

    console.print("  # Let evaluations through without comments")
    console.print("  hackathon-scoring settings --no-require-comments\n")

    console.print("  # Progress and top three")
    console.print("  hackathon-scoring stats")


if __name__ == "__main__":
    app()
