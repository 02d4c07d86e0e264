"""Report generation services for Hackathon Scoring."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from statistics import mean

from tabulate import tabulate

from hackathon_scoring.leaderboard import CRITERION_FIELDS, CRITERION_NAMES, round_score
from hackathon_scoring.models import LeaderboardEntry

LEADERBOARD_HEADERS: tuple[str, ...] = (
    "Rank",
    "Code",
    "Name",
    "Project",
    *(CRITERION_NAMES[f] for f in CRITERION_FIELDS),
    "Total",
)

CSV_HEADERS: tuple[str, ...] = (
    "rank",
    "participant_id",
    "participant_code",
    "name",
    "project",
    *CRITERION_FIELDS,
    "total",
)


@dataclass(frozen=True)
class PerformanceStats:
    """Dashboard summary of judging progress.

    Attributes:
        participants: Registered participants.
        judges: Registered judges.
        evaluations: Submitted evaluations.
        evaluated_participants: Participants with at least one evaluation.
        completion_percentage: evaluations / (participants * judges), as a percentage.
        average_total: Mean composite score over ranked entries.
        highest_total: Best composite score, or None with no entries.
    """

    participants: int
    judges: int
    evaluations: int
    evaluated_participants: int
    completion_percentage: float
    average_total: float | None
    highest_total: float | None


def compute_performance_stats(
    entries: Sequence[LeaderboardEntry],
    participant_count: int,
    judge_count: int,
    evaluation_count: int,
) -> PerformanceStats:
    """Summarize judging progress next to a computed leaderboard."""
    expected = participant_count * judge_count
    completion = round_score(evaluation_count / expected * 100) if expected else 0.0
    totals = [e.total for e in entries]

    return PerformanceStats(
        participants=participant_count,
        judges=judge_count,
        evaluations=evaluation_count,
        evaluated_participants=len(entries),
        completion_percentage=completion,
        average_total=round_score(mean(totals)) if totals else None,
        highest_total=max(totals) if totals else None,
    )


def top_performers(entries: Sequence[LeaderboardEntry], n: int = 3) -> list[LeaderboardEntry]:
    """Return the first n entries of a rank-ordered leaderboard."""
    return list(entries[:n])


def leaderboard_rows(entries: Sequence[LeaderboardEntry]) -> list[list[object]]:
    """Flatten entries into rows matching CSV_HEADERS."""
    return [
        [
            e.rank,
            e.participant_id,
            e.participant_code,
            e.name,
            e.project,
            *(getattr(e, f) for f in CRITERION_FIELDS),
            e.total,
        ]
        for e in entries
    ]


def render_leaderboard(
    entries: Sequence[LeaderboardEntry],
    title: str = "Leaderboard",
    include_comments: bool = False,
) -> str:
    """Render entries as a Markdown report.

    Args:
        entries: Rank-ordered leaderboard.
        title: Report title (markdown heading).
        include_comments: Append a section with judge comments per participant.

    Returns:
        Markdown report content.
    """
    rows = [
        (
            e.rank,
            e.participant_code,
            e.name,
            e.project,
            *(getattr(e, f) for f in CRITERION_FIELDS),
            e.total,
        )
        for e in entries
    ]

    lines = [f"# {title}", ""]
    if not rows:
        lines.append("_No evaluations submitted yet._")
        return "\n".join(lines)

    lines.append(tabulate(rows, headers=LEADERBOARD_HEADERS, tablefmt="github", floatfmt=".1f"))

    if include_comments:
        commented = [e for e in entries if e.comments]
        if commented:
            lines.extend(["", "## Judge Comments"])
        for e in commented:
            lines.extend(["", f"### {e.participant_code} - {e.name}", ""])
            for comment in e.comments:
                author = comment.judge_name or f"Judge #{comment.judge_id}"
                lines.append(f"- **{author}**: {comment.text}")

    return "\n".join(lines)
