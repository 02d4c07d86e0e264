#!/usr/bin/env python
"""Seed a demo hackathon with a few teams, judges and evaluations.

Uses the database from HACKATHON_SCORING_DB (or ./demo/scoring.db) and
writes the resulting leaderboard reports to ./demo/reports.
"""

import asyncio
import os

from dotenv import load_dotenv

from hackathon_scoring.core.config import DATABASE_ENV_VAR, ScoringConfig
from hackathon_scoring.models import EvaluationScores
from hackathon_scoring.services.reporting import compute_performance_stats
from hackathon_scoring.services.scoring import ScoringService
from hackathon_scoring.services.storage import ReportStore, ScoringStore

load_dotenv()

TEAMS = [
    ("ARDC-001", "Byte Me", "Campus Water Tracker"),
    ("ARDC-002", "Null Pointers", "Lost & Found Board"),
    ("ARDC-003", "Stack Smashers", "Library Seat Finder"),
    ("ARDC-004", "The Forkers", "Carpool Matcher"),
]

JUDGES = [
    ("ada", "Ada Lovelace"),
    ("grace", "Grace Hopper"),
    ("linus", "Linus Torvalds"),
]

# (team index, judge index, scores, comments)
EVALUATIONS = [
    (0, 0, (85, 90, 80, 75, 88), "Strong data model, demo ran smoothly."),
    (0, 1, (80, 85, 70, 80, 90), "Great impact story."),
    (1, 0, (70, 75, 85, 90, 65), "Polished UI, thin backend."),
    (1, 2, (72, 70, 80, 88, 60), "Nice design work."),
    (2, 1, (90, 88, 75, 70, 80), "Clever seat detection."),
    (2, 2, (88, 92, 78, 72, 82), "Most complete feature set."),
    (3, 0, (60, 65, 70, 60, 75), "Good idea, needs more time."),
]


async def main() -> None:
    config = ScoringConfig(
        event_name="Demo Hackathon",
        database_path=os.environ.get(DATABASE_ENV_VAR) or "./demo/scoring.db",
        output_dir="./demo/reports",
    )

    store = ScoringStore(config)
    await store.init()
    service = ScoringService(store, config)

    try:
        teams = [await service.register_participant(*team) for team in TEAMS]
        judges = [await service.register_judge(*judge) for judge in JUDGES]

        for team_idx, judge_idx, scores, comments in EVALUATIONS:
            pd, fn, pr, wd, im = scores
            await service.submit_evaluation(
                judges[judge_idx].id,
                teams[team_idx].id,
                EvaluationScores(
                    project_design=pd,
                    functionality=fn,
                    presentation=pr,
                    web_design=wd,
                    impact=im,
                ),
                comments,
            )

        entries = await store.get_leaderboard()
        stats = compute_performance_stats(
            entries, len(teams), len(judges), len(EVALUATIONS)
        )

        print(config.event_name)
        print("=" * 40)
        for entry in entries:
            print(f"{entry.rank:>2}. {entry.participant_code} {entry.name:<16} {entry.total:5.1f}")
        print(f"\nCompletion: {stats.completion_percentage:.1f}%")

        paths = await ReportStore(config.output_dir).save_leaderboard(
            entries, f"{config.event_name} Leaderboard"
        )
        print(f"\nReports written to: {paths[0].parent}")
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
