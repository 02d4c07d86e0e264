"""Leaderboard report and data export files."""

from __future__ import annotations

import asyncio
import csv
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from hackathon_scoring.models import LeaderboardEntry
from hackathon_scoring.services.reporting import (
    CSV_HEADERS,
    leaderboard_rows,
    render_leaderboard,
)

logger = structlog.get_logger()


class ReportStore:
    """Writes leaderboard reports (Markdown, CSV, JSON) and full data exports."""

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize report store.

        Args:
            output_dir: Directory for report files. Created on first write.
        """
        self.output_dir = Path(output_dir)

    def _path(self, filename: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir / filename

    async def save_leaderboard(
        self, entries: Sequence[LeaderboardEntry], title: str = "Leaderboard"
    ) -> list[Path]:
        """Save leaderboard to md/csv/json files for human and dashboard consumption.

        Returns:
            Paths written.
        """

        def _save() -> list[Path]:
            md_path = self._path("leaderboard.md")
            md_path.write_text(
                render_leaderboard(entries, title=title, include_comments=True) + "\n",
                encoding="utf-8",
            )

            csv_path = self._path("leaderboard.csv")
            with csv_path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(CSV_HEADERS)
                writer.writerows(leaderboard_rows(entries))

            json_path = self._path("leaderboard.json")
            with json_path.open("w", encoding="utf-8") as f:
                json.dump([e.model_dump() for e in entries], f, indent=2)

            paths = [md_path, csv_path, json_path]
            logger.debug("saved_leaderboard", paths=[str(p) for p in paths])
            return paths

        return await asyncio.to_thread(_save)

    async def save_export(self, data: dict[str, Any], filename: str = "export.json") -> Path:
        """Save a full data export as JSON."""

        def _save() -> Path:
            path = self._path(filename)
            with path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, default=str)
            logger.debug("saved_export", path=str(path))
            return path

        return await asyncio.to_thread(_save)
