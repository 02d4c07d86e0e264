"""Hackathon Scoring.

Collect weighted judge evaluations for hackathon participants and turn them
into a ranked, live-updating leaderboard.
"""

from hackathon_scoring.leaderboard import compute_leaderboard
from hackathon_scoring.models import LeaderboardEntry

__version__ = "0.1.0"
__all__ = [
    "LeaderboardEntry",
    "__version__",
    "compute_leaderboard",
]
