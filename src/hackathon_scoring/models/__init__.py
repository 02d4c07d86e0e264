from .criterion import Criterion
from .evaluation import Evaluation, EvaluationScores
from .judge import Judge
from .leaderboard import JudgeComment, LeaderboardEntry
from .participant import Participant
from .settings import AppSettings

__all__ = [
    "AppSettings",
    "Criterion",
    "Evaluation",
    "EvaluationScores",
    "Judge",
    "JudgeComment",
    "LeaderboardEntry",
    "Participant",
]
