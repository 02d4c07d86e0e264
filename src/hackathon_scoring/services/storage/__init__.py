from .criterion_repository import CriterionRepository
from .evaluation_repository import EvaluationRepository
from .import_repository import ImportRepository
from .judge_repository import JudgeRepository
from .participant_repository import ParticipantRepository
from .report_store import ReportStore
from .settings_repository import SettingsRepository
from .snapshot import DataSnapshot, load_snapshot_file, parse_snapshot
from .store import ScoringStore

__all__ = [
    "CriterionRepository",
    "DataSnapshot",
    "EvaluationRepository",
    "ImportRepository",
    "JudgeRepository",
    "ParticipantRepository",
    "ReportStore",
    "ScoringStore",
    "SettingsRepository",
    "load_snapshot_file",
    "parse_snapshot",
]
