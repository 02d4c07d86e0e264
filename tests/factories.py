"""Record builders for tests."""

from hackathon_scoring.models import Criterion, Evaluation, Judge, Participant

DEFAULT_WEIGHTS = {
    "Project Design": 25.0,
    "Functionality": 30.0,
    "Presentation": 15.0,
    "Web Design": 15.0,
    "Impact": 15.0,
}


def make_participant(pid: int, code: str | None = None, name: str | None = None) -> Participant:
    return Participant(
        id=pid,
        participant_code=code or f"ARDC-{pid:03d}",
        name=name or f"Team {pid}",
        project=f"Project {pid}",
    )


def make_evaluation(
    participant_id: int,
    judge_id: int,
    scores: tuple[float, float, float, float, float],
    comments: str | None = None,
) -> Evaluation:
    pd, fn, pr, wd, im = scores
    return Evaluation(
        participant_id=participant_id,
        judge_id=judge_id,
        project_design=pd,
        functionality=fn,
        presentation=pr,
        web_design=wd,
        impact=im,
        comments=comments,
    )


def make_criteria(
    weights: dict[str, float] | None = None, omit: tuple[str, ...] = ()
) -> list[Criterion]:
    merged = {**DEFAULT_WEIGHTS, **(weights or {})}
    return [
        Criterion(id=i, name=name, weight=weight)
        for i, (name, weight) in enumerate(merged.items(), 1)
        if name not in omit
    ]


def make_judge(jid: int, name: str | None = None) -> Judge:
    return Judge(id=jid, username=f"judge{jid}", name=name or f"Judge {jid}")
