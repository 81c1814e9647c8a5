"""Reduce a learner's decision history into an aggregate performance signal."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, TypedDict


class UserPerformance(TypedDict):
    average_score: float
    strong_skills: List[str]
    weak_skills: List[str]


def empty_performance() -> UserPerformance:
    return {"average_score": 0, "strong_skills": [], "weak_skills": []}


def _outcome(record: dict) -> dict:
    # History records nest the round outcome under "feedback"; flat records are accepted too
    feedback = record.get("feedback")
    return feedback if isinstance(feedback, dict) else record


def record_score(record: dict) -> float:
    return float(_outcome(record).get("outcome_score") or 0)


def record_skills(record: dict) -> Dict[str, float]:
    return dict(_outcome(record).get("skills_gained") or {})


def skill_averages(user_history: Iterable[dict]) -> List[tuple]:
    """(skill, average points) pairs, highest average first.

    Ties keep first-seen order.
    """
    points_by_skill: Dict[str, List[float]] = {}
    for record in user_history:
        for skill, points in record_skills(record).items():
            points_by_skill.setdefault(skill, []).append(float(points))

    averages = [(skill, sum(points) / len(points)) for skill, points in points_by_skill.items()]
    averages.sort(key=lambda pair: pair[1], reverse=True)
    return averages


def calculate_user_performance(user_history: Optional[List[dict]] = None) -> UserPerformance:
    """Average outcome score plus top-3 / bottom-3 skills.

    With fewer than six distinct skills the strong and weak lists overlap.
    """
    if not user_history:
        return empty_performance()

    scores = [record_score(record) for record in user_history]
    average_score = sum(scores) / len(scores)

    ranked = [skill for skill, _ in skill_averages(user_history)]
    return {
        "average_score": average_score,
        "strong_skills": ranked[:3],
        "weak_skills": ranked[-3:],
    }
