"""Finite state machine for multi-round simulation sessions."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import settings

from .performance import calculate_user_performance, record_skills
from .synthetic_data import build_round_context

logger = logging.getLogger(__name__)

IN_PROGRESS = "IN_PROGRESS"
COMPLETED = "COMPLETED"


def initialize_session(career_path: str, total_rounds: Optional[int] = None) -> dict:
    """Create the initial session state at round 1."""
    total_rounds = total_rounds or settings.TOTAL_ROUNDS
    if total_rounds < 1:
        raise ValueError("A session needs at least one round.")
    return {
        "career_path": career_path,
        "current_round": 1,
        "total_rounds": total_rounds,
        "status": IN_PROGRESS,
        "history": [],
        "progress": {},
    }


def played_scenarios(state: dict) -> List[str]:
    return [record["scenario_type"] for record in state.get("history") or [] if record.get("scenario_type")]


def current_context(state: dict) -> dict:
    """SimulationContext for the round the session is on."""
    return build_round_context(state["current_round"], state["career_path"], played_scenarios(state))


def update_progress(progress: Dict[str, dict], skills_gained: Dict[str, int], score: float) -> Dict[str, dict]:
    """Fold one round's skill gains and score into per-skill progress."""
    updated = {skill: dict(entry) for skill, entry in progress.items()}
    for skill, points in skills_gained.items():
        entry = updated.get(skill)
        if entry:
            completed = entry["total_scenarios_completed"] + 1
            entry["skill_level"] += points
            entry["average_score"] = (
                entry["average_score"] * entry["total_scenarios_completed"] + score
            ) / completed
            entry["total_scenarios_completed"] = completed
        else:
            updated[skill] = {
                "skill_level": points,
                "total_scenarios_completed": 1,
                "average_score": score,
            }
    return updated


def record_round(
    state: dict,
    simulation: dict,
    result: dict,
    round_number: Optional[int] = None,
) -> dict:
    """Append a round outcome to the history and advance the session.

    Returns a new state. Raises ValueError on invalid transitions.
    """
    if state.get("status") != IN_PROGRESS:
        raise ValueError("Session is not accepting decisions in its current state.")
    current_round = state["current_round"]
    if round_number is not None and round_number != current_round:
        raise ValueError(f"Session is on round {current_round}, not round {round_number}.")

    score = result["performance_score"]
    skills_gained = dict(result.get("skill_gains") or {})

    new_state = {
        **state,
        "history": list(state.get("history") or []),
    }
    new_state["history"].append(
        {
            "round_number": current_round,
            "scenario_type": simulation["scenario"]["title"],
            "selected_option": result["selected_option"]["id"],
            "feedback": {
                "outcome_score": score,
                "skills_gained": skills_gained,
            },
        }
    )
    new_state["progress"] = update_progress(state.get("progress") or {}, skills_gained, score)

    if current_round >= state["total_rounds"]:
        new_state["status"] = COMPLETED
        logger.info("Session for %s completed after %d rounds", state["career_path"], current_round)
    else:
        new_state["current_round"] = current_round + 1
        logger.info("Session for %s advanced to round %d", state["career_path"], current_round + 1)
    return new_state


def session_progress(state: dict) -> int:
    """Percent complete, as shown on the dashboard."""
    if state.get("status") == COMPLETED:
        return 100
    return round(state["current_round"] / state["total_rounds"] * 100)


def summarize_session(state: dict) -> dict:
    """Debrief-friendly summary of every round played so far."""
    history = state.get("history") or []
    performance = calculate_user_performance(history)
    average = performance["average_score"]

    skill_totals: Dict[str, int] = {}
    for record in history:
        for skill, points in record_skills(record).items():
            skill_totals[skill] = skill_totals.get(skill, 0) + points

    strengths: List[str] = []
    weaknesses: List[str] = []

    if average >= 80:
        strengths.append("Your decisions consistently fit the situation your business was in.")
    elif history and average < 60:
        weaknesses.append("Several decisions did not match the risk your business stage could absorb.")

    scores = [record["feedback"]["outcome_score"] for record in history]
    if len(scores) >= 2 and scores[-1] > scores[0]:
        strengths.append("Your scores improved from the first round to the latest one.")
    elif len(scores) >= 2 and scores[-1] < scores[0]:
        weaknesses.append("Your scores dropped as the scenarios became harder.")

    if performance["strong_skills"]:
        strengths.append(f"You built the most momentum in {performance['strong_skills'][0].replace('_', ' ')}.")

    if not strengths:
        strengths.append("You worked through the scenarios and made decisions; use the feedback to iterate.")
    if not weaknesses:
        weaknesses.append("You avoided major pitfalls across the session.")

    return {
        "status": state.get("status"),
        "rounds_played": len(history),
        "average_score": average,
        "strong_skills": performance["strong_skills"],
        "weak_skills": performance["weak_skills"],
        "skill_totals": skill_totals,
        "strengths": strengths,
        "weaknesses": weaknesses,
    }
