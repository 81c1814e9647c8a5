"""Scoring rules for a submitted decision.

A decision is graded on fit with its context rather than against a single
correct answer: bold moves pay off for startups, caution pays off for
established firms, and cheap options earn a small efficiency bonus.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, TypedDict

from . import catalog
from .coach import DetailedFeedbackDef, generate_detailed_feedback
from .options import SimulationOptionDef
from .randomness import get_rng, pick

logger = logging.getLogger(__name__)

BASE_SCORE = 70
NOISE = 10
EFFICIENT_BUDGET_SHARE = 0.2


class ConsequencesDef(TypedDict):
    immediate: List[str]
    short_term: List[str]
    long_term: List[str]


class SimulationResultDef(TypedDict):
    selected_option: SimulationOptionDef
    outcome_description: str
    consequences: ConsequencesDef
    skill_gains: Dict[str, int]
    performance_score: int
    ai_feedback: DetailedFeedbackDef
    next_scenario_context: str


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def rule_risk_fit(option: SimulationOptionDef, context: dict) -> int:
    """Balanced risk always helps; high risk suits startups, low risk suits established firms."""
    risk = option.get("risk_level")
    stage = context.get("businessStage")
    if risk == "medium":
        return 10
    if risk == "high" and stage == "startup":
        return 15
    if risk == "low" and stage == "established":
        return 10
    return 0


def rule_budget_efficiency(option: SimulationOptionDef, context: dict) -> int:
    budget = (context.get("resources") or {}).get("budget") or 0
    budget_change = (option.get("resource_impact") or {}).get("budget_change") or 0
    if abs(budget_change) < budget * EFFICIENT_BUDGET_SHARE:
        return 5
    return 0


RULES: Dict[str, Callable[[SimulationOptionDef, dict], int]] = {
    "risk_fit": rule_risk_fit,
    "budget_efficiency": rule_budget_efficiency,
}


def expected_score(option: SimulationOptionDef, context: dict) -> int:
    """Score before noise."""
    return BASE_SCORE + sum(rule(option, context) for rule in RULES.values())


def calculate_performance_score(
    option: SimulationOptionDef,
    scenario: dict,
    context: dict,
    rng: Optional[random.Random] = None,
) -> int:
    """0-100 score: base plus rule adjustments plus uniform noise in [-10, 10]."""
    rng = get_rng(rng)
    expected = expected_score(option, context)
    noise = rng.randint(-NOISE, NOISE)
    score = int(_clamp(expected + noise, 0, 100))
    logger.debug(
        "Scored option %s in scenario %s: expected=%d noise=%d score=%d",
        option.get("id"),
        scenario.get("id"),
        expected,
        noise,
        score,
    )
    return score


def calculate_skill_gains(option: SimulationOptionDef, career_path: str) -> Dict[str, int]:
    """Option's own skill deltas merged with the career bonus; the bonus wins on collisions."""
    return {**(option.get("skill_development") or {}), **catalog.skill_bonuses(career_path)}


def score_tier(score: int) -> str:
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


_OUTCOMES: Dict[str, List[str]] = {
    "high": [
        "Your strategic decision has yielded excellent results, positioning your business for sustainable growth.",
        "The approach you chose has created significant competitive advantages and stakeholder confidence.",
        "Your decision-making process and execution have exceeded expectations, creating lasting positive impact.",
    ],
    "medium": [
        "Your decision has produced solid results with room for optimization in future implementations.",
        "The chosen approach has achieved its primary objectives while highlighting areas for improvement.",
        "Your strategy has been effective overall, with valuable lessons learned for future scenarios.",
    ],
    "low": [
        "While your decision faced challenges, it provided valuable learning opportunities for future growth.",
        "The approach encountered obstacles that offer important insights for refining your strategy.",
        "This experience, though challenging, has strengthened your decision-making capabilities.",
    ],
}

_SHORT_TERM = [
    "Team morale and productivity adjustments based on the new direction",
    "Initial market and customer reactions to the strategic changes",
    "Resource allocation shifts and operational modifications",
    "Stakeholder feedback and relationship dynamics evolution",
]

_NEXT_CONTEXTS: Dict[str, str] = {
    "high": (
        "Your successful decision has opened new opportunities and challenges that require advanced "
        "strategic thinking."
    ),
    "medium": "The mixed results from your decision have created a complex situation requiring careful navigation.",
    "low": "The challenges from your previous decision have created urgent issues that need immediate attention.",
}


def generate_simulation_result(
    scenario: dict,
    selected_option: SimulationOptionDef,
    context: dict,
    user_history: Optional[List[dict]] = None,
    rng: Optional[random.Random] = None,
) -> SimulationResultDef:
    """Score a decision and package it with consequences and detailed feedback."""
    rng = get_rng(rng)
    career = (context.get("user_background") or {}).get("career_path") or catalog.DEFAULT_CAREER

    feedback = generate_detailed_feedback(scenario, selected_option, context, user_history, rng)
    score = calculate_performance_score(selected_option, scenario, context, rng)
    tier = score_tier(score)

    return {
        "selected_option": selected_option,
        "outcome_description": pick(rng, _OUTCOMES[tier]),
        "consequences": {
            "immediate": list(selected_option.get("immediate_consequences") or []),
            "short_term": _SHORT_TERM[:2],
            "long_term": list(selected_option.get("long_term_effects") or []),
        },
        "skill_gains": calculate_skill_gains(selected_option, career),
        "performance_score": score,
        "ai_feedback": feedback,
        "next_scenario_context": _NEXT_CONTEXTS[tier],
    }
