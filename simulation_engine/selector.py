"""Template selection and difficulty curve."""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from .performance import UserPerformance
from .randomness import get_rng, pick
from .templates import ScenarioTemplateDef, load_templates

logger = logging.getLogger(__name__)

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


def used_scenarios(context: dict, user_history: Optional[List[dict]] = None) -> List[str]:
    """Scenario titles the learner has already seen.

    Combines the context's previous decisions with the scenario type recorded
    on each history entry.
    """
    used = list((context.get("user_background") or {}).get("previous_decisions") or [])
    for record in user_history or []:
        scenario_type = record.get("scenario_type") or record.get("scenarioType")
        if scenario_type:
            used.append(scenario_type)
    return used


def _is_used(template: ScenarioTemplateDef, used: Iterable[str]) -> bool:
    # Generated titles embed the template title, so match by containment
    return any(template["title"] in entry for entry in used)


def select_template(
    business_stage: str,
    used: Optional[List[str]] = None,
    rng: Optional[random.Random] = None,
) -> ScenarioTemplateDef:
    """Pick a template for the stage, preferring ones not played yet."""
    rng = get_rng(rng)
    templates = load_templates(business_stage)
    fresh = [t for t in templates if not _is_used(t, used or [])]
    if not fresh:
        logger.debug("All %d templates for %s already used; allowing repeats", len(templates), business_stage)
    selected = pick(rng, fresh or templates)
    logger.debug("Selected template %r for stage %s", selected["title"], business_stage)
    return selected


def calculate_difficulty(
    context: dict,
    performance: Optional[UserPerformance] = None,
    has_history: Optional[bool] = None,
) -> int:
    """Difficulty level 1-5.

    Stage and skill level set the baseline; past performance nudges it by one
    step either way. The downward nudge only applies when there is history
    to judge by.
    """
    background = context.get("user_background") or {}
    stage = context.get("businessStage")
    average = (performance or {}).get("average_score") or 0
    if has_history is None:
        has_history = average > 0

    difficulty = MIN_DIFFICULTY
    if stage == "growth":
        difficulty += 1
    if stage == "established":
        difficulty += 2
    if (background.get("skill_level") or 0) > 50:
        difficulty += 1
    if "volatile" in (context.get("market_conditions") or ""):
        difficulty += 1

    if average > 80:
        difficulty += 1
    if has_history and average < 60:
        difficulty = max(MIN_DIFFICULTY, difficulty - 1)

    return max(MIN_DIFFICULTY, min(difficulty, MAX_DIFFICULTY))
