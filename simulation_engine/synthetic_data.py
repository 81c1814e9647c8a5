"""Synthetic learner context for each round of a session.

Rounds ramp up deterministically: the business matures, the budget and team
grow, and the assumed skill level rises by 20 points per round.
"""

from __future__ import annotations

from typing import List, Optional

import settings


def stage_for_round(round_number: int) -> str:
    if round_number <= 2:
        return "startup"
    if round_number <= 4:
        return "growth"
    return "established"


def build_round_context(
    round_number: int,
    career_path: str,
    previous_decisions: Optional[List[str]] = None,
) -> dict:
    """Return the SimulationContext for a 1-based round number."""
    return {
        "industry": settings.DEFAULT_INDUSTRY,
        "location": settings.DEFAULT_LOCATION,
        "businessStage": stage_for_round(round_number),
        "resources": {
            "budget": 5000 + round_number * 2000,
            "team_size": min(2 + round_number, 10),
            "time_constraint": settings.DEFAULT_TIME_CONSTRAINT,
        },
        "market_conditions": settings.DEFAULT_MARKET_CONDITIONS,
        "user_background": {
            "career_path": career_path,
            "skill_level": round_number * 20,
            "previous_decisions": list(previous_decisions or []),
        },
    }
