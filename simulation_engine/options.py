"""Option generation for multiple-choice decisions.

Every decision offers the same three archetypes, in order: aggressive,
conservative, innovative. The archetype fixes the risk level, skill deltas
and resource profile; only the wording is drawn at random.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, TypedDict

from . import catalog
from .randomness import get_rng, pick

ARCHETYPES = ("aggressive", "conservative", "innovative")
DEFAULT_ARCHETYPE = "conservative"

RISK_LEVELS: Dict[str, str] = {
    "aggressive": "high",
    "conservative": "low",
    "innovative": "medium",
}


class ResourceImpactDef(TypedDict):
    budget_change: float
    time_required: str
    team_involvement: List[str]


class SimulationOptionDef(TypedDict):
    id: str
    text: str
    reasoning: str
    immediate_consequences: List[str]
    long_term_effects: List[str]
    skill_development: Dict[str, int]
    risk_level: str
    resource_impact: ResourceImpactDef


_OPTION_TEXTS: Dict[str, List[str]] = {
    "aggressive": [
        "Immediately restructure operations to address {challenge}",
        "Launch an aggressive campaign to counter the current situation",
        "Make bold strategic changes to transform the business model",
    ],
    "conservative": [
        "Carefully analyze the situation and implement gradual changes",
        "Maintain current operations while making strategic adjustments",
        "Take a measured approach with thorough risk assessment",
    ],
    "innovative": [
        "Develop a creative solution that leverages new technology or partnerships",
        "Redesign the approach using innovative methods and user feedback",
        "Explore unconventional strategies that could differentiate your business",
    ],
}

_REASONING: Dict[str, List[str]] = {
    "aggressive": [
        "Given your {career_path} background, taking bold action could leverage your expertise to create "
        "significant impact quickly.",
        "Moving first in {location} could lock in an advantage before competitors react.",
    ],
    "conservative": [
        "With current market conditions being {market_conditions}, a careful approach minimizes risk while "
        "maintaining stability.",
        "Protecting your ${budget} budget keeps options open if the situation gets worse.",
    ],
    "innovative": [
        "Your industry experience in {industry} positions you well to identify creative solutions that others "
        "might miss.",
        "A fresh approach lets your team of {team_size} test ideas cheaply before committing.",
    ],
}

_IMMEDIATE: Dict[str, List[str]] = {
    "aggressive": ["High resource consumption", "Rapid team mobilization", "Immediate market response"],
    "conservative": ["Minimal disruption", "Steady progress", "Maintained stability"],
    "innovative": ["Learning curve challenges", "Stakeholder curiosity", "Prototype development"],
}

_LONG_TERM: Dict[str, List[str]] = {
    "aggressive": ["Potential high returns", "Market leadership position", "Increased competition response"],
    "conservative": ["Sustainable growth", "Risk mitigation", "Gradual market position improvement"],
    "innovative": ["Competitive differentiation", "New market opportunities", "Enhanced reputation for innovation"],
}

_SKILLS: Dict[str, Dict[str, int]] = {
    "aggressive": {"leadership": 3, "risk_management": 2, "strategic_thinking": 3},
    "conservative": {"planning": 3, "risk_assessment": 3, "financial_management": 2},
    "innovative": {"creativity": 3, "problem_solving": 3, "adaptability": 2},
}

# (share of budget spent, time required, who is involved)
_RESOURCE_PROFILES: Dict[str, tuple] = {
    "aggressive": (0.3, "2-4 weeks", ["all_departments", "external_consultants"]),
    "conservative": (0.1, "6-8 weeks", ["core_team", "gradual_rollout"]),
    "innovative": (0.2, "4-6 weeks", ["r&d_team", "pilot_group"]),
}

TEXT_RESPONSE_ID = "text_response"
_TEXT_PREVIEW_LENGTH = 100


def format_money(amount: float) -> str:
    """Thousands-separated amount, without decimals for whole numbers."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"


def _fill(template: str, scenario: dict, context: dict) -> str:
    resources = context.get("resources") or {}
    background = context.get("user_background") or {}
    return template.format(
        challenge=(scenario.get("challenge") or "").lower(),
        career_path=background.get("career_path") or catalog.DEFAULT_CAREER,
        location=context.get("location", ""),
        industry=context.get("industry", ""),
        market_conditions=context.get("market_conditions", ""),
        budget=format_money(resources.get("budget") or 0),
        team_size=resources.get("team_size", ""),
    )


def resource_impact(archetype: str, context: dict) -> ResourceImpactDef:
    share, time_required, team = _RESOURCE_PROFILES.get(archetype) or _RESOURCE_PROFILES[DEFAULT_ARCHETYPE]
    budget = (context.get("resources") or {}).get("budget") or 0
    return {
        "budget_change": -(budget * share),
        "time_required": time_required,
        "team_involvement": list(team),
    }


def build_option(
    archetype: str,
    index: int,
    scenario: dict,
    context: dict,
    rng: Optional[random.Random] = None,
) -> SimulationOptionDef:
    rng = get_rng(rng)
    if archetype not in RISK_LEVELS:
        archetype = DEFAULT_ARCHETYPE
    return {
        "id": f"option_{index}",
        "text": _fill(pick(rng, _OPTION_TEXTS[archetype]), scenario, context),
        "reasoning": _fill(pick(rng, _REASONING[archetype]), scenario, context),
        "immediate_consequences": list(_IMMEDIATE[archetype]),
        "long_term_effects": list(_LONG_TERM[archetype]),
        "skill_development": dict(_SKILLS[archetype]),
        "risk_level": RISK_LEVELS[archetype],
        "resource_impact": resource_impact(archetype, context),
    }


def generate_options(
    scenario: dict, context: dict, rng: Optional[random.Random] = None
) -> List[SimulationOptionDef]:
    """Three options, one per archetype, in fixed order."""
    rng = get_rng(rng)
    return [build_option(archetype, i, scenario, context, rng) for i, archetype in enumerate(ARCHETYPES, 1)]


def option_from_response(response_text: str) -> SimulationOptionDef:
    """Wrap a free-text answer as a balanced, budget-neutral option so it can be scored."""
    text = (response_text or "").strip() or "User response"
    if len(text) > _TEXT_PREVIEW_LENGTH:
        text = text[:_TEXT_PREVIEW_LENGTH] + "..."
    return {
        "id": TEXT_RESPONSE_ID,
        "text": text,
        "reasoning": "User-provided strategic response to the scenario",
        "immediate_consequences": ["Strategic implementation", "Stakeholder response"],
        "long_term_effects": ["Business development", "Market impact"],
        "skill_development": {"strategic_thinking": 3, "decision_making": 2, "communication": 2},
        "risk_level": "medium",
        "resource_impact": {
            "budget_change": 0,
            "time_required": "2-4 weeks",
            "team_involvement": ["management", "operations"],
        },
    }
