"""Coach feedback for a submitted decision.

Feedback is composed from curated content banks rather than a live model
call. Every section branches on the option's risk level, the business stage
or the career path, and always has a default to fall back on.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, TypedDict

from . import catalog
from .options import SimulationOptionDef
from .performance import UserPerformance, calculate_user_performance
from .randomness import get_rng, pick


class DecisionAnalysisDef(TypedDict):
    strengths: List[str]
    areas_for_improvement: List[str]
    alternative_approaches: List[str]


class SkillDevelopmentDef(TypedDict):
    skills_demonstrated: List[dict]
    skills_to_develop: List[dict]


class DetailedFeedbackDef(TypedDict):
    overall_assessment: str
    decision_analysis: DecisionAnalysisDef
    skill_development: SkillDevelopmentDef
    real_world_examples: List[catalog.ExampleDef]
    learning_resources: catalog.ResourceBank
    action_items: List[catalog.ActionItemDef]
    reflection_questions: List[str]


_ASSESSMENTS: Dict[str, List[str]] = {
    "low": [
        "Your conservative approach demonstrates strong risk management skills, which is crucial for {career} "
        "roles. This decision shows you prioritize stability and sustainable growth over quick wins.",
        "You've chosen a measured approach that aligns well with best practices in {career}. This shows maturity "
        "in decision-making and understanding of long-term consequences.",
    ],
    "medium": [
        "Your balanced approach shows good judgment in weighing risks against potential rewards. This is exactly "
        "the kind of strategic thinking expected from a {career}.",
        "You've struck a good balance between innovation and prudence. This decision demonstrates the analytical "
        "skills essential for {career} success.",
    ],
    "high": [
        "Your bold decision shows entrepreneurial courage and willingness to take calculated risks. While risky, "
        "this approach could lead to significant breakthroughs if executed well.",
        "You've chosen an aggressive strategy that could differentiate your business. This shows the kind of "
        "innovative thinking that drives industry leadership.",
    ],
}

_ALTERNATIVES = [
    "Implement a phased approach to reduce risk while maintaining innovation potential",
    "Develop partnerships to share resources and risks",
    "Create pilot programs to test concepts before full-scale implementation",
    "Establish clear success metrics and decision checkpoints for course correction",
]

MAX_ANALYSIS_ITEMS = 3
MAX_EXAMPLES = 2
MAX_ACTION_ITEMS = 3
MAX_REFLECTION_QUESTIONS = 4


def _readable(skill: str) -> str:
    return skill.replace("_", " ")


def overall_assessment(
    option: SimulationOptionDef,
    career: str,
    performance: Optional[UserPerformance] = None,
    rng: Optional[random.Random] = None,
) -> str:
    rng = get_rng(rng)
    candidates = _ASSESSMENTS.get(option.get("risk_level")) or _ASSESSMENTS["medium"]
    assessment = pick(rng, candidates).format(career=career)
    if performance and performance["average_score"] > 0:
        assessment += (
            f" Across your earlier rounds you averaged {performance['average_score']:.0f}/100, "
            "so compare this choice with how those decisions played out."
        )
    return assessment


def strengths(option: SimulationOptionDef, scenario: dict, context: dict) -> List[str]:
    found = []
    risk = option.get("risk_level")
    if risk == "low":
        found.append("Demonstrated strong risk management by choosing a conservative approach")
        found.append("Prioritized business stability and stakeholder confidence")
    elif risk == "high":
        found.append("Showed entrepreneurial courage and willingness to innovate")
        found.append("Recognized the potential for significant competitive advantage")
    else:
        found.append("Balanced risk and reward instead of committing to an extreme")

    if context.get("businessStage") == "startup":
        found.append("Considered the unique constraints and opportunities of a startup environment")
    if len(scenario.get("stakeholders") or []) > 3:
        found.append("Navigated a complex stakeholder environment effectively")
    return found[:MAX_ANALYSIS_ITEMS]


def areas_for_improvement(option: SimulationOptionDef) -> List[str]:
    found = []
    risk = option.get("risk_level")
    if risk == "high":
        found.append("Consider developing more detailed risk mitigation strategies for high-risk decisions")
        found.append("Explore ways to test assumptions before full implementation")
    elif risk == "low":
        found.append("Look for opportunities to be more innovative while maintaining prudent risk management")
        found.append("Consider how to accelerate growth while preserving stability")

    if ((option.get("resource_impact") or {}).get("budget_change") or 0) < -1000:
        found.append("Develop more cost-effective approaches to achieve similar outcomes")
    found.append("Enhance stakeholder communication and buy-in strategies")
    return found[:MAX_ANALYSIS_ITEMS]


def decision_analysis(option: SimulationOptionDef, scenario: dict, context: dict) -> DecisionAnalysisDef:
    return {
        "strengths": strengths(option, scenario, context),
        "areas_for_improvement": areas_for_improvement(option),
        "alternative_approaches": _ALTERNATIVES[:2],
    }


def skill_development(
    option: SimulationOptionDef,
    career: str,
    performance: Optional[UserPerformance] = None,
) -> SkillDevelopmentDef:
    """Career focus skills split into two demonstrated and two to develop.

    A known weak skill from earlier rounds replaces the last development item.
    """
    skills = catalog.focus_skills(career)
    level = "advanced" if option.get("risk_level") == "high" else "intermediate"
    choice = (option.get("text") or "").lower()

    to_develop = list(skills[2:4])
    weak = (performance or {}).get("weak_skills") or []
    if weak and weak[0] not in to_develop and weak[0] not in skills[:2]:
        to_develop[-1] = weak[0]

    return {
        "skills_demonstrated": [
            {
                "skill": _readable(skill),
                "level": level,
                "evidence": (
                    f"Your decision to {choice} demonstrates practical application of {_readable(skill)} principles"
                ),
            }
            for skill in skills[:2]
        ],
        "skills_to_develop": [
            {
                "skill": _readable(skill),
                "why_important": f"{_readable(skill)} is crucial for {career} success in today's business environment",
                "how_to_improve": f"Practice {_readable(skill)} through case studies, mentorship, and hands-on projects",
            }
            for skill in to_develop
        ],
    }


def learning_resources(career: str) -> catalog.ResourceBank:
    """Base reading list followed by career extras, truncated per kind."""
    extras = catalog.career_resources(career)
    return {
        kind: (list(catalog.BASE_RESOURCES[kind]) + list(extras[kind]))[:limit]
        for kind, limit in catalog.RESOURCE_LIMITS.items()
    }


def generate_detailed_feedback(
    scenario: dict,
    selected_option: SimulationOptionDef,
    context: dict,
    user_history: Optional[List[dict]] = None,
    rng: Optional[random.Random] = None,
) -> DetailedFeedbackDef:
    """Build the full feedback document for one decision."""
    rng = get_rng(rng)
    performance = calculate_user_performance(user_history)
    career = (context.get("user_background") or {}).get("career_path") or catalog.DEFAULT_CAREER

    return {
        "overall_assessment": overall_assessment(selected_option, career, performance, rng),
        "decision_analysis": decision_analysis(selected_option, scenario, context),
        "skill_development": skill_development(selected_option, career, performance),
        "real_world_examples": list(catalog.examples_for_stage(context.get("businessStage") or ""))[:MAX_EXAMPLES],
        "learning_resources": learning_resources(career),
        "action_items": list(catalog.ACTION_ITEMS[:MAX_ACTION_ITEMS]),
        "reflection_questions": list(catalog.REFLECTION_QUESTIONS[:MAX_REFLECTION_QUESTIONS]),
    }
