"""Scenario synthesis: template + learner context -> one playable round.

A round is a scenario plus six tasks: one required primary decision whose
type depends on skill level, four required follow-up tasks in fixed order,
and an optional risk-assessment upload.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Optional, TypedDict

from . import catalog
from .options import SimulationOptionDef, format_money, generate_options
from .performance import UserPerformance, calculate_user_performance
from .randomness import get_rng, pick, token
from .selector import calculate_difficulty, select_template, used_scenarios
from .templates import ScenarioTemplateDef

logger = logging.getLogger(__name__)

PRIMARY_TASK_IDS = ("strategic_decision", "strategic_analysis", "strategic_response")
REQUIRED_TASK_POINTS = 20
OPTIONAL_TASK_POINTS = 10


class SimulationScenarioDef(TypedDict):
    id: str
    title: str
    context: str
    situation: str
    challenge: str
    stakeholders: List[str]
    constraints: List[str]
    success_metrics: List[str]
    difficulty_level: int
    estimated_time: int


class SimulationTaskDef(TypedDict, total=False):
    id: str
    type: str
    title: str
    description: str
    required: bool
    options: List[SimulationOptionDef]
    constraints: Dict[str, object]
    prompt: str
    evaluation_criteria: List[str]


class SimulationResponseDef(TypedDict):
    scenario: SimulationScenarioDef
    tasks: List[SimulationTaskDef]
    ai_context: str
    learning_objectives: List[str]
    total_points: int


ESSAY_CRITERIA = [
    "Problem identification and root cause analysis",
    "Stakeholder impact assessment",
    "Strategic options evaluation",
    "Risk assessment and mitigation strategies",
    "Implementation roadmap and timeline",
    "Success metrics and monitoring plan",
]

SHORT_ANSWER_CRITERIA = [
    "Clear decision articulation",
    "Logical reasoning process",
    "Consideration of key constraints",
    "Practical implementation approach",
]


def _background(context: dict) -> dict:
    return context.get("user_background") or {}


def _resources(context: dict) -> dict:
    return context.get("resources") or {}


def _career(context: dict) -> str:
    return _background(context).get("career_path") or catalog.DEFAULT_CAREER


def career_specific_title(base_title: str, career_path: str, rng: Optional[random.Random] = None) -> str:
    rng = get_rng(rng)
    prefix = pick(rng, catalog.title_prefixes(career_path))
    variations = [
        f"{prefix} {base_title}",
        base_title,
        f"{base_title} - {career_path.upper()} Perspective",
        f"{base_title}: A {career_path} Challenge",
    ]
    return pick(rng, variations)


def generate_situation(
    context: dict,
    performance: Optional[UserPerformance] = None,
    rng: Optional[random.Random] = None,
) -> str:
    rng = get_rng(rng)
    resources = _resources(context)
    situations = [
        f"In {context.get('location')}, your {context.get('industry')} business faces this challenge during "
        f"{context.get('market_conditions')} market conditions.",
        f"With a team of {resources.get('team_size')} and a budget of ${format_money(resources.get('budget') or 0)}, "
        "you must navigate this situation.",
        f"Given your {_career(context)} expertise and current skill level, this scenario "
        "tests your decision-making abilities.",
    ]

    # Only reference skills once there is history behind them
    if performance and performance["average_score"] > 0:
        strong, weak = performance["strong_skills"], performance["weak_skills"]
        if performance["average_score"] > 80 and strong:
            situations.append(
                f"Your previous strong performance in {' and '.join(strong)} positions you well for this "
                "advanced challenge."
            )
        elif performance["average_score"] < 60 and weak:
            situations.append(
                f"This scenario provides an opportunity to develop your {' and '.join(weak)} skills further."
            )
        if weak:
            situations.append(f"Focus on applying {weak[0]} principles as you work through this situation.")

    return pick(rng, situations)


def essay_prompt(scenario: SimulationScenarioDef, context: dict, rng: Optional[random.Random] = None) -> str:
    rng = get_rng(rng)
    resources = _resources(context)
    career = _career(context)
    budget = format_money(resources.get("budget") or 0)
    prompts = [
        f'Analyze the situation described in "{scenario["title"]}" from multiple perspectives. '
        "In your essay, address the following:\n\n"
        "1. **Situation Analysis**: What are the key challenges and opportunities present in this scenario? "
        "Consider both internal and external factors affecting your business.\n\n"
        "2. **Stakeholder Impact**: How does this situation affect different stakeholders "
        f"({', '.join(scenario['stakeholders'])})? What are their likely concerns and expectations?\n\n"
        "3. **Strategic Options**: Evaluate at least three different strategic approaches you could take. "
        "What are the pros and cons of each?\n\n"
        "4. **Recommended Action**: Based on your analysis, what specific actions would you take and why? "
        "Include a timeline and resource allocation.\n\n"
        "5. **Risk Management**: What are the potential risks of your chosen approach, and how would you "
        "mitigate them?\n\n"
        "6. **Success Metrics**: How would you measure the success of your strategy? What key performance "
        "indicators would you track?\n\n"
        f"Consider the unique context of operating in {context.get('location')} within the "
        f"{context.get('industry')} industry, with your background as a {career} and current resources of "
        f"{budget} budget and {resources.get('team_size')} team members.",
        f'You are facing the challenge described in "{scenario["title"]}". Write a comprehensive strategic '
        "response that demonstrates your understanding of the business environment and decision-making "
        "process.\n\nYour essay should include:\n\n"
        "**Executive Summary** (100-150 words): Briefly summarize the situation and your recommended approach.\n\n"
        "**Problem Analysis** (200-300 words):\n"
        "- Identify the core problems and their root causes\n"
        f"- Analyze the constraints: {', '.join(scenario['constraints'])}\n"
        f"- Consider the market conditions in {context.get('location')}\n\n"
        "**Strategic Framework** (250-400 words):\n"
        "- Apply relevant business frameworks to analyze the situation\n"
        f"- Consider your {career} expertise and how it applies\n"
        "- Evaluate the competitive landscape and market dynamics\n\n"
        "**Implementation Plan** (200-300 words):\n"
        "- Outline specific steps and timeline\n"
        f"- Address resource allocation (budget: {budget}, team: {resources.get('team_size')} members)\n"
        f"- Define success metrics: {', '.join(scenario['success_metrics'])}\n\n"
        "**Risk Assessment and Contingency Planning** (150-200 words):\n"
        "- Identify potential risks and their likelihood\n"
        "- Develop mitigation strategies\n"
        "- Create contingency plans for different scenarios\n\n"
        "Demonstrate critical thinking, practical application of business principles, and consideration "
        "of the unique challenges of operating in your local business environment.",
    ]
    return pick(rng, prompts)


def short_answer_prompt(scenario: SimulationScenarioDef, context: dict, rng: Optional[random.Random] = None) -> str:
    rng = get_rng(rng)
    resources = _resources(context)
    career = _career(context)
    budget = format_money(resources.get("budget") or 0)
    prompts = [
        f'Given the situation in "{scenario["title"]}", what would be your primary strategic decision and why?\n\n'
        "Consider:\n"
        f"- Your role as a {career}\n"
        f"- Available resources ({budget} budget, {resources.get('team_size')} team members)\n"
        f"- Key stakeholders: {', '.join(scenario['stakeholders'][:3])}\n"
        f"- Operating context in {context.get('location')}\n\n"
        "Provide a clear decision statement followed by 2-3 key reasons supporting your choice. "
        "Focus on practical implementation and expected outcomes.",
        f'How would you address the challenge presented in "{scenario["title"]}"?\n\n'
        "Your response should include:\n"
        "1. Your specific decision/approach\n"
        "2. Why this approach is appropriate given the constraints "
        f"({', '.join(scenario['constraints'][:2])})\n"
        "3. How you would implement it with your current resources\n"
        "4. What immediate actions you would take\n\n"
        f"Keep your response focused and actionable, demonstrating your {career} expertise.",
        f'Analyze the situation in "{scenario["title"]}" and propose your solution.\n\n'
        "Address these key points:\n"
        "- What is the most critical issue that needs immediate attention?\n"
        "- What approach would you take and why?\n"
        f"- How does your {career} background influence your decision?\n"
        "- What would be your first three actions?\n\n"
        "Provide specific, practical recommendations that can be implemented with your available resources "
        f"in the {context.get('location')} market.",
    ]
    return pick(rng, prompts)


def select_primary_task_type(skill_level: int, rng: Optional[random.Random] = None) -> str:
    """Beginners mostly get multiple choice; advanced learners mostly write essays."""
    rng = get_rng(rng)
    if skill_level < 40:
        return "multiple_choice" if rng.random() < 0.6 else "short_answer"
    if skill_level < 80:
        return pick(rng, ["multiple_choice", "short_answer", "essay"])
    return "multiple_choice" if rng.random() < 0.4 else "essay"


def primary_task(
    task_type: str,
    scenario: SimulationScenarioDef,
    context: dict,
    rng: Optional[random.Random] = None,
) -> SimulationTaskDef:
    rng = get_rng(rng)
    if task_type == "multiple_choice":
        return {
            "id": "strategic_decision",
            "type": "multiple_choice",
            "title": "Primary Strategic Response",
            "description": (
                "Choose your main strategic approach to address this crisis. Consider all stakeholders "
                "and long-term implications."
            ),
            "required": True,
            "options": generate_options(scenario, context, rng),
        }
    if task_type == "essay":
        return {
            "id": "strategic_analysis",
            "type": "essay",
            "title": "Comprehensive Strategic Analysis",
            "description": (
                "Provide a detailed analysis of the situation and develop a comprehensive strategic response."
            ),
            "prompt": essay_prompt(scenario, context, rng),
            "required": True,
            "constraints": {"min_length": 300, "max_length": 1500, "word_limit": 750},
            "evaluation_criteria": list(ESSAY_CRITERIA),
        }
    return {
        "id": "strategic_response",
        "type": "short_answer",
        "title": "Strategic Decision Rationale",
        "description": "Explain your primary strategic decision and the reasoning behind it.",
        "prompt": short_answer_prompt(scenario, context, rng),
        "required": True,
        "constraints": {"min_length": 100, "max_length": 400, "word_limit": 200},
        "evaluation_criteria": list(SHORT_ANSWER_CRITERIA),
    }


def follow_up_tasks(context: dict) -> List[SimulationTaskDef]:
    budget = _resources(context).get("budget") or 0
    return [
        {
            "id": "budget_allocation",
            "type": "budget_allocation",
            "title": "Emergency Budget Reallocation",
            "description": (
                f"You have ${format_money(budget)} remaining. Allocate funds across critical areas to maximize "
                "survival and growth potential."
            ),
            "required": True,
            "constraints": {"budget_limit": budget},
        },
        {
            "id": "action_plan",
            "type": "short_answer",
            "title": "90-Day Action Plan",
            "description": (
                "Write a detailed 90-day action plan explaining how you will execute your strategy. Include "
                "specific milestones, timelines, and success metrics."
            ),
            "required": True,
            "constraints": {"max_length": 1000},
        },
        {
            "id": "stakeholder_communication",
            "type": "short_answer",
            "title": "Stakeholder Communication Strategy",
            "description": (
                "Draft key messages for different stakeholder groups. How will you communicate this crisis "
                "and your response plan?"
            ),
            "required": True,
            "constraints": {"max_length": 800},
        },
        {
            "id": "priority_ranking",
            "type": "priority_ranking",
            "title": "Crisis Response Priorities",
            "description": "Rank these crisis response activities in order of priority (1 = highest priority).",
            "required": True,
            "constraints": {"max_items": 8},
        },
        {
            "id": "risk_assessment",
            "type": "file_upload",
            "title": "Risk Assessment Document",
            "description": (
                "Upload a detailed risk assessment document analyzing potential outcomes of your strategy "
                "(optional but recommended)."
            ),
            "required": False,
            "constraints": {"file_types": ["pdf", "doc", "docx", "txt"]},
        },
    ]


def generate_tasks(
    context: dict, scenario: SimulationScenarioDef, rng: Optional[random.Random] = None
) -> List[SimulationTaskDef]:
    rng = get_rng(rng)
    task_type = select_primary_task_type(_background(context).get("skill_level") or 0, rng)
    return [primary_task(task_type, scenario, context, rng)] + follow_up_tasks(context)


def primary_decision(tasks: List[SimulationTaskDef]) -> SimulationTaskDef:
    """The round's single primary decision task."""
    return next(task for task in tasks if task["id"] in PRIMARY_TASK_IDS)


def total_points(tasks: List[SimulationTaskDef]) -> int:
    return sum(REQUIRED_TASK_POINTS if task["required"] else OPTIONAL_TASK_POINTS for task in tasks)


def build_scenario(
    template: ScenarioTemplateDef,
    context: dict,
    performance: UserPerformance,
    difficulty: int,
    rng: Optional[random.Random] = None,
) -> SimulationScenarioDef:
    rng = get_rng(rng)
    career = _career(context)
    return {
        "id": f"sim_{int(time.time() * 1000)}_{token(rng)}",
        "title": career_specific_title(template["title"], career, rng),
        "context": f"{template['context']} Your {career} background gives you unique insights into this situation.",
        "situation": generate_situation(context, performance, rng),
        "challenge": template["challenge"],
        "stakeholders": list(template["stakeholders"]),
        "constraints": list(template["constraints"]),
        "success_metrics": list(template["success_metrics"]),
        "difficulty_level": difficulty,
        "estimated_time": rng.randrange(10, 20),
    }


def generate_simulation(
    context: dict,
    user_history: Optional[List[dict]] = None,
    rng: Optional[random.Random] = None,
) -> SimulationResponseDef:
    """Synthesize one simulation round for the learner."""
    rng = get_rng(rng)
    performance = calculate_user_performance(user_history)
    template = select_template(
        context.get("businessStage") or "",
        used_scenarios(context, user_history),
        rng,
    )
    difficulty = calculate_difficulty(context, performance, has_history=bool(user_history))
    scenario = build_scenario(template, context, performance, difficulty, rng)
    tasks = generate_tasks(context, scenario, rng)

    career = _career(context)
    response: SimulationResponseDef = {
        "scenario": scenario,
        "tasks": tasks,
        "ai_context": (
            f"As your AI mentor, I'll help you navigate this {difficulty}/5 difficulty scenario. Your {career} "
            "expertise and previous decisions will influence the outcomes. I'll provide personalized feedback "
            "based on your choice."
        ),
        "learning_objectives": [
            f"Develop {career} decision-making skills",
            "Learn to balance stakeholder interests in complex situations",
            "Practice resource allocation under constraints",
            "Understand long-term consequences of strategic decisions",
        ],
        "total_points": total_points(tasks),
    }
    logger.info(
        "Generated simulation %s (%s, difficulty %d, primary task %s)",
        scenario["id"],
        template["title"],
        difficulty,
        tasks[0]["type"],
    )
    return response
