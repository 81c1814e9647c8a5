"""Pydantic data contracts and validated entry points for the simulation engine.

The engine works on plain dicts. This module is the boundary: it rejects
malformed input (negative budgets, empty teams, unknown stages) before the
engine sees it, and returns typed models to callers.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from simulation_engine import coach, rules_engine, synthesizer
from simulation_engine.options import option_from_response

logger = logging.getLogger(__name__)

BusinessStage = Literal["startup", "growth", "established"]
RiskLevel = Literal["low", "medium", "high"]
SkillLevel = Literal["beginner", "intermediate", "advanced"]
Priority = Literal["high", "medium", "low"]
TaskType = Literal[
    "multiple_choice",
    "essay",
    "short_answer",
    "budget_allocation",
    "priority_ranking",
    "file_upload",
]


class Resources(BaseModel):
    budget: float = Field(..., ge=0)
    team_size: int = Field(..., ge=1)
    time_constraint: str


class UserBackground(BaseModel):
    career_path: str
    skill_level: int = Field(..., ge=0)
    previous_decisions: List[str] = []


class SimulationContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    industry: str
    location: str
    business_stage: BusinessStage = Field(..., alias="businessStage")
    resources: Resources
    market_conditions: str = ""
    user_background: UserBackground


class RoundFeedback(BaseModel):
    outcome_score: float = 0
    skills_gained: Dict[str, float] = {}


class HistoryRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    round_number: Optional[int] = None
    scenario_type: Optional[str] = Field(None, alias="scenarioType")
    selected_option: Optional[str] = Field(None, alias="selectedOption")
    feedback: RoundFeedback = Field(default_factory=RoundFeedback)

    @model_validator(mode="before")
    @classmethod
    def nest_flat_outcome(cls, data):
        """Move a top-level outcome_score / skills_gained into feedback."""
        if not isinstance(data, dict) or "feedback" in data:
            return data
        flat = {key: data[key] for key in ("outcome_score", "skills_gained") if key in data}
        if not flat:
            return data
        rest = {key: value for key, value in data.items() if key not in flat}
        return {**rest, "feedback": flat}


class ResourceImpact(BaseModel):
    budget_change: float
    time_required: str
    team_involvement: List[str]


class SimulationOption(BaseModel):
    id: str
    text: str
    reasoning: str
    immediate_consequences: List[str]
    long_term_effects: List[str]
    skill_development: Dict[str, int]
    risk_level: RiskLevel
    resource_impact: ResourceImpact


class TaskConstraints(BaseModel):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_limit: Optional[int] = None
    budget_limit: Optional[float] = None
    max_items: Optional[int] = None
    file_types: Optional[List[str]] = None


class SimulationTask(BaseModel):
    id: str
    type: TaskType
    title: str
    description: str
    required: bool
    options: Optional[List[SimulationOption]] = None
    constraints: Optional[TaskConstraints] = None
    prompt: Optional[str] = None
    evaluation_criteria: Optional[List[str]] = None


class SimulationScenario(BaseModel):
    id: str
    title: str
    context: str
    situation: str
    challenge: str
    stakeholders: List[str]
    constraints: List[str]
    success_metrics: List[str]
    difficulty_level: int = Field(..., ge=1, le=5)
    estimated_time: int


class SimulationResponse(BaseModel):
    scenario: SimulationScenario
    tasks: List[SimulationTask]
    ai_context: str
    learning_objectives: List[str]
    total_points: int


class DecisionAnalysis(BaseModel):
    strengths: List[str]
    areas_for_improvement: List[str]
    alternative_approaches: List[str]


class SkillDemonstrated(BaseModel):
    skill: str
    level: SkillLevel
    evidence: str


class SkillToDevelop(BaseModel):
    skill: str
    why_important: str
    how_to_improve: str


class SkillDevelopment(BaseModel):
    skills_demonstrated: List[SkillDemonstrated]
    skills_to_develop: List[SkillToDevelop]


class RealWorldExample(BaseModel):
    company: str
    situation: str
    outcome: str
    lesson: str


class Book(BaseModel):
    title: str
    author: str
    relevance: str
    key_chapters: List[str] = []


class Article(BaseModel):
    title: str
    url: str
    source: str
    summary: str


class Video(BaseModel):
    title: str
    url: str
    channel: str
    duration: str
    key_topics: List[str]


class Course(BaseModel):
    title: str
    provider: str
    url: str
    level: SkillLevel
    estimated_time: str


class LearningResources(BaseModel):
    books: List[Book]
    articles: List[Article]
    videos: List[Video]
    courses: List[Course]


class ActionItem(BaseModel):
    task: str
    priority: Priority
    timeline: str
    resources_needed: List[str]


class DetailedFeedback(BaseModel):
    overall_assessment: str
    decision_analysis: DecisionAnalysis
    skill_development: SkillDevelopment
    real_world_examples: List[RealWorldExample]
    learning_resources: LearningResources
    action_items: List[ActionItem]
    reflection_questions: List[str] = Field(..., max_length=4)


class Consequences(BaseModel):
    immediate: List[str]
    short_term: List[str]
    long_term: List[str]


class SimulationResult(BaseModel):
    selected_option: SimulationOption
    outcome_description: str
    consequences: Consequences
    skill_gains: Dict[str, int]
    performance_score: int = Field(..., ge=0, le=100)
    ai_feedback: DetailedFeedback
    next_scenario_context: str


ContextInput = Union[SimulationContext, Dict[str, Any]]
HistoryInput = Optional[List[Union[HistoryRecord, Dict[str, Any]]]]


def _context(payload: ContextInput) -> dict:
    """Validate a context and return it in the engine's dict shape."""
    model = payload if isinstance(payload, SimulationContext) else SimulationContext.model_validate(payload)
    return model.model_dump(by_alias=True)


def _history(history: HistoryInput) -> List[dict]:
    records = []
    for record in history or []:
        model = record if isinstance(record, HistoryRecord) else HistoryRecord.model_validate(record)
        records.append(model.model_dump())
    return records


def _dump(model_or_dict: Union[BaseModel, Dict[str, Any]]) -> dict:
    if isinstance(model_or_dict, BaseModel):
        return model_or_dict.model_dump(exclude_none=True)
    return model_or_dict


def create_simulation(
    context: ContextInput,
    history: HistoryInput = None,
    rng: Optional[random.Random] = None,
) -> SimulationResponse:
    """Validate the learner context and synthesize one round."""
    raw = synthesizer.generate_simulation(_context(context), _history(history), rng)
    return SimulationResponse.model_validate(raw)


def resolve_option(
    simulation: Union[SimulationResponse, Dict[str, Any]],
    option_id: Optional[str] = None,
    response_text: Optional[str] = None,
) -> dict:
    """Find the chosen option, or wrap a free-text answer as one.

    Raises ValueError when neither or both are given, or when the option id
    does not belong to the round's primary decision.
    """
    if (option_id is None) == (response_text is None):
        raise ValueError("Provide exactly one of option_id or response_text.")
    if response_text is not None:
        return option_from_response(response_text)

    primary = synthesizer.primary_decision(_dump(simulation)["tasks"])
    option = next((o for o in primary.get("options") or [] if o["id"] == option_id), None)
    if not option:
        raise ValueError(f"Invalid option {option_id!r} for this round.")
    return option


def evaluate_decision(
    simulation: Union[SimulationResponse, Dict[str, Any]],
    context: ContextInput,
    option_id: Optional[str] = None,
    response_text: Optional[str] = None,
    history: HistoryInput = None,
    rng: Optional[random.Random] = None,
) -> SimulationResult:
    """Score the learner's answer to a round and build its feedback."""
    option = resolve_option(simulation, option_id, response_text)
    scenario = _dump(simulation)["scenario"]
    raw = rules_engine.generate_simulation_result(scenario, option, _context(context), _history(history), rng)
    logger.info("Scored %s for scenario %s: %d", option["id"], scenario["id"], raw["performance_score"])
    return SimulationResult.model_validate(raw)


def build_feedback(
    scenario: Union[SimulationScenario, Dict[str, Any]],
    option: Union[SimulationOption, Dict[str, Any]],
    context: ContextInput,
    history: HistoryInput = None,
    rng: Optional[random.Random] = None,
) -> DetailedFeedback:
    """Feedback document alone, without scoring."""
    raw = coach.generate_detailed_feedback(_dump(scenario), _dump(option), _context(context), _history(history), rng)
    return DetailedFeedback.model_validate(raw)
