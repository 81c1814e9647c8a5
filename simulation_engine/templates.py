"""Static scenario templates for venture simulations.

Templates are grouped by business stage. They are hard-coded and never
mutated; the synthesizer copies their lists into each generated scenario.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, TypedDict


class ScenarioTemplateDef(TypedDict):
    title: str
    context: str
    challenge: str
    stakeholders: List[str]
    constraints: List[str]
    success_metrics: List[str]


BUSINESS_STAGES: Tuple[str, ...] = ("startup", "growth", "established")
DEFAULT_STAGE = "startup"

_TEMPLATES: Dict[str, List[ScenarioTemplateDef]] = {stage: [] for stage in BUSINESS_STAGES}


def _register(stage: str, template: ScenarioTemplateDef) -> None:
    _TEMPLATES[stage].append(template)


_register(
    "startup",
    {
        "title": "The Funding Crunch Crisis",
        "context": (
            "Your fintech startup in Monrovia faces multiple simultaneous challenges: funding is running "
            "low (2 months runway), your lead developer just quit, a competitor launched a similar product, "
            "and the Central Bank of Liberia is considering new regulations that could affect your business model."
        ),
        "challenge": (
            "Navigate this multi-faceted crisis by making strategic decisions across funding, team "
            "management, competitive positioning, and regulatory compliance."
        ),
        "stakeholders": [
            "investors",
            "remaining_employees",
            "customers",
            "co-founders",
            "regulatory_bodies",
            "competitors",
        ],
        "constraints": [
            "limited_time",
            "cash_flow",
            "team_morale",
            "regulatory_uncertainty",
            "competitive_pressure",
        ],
        "success_metrics": [
            "runway_extension",
            "team_stability",
            "market_position",
            "regulatory_compliance",
            "customer_retention",
        ],
    },
)

_register(
    "startup",
    {
        "title": "Product-Market Fit Pivot",
        "context": (
            "After 6 months, user engagement is low and feedback suggests your product doesn't solve "
            "the right problem."
        ),
        "challenge": "Decide whether to pivot your product strategy or double down on current approach.",
        "stakeholders": ["users", "investors", "development_team", "early_customers"],
        "constraints": ["development_resources", "market_timing", "competitive_pressure"],
        "success_metrics": ["user_engagement", "market_validation", "revenue_potential"],
    },
)

_register(
    "startup",
    {
        "title": "First Customer Acquisition",
        "context": "Your product is ready but you haven't secured your first paying customer yet.",
        "challenge": "Choose the best strategy to acquire your first customers in the Liberian market.",
        "stakeholders": ["potential_customers", "team", "advisors", "local_community"],
        "constraints": ["marketing_budget", "brand_awareness", "trust_building"],
        "success_metrics": ["customer_acquisition", "revenue_generation", "market_feedback"],
    },
)

_register(
    "startup",
    {
        "title": "Regulatory Compliance Nightmare",
        "context": (
            "New government regulations threaten to shut down your operations within 30 days unless "
            "you comply with complex new requirements."
        ),
        "challenge": "Navigate regulatory compliance while maintaining business operations and customer trust.",
        "stakeholders": ["regulatory_bodies", "customers", "employees", "legal_advisors"],
        "constraints": ["compliance_deadline", "legal_costs", "operational_disruption"],
        "success_metrics": ["regulatory_approval", "business_continuity", "cost_management"],
    },
)

_register(
    "startup",
    {
        "title": "Talent War: Key Employee Exodus",
        "context": (
            "Three of your top performers just received competing offers from a well-funded competitor, "
            "and they're considering leaving."
        ),
        "challenge": "Retain critical talent while managing budget constraints and team morale.",
        "stakeholders": ["key_employees", "remaining_team", "competitors", "investors"],
        "constraints": ["salary_budget", "equity_pool", "company_culture"],
        "success_metrics": ["talent_retention", "team_productivity", "competitive_advantage"],
    },
)

_register(
    "startup",
    {
        "title": "Supply Chain Disruption Crisis",
        "context": (
            "Your main supplier in Ghana has shut down operations, leaving you with 2 weeks of inventory "
            "and no immediate alternatives."
        ),
        "challenge": "Secure alternative supply chains while maintaining product quality and customer commitments.",
        "stakeholders": ["customers", "suppliers", "logistics_partners", "investors"],
        "constraints": ["inventory_levels", "quality_standards", "cost_increases"],
        "success_metrics": ["supply_continuity", "customer_satisfaction", "cost_control"],
    },
)

_register(
    "startup",
    {
        "title": "Co-founder Conflict",
        "context": "You and your co-founder disagree on the company's direction and equity split.",
        "challenge": "Resolve the conflict while maintaining the partnership and company momentum.",
        "stakeholders": ["co-founder", "employees", "investors", "advisors"],
        "constraints": ["relationship_dynamics", "legal_implications", "company_culture"],
        "success_metrics": ["partnership_stability", "team_confidence", "operational_continuity"],
    },
)

_register(
    "growth",
    {
        "title": "The Great Scaling Dilemma",
        "context": "Your company is growing rapidly but team communication and culture are suffering.",
        "challenge": "Balance rapid growth with maintaining company culture and operational efficiency.",
        "stakeholders": ["existing_employees", "new_hires", "management", "customers"],
        "constraints": ["hiring_budget", "training_time", "cultural_integration"],
        "success_metrics": ["employee_satisfaction", "productivity", "customer_satisfaction"],
    },
)

_register(
    "growth",
    {
        "title": "Digital Transformation Crossroads",
        "context": (
            "Your traditional business model is being disrupted by digital competitors, and customers "
            "are demanding online services."
        ),
        "challenge": (
            "Transform your business digitally while maintaining existing operations and customer relationships."
        ),
        "stakeholders": ["traditional_customers", "digital_natives", "employees", "technology_partners"],
        "constraints": ["technology_budget", "employee_skills", "customer_adoption"],
        "success_metrics": ["digital_revenue", "customer_retention", "operational_efficiency"],
    },
)

_register(
    "growth",
    {
        "title": "Acquisition Opportunity Dilemma",
        "context": (
            "A smaller competitor has approached you for acquisition, but it would stretch your resources "
            "and require significant integration effort."
        ),
        "challenge": "Evaluate whether to acquire the competitor or focus on organic growth.",
        "stakeholders": ["acquisition_target", "employees", "customers", "investors"],
        "constraints": ["financial_resources", "integration_complexity", "market_timing"],
        "success_metrics": ["market_share", "revenue_growth", "integration_success"],
    },
)

_register(
    "growth",
    {
        "title": "Market Expansion Decision",
        "context": (
            "Your business is successful locally and you're considering expanding to other West African markets."
        ),
        "challenge": "Decide whether to expand regionally or consolidate your position in Liberia first.",
        "stakeholders": ["current_customers", "potential_customers", "investors", "regulatory_bodies"],
        "constraints": ["expansion_capital", "regulatory_compliance", "local_partnerships"],
        "success_metrics": ["market_penetration", "revenue_growth", "operational_efficiency"],
    },
)

_register(
    "growth",
    {
        "title": "Technology Investment",
        "context": "Your manual processes are becoming bottlenecks as you scale operations.",
        "challenge": "Choose the right technology investments to support growth without over-investing.",
        "stakeholders": ["operations_team", "customers", "investors", "technology_partners"],
        "constraints": ["technology_budget", "implementation_time", "staff_training"],
        "success_metrics": ["operational_efficiency", "customer_satisfaction", "cost_reduction"],
    },
)

_register(
    "established",
    {
        "title": "Legacy System Modernization Crisis",
        "context": "A new competitor with innovative technology is threatening your market position.",
        "challenge": "Decide how to respond to competitive threats while maintaining current operations.",
        "stakeholders": ["shareholders", "customers", "employees", "partners"],
        "constraints": ["innovation_budget", "legacy_systems", "market_expectations"],
        "success_metrics": ["market_share", "innovation_speed", "customer_retention"],
    },
)


def load_templates(business_stage: str) -> List[ScenarioTemplateDef]:
    """Return the templates eligible for a business stage.

    Unknown stages get the startup set.
    """
    return list(_TEMPLATES.get(business_stage) or _TEMPLATES[DEFAULT_STAGE])


def get_all_summaries() -> List[dict]:
    """Return lightweight summaries for listing."""
    return [
        {
            "stage": stage,
            "title": t["title"],
            "challenge": t["challenge"],
            "stakeholders": len(t["stakeholders"]),
        }
        for stage, templates in _TEMPLATES.items()
        for t in templates
    ]
