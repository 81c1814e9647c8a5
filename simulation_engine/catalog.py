"""Career-path lookup tables and curated content banks.

Everything here is keyed data with no logic beyond the fallback lookups at
the bottom. Unknown career paths resolve to the `ceo` entries.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, TypedDict

DEFAULT_CAREER = "ceo"


class BookDef(TypedDict):
    title: str
    author: str
    relevance: str
    key_chapters: List[str]


class ArticleDef(TypedDict):
    title: str
    url: str
    source: str
    summary: str


class VideoDef(TypedDict):
    title: str
    url: str
    channel: str
    duration: str
    key_topics: List[str]


class CourseDef(TypedDict):
    title: str
    provider: str
    url: str
    level: str
    estimated_time: str


class ResourceBank(TypedDict):
    books: List[BookDef]
    articles: List[ArticleDef]
    videos: List[VideoDef]
    courses: List[CourseDef]


class ExampleDef(TypedDict):
    company: str
    situation: str
    outcome: str
    lesson: str


class ActionItemDef(TypedDict):
    task: str
    priority: str
    timeline: str
    resources_needed: List[str]


CAREER_TITLE_PREFIXES: Dict[str, List[str]] = {
    "ceo": ["Executive Decision:", "Leadership Challenge:", "Strategic Crisis:", "CEO Dilemma:"],
    "cto": ["Tech Leadership:", "Innovation Challenge:", "Technical Crisis:", "CTO Decision:"],
    "marketing": ["Brand Challenge:", "Market Crisis:", "Customer Dilemma:", "Marketing Strategy:"],
    "finance": ["Financial Crisis:", "Budget Challenge:", "Investment Decision:", "CFO Dilemma:"],
    "operations": ["Operational Crisis:", "Process Challenge:", "Efficiency Dilemma:", "Operations Decision:"],
    "sales": ["Revenue Challenge:", "Sales Crisis:", "Client Dilemma:", "Growth Decision:"],
    "hr": ["People Challenge:", "Culture Crisis:", "Talent Dilemma:", "HR Decision:"],
    "product": ["Product Crisis:", "User Challenge:", "Feature Dilemma:", "Product Decision:"],
}

# Bonus points merged into every round's skill gains, per career path
CAREER_SKILL_BONUSES: Dict[str, Dict[str, int]] = {
    "ceo": {"strategic_thinking": 3, "leadership": 2, "decision_making": 3},
    "cto": {"technical_leadership": 3, "innovation": 2, "system_thinking": 2},
    "marketing": {"market_analysis": 3, "creativity": 2, "customer_insights": 2},
    "finance": {"financial_analysis": 3, "risk_management": 2, "planning": 2},
    "operations": {"process_optimization": 3, "efficiency": 2, "quality_management": 2},
    "sales": {"relationship_building": 3, "negotiation": 2, "persuasion": 2},
    "hr": {"people_management": 3, "culture_building": 2, "communication": 2},
    "product": {"user_experience": 3, "product_strategy": 2, "innovation": 2},
}

# First two are "demonstrated", last two are "to develop" in feedback
CAREER_FOCUS_SKILLS: Dict[str, List[str]] = {
    "ceo": ["strategic_thinking", "leadership", "decision_making", "stakeholder_management"],
    "cto": ["technical_leadership", "innovation_management", "system_thinking", "team_building"],
    "marketing": ["market_analysis", "brand_management", "customer_insights", "creative_strategy"],
    "finance": ["financial_analysis", "risk_management", "budgeting", "investment_strategy"],
    "operations": ["process_optimization", "quality_management", "efficiency_improvement", "logistics"],
    "sales": ["relationship_building", "negotiation", "market_penetration", "revenue_optimization"],
    "hr": ["talent_management", "organizational_development", "culture_building", "performance_management"],
    "product": ["user_experience", "product_strategy", "market_research", "innovation"],
}

BASE_RESOURCES: ResourceBank = {
    "books": [
        {
            "title": "The Lean Startup",
            "author": "Eric Ries",
            "relevance": "Essential for understanding iterative business development and risk management",
            "key_chapters": ["Build-Measure-Learn", "Validated Learning"],
        },
        {
            "title": "Good to Great",
            "author": "Jim Collins",
            "relevance": "Provides frameworks for sustainable business growth and leadership",
            "key_chapters": ["Level 5 Leadership", "The Hedgehog Concept"],
        },
    ],
    "articles": [
        {
            "title": "The Hard Thing About Hard Things",
            "url": "https://a16z.com/2014/05/09/the-hard-thing-about-hard-things/",
            "source": "Andreessen Horowitz",
            "summary": "Practical advice for navigating difficult business decisions",
        },
        {
            "title": "Blitzscaling: The Lightning-Fast Path to Building Massively Valuable Companies",
            "url": "https://hbr.org/2016/04/blitzscaling",
            "source": "Harvard Business Review",
            "summary": "Strategies for rapid scaling in competitive markets",
        },
    ],
    "videos": [
        {
            "title": "How to Build Your Startup",
            "url": "https://www.youtube.com/watch?v=CVfnkM44Urs",
            "channel": "Stanford eCorner",
            "duration": "45 minutes",
            "key_topics": ["Product-Market Fit", "Team Building", "Fundraising"],
        },
        {
            "title": "The Single Biggest Reason Why Startups Succeed",
            "url": "https://www.youtube.com/watch?v=bNpx7gpSqbY",
            "channel": "TED",
            "duration": "6 minutes",
            "key_topics": ["Timing", "Market Analysis", "Execution"],
        },
    ],
    "courses": [
        {
            "title": "Entrepreneurship Specialization",
            "provider": "Coursera (University of Pennsylvania)",
            "url": "https://www.coursera.org/specializations/wharton-entrepreneurship",
            "level": "intermediate",
            "estimated_time": "4-6 months",
        },
        {
            "title": "Strategic Leadership and Management",
            "provider": "edX (MIT)",
            "url": "https://www.edx.org/course/strategic-leadership",
            "level": "advanced",
            "estimated_time": "8-10 weeks",
        },
    ],
}

CAREER_RESOURCES: Dict[str, ResourceBank] = {
    "cto": {
        "books": [
            {
                "title": "The Technology Fallacy",
                "author": "Gerald Kane",
                "relevance": "Understanding technology's role in business strategy",
                "key_chapters": ["Digital Transformation", "Technology Leadership"],
            }
        ],
        "articles": [
            {
                "title": "What Makes a Great CTO",
                "url": "https://firstround.com/review/what-makes-a-great-cto/",
                "source": "First Round Review",
                "summary": "Key competencies and responsibilities of technical leaders",
            }
        ],
        "videos": [
            {
                "title": "Building Technical Teams",
                "url": "https://www.youtube.com/watch?v=technical-teams",
                "channel": "Tech Leadership",
                "duration": "30 minutes",
                "key_topics": ["Hiring", "Team Culture", "Technical Vision"],
            }
        ],
        "courses": [
            {
                "title": "Technical Leadership",
                "provider": "Pluralsight",
                "url": "https://www.pluralsight.com/courses/technical-leadership",
                "level": "advanced",
                "estimated_time": "6 weeks",
            }
        ],
    },
    "marketing": {
        "books": [
            {
                "title": "Building a StoryBrand",
                "author": "Donald Miller",
                "relevance": "Creating clear marketing messages that resonate",
                "key_chapters": ["The StoryBrand Framework", "Customer Journey"],
            }
        ],
        "articles": [
            {
                "title": "The Future of Marketing",
                "url": "https://hbr.org/2020/01/marketing-in-the-age-of-alexa",
                "source": "Harvard Business Review",
                "summary": "How technology is changing marketing strategies",
            }
        ],
        "videos": [
            {
                "title": "Digital Marketing Strategy",
                "url": "https://www.youtube.com/watch?v=digital-marketing",
                "channel": "Marketing School",
                "duration": "25 minutes",
                "key_topics": ["SEO", "Content Marketing", "Social Media"],
            }
        ],
        "courses": [
            {
                "title": "Digital Marketing Specialization",
                "provider": "Coursera (University of Illinois)",
                "url": "https://www.coursera.org/specializations/digital-marketing",
                "level": "intermediate",
                "estimated_time": "3-4 months",
            }
        ],
    },
    "finance": {
        "books": [
            {
                "title": "Venture Deals",
                "author": "Brad Feld and Jason Mendelson",
                "relevance": "How term sheets, valuations and runway decisions fit together",
                "key_chapters": ["Economic Terms", "Raising Money the Right Way"],
            }
        ],
        "articles": [
            {
                "title": "How to Manage Cash Burn",
                "url": "https://hbr.org/2020/05/how-startups-can-manage-cash-burn",
                "source": "Harvard Business Review",
                "summary": "Extending runway without stalling growth",
            }
        ],
        "videos": [],
        "courses": [
            {
                "title": "Financial Management for Entrepreneurs",
                "provider": "edX (Babson College)",
                "url": "https://www.edx.org/course/financial-management-for-entrepreneurs",
                "level": "beginner",
                "estimated_time": "5 weeks",
            }
        ],
    },
}

EMPTY_RESOURCES: ResourceBank = {"books": [], "articles": [], "videos": [], "courses": []}

# How many of each resource kind a feedback document carries
RESOURCE_LIMITS: Dict[str, int] = {"books": 3, "articles": 3, "videos": 3, "courses": 2}

REAL_WORLD_EXAMPLES: Dict[str, List[ExampleDef]] = {
    "startup": [
        {
            "company": "Airbnb",
            "situation": "Faced regulatory challenges in multiple cities while trying to scale",
            "outcome": "Developed city-specific compliance strategies and stakeholder engagement",
            "lesson": "Proactive regulatory engagement is crucial for platform businesses",
        },
        {
            "company": "Slack",
            "situation": "Pivoted from gaming company to communication platform during financial crisis",
            "outcome": "Became one of the fastest-growing business applications",
            "lesson": "Sometimes the best opportunities come from unexpected pivots",
        },
    ],
    "growth": [
        {
            "company": "Netflix",
            "situation": "Transitioned from DVD-by-mail to streaming while cannibalizing existing business",
            "outcome": "Became the dominant streaming platform globally",
            "lesson": "Bold strategic moves sometimes require sacrificing current success for future growth",
        },
        {
            "company": "Shopify",
            "situation": "Scaled platform while maintaining performance and adding new features",
            "outcome": "Became the leading e-commerce platform for small businesses",
            "lesson": "Technical excellence and customer focus enable sustainable scaling",
        },
    ],
}

ACTION_ITEMS: List[ActionItemDef] = [
    {
        "task": "Create a detailed implementation plan with milestones and success metrics",
        "priority": "high",
        "timeline": "1 week",
        "resources_needed": ["team input", "market research", "financial projections"],
    },
    {
        "task": "Identify and engage key stakeholders for buy-in and support",
        "priority": "high",
        "timeline": "2 weeks",
        "resources_needed": ["stakeholder mapping", "communication plan", "presentation materials"],
    },
    {
        "task": "Develop risk mitigation strategies for potential challenges",
        "priority": "medium",
        "timeline": "1 week",
        "resources_needed": ["risk assessment framework", "contingency planning", "expert consultation"],
    },
    {
        "task": "Set up monitoring and feedback systems to track progress",
        "priority": "medium",
        "timeline": "2 weeks",
        "resources_needed": ["analytics tools", "reporting dashboard", "feedback mechanisms"],
    },
]

REFLECTION_QUESTIONS: List[str] = [
    "What assumptions did you make when choosing this option, and how could you validate them?",
    "How might different stakeholders react to your decision, and how would you address their concerns?",
    "What would you do differently if you had unlimited resources versus significant constraints?",
    "How does this decision align with your long-term career goals and values?",
    "What early warning signs would indicate that your chosen approach isn't working?",
    "How could you apply the lessons from this scenario to real-world situations in your career?",
]


def _for_career(table: Mapping[str, object], career_path: str):
    return table.get(career_path) or table[DEFAULT_CAREER]


def title_prefixes(career_path: str) -> List[str]:
    return _for_career(CAREER_TITLE_PREFIXES, career_path)


def skill_bonuses(career_path: str) -> Dict[str, int]:
    return dict(_for_career(CAREER_SKILL_BONUSES, career_path))


def focus_skills(career_path: str) -> List[str]:
    return _for_career(CAREER_FOCUS_SKILLS, career_path)


def career_resources(career_path: str) -> ResourceBank:
    """Career-specific resources; empty bank for paths without extras."""
    return CAREER_RESOURCES.get(career_path) or EMPTY_RESOURCES


def examples_for_stage(business_stage: str) -> List[ExampleDef]:
    """Startups get startup stories; growth and established firms get growth stories."""
    key = "startup" if business_stage == "startup" else "growth"
    return REAL_WORLD_EXAMPLES[key]
