"""Simulation engine package for venture decision rounds.

This package keeps the core simulation logic (templates, synthesis,
scoring, coach feedback, session state) pure and framework-agnostic so it
can be exercised from tests, the CLI and any outer service.
"""

from . import catalog, templates, performance, selector, options, synthesizer, coach, rules_engine  # noqa: F401
from . import synthetic_data, state_machine  # noqa: F401

from .coach import generate_detailed_feedback  # noqa: F401
from .rules_engine import generate_simulation_result  # noqa: F401
from .synthesizer import generate_simulation  # noqa: F401
