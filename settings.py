"""Runtime configuration for the venture simulation engine.

Values come from the environment, with a local `.env` file loaded first so
seeds and round defaults can be pinned during development.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root (next to this file) regardless of cwd
load_dotenv(Path(__file__).resolve().parent / ".env")


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


# Seed for the default randomness source; unset means non-deterministic runs
SIMULATION_SEED = _int_env("SIMULATION_SEED", None)

TOTAL_ROUNDS = _int_env("SIMULATION_TOTAL_ROUNDS", 5) or 5

# Defaults used when synthesizing the context for a session round
DEFAULT_INDUSTRY = os.getenv("SIMULATION_INDUSTRY", "Technology")
DEFAULT_LOCATION = os.getenv("SIMULATION_LOCATION", "Monrovia, Liberia")
DEFAULT_MARKET_CONDITIONS = os.getenv(
    "SIMULATION_MARKET_CONDITIONS", "emerging market with growth potential"
)
DEFAULT_TIME_CONSTRAINT = os.getenv("SIMULATION_TIME_CONSTRAINT", "2-3 months")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
