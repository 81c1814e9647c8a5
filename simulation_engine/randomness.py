"""Randomness source shared by every generator in the engine.

All candidate-sentence picks and scoring noise go through a `random.Random`
instance. Callers pass their own (seeded) instance to pin outputs; otherwise
a process-wide default is used, seeded from `SIMULATION_SEED` when set.
"""

from __future__ import annotations

import random
import string
from typing import Optional, Sequence, TypeVar

import settings

T = TypeVar("T")

_DEFAULT_RNG = random.Random(settings.SIMULATION_SEED)

_TOKEN_ALPHABET = string.digits + string.ascii_lowercase


def get_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return the caller's generator, or the process default."""
    return rng if rng is not None else _DEFAULT_RNG


def pick(rng: random.Random, candidates: Sequence[T]) -> T:
    """Uniform choice from a non-empty candidate set."""
    return candidates[rng.randrange(len(candidates))]


def token(rng: random.Random, length: int = 9) -> str:
    """Short base-36 token for opaque ids."""
    return "".join(pick(rng, _TOKEN_ALPHABET) for _ in range(length))
