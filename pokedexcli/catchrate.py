"""Chance of catching a pokemon from its base experience."""

from __future__ import annotations

import math
import random

MAX_BASE_EXP = 600
MIN_CATCH_RATE = 5.0
MAX_CATCH_RATE = 95.0
CURVE_STEEPNESS = 1.5


def calculate_catch_rate(base_experience: int) -> float:
    """Return the catch rate in percent, rounded to one decimal place.

    The rate falls off exponentially from 95 for no experience to a floor
    of 5 at or above 600 base experience.
    """
    if base_experience <= 0:
        return MAX_CATCH_RATE
    if base_experience >= MAX_BASE_EXP:
        return MIN_CATCH_RATE

    normalized = base_experience / MAX_BASE_EXP
    rate = max(MAX_CATCH_RATE * math.exp(-CURVE_STEEPNESS * normalized), MIN_CATCH_RATE)
    # Round half away from zero; the rate is always positive here.
    return math.floor(rate * 10 + 0.5) / 10


def simulate_catch(base_experience: int, rng: random.Random | None = None) -> bool:
    """Roll once and report whether the pokemon was caught."""
    roll = 100 * (rng or random).random()
    return roll < calculate_catch_rate(base_experience)