import math
import re

from recipe_budget.services.scaling.models import Servings

DEFAULT_SERVINGS = 1

_FIRST_NUMBER = re.compile(r"\d+")


def parse_servings(value: Servings) -> float:
    """
    Best-effort serving count from a loosely written descriptor. Never raises.

    6 -> 6, "4 people" -> 4, "4 to 6" -> 4 (first number wins),
    "", None, "no digits here" -> 1.
    Numbers pass through untouched; zero, negative or non-finite counts fall
    back to 1 so a scale factor built from the result is always finite.
    """
    if isinstance(value, bool):
        return DEFAULT_SERVINGS
    if isinstance(value, (int, float)):
        if not math.isfinite(value) or value <= 0:
            return DEFAULT_SERVINGS
        return value
    if not value:
        return DEFAULT_SERVINGS
    match = _FIRST_NUMBER.search(str(value))
    if not match:
        return DEFAULT_SERVINGS
    return int(match.group(0)) or DEFAULT_SERVINGS
