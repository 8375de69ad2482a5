import math
from numbers import Real
from typing import Optional

from recipe_budget.config import settings


def format_currency(amount: object, symbol: Optional[str] = None) -> str:
    """Render a money value for display, e.g. 12.5 -> '₱12.50'."""
    prefix = settings.currency_symbol if symbol is None else symbol
    if isinstance(amount, bool) or not isinstance(amount, Real) or not math.isfinite(amount):
        return f"{prefix}0.00"
    return f"{prefix}{amount:.2f}"
