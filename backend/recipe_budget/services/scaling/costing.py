"""
Currency rounding and the derived cost fields of a recipe.

total_cost on an ingredient and on a recipe is a cache of quantity * unit price.
Callers recompute it with with_computed_costs whenever ingredients change;
nothing recomputes it implicitly.
"""

import math
from dataclasses import replace
from numbers import Real
from typing import Iterable

from recipe_budget.services.scaling.models import Ingredient, Recipe


def round_currency(amount: object) -> float:
    """Round half-up to 2 decimals. Non-numeric, NaN and infinite input becomes 0."""
    if isinstance(amount, bool) or not isinstance(amount, Real):
        return 0.0
    value = float(amount)
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 100 + 0.5) / 100


def compute_ingredient_total_cost(quantity: float, cost_per_unit: float) -> float:
    return round_currency(quantity * cost_per_unit)


def compute_recipe_total_cost(ingredients: Iterable[Ingredient]) -> float:
    total = sum(
        compute_ingredient_total_cost(ingredient.quantity, ingredient.cost_per_unit)
        for ingredient in ingredients
    )
    return round_currency(total)


def with_computed_costs(recipe: Recipe) -> Recipe:
    ingredients = [
        replace(
            ingredient,
            total_cost=compute_ingredient_total_cost(ingredient.quantity, ingredient.cost_per_unit),
        )
        for ingredient in recipe.ingredients
    ]
    return replace(
        recipe,
        ingredients=ingredients,
        total_cost=round_currency(sum(ingredient.total_cost for ingredient in ingredients)),
    )
