"""
Serving-size-aware cost computation.

List pricing, budget filtering and the detail view all go through these
functions so a recipe shows the same figures everywhere. Every function is
pure: inputs are never mutated and every call returns fresh objects.

Rounding happens once, when each derived field is emitted. The recipe-level
scaled total is scaled from the original aggregate rather than re-summed from
the rounded ingredient costs, so the two can differ by a few cents.
"""

import math
from dataclasses import replace
from numbers import Real
from typing import Callable, List, Optional, Sequence

from recipe_budget.config import settings
from recipe_budget.logging import get_logger
from recipe_budget.services.scaling.costing import round_currency
from recipe_budget.services.scaling.models import (
    CostBreakdown,
    FilteredRecipe,
    Ingredient,
    IngredientCostLine,
    Recipe,
    ScaledRecipe,
    ValidationResult,
)
from recipe_budget.services.scaling.serving_parser import parse_servings

logger = get_logger(__name__)


class InvalidArgumentError(ValueError):
    """The caller broke the scaling contract (no ingredients, zero cost, bad target)."""


def _is_positive(value: object) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, Real)
        and math.isfinite(value)
        and value > 0
    )


def _is_positive_count(value: object) -> bool:
    return _is_positive(value) and float(value).is_integer()


def _scale_ingredients(ingredients: Sequence[Ingredient], factor: float) -> List[Ingredient]:
    return [
        replace(
            ingredient,
            quantity=round_currency(ingredient.quantity * factor),
            total_cost=round_currency(ingredient.total_cost * factor),
        )
        for ingredient in ingredients
    ]


def _project(recipe: Recipe, target_servings: float) -> ScaledRecipe:
    original_servings = parse_servings(recipe.servings)

    # Same serving count: stored figures pass through without re-rounding.
    if original_servings == target_servings:
        return ScaledRecipe(
            recipe=replace(recipe, ingredients=list(recipe.ingredients)),
            original_servings=original_servings,
            target_servings=target_servings,
            scale_factor=1.0,
            cost_per_serving=round_currency(recipe.total_cost / original_servings),
        )

    factor = target_servings / original_servings
    scaled_total = round_currency(recipe.total_cost * factor)
    return ScaledRecipe(
        recipe=replace(
            recipe,
            ingredients=_scale_ingredients(recipe.ingredients, factor),
            total_cost=scaled_total,
            servings=target_servings,
        ),
        original_servings=original_servings,
        target_servings=target_servings,
        scale_factor=round_currency(factor),
        cost_per_serving=round_currency(scaled_total / target_servings),
    )


def _as_is(recipe: Recipe) -> ScaledRecipe:
    own_servings = parse_servings(recipe.servings)
    return ScaledRecipe(
        recipe=replace(recipe, ingredients=list(recipe.ingredients)),
        original_servings=own_servings,
        target_servings=own_servings,
        scale_factor=1.0,
        cost_per_serving=cost_per_serving(recipe),
    )


def _annotate(scaled: ScaledRecipe, fits: Callable[[float], bool]) -> FilteredRecipe:
    cost = scaled.recipe.total_cost
    return FilteredRecipe(
        recipe=scaled.recipe,
        original_servings=scaled.original_servings,
        target_servings=scaled.target_servings,
        scale_factor=scaled.scale_factor,
        cost_per_serving=scaled.cost_per_serving,
        scaled_total_cost=cost,
        fits_in_budget=fits(cost),
    )


def scale_to_servings(recipe: Recipe, target_servings: int) -> ScaledRecipe:
    """
    Scale quantities and costs of a recipe to target_servings.

    Raises InvalidArgumentError when the recipe has no ingredients, a
    non-positive total_cost, or target_servings is not a positive integer.
    """
    if recipe is None or not recipe.ingredients:
        raise InvalidArgumentError("Recipe must have at least one ingredient")
    if not _is_positive(recipe.total_cost):
        raise InvalidArgumentError("Recipe total cost must be positive")
    if not _is_positive_count(target_servings):
        raise InvalidArgumentError("Target servings must be a positive integer")
    return _project(recipe, target_servings)


def filter_and_rank(
    recipes: Optional[Sequence[Recipe]],
    budget: Optional[float],
    target_servings: Optional[int],
) -> List[FilteredRecipe]:
    """
    Recipes whose cost at target_servings is at or under budget, cheapest per serving first.

    A missing or non-positive budget or target yields [] rather than an error.
    Ties keep their input order.
    """
    if not recipes:
        return []
    if not _is_positive(budget) or not _is_positive(target_servings):
        return []

    annotated = [
        _annotate(_project(recipe, target_servings), lambda cost: cost <= budget)
        for recipe in recipes
    ]
    matched = [item for item in annotated if item.fits_in_budget]
    matched.sort(key=lambda item: item.cost_per_serving)
    logger.debug(
        "scaler.filter_and_rank budget=%s servings=%s recipes=%s matched=%s",
        budget,
        target_servings,
        len(recipes),
        len(matched),
    )
    return matched


def filter_by_budget_range(
    recipes: Optional[Sequence[Recipe]],
    min_budget: Optional[float] = None,
    max_budget: Optional[float] = None,
    target_servings: Optional[int] = None,
) -> List[FilteredRecipe]:
    """
    Recipes whose cost falls inside the inclusive [min_budget, max_budget] window.

    With target_servings each recipe is scaled first and its scaled total is
    compared; without it the stored total is compared as is. A missing lower
    bound means 0 and a missing upper bound means unbounded. Results are
    ordered by the compared cost, cheapest first.
    """
    if not recipes:
        return []
    if target_servings is not None and not _is_positive(target_servings):
        return []

    low = 0.0 if min_budget is None else min_budget
    high = math.inf if max_budget is None else max_budget

    def in_range(cost: float) -> bool:
        return low <= cost <= high

    results: List[FilteredRecipe] = []
    for recipe in recipes:
        scaled = _project(recipe, target_servings) if target_servings is not None else _as_is(recipe)
        item = _annotate(scaled, in_range)
        if item.fits_in_budget:
            results.append(item)

    results.sort(key=lambda item: item.scaled_total_cost)
    logger.debug(
        "scaler.filter_by_budget_range min=%s max=%s servings=%s recipes=%s matched=%s",
        min_budget,
        max_budget,
        target_servings,
        len(recipes),
        len(results),
    )
    return results


def rank_within_budget(
    recipes: Optional[Sequence[Recipe]],
    budget: Optional[float],
) -> List[FilteredRecipe]:
    """
    Recipes whose stored total is at or under budget, cheapest per serving first.

    The unscaled counterpart of filter_and_rank: each recipe keeps its own
    serving count. A missing or non-positive budget yields []. Ties keep their
    input order.
    """
    if not recipes or not _is_positive(budget):
        return []

    annotated = [_annotate(_as_is(recipe), lambda cost: cost <= budget) for recipe in recipes]
    matched = [item for item in annotated if item.fits_in_budget]
    matched.sort(key=lambda item: item.cost_per_serving)
    logger.debug("scaler.rank_within_budget budget=%s recipes=%s matched=%s", budget, len(recipes), len(matched))
    return matched


def recipes_for_exact_budget(
    recipes: Optional[Sequence[Recipe]],
    exact_budget: Optional[float],
    target_servings: Optional[int],
    tolerance: Optional[float] = None,
) -> List[FilteredRecipe]:
    """Recipes landing within +/- tolerance of exact_budget at target_servings."""
    if not recipes or not _is_positive(exact_budget) or not _is_positive(target_servings):
        return []
    if tolerance is None:
        tolerance = settings.exact_budget_tolerance
    return filter_by_budget_range(
        recipes,
        max(0.0, exact_budget - tolerance),
        exact_budget + tolerance,
        target_servings,
    )


def cost_per_serving(recipe: Optional[Recipe], servings: Optional[float] = None) -> float:
    """total_cost / servings, defaulting to the recipe's own serving count. 0 instead of dividing by zero."""
    if recipe is None or not recipe.total_cost:
        return 0.0
    actual = servings or parse_servings(recipe.servings)
    if not _is_positive(actual):
        return 0.0
    return round_currency(recipe.total_cost / actual)


def ingredient_cost_breakdown(recipe: Optional[Recipe], target_servings: Optional[int]) -> Optional[CostBreakdown]:
    """Per-ingredient scaled cost and its share of the scaled total, for the detail view."""
    if recipe is None or not _is_positive(target_servings):
        return None

    original_servings = parse_servings(recipe.servings)
    factor = target_servings / original_servings
    exact_total = recipe.total_cost * factor

    lines: List[IngredientCostLine] = []
    for ingredient in recipe.ingredients:
        scaled_cost = round_currency(ingredient.total_cost * factor)
        share = scaled_cost / exact_total * 100 if exact_total else 0.0
        lines.append(
            IngredientCostLine(
                name=ingredient.name,
                original_quantity=ingredient.quantity,
                scaled_quantity=round_currency(ingredient.quantity * factor),
                unit=ingredient.unit,
                cost_per_unit=ingredient.cost_per_unit,
                original_total_cost=ingredient.total_cost,
                scaled_total_cost=scaled_cost,
                percentage_of_total=round_currency(share),
            )
        )

    return CostBreakdown(
        original_servings=original_servings,
        target_servings=target_servings,
        scale_factor=round_currency(factor),
        original_total_cost=recipe.total_cost,
        scaled_total_cost=round_currency(exact_total),
        cost_per_serving=round_currency(exact_total / target_servings),
        ingredients=lines,
    )


def validate_parameters(
    budget: Optional[float],
    servings: Optional[int],
    max_budget: Optional[float] = None,
    max_servings: Optional[int] = None,
) -> ValidationResult:
    """Collect messages for out-of-range budget/servings query values. Never raises."""
    if max_budget is None:
        max_budget = settings.max_budget
    if max_servings is None:
        max_servings = settings.max_servings

    result = ValidationResult()

    if budget is not None:
        if isinstance(budget, bool) or not isinstance(budget, Real) or not math.isfinite(budget):
            result.errors.append("Budget must be a valid number")
        elif budget < 0:
            result.errors.append("Budget cannot be negative")
        elif budget > max_budget:
            result.errors.append(f"Budget cannot exceed {settings.currency_symbol}{max_budget:,.0f}")

    if servings is not None:
        if isinstance(servings, bool) or not isinstance(servings, int):
            result.errors.append("Servings must be a valid integer")
        elif servings < 1:
            result.errors.append("Servings must be at least 1")
        elif servings > max_servings:
            result.errors.append(f"Servings cannot exceed {max_servings}")

    return result
