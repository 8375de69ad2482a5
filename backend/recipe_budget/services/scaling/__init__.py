"""Recipe cost scaling and budget filtering. Pure functions, no I/O."""

from recipe_budget.services.scaling.costing import (
    compute_ingredient_total_cost,
    compute_recipe_total_cost,
    round_currency,
    with_computed_costs,
)
from recipe_budget.services.scaling.recipe_scaler import (
    InvalidArgumentError,
    cost_per_serving,
    filter_and_rank,
    filter_by_budget_range,
    ingredient_cost_breakdown,
    rank_within_budget,
    recipes_for_exact_budget,
    scale_to_servings,
    validate_parameters,
)
from recipe_budget.services.scaling.serving_parser import parse_servings

__all__ = [
    "InvalidArgumentError",
    "compute_ingredient_total_cost",
    "compute_recipe_total_cost",
    "cost_per_serving",
    "filter_and_rank",
    "filter_by_budget_range",
    "ingredient_cost_breakdown",
    "parse_servings",
    "rank_within_budget",
    "recipes_for_exact_budget",
    "round_currency",
    "scale_to_servings",
    "validate_parameters",
    "with_computed_costs",
]
