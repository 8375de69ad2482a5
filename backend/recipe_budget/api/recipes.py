from dataclasses import asdict
from typing import Sequence

from fastapi import APIRouter, HTTPException

from recipe_budget.logging import get_logger
from recipe_budget.schemas.recipe import (
    CostBreakdownOut,
    IngredientCostLineOut,
    IngredientOut,
    InstructionStepOut,
    RecipeFilters,
    RecipeListResponse,
    RecipeOut,
    ScaledRecipeDetail,
)
from recipe_budget.services.formatting import format_currency
from recipe_budget.services.scaling import (
    InvalidArgumentError,
    cost_per_serving,
    filter_and_rank,
    filter_by_budget_range,
    ingredient_cost_breakdown,
    rank_within_budget,
    scale_to_servings,
    validate_parameters,
)
from recipe_budget.services.scaling.models import (
    CostBreakdown,
    FilteredRecipe,
    Ingredient,
    Recipe,
    ScaledRecipe,
)
from recipe_budget.storage.db import get_session
from recipe_budget.storage.repositories import get_recipe, list_recipes, search_recipes

router = APIRouter()
logger = get_logger(__name__)


def _ingredient_out(ingredient: Ingredient) -> IngredientOut:
    return IngredientOut(
        name=ingredient.name,
        quantity=ingredient.quantity,
        unit=ingredient.unit,
        cost_per_unit=ingredient.cost_per_unit,
        total_cost=ingredient.total_cost,
        formatted_total_cost=format_currency(ingredient.total_cost),
        formatted_cost_per_unit=format_currency(ingredient.cost_per_unit),
    )


def _recipe_out(recipe: Recipe, per_serving: float, **scaling) -> RecipeOut:
    return RecipeOut(
        id=recipe.id,
        name=recipe.name,
        description=recipe.description,
        servings=str(recipe.servings),
        ingredients=[_ingredient_out(ingredient) for ingredient in recipe.ingredients],
        instructions=[InstructionStepOut(**asdict(step)) for step in recipe.instructions],
        total_cost=recipe.total_cost,
        cost_per_serving=per_serving,
        total_time=recipe.total_time,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        difficulty=recipe.difficulty,
        category=recipe.category,
        cuisine=recipe.cuisine,
        tags=recipe.tags,
        formatted_total_cost=format_currency(recipe.total_cost),
        formatted_cost_per_serving=format_currency(per_serving),
        **scaling,
    )


def _plain_out(recipe: Recipe) -> RecipeOut:
    return _recipe_out(recipe, cost_per_serving(recipe))


def _scaled_out(scaled: ScaledRecipe) -> RecipeOut:
    scaling = {
        "original_servings": scaled.original_servings,
        "target_servings": scaled.target_servings,
        "scale_factor": scaled.scale_factor,
    }
    if isinstance(scaled, FilteredRecipe):
        scaling["scaled_total_cost"] = scaled.scaled_total_cost
        scaling["fits_in_budget"] = scaled.fits_in_budget
    return _recipe_out(scaled.recipe, scaled.cost_per_serving, **scaling)


def _breakdown_out(breakdown: CostBreakdown) -> CostBreakdownOut:
    return CostBreakdownOut(
        original_servings=breakdown.original_servings,
        target_servings=breakdown.target_servings,
        scale_factor=breakdown.scale_factor,
        original_total_cost=breakdown.original_total_cost,
        scaled_total_cost=breakdown.scaled_total_cost,
        cost_per_serving=breakdown.cost_per_serving,
        formatted_scaled_total_cost=format_currency(breakdown.scaled_total_cost),
        formatted_cost_per_serving=format_currency(breakdown.cost_per_serving),
        ingredients=[
            IngredientCostLineOut(
                **asdict(line),
                formatted_scaled_total_cost=format_currency(line.scaled_total_cost),
            )
            for line in breakdown.ingredients
        ],
    )


def _validate_or_400(budget: float | None, servings: int | None) -> None:
    validation = validate_parameters(budget, servings)
    if not validation.is_valid:
        detail = ", ".join(validation.errors)
        logger.info("recipes.invalid_params budget=%s servings=%s errors=%s", budget, servings, detail)
        raise HTTPException(status_code=400, detail=detail)


def _scale_each(recipes: Sequence[Recipe], servings: int) -> list[ScaledRecipe]:
    scaled: list[ScaledRecipe] = []
    for recipe in recipes:
        try:
            scaled.append(scale_to_servings(recipe, servings))
        except InvalidArgumentError as e:
            logger.warning("recipes.scale_skipped id=%s reason=%s", recipe.id, e)
    return scaled


def _priced(recipes: Sequence[Recipe], budget: float | None, servings: int | None) -> list[RecipeOut]:
    """Shared pricing for the list and search views."""
    if budget is not None and servings is not None:
        return [_scaled_out(item) for item in filter_and_rank(recipes, budget, servings)]
    if budget is not None:
        return [_scaled_out(item) for item in rank_within_budget(recipes, budget)]
    if servings is not None:
        return [_scaled_out(item) for item in _scale_each(recipes, servings)]
    return [_plain_out(recipe) for recipe in recipes]


def _get_or_404(recipe_id: int) -> Recipe:
    with get_session() as session:
        recipe = get_recipe(session, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.get("/recipes", response_model=RecipeListResponse)
def list_all_recipes(
    search: str | None = None,
    budget: float | None = None,
    servings: int | None = None,
) -> RecipeListResponse:
    """
    All recipes, newest first.
    servings: scale every recipe to this many servings.
    budget: keep recipes at or under budget (scaled to servings when given), cheapest per serving first. A zero budget matches nothing.
    """
    _validate_or_400(budget, servings)
    with get_session() as session:
        recipes = search_recipes(session, search) if search and search.strip() else list_recipes(session)
    data = _priced(recipes, budget, servings)
    logger.info("recipes.list search=%s budget=%s servings=%s count=%s", search, budget, servings, len(data))
    return RecipeListResponse(count=len(data), data=data)


@router.get("/recipes/search", response_model=RecipeListResponse)
def search_all_recipes(
    q: str | None = None,
    budget: float | None = None,
    servings: int | None = None,
) -> RecipeListResponse:
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    _validate_or_400(budget, servings)
    with get_session() as session:
        recipes = search_recipes(session, q)
    data = _priced(recipes, budget, servings)
    logger.info("recipes.search q=%s count=%s", q.strip(), len(data))
    return RecipeListResponse(count=len(data), data=data, query=q.strip())


@router.get("/recipes/filter", response_model=RecipeListResponse)
def filter_recipes(
    budget: float | None = None,
    servings: int | None = None,
    min_budget: float | None = None,
    max_budget: float | None = None,
) -> RecipeListResponse:
    """
    Budget-aware listing.
    budget + servings: recipes whose scaled cost fits the budget, cheapest per serving first.
    budget alone: stored totals at or under budget, cheapest per serving first.
    min_budget / max_budget: inclusive cost window, optionally scaled to servings.
    """
    _validate_or_400(budget, servings)
    if min_budget is not None and min_budget < 0:
        raise HTTPException(status_code=400, detail="Minimum budget must be a positive number")
    if max_budget is not None and max_budget < 0:
        raise HTTPException(status_code=400, detail="Maximum budget must be a positive number")
    if min_budget is not None and max_budget is not None and min_budget > max_budget:
        raise HTTPException(status_code=400, detail="Minimum budget cannot be greater than maximum budget")

    with get_session() as session:
        recipes = list_recipes(session)

    logger.info(
        "recipes.filter.start budget=%s servings=%s min=%s max=%s recipes=%s",
        budget,
        servings,
        min_budget,
        max_budget,
        len(recipes),
    )
    if budget is not None and servings is not None:
        results = filter_and_rank(recipes, budget, servings)
    elif min_budget is not None or max_budget is not None:
        results = filter_by_budget_range(recipes, min_budget, max_budget, servings)
    elif budget is not None:
        results = rank_within_budget(recipes, budget)
    else:
        data = _priced(recipes, None, servings)
        return RecipeListResponse(
            count=len(data),
            data=data,
            filters=RecipeFilters(servings=servings),
        )

    data = [_scaled_out(item) for item in results]
    logger.info("recipes.filter.end count=%s", len(data))
    return RecipeListResponse(
        count=len(data),
        data=data,
        filters=RecipeFilters(budget=budget, servings=servings, min_budget=min_budget, max_budget=max_budget),
    )


@router.get("/recipes/{recipe_id}", response_model=RecipeOut)
def get_recipe_detail(recipe_id: int) -> RecipeOut:
    return _plain_out(_get_or_404(recipe_id))


@router.get("/recipes/{recipe_id}/servings/{servings}", response_model=ScaledRecipeDetail)
def get_scaled_recipe(recipe_id: int, servings: int) -> ScaledRecipeDetail:
    """Recipe scaled to servings, with each ingredient's share of the scaled total."""
    _validate_or_400(None, servings)
    recipe = _get_or_404(recipe_id)
    try:
        scaled = scale_to_servings(recipe, servings)
    except InvalidArgumentError as e:
        logger.info("recipes.scale_rejected id=%s servings=%s reason=%s", recipe_id, servings, e)
        raise HTTPException(status_code=400, detail=str(e))
    breakdown = ingredient_cost_breakdown(recipe, servings)
    return ScaledRecipeDetail(
        **_scaled_out(scaled).model_dump(),
        cost_breakdown=_breakdown_out(breakdown),
    )
