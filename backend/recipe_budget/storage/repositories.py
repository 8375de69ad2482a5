"""
Recipe persistence and the conversion between stored rows and the plain
Recipe shape the scaling engine works on.
"""

from dataclasses import asdict
from typing import Iterable, List, Optional

from sqlmodel import Session, select

from recipe_budget.logging import get_logger
from recipe_budget.services.scaling.costing import with_computed_costs
from recipe_budget.services.scaling.models import DIFFICULTIES, UNITS, Ingredient, InstructionStep, Recipe
from recipe_budget.storage.models import RecipeRecord

logger = get_logger(__name__)


def to_recipe(record: RecipeRecord) -> Recipe:
    return Recipe(
        id=record.id,
        name=record.name,
        description=record.description,
        servings=record.servings,
        ingredients=[
            Ingredient(
                name=item["name"],
                quantity=item["quantity"],
                unit=item["unit"],
                cost_per_unit=item["cost_per_unit"],
                total_cost=item.get("total_cost") or 0.0,
            )
            for item in record.ingredients or []
        ],
        instructions=[
            InstructionStep(step_number=item["step_number"], description=item["description"])
            for item in record.instructions or []
        ],
        total_cost=record.total_cost,
        prep_time=record.prep_time,
        cook_time=record.cook_time,
        difficulty=record.difficulty,
        category=record.category,
        cuisine=record.cuisine,
        tags=list(record.tags or []),
    )


def _check_vocabulary(recipe: Recipe) -> None:
    if recipe.difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty {recipe.difficulty!r} for recipe {recipe.name!r}")
    for ingredient in recipe.ingredients:
        if ingredient.unit not in UNITS:
            raise ValueError(f"Unknown unit {ingredient.unit!r} for ingredient {ingredient.name!r}")


def to_record(recipe: Recipe) -> RecipeRecord:
    """
    Build a row with ingredient and recipe totals recomputed from quantity * unit price.

    Raises ValueError when the difficulty or an ingredient unit is outside the
    known vocabulary.
    """
    _check_vocabulary(recipe)
    priced = with_computed_costs(recipe)
    return RecipeRecord(
        name=priced.name.strip(),
        description=priced.description.strip(),
        servings=str(priced.servings).strip(),
        ingredients=[asdict(ingredient) for ingredient in priced.ingredients],
        instructions=[asdict(step) for step in priced.instructions],
        total_cost=priced.total_cost,
        prep_time=priced.prep_time,
        cook_time=priced.cook_time,
        difficulty=priced.difficulty,
        category=priced.category,
        cuisine=priced.cuisine,
        tags=list(priced.tags),
    )


def create_recipe(session: Session, recipe: Recipe) -> Recipe:
    record = to_record(recipe)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info("recipes.created id=%s name=%s total_cost=%s", record.id, record.name, record.total_cost)
    return to_recipe(record)


def create_recipes(session: Session, recipes: Iterable[Recipe]) -> List[Recipe]:
    records = [to_record(recipe) for recipe in recipes]
    session.add_all(records)
    session.commit()
    for record in records:
        session.refresh(record)
    return [to_recipe(record) for record in records]


def list_recipes(session: Session) -> List[Recipe]:
    statement = select(RecipeRecord).order_by(RecipeRecord.created_at.desc(), RecipeRecord.id.desc())
    return [to_recipe(record) for record in session.exec(statement)]


def get_recipe(session: Session, recipe_id: int) -> Optional[Recipe]:
    record = session.get(RecipeRecord, recipe_id)
    return to_recipe(record) if record else None


def _matches(recipe: Recipe, needle: str) -> bool:
    haystack = [recipe.name, recipe.description, recipe.category or "", recipe.cuisine or ""]
    haystack.extend(ingredient.name for ingredient in recipe.ingredients)
    haystack.extend(recipe.tags)
    return any(needle in value.lower() for value in haystack)


def search_recipes(session: Session, query: str) -> List[Recipe]:
    """Case-insensitive substring match over name, description, ingredients, tags, category and cuisine."""
    needle = query.strip().lower()
    recipes = list_recipes(session)
    if not needle:
        return recipes
    return [recipe for recipe in recipes if _matches(recipe, needle)]


def clear_recipes(session: Session) -> int:
    records = list(session.exec(select(RecipeRecord)))
    for record in records:
        session.delete(record)
    session.commit()
    logger.info("recipes.cleared removed=%s", len(records))
    return len(records)
