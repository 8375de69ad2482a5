"""
Demo recipe catalogue. Replaces every stored recipe.

    python -m recipe_budget.storage.seed
"""

from typing import List

from sqlmodel import Session

from recipe_budget.logging import configure_logging, get_logger
from recipe_budget.services.formatting import format_currency
from recipe_budget.services.scaling.models import Ingredient, InstructionStep, Recipe
from recipe_budget.services.scaling.recipe_scaler import cost_per_serving
from recipe_budget.storage.db import create_db_and_tables, get_session
from recipe_budget.storage.repositories import clear_recipes, create_recipes

logger = get_logger(__name__)


def _steps(*descriptions: str) -> List[InstructionStep]:
    return [InstructionStep(step_number=i, description=text) for i, text in enumerate(descriptions, start=1)]


DEMO_RECIPES: List[Recipe] = [
    Recipe(
        name="Chicken Adobo",
        description="Chicken braised in vinegar, soy sauce, garlic and bay leaves.",
        servings="4 people",
        ingredients=[
            Ingredient(name="chicken thighs", quantity=1, unit="kg", cost_per_unit=220),
            Ingredient(name="soy sauce", quantity=0.5, unit="cup", cost_per_unit=30),
            Ingredient(name="cane vinegar", quantity=0.5, unit="cup", cost_per_unit=20),
            Ingredient(name="garlic", quantity=8, unit="cloves", cost_per_unit=2.5),
            Ingredient(name="bay leaves", quantity=3, unit="pieces", cost_per_unit=1),
        ],
        instructions=_steps(
            "Marinate the chicken in soy sauce and garlic for 30 minutes.",
            "Brown the chicken, add the marinade, vinegar and bay leaves.",
            "Simmer covered for 35 minutes until the sauce thickens.",
        ),
        prep_time=35,
        cook_time=40,
        difficulty="Easy",
        category="Main Dish",
        cuisine="Filipino",
        tags=["filipino", "chicken", "braise"],
    ),
    Recipe(
        name="Pork Sinigang",
        description="Sour tamarind soup with pork ribs and vegetables.",
        servings="6",
        ingredients=[
            Ingredient(name="pork ribs", quantity=1, unit="kg", cost_per_unit=280),
            Ingredient(name="tamarind soup mix", quantity=1, unit="pack", cost_per_unit=25),
            Ingredient(name="kangkong", quantity=1, unit="bunch", cost_per_unit=20),
            Ingredient(name="radish", quantity=1, unit="pc", cost_per_unit=30),
            Ingredient(name="tomatoes", quantity=3, unit="pieces", cost_per_unit=8),
            Ingredient(name="string beans", quantity=1, unit="bunch", cost_per_unit=25),
        ],
        instructions=_steps(
            "Boil the pork ribs with tomatoes until tender.",
            "Add radish and string beans, then the tamarind mix.",
            "Finish with kangkong and season to taste.",
        ),
        prep_time=15,
        cook_time=60,
        difficulty="Medium",
        category="Soup",
        cuisine="Filipino",
        tags=["filipino", "pork", "soup"],
    ),
    Recipe(
        name="Tortang Talong",
        description="Grilled eggplant omelette.",
        servings="2 to 3",
        ingredients=[
            Ingredient(name="eggplant", quantity=2, unit="pieces", cost_per_unit=15),
            Ingredient(name="eggs", quantity=2, unit="large", cost_per_unit=9),
            Ingredient(name="cooking oil", quantity=3, unit="tbsp", cost_per_unit=2),
        ],
        instructions=_steps(
            "Grill the eggplants until the skin chars, then peel.",
            "Flatten each eggplant and dip in beaten egg.",
            "Pan-fry until golden on both sides.",
        ),
        prep_time=10,
        cook_time=20,
        difficulty="Easy",
        category="Main Dish",
        cuisine="Filipino",
        tags=["filipino", "vegetarian"],
    ),
    Recipe(
        name="Pancit Canton",
        description="Stir-fried egg noodles with pork and vegetables.",
        servings="5 people",
        ingredients=[
            Ingredient(name="canton noodles", quantity=500, unit="grams", cost_per_unit=0.12),
            Ingredient(name="pork belly", quantity=250, unit="grams", cost_per_unit=0.35),
            Ingredient(name="cabbage", quantity=0.5, unit="head", cost_per_unit=50),
            Ingredient(name="carrot", quantity=1, unit="pieces", cost_per_unit=12),
            Ingredient(name="soy sauce", quantity=3, unit="tbsp", cost_per_unit=2),
            Ingredient(name="celery", quantity=1, unit="stalk", cost_per_unit=10),
        ],
        instructions=_steps(
            "Saute the pork until browned.",
            "Add vegetables and soy sauce with a cup of water.",
            "Toss in the noodles and cook until the liquid is absorbed.",
        ),
        prep_time=20,
        cook_time=25,
        difficulty="Medium",
        category="Noodles",
        cuisine="Filipino",
        tags=["filipino", "noodles", "party"],
    ),
    Recipe(
        name="Ginisang Monggo",
        description="Sauteed mung bean stew with spinach.",
        servings=4,
        ingredients=[
            Ingredient(name="mung beans", quantity=250, unit="grams", cost_per_unit=0.2),
            Ingredient(name="spinach", quantity=1, unit="bunch", cost_per_unit=25),
            Ingredient(name="garlic", quantity=4, unit="cloves", cost_per_unit=2.5),
            Ingredient(name="onion", quantity=1, unit="pieces", cost_per_unit=10),
        ],
        instructions=_steps(
            "Boil the mung beans until soft.",
            "Saute garlic and onion, then add the beans.",
            "Stir in the spinach and simmer for 5 minutes.",
        ),
        prep_time=10,
        cook_time=45,
        difficulty="Easy",
        category="Main Dish",
        cuisine="Filipino",
        tags=["filipino", "vegetarian", "budget"],
    ),
]


def seed_recipes(session: Session) -> List[Recipe]:
    removed = clear_recipes(session)
    created = create_recipes(session, DEMO_RECIPES)
    logger.info("seed.done removed=%s created=%s", removed, len(created))
    for recipe in created:
        logger.info(
            "seed.recipe name=%s servings=%s total=%s per_serving=%s",
            recipe.name,
            recipe.servings,
            format_currency(recipe.total_cost),
            format_currency(cost_per_serving(recipe)),
        )
    return created


if __name__ == "__main__":
    configure_logging()
    create_db_and_tables()
    with get_session() as session:
        seed_recipes(session)
