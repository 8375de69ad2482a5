"""Plain data shapes consumed and produced by the cost-scaling engine."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

UNITS = (
    "cups",
    "tbsp",
    "tsp",
    "lbs",
    "oz",
    "grams",
    "kg",
    "pieces",
    "cloves",
    "ml",
    "liters",
    # recipe-specific units found in the seeded catalogue
    "cup",
    "large",
    "clove",
    "scallion",
    "pc",
    "bunch",
    "pack",
    "head",
    "stalk",
    "sprigs",
)

DIFFICULTIES = ("Easy", "Medium", "Hard")

# A serving descriptor as authored: 4, "4", "4 people", "4 to 6".
Servings = Union[int, float, str, None]


@dataclass
class Ingredient:
    name: str
    quantity: float
    unit: str
    cost_per_unit: float
    # Cached quantity * cost_per_unit; see costing.with_computed_costs.
    total_cost: float = 0.0


@dataclass
class InstructionStep:
    step_number: int
    description: str


@dataclass
class Recipe:
    name: str
    description: str
    ingredients: List[Ingredient]
    servings: Servings
    instructions: List[InstructionStep] = field(default_factory=list)
    total_cost: float = 0.0
    id: Optional[int] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    difficulty: str = "Medium"
    category: Optional[str] = None
    cuisine: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)


@dataclass
class ScaledRecipe:
    """
    A recipe projected onto a target serving count.

    recipe holds the scaled copy (ingredients, total_cost and servings adjusted);
    the source recipe is never mutated.
    """

    recipe: Recipe
    original_servings: float
    target_servings: float
    scale_factor: float
    cost_per_serving: float


@dataclass
class FilteredRecipe(ScaledRecipe):
    scaled_total_cost: float = 0.0
    fits_in_budget: bool = False


@dataclass
class IngredientCostLine:
    name: str
    original_quantity: float
    scaled_quantity: float
    unit: str
    cost_per_unit: float
    original_total_cost: float
    scaled_total_cost: float
    percentage_of_total: float


@dataclass
class CostBreakdown:
    original_servings: float
    target_servings: float
    scale_factor: float
    original_total_cost: float
    scaled_total_cost: float
    cost_per_serving: float
    ingredients: List[IngredientCostLine]


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
