from typing import Optional

from pydantic import BaseModel


class IngredientOut(BaseModel):
    name: str
    quantity: float
    unit: str
    cost_per_unit: float
    total_cost: float
    formatted_total_cost: str | None = None
    formatted_cost_per_unit: str | None = None


class InstructionStepOut(BaseModel):
    step_number: int
    description: str


class RecipeOut(BaseModel):
    id: Optional[int]
    name: str
    description: str
    servings: str
    ingredients: list[IngredientOut]
    instructions: list[InstructionStepOut] = []
    total_cost: float
    cost_per_serving: float
    total_time: int
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    difficulty: str
    category: Optional[str] = None
    cuisine: Optional[str] = None
    tags: list[str] = []
    formatted_total_cost: str
    formatted_cost_per_serving: str
    # Present when the figures were scaled to a requested serving count.
    original_servings: float | None = None
    target_servings: float | None = None
    scale_factor: float | None = None
    # Present on budget-filtered results.
    scaled_total_cost: float | None = None
    fits_in_budget: bool | None = None


class IngredientCostLineOut(BaseModel):
    name: str
    original_quantity: float
    scaled_quantity: float
    unit: str
    cost_per_unit: float
    original_total_cost: float
    scaled_total_cost: float
    percentage_of_total: float
    formatted_scaled_total_cost: str


class CostBreakdownOut(BaseModel):
    original_servings: float
    target_servings: float
    scale_factor: float
    original_total_cost: float
    scaled_total_cost: float
    cost_per_serving: float
    formatted_scaled_total_cost: str
    formatted_cost_per_serving: str
    ingredients: list[IngredientCostLineOut]


class ScaledRecipeDetail(RecipeOut):
    cost_breakdown: CostBreakdownOut


class RecipeFilters(BaseModel):
    budget: float | None = None
    servings: int | None = None
    min_budget: float | None = None
    max_budget: float | None = None


class RecipeListResponse(BaseModel):
    count: int
    data: list[RecipeOut]
    query: str | None = None
    filters: RecipeFilters | None = None
