from datetime import datetime
from typing import Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel


class RecipeRecord(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    description: str
    servings: str  # free-text descriptor, e.g. "4 people"
    # [{"name", "quantity", "unit", "cost_per_unit", "total_cost"}]
    ingredients: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    # [{"step_number", "description"}]
    instructions: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_cost: float = Field(default=0.0, index=True)
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    difficulty: str = Field(default="Medium", index=True)  # Easy | Medium | Hard
    category: Optional[str] = None
    cuisine: Optional[str] = None
    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
