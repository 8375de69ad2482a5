import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from recipe_budget import main
from recipe_budget.services.scaling.models import Ingredient, Recipe
from recipe_budget.storage import db as db_module


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(monkeypatch, engine):
    monkeypatch.setattr(db_module, "engine", engine)
    monkeypatch.setattr(main.settings, "seed_on_startup", False)

    client = TestClient(main.app)
    return client


@pytest.fixture(name="rice_and_chicken")
def rice_and_chicken_fixture():
    """Base recipe: 4 servings, 100.00 total (rice 20.00 + chicken 80.00)."""
    return Recipe(
        id=1,
        name="Chicken Rice",
        description="Rice with chicken",
        servings="4",
        total_cost=100.0,
        ingredients=[
            Ingredient(name="rice", quantity=2, unit="cups", cost_per_unit=10, total_cost=20),
            Ingredient(name="chicken", quantity=1, unit="kg", cost_per_unit=80, total_cost=80),
        ],
    )
