from fastapi import APIRouter

from recipe_budget.api.health import router as health_router
from recipe_budget.api.recipes import router as recipes_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(recipes_router)
