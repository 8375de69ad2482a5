from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_budget.api.routes import router as api_router
from recipe_budget.config import settings
from recipe_budget.logging import configure_logging, get_logger
from recipe_budget.storage.db import create_db_and_tables, get_session
from recipe_budget.storage.seed import seed_recipes

app = FastAPI(title="Budget Recipes API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    logger.info("startup: env=%s database=%s", settings.env, settings.database_url)
    create_db_and_tables()
    if settings.seed_on_startup:
        with get_session() as session:
            seed_recipes(session)


app.include_router(api_router)
