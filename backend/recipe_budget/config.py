from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "budget-recipes"
    env: str = "local"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./recipes.db"

    # Prefixed to every formatted money field in API responses.
    currency_symbol: str = "₱"

    # Upper bounds accepted by the filter and scaling endpoints.
    max_budget: float = 100000
    max_servings: int = 100

    # +/- window used when looking for recipes that land close to an exact budget.
    exact_budget_tolerance: float = 5.0

    # Load the bundled demo recipes when the API starts (replaces existing rows).
    seed_on_startup: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
