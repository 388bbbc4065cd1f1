from pydantic_settings import BaseSettings
from typing import Optional, List


DEFAULT_COMMON_MIXERS = [
    "soda water",
    "tonic water",
    "cola",
    "ginger beer",
    "ginger ale",
    "lemon juice",
    "lime juice",
    "orange juice",
    "pineapple juice",
    "cranberry juice",
    "grapefruit juice",
    "simple syrup",
    "sugar",
    "honey",
    "egg white",
    "cream",
    "milk",
    "coconut cream",
    "coffee",
    "water",
    "ice",
]


class Settings(BaseSettings):
    APP_NAME: str = "Liquor Cabinet API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    GEMINI_API_KEY: Optional[str] = None
    IDENTIFY_MODEL: str = "gemini-2.5-flash"
    RECIPE_MODEL: str = "gemini-2.5-flash"
    IDENTIFY_MAX_TOKENS: int = 1024
    RECIPES_MAX_TOKENS: int = 2048

    RECIPE_SUGGESTION_COUNT: int = 8
    COMMON_MIXERS: List[str] = DEFAULT_COMMON_MIXERS
    MEASUREMENT_UNITS: str = "metric"

    COCKTAIL_IMAGE_API_URL: str = (
        "https://www.thecocktaildb.com/api/json/v1/1/search.php"
    )
    COCKTAIL_IMAGE_TIMEOUT_SECONDS: float = 10.0

    ALLOWED_ORIGINS: List[str] = ["http://localhost", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
