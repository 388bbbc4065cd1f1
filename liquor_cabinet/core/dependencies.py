from fastapi import Depends, Request
from sqlalchemy.orm import Session

from liquor_cabinet.core.config import Settings, settings
from liquor_cabinet.core.database import get_db
from liquor_cabinet.services.ai_client import CompletionClient
from liquor_cabinet.services.bottle_service import BottleService
from liquor_cabinet.services.cocktail_image_client import CocktailImageClient
from liquor_cabinet.services.identification_service import IdentificationService
from liquor_cabinet.services.recipe_service import RecipeService
from liquor_cabinet.services.stats_service import StatsService


def get_settings() -> Settings:
    return settings


def get_completion_client(request: Request) -> CompletionClient:
    """Client construit au démarrage (lifespan) et partagé via app.state"""
    return request.app.state.completion_client


def get_cocktail_image_client(request: Request) -> CocktailImageClient:
    return request.app.state.cocktail_image_client


def get_bottle_service(db: Session = Depends(get_db)) -> BottleService:
    return BottleService(db)


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(db)


def get_identification_service(
    completion_client: CompletionClient = Depends(get_completion_client),
    app_settings: Settings = Depends(get_settings),
) -> IdentificationService:
    return IdentificationService(completion_client, app_settings)


def get_recipe_service(
    db: Session = Depends(get_db),
    completion_client: CompletionClient = Depends(get_completion_client),
    image_client: CocktailImageClient = Depends(get_cocktail_image_client),
    app_settings: Settings = Depends(get_settings),
) -> RecipeService:
    return RecipeService(db, completion_client, image_client, app_settings)
