"""
Business logic services
"""

from liquor_cabinet.services.bottle_service import BottleService
from liquor_cabinet.services.stats_service import StatsService
from liquor_cabinet.services.identification_service import IdentificationService
from liquor_cabinet.services.recipe_service import RecipeService
from liquor_cabinet.services.ai_client import CompletionClient
from liquor_cabinet.services.cocktail_image_client import CocktailImageClient
from liquor_cabinet.services.import_service import ImportService

__all__ = [
    "BottleService",
    "StatsService",
    "IdentificationService",
    "RecipeService",
    "CompletionClient",
    "CocktailImageClient",
    "ImportService",
]
