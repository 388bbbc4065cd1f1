from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from pydantic import TypeAdapter, ValidationError
import json
import logging
import re

from liquor_cabinet.core.config import Settings
from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.schemas.recipe import RawRecipe, Recipe
from liquor_cabinet.services.ai_client import CompletionClient
from liquor_cabinet.services.bottle_service import BottleService
from liquor_cabinet.services.cocktail_image_client import CocktailImageClient
from liquor_cabinet.services.recipe_matching import (
    annotate_recipe,
    bottle_categories,
    bottle_names,
    sort_by_category,
)
from liquor_cabinet.utils.exceptions import (
    AIResponseParseError,
    CocktailNotFoundException,
    EmptySearchQueryException,
)
from liquor_cabinet.utils.validators import sanitize_search_query

logger = logging.getLogger(__name__)

EMPTY_INVENTORY_MESSAGE = "Add some bottles to get recipe suggestions"

RECIPE_JSON_SHAPE = """{
  "name": "Cocktail name",
  "difficulty": "easy|medium|hard",
  "ingredients": [
    {"item": "Ingredient name", "amount": "amount with unit", "isSpirit": true/false}
  ],
  "instructions": "Step by step instructions in 2-4 sentences",
  "glassType": "Type of glass",
  "garnish": "Garnish suggestion"
}"""

_raw_recipe_list = TypeAdapter(List[RawRecipe])

_FENCE_START = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
_FENCE_END = re.compile(r"\n?```\s*$", re.IGNORECASE)


def clean_json_response(text: str) -> str:
    """Retire un éventuel bloc markdown ```json ... ``` autour de la réponse"""
    cleaned = text.strip()
    cleaned = _FENCE_START.sub("", cleaned)
    cleaned = _FENCE_END.sub("", cleaned)
    return cleaned.strip()


class RecipeService:
    def __init__(
        self,
        db: Session,
        completion_client: CompletionClient,
        image_client: CocktailImageClient,
        settings: Settings,
    ):
        self.db = db
        self.completion_client = completion_client
        self.image_client = image_client
        self.max_tokens = settings.RECIPES_MAX_TOKENS
        self.suggestion_count = settings.RECIPE_SUGGESTION_COUNT
        self.common_mixers = list(settings.COMMON_MIXERS)
        self.units = settings.MEASUREMENT_UNITS

    async def _get_active_bottles(self, user_id: int) -> List[Bottle]:
        # requête synchrone : hors de la boucle d'événements
        return await run_in_threadpool(BottleService(self.db).list_active, user_id)

    def _units_rule(self) -> str:
        if self.units == "imperial":
            return "- Give amounts in oz"
        return "- Give amounts in ml"

    def build_suggestion_prompt(self, bottles: List[Bottle]) -> str:
        bottle_list = "\n".join(
            f"- {b.brand} {b.product_name} ({b.sub_category or b.category})"
            for b in bottles
        )

        return f"""Given these bottles in my bar:
{bottle_list}

Suggest {self.suggestion_count} cocktails I can make or almost make. Prioritize cocktails where I have the main spirit(s).

IMPORTANT: Use well-known, classic cocktail names when possible (e.g., "Aperol Spritz", "Piña Colada", "Margarita", "Mojito") so images can be found in cocktail databases.

For each cocktail return a JSON object with:
{RECIPE_JSON_SHAPE}

Rules:
- isSpirit should be true ONLY for liquors/spirits/liqueurs (not mixers like juice, soda, syrup, bitters)
- Include classic cocktails that use my bottles
- Include some creative or lesser-known options
- Vary the difficulty levels
- Keep instructions concise but complete
{self._units_rule()}

Return ONLY a valid JSON array, no markdown, no code blocks, no explanation."""

    @staticmethod
    def build_search_prompt(query: str) -> str:
        return f"""Give me the recipe for: "{query}"

If this is a known cocktail, return a JSON object with:
{RECIPE_JSON_SHAPE}

Rules:
- isSpirit should be true ONLY for liquors/spirits/liqueurs (not mixers like juice, soda, syrup, bitters)
- Use standard measurements (oz is fine)
- Keep instructions concise but complete
- If the cocktail doesn't exist or you don't recognize it, return: {{"error": "Cocktail not found"}}

Return ONLY valid JSON, no markdown, no code blocks, no explanation."""

    @staticmethod
    def _parse_json(text: str, error_message: str) -> Any:
        try:
            return json.loads(clean_json_response(text))
        except json.JSONDecodeError:
            logger.error(f"Failed to parse recipes: {text}")
            raise AIResponseParseError(error_message)

    async def suggest_recipes(self, user_id: int) -> Dict[str, Any]:
        """
        Suggestions de cocktails à partir des bouteilles actives.
        Inventaire vide : liste vide + message, pas d'erreur.
        """
        bottles = await self._get_active_bottles(user_id)
        logger.info(f"Found {len(bottles)} active bottles for user {user_id}")

        if not bottles:
            return {"recipes": [], "message": EMPTY_INVENTORY_MESSAGE}

        response_text = await self.completion_client.complete_text(
            self.build_suggestion_prompt(bottles), self.max_tokens
        )

        data = self._parse_json(response_text, "Failed to parse recipe suggestions")
        try:
            raw_recipes = _raw_recipe_list.validate_python(data)
        except ValidationError as e:
            logger.error(f"Recipe suggestions have unexpected shape: {e}")
            raise AIResponseParseError("Failed to parse recipe suggestions")

        images = await self.image_client.get_image_urls(r.name for r in raw_recipes)

        names = bottle_names(bottles)
        categories = bottle_categories(bottles)
        recipes = [
            annotate_recipe(
                raw, names, categories, self.common_mixers, images.get(raw.name)
            )
            for raw in raw_recipes
        ]

        return {"recipes": sort_by_category(recipes), "bottle_count": len(bottles)}

    async def search_recipe(self, user_id: int, query: str) -> Recipe:
        query = sanitize_search_query(query)
        if not query:
            raise EmptySearchQueryException()

        bottles = await self._get_active_bottles(user_id)

        response_text = await self.completion_client.complete_text(
            self.build_search_prompt(query), self.max_tokens
        )

        data = self._parse_json(response_text, "Failed to parse recipe")
        if isinstance(data, dict) and data.get("error"):
            logger.info(f"Cocktail not found for query '{query}': {data['error']}")
            raise CocktailNotFoundException(str(data["error"]))

        try:
            raw_recipe = RawRecipe.model_validate(data)
        except ValidationError as e:
            logger.error(f"Recipe has unexpected shape: {e}")
            raise AIResponseParseError("Failed to parse recipe")

        image_url = await self.image_client.get_image_url(raw_recipe.name)

        return annotate_recipe(
            raw_recipe,
            bottle_names(bottles),
            bottle_categories(bottles),
            self.common_mixers,
            image_url,
        )
