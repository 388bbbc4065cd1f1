from fastapi import APIRouter, Depends
import logging

from liquor_cabinet.core.dependencies import get_recipe_service
from liquor_cabinet.core.security import get_current_user_id
from liquor_cabinet.schemas.recipe import RecipeSearchRequest
from liquor_cabinet.services.presentation import group_recipes_by_category
from liquor_cabinet.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get("")
async def suggest_recipes(
    user_id: int = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Suggestions de cocktails d'après l'inventaire, triées :
    can_make, almost, need_shopping
    """
    result = await service.suggest_recipes(user_id)
    recipes = result["recipes"]

    if not recipes and "message" in result:
        return {"success": True, "recipes": [], "message": result["message"]}

    return {
        "success": True,
        "recipes": [r.model_dump(by_alias=True) for r in recipes],
        "bottleCount": result["bottle_count"],
        "groups": group_recipes_by_category(recipes),
    }


@router.post("/search")
async def search_recipe(
    request: RecipeSearchRequest,
    user_id: int = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service),
):
    recipe = await service.search_recipe(user_id, request.query)
    return {"success": True, "recipe": recipe.model_dump(by_alias=True)}
