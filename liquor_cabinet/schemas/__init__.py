from liquor_cabinet.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    RefreshRequest,
)
from liquor_cabinet.schemas.bottle import BottleCreate, BottleUpdate, BottleResponse
from liquor_cabinet.schemas.inventory_event import InventoryEventResponse
from liquor_cabinet.schemas.identification import (
    IdentifyRequest,
    BottleIdentification,
)
from liquor_cabinet.schemas.recipe import (
    RawIngredient,
    RawRecipe,
    RecipeIngredient,
    Recipe,
    RecipeSearchRequest,
)
from liquor_cabinet.schemas.stats import InventoryStats

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "RefreshRequest",
    "BottleCreate",
    "BottleUpdate",
    "BottleResponse",
    "InventoryEventResponse",
    "IdentifyRequest",
    "BottleIdentification",
    "RawIngredient",
    "RawRecipe",
    "RecipeIngredient",
    "Recipe",
    "RecipeSearchRequest",
    "InventoryStats",
]
