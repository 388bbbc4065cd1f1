from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Literal


ReadinessCategory = Literal["can_make", "almost", "need_shopping"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RawIngredient(CamelModel):
    """Ingrédient tel que renvoyé par le modèle."""

    item: str
    amount: str = ""
    is_spirit: bool = False


class RawRecipe(CamelModel):
    name: str
    difficulty: str = "medium"
    ingredients: List[RawIngredient] = Field(default_factory=list)
    instructions: str = ""
    glass_type: str = ""
    garnish: str = ""


class RecipeIngredient(RawIngredient):
    # None = mixer courant, non suivi dans l'inventaire
    have: Optional[bool] = None


class Recipe(CamelModel):
    name: str
    difficulty: str
    ingredients: List[RecipeIngredient]
    instructions: str
    glass_type: str
    garnish: str
    missing_spirits: int
    category: ReadinessCategory
    image_url: Optional[str] = None


class RecipeSearchRequest(BaseModel):
    query: Optional[str] = None
