"""
Rapprochement recettes / inventaire.

Fonctions pures, sans accès réseau ni base : la correspondance est une
simple heuristique par sous-chaînes, volontairement conservée telle quelle.
"""

import enum
from typing import Iterable, List, Optional, Sequence

from liquor_cabinet.schemas.recipe import RawRecipe, Recipe, RecipeIngredient

CATEGORY_ORDER = {"can_make": 0, "almost": 1, "need_shopping": 2}


class Availability(enum.Enum):
    HAVE = "have"
    NOT_HAVE = "not_have"
    UNTRACKED = "untracked"

    def as_have_flag(self) -> Optional[bool]:
        if self is Availability.UNTRACKED:
            return None
        return self is Availability.HAVE


def bottle_names(bottles: Iterable) -> List[str]:
    """"marque produit" en minuscules, un par bouteille"""
    return [f"{b.brand} {b.product_name}".lower() for b in bottles]


def bottle_categories(bottles: Iterable) -> List[str]:
    return [(b.sub_category or b.category or "").lower() for b in bottles]


def is_common_mixer(item: str, mixers: Iterable[str]) -> bool:
    item_lower = item.lower()
    return any(mixer.lower() in item_lower for mixer in mixers)


def classify_ingredient(
    item: str,
    is_spirit: bool,
    inventory_names: Sequence[str],
    inventory_categories: Sequence[str],
    mixers: Iterable[str],
) -> Availability:
    item_lower = item.lower()

    if is_common_mixer(item_lower, mixers) or not is_spirit:
        return Availability.UNTRACKED

    # nom complet contient l'ingrédient, ou l'ingrédient contient le premier mot (la marque)
    for name in inventory_names:
        if item_lower in name or name.split(" ")[0] in item_lower:
            return Availability.HAVE

    for category in inventory_categories:
        if category and (category in item_lower or item_lower in category):
            return Availability.HAVE

    return Availability.NOT_HAVE


def readiness_category(missing_spirits: int) -> str:
    if missing_spirits == 0:
        return "can_make"
    if missing_spirits == 1:
        return "almost"
    return "need_shopping"


def annotate_recipe(
    raw: RawRecipe,
    inventory_names: Sequence[str],
    inventory_categories: Sequence[str],
    mixers: Iterable[str],
    image_url: Optional[str] = None,
) -> Recipe:
    mixers = list(mixers)
    ingredients = []
    for ingredient in raw.ingredients:
        availability = classify_ingredient(
            ingredient.item,
            ingredient.is_spirit,
            inventory_names,
            inventory_categories,
            mixers,
        )
        ingredients.append(
            RecipeIngredient(
                item=ingredient.item,
                amount=ingredient.amount,
                is_spirit=ingredient.is_spirit,
                have=availability.as_have_flag(),
            )
        )

    missing_spirits = sum(1 for i in ingredients if i.is_spirit and i.have is False)

    return Recipe(
        name=raw.name,
        difficulty=raw.difficulty,
        ingredients=ingredients,
        instructions=raw.instructions,
        glass_type=raw.glass_type,
        garnish=raw.garnish,
        missing_spirits=missing_spirits,
        category=readiness_category(missing_spirits),
        image_url=image_url,
    )


def sort_by_category(recipes: List[Recipe]) -> List[Recipe]:
    """Tri stable : can_make, puis almost, puis need_shopping"""
    return sorted(recipes, key=lambda r: CATEGORY_ORDER[r.category])
