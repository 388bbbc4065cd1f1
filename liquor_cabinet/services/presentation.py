from typing import Any, Dict, List, Sequence

from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.schemas.bottle import BottleResponse
from liquor_cabinet.schemas.recipe import Recipe

BOTTLE_CATEGORY_LABELS = {
    "whisky": "Whisky",
    "gin": "Gin",
    "rum": "Rum",
    "vodka": "Vodka",
    "tequila": "Tequila",
    "brandy": "Brandy",
    "liqueur": "Liqueur",
    "wine": "Wine",
    "beer": "Beer",
    "other": "Other",
}

RECIPE_CATEGORY_LABELS = {
    "can_make": {
        "label": "Ready to Make",
        "description": "You have all the spirits needed",
    },
    "almost": {
        "label": "Almost There",
        "description": "Missing just one spirit",
    },
    "need_shopping": {
        "label": "Need Shopping",
        "description": "Missing two or more spirits",
    },
}


def group_bottles_by_category(bottles: Sequence[Bottle]) -> List[Dict[str, Any]]:
    """Groupes dans l'ordre de première apparition, bouteilles dans l'ordre reçu"""
    groups: Dict[str, List[Bottle]] = {}
    for bottle in bottles:
        groups.setdefault(bottle.category or "other", []).append(bottle)

    return [
        {
            "category": category,
            "label": BOTTLE_CATEGORY_LABELS.get(category, category),
            "bottles": [
                BottleResponse.model_validate(b).model_dump(mode="json")
                for b in members
            ],
        }
        for category, members in groups.items()
    ]


def group_recipes_by_category(recipes: Sequence[Recipe]) -> List[Dict[str, Any]]:
    groups = []
    for category, labels in RECIPE_CATEGORY_LABELS.items():
        members = [r.name for r in recipes if r.category == category]
        if not members:
            continue
        groups.append({"category": category, **labels, "recipes": members})
    return groups
