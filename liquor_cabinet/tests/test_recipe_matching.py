"""Tests du rapprochement ingrédients / inventaire"""

from types import SimpleNamespace

import pytest

from liquor_cabinet.core.config import DEFAULT_COMMON_MIXERS
from liquor_cabinet.schemas.recipe import RawRecipe
from liquor_cabinet.services.recipe_matching import (
    Availability,
    annotate_recipe,
    bottle_categories,
    bottle_names,
    classify_ingredient,
    readiness_category,
    sort_by_category,
)

BOTTLES = [
    SimpleNamespace(
        brand="Maker's Mark", product_name="Bourbon", category="whisky", sub_category="bourbon"
    ),
    SimpleNamespace(
        brand="Tanqueray", product_name="London Dry Gin", category="gin", sub_category=None
    ),
]

NAMES = bottle_names(BOTTLES)
CATEGORIES = bottle_categories(BOTTLES)


def _classify(item, is_spirit=True, names=NAMES, categories=CATEGORIES):
    return classify_ingredient(item, is_spirit, names, categories, DEFAULT_COMMON_MIXERS)


def test_inventory_strings():
    assert NAMES == ["maker's mark bourbon", "tanqueray london dry gin"]
    assert CATEGORIES == ["bourbon", "gin"]


def test_non_spirit_is_untracked():
    assert _classify("Angostura bitters", is_spirit=False) is Availability.UNTRACKED


def test_common_mixer_is_untracked_even_if_flagged_spirit():
    assert _classify("Fresh lime juice", is_spirit=True) is Availability.UNTRACKED
    assert _classify("Soda Water") is Availability.UNTRACKED


@pytest.mark.parametrize(
    "item",
    [
        "Gin",
        "Bourbon",
        # la marque (premier mot) suffit
        "Tanqueray No. Ten",
        "London dry gin",
    ],
)
def test_spirit_in_inventory(item):
    assert _classify(item) is Availability.HAVE


def test_spirit_matched_by_sub_category():
    bottles = [
        SimpleNamespace(
            brand="Smith & Cross", product_name="Navy Strength", category="rum", sub_category="jamaican rum"
        )
    ]
    assert (
        _classify("Rum", names=bottle_names(bottles), categories=bottle_categories(bottles))
        is Availability.HAVE
    )


@pytest.mark.parametrize("item", ["Campari", "Sweet vermouth", "Champagne", "Tequila"])
def test_spirit_not_in_inventory(item):
    assert _classify(item) is Availability.NOT_HAVE


def test_empty_inventory_means_every_spirit_missing():
    assert _classify("Gin", names=[], categories=[]) is Availability.NOT_HAVE


def test_availability_flags():
    assert Availability.HAVE.as_have_flag() is True
    assert Availability.NOT_HAVE.as_have_flag() is False
    assert Availability.UNTRACKED.as_have_flag() is None


@pytest.mark.parametrize(
    "missing, expected",
    [(0, "can_make"), (1, "almost"), (2, "need_shopping"), (5, "need_shopping")],
)
def test_readiness_category(missing, expected):
    assert readiness_category(missing) == expected


def _raw(name, *spirits):
    return RawRecipe.model_validate(
        {
            "name": name,
            "ingredients": [{"item": s, "amount": "30 ml", "isSpirit": True} for s in spirits],
        }
    )


def test_annotate_recipe_counts_missing_spirits():
    recipe = annotate_recipe(
        _raw("Boulevardier", "Bourbon", "Campari", "Sweet vermouth"),
        NAMES,
        CATEGORIES,
        DEFAULT_COMMON_MIXERS,
        "https://img.test/boulevardier.jpg",
    )

    assert recipe.missing_spirits == 2
    assert recipe.category == "need_shopping"
    assert [i.have for i in recipe.ingredients] == [True, False, False]
    assert recipe.image_url == "https://img.test/boulevardier.jpg"
    assert recipe.model_dump(by_alias=True)["missingSpirits"] == 2


def test_sort_by_category_is_stable():
    recipes = [
        annotate_recipe(_raw(name, *spirits), NAMES, CATEGORIES, DEFAULT_COMMON_MIXERS)
        for name, spirits in [
            ("A", ("Campari", "Tequila")),
            ("B", ("Gin",)),
            ("C", ("Champagne",)),
            ("D", ("Bourbon",)),
        ]
    ]

    assert [(r.name, r.category) for r in sort_by_category(recipes)] == [
        ("B", "can_make"),
        ("D", "can_make"),
        ("C", "almost"),
        ("A", "need_shopping"),
    ]
