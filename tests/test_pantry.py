import pytest

from recipe.errors import PantryValidationError
from recipe.models import GenerationMode, PantryItem
from recipe.pantry import normalize_pantry, parse_generation_request


def test_normalize_pantry_keeps_order_and_defaults_qty():
    items = normalize_pantry([
        {"name": "tomates", "qty": "3"},
        {"name": "pâtes"},
        {"name": "sel", "qty": None},
    ])
    assert items == [
        PantryItem(name="tomates", qty="3"),
        PantryItem(name="pâtes", qty=""),
        PantryItem(name="sel", qty=""),
    ]


@pytest.mark.parametrize("raw", [None, "pâtes", {"name": "pâtes"}, 42])
def test_normalize_pantry_non_list_is_empty(raw):
    assert normalize_pantry(raw) == []


def test_normalize_pantry_coerces_and_drops_unusable_items():
    items = normalize_pantry([
        {"name": "  oeufs ", "qty": 6},
        "beurre",
        {"name": "   "},
        {"qty": "200g"},
        17,
        None,
    ])
    assert items == [PantryItem(name="oeufs", qty="6"), PantryItem(name="beurre")]


def test_normalize_pantry_rejects_non_scalar_values():
    items = normalize_pantry([
        {"name": {"x": 1}, "qty": "2"},
        {"name": True},
        {"name": ["riz"]},
        {"name": "lait", "qty": {"l": 1}},
        {"name": "farine", "qty": False},
        {"name": 2.5, "qty": 3},
    ])
    assert items == [
        PantryItem(name="lait", qty=""),
        PantryItem(name="farine", qty=""),
        PantryItem(name="2.5", qty="3"),
    ]


def test_parse_generation_request_defaults():
    generation = parse_generation_request({"pantry": [{"name": "riz", "qty": "200g"}]})
    assert generation.mode == GenerationMode.NONE
    assert generation.improve is False
    assert generation.pantry == [PantryItem(name="riz", qty="200g")]


@pytest.mark.parametrize("mode, expected", [
    ("lean", GenerationMode.LEAN),
    ("protein", GenerationMode.PROTEIN),
    ("veg", GenerationMode.VEG),
    ("none", GenerationMode.NONE),
    ("keto", GenerationMode.NONE),
    (3, GenerationMode.NONE),
    (None, GenerationMode.NONE),
])
def test_parse_generation_request_mode(mode, expected):
    generation = parse_generation_request({"pantry": ["riz"], "mode": mode})
    assert generation.mode == expected


def test_parse_generation_request_improve_is_truthiness():
    assert parse_generation_request({"pantry": ["riz"], "improve": True}).improve is True
    assert parse_generation_request({"pantry": ["riz"], "improve": 1}).improve is True
    assert parse_generation_request({"pantry": ["riz"], "improve": 0}).improve is False


@pytest.mark.parametrize("body", [{}, {"pantry": []}, {"pantry": [{"name": ""}]}, [], "pantry", None])
def test_parse_generation_request_rejects_empty_pantry(body):
    with pytest.raises(PantryValidationError) as exc_info:
        parse_generation_request(body)
    assert exc_info.value.status_code == 400
    assert str(exc_info.value) == 'Paramètre "pantry" manquant ou vide.'
