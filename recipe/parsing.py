import json
import logging
from typing import Any

from recipe.models import PantryItem, Recipe
from recipe.prompts import PANTRY_SEPARATOR, format_pantry

DEFAULT_TITLE = "Recette générée"
DEFAULT_TIME_ESTIMATE = "—"
DEFAULT_STEPS = ["Étapes indisponibles."]


def _reject_constant(name: str):
    """NaN et Infinity ne sont pas du JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def extract_json_object(text: str) -> dict:
    """Récupère l'objet JSON noyé dans la réponse du modèle.

    On prend tout ce qui va du premier "{" au dernier "}". Le modèle ajoute
    souvent du texte ou des balises ``` autour du JSON, ce découpage suffit
    dans l'immense majorité des cas. Plusieurs fragments JSON ou des
    accolades isolées dans la prose peuvent fausser le découpage.

    Ne lève jamais d'exception: sans JSON exploitable, renvoie {}.
    """
    first_brace = text.find("{")
    last_brace = text.rfind("}")
    if first_brace < 0 or last_brace <= first_brace:
        logging.warning("No JSON object found in Gemini reply")
        return {}

    try:
        parsed = json.loads(text[first_brace:last_brace + 1], parse_constant=_reject_constant)
        # "\ud800" isolé: parsable, mais la réponse ne pourrait pas être encodée en UTF-8
        json.dumps(parsed, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError) as e:
        logging.warning(f"Could not parse JSON from Gemini reply: {e}")
        return {}

    return parsed if isinstance(parsed, dict) else {}


def _string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _list_or(value: Any, default: list) -> list:
    return value if isinstance(value, list) else default


def normalize_recipe(parsed: Any, pantry: list[PantryItem]) -> Recipe:
    """Toujours une Recipe valide, quel que soit ce que le modèle a renvoyé."""
    if not isinstance(parsed, dict):
        parsed = {}

    pantry_ingredients = [x for x in format_pantry(pantry).split(PANTRY_SEPARATOR) if x]

    return Recipe(
        title=_string_or(parsed.get("title"), DEFAULT_TITLE),
        time_estimate=_string_or(parsed.get("timeEstimate"), DEFAULT_TIME_ESTIMATE),
        ingredients=_list_or(parsed.get("ingredients"), pantry_ingredients),
        steps=_list_or(parsed.get("steps"), list(DEFAULT_STEPS)),
        missing_ingredients=_list_or(parsed.get("missingIngredients"), []),
        tips=_list_or(parsed.get("tips"), []),
    )
