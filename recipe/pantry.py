from typing import Any

from recipe.errors import PantryValidationError
from recipe.models import GenerationMode, GenerationRequest, PantryItem


def _as_text(value: Any) -> str:
    """Seuls les scalaires texte/nombre sont acceptés, le reste devient ""."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()


def normalize_pantry(raw: Any) -> list[PantryItem]:
    """Convertit le panier brut en liste de PantryItem, dans l'ordre reçu."""
    if not isinstance(raw, list):
        return []

    items = []
    for element in raw:
        if isinstance(element, dict):
            name = _as_text(element.get("name"))
            qty = _as_text(element.get("qty"))
        elif isinstance(element, str):
            name, qty = element.strip(), ""
        else:
            continue
        if name:
            items.append(PantryItem(name=name, qty=qty))
    return items


def parse_generation_request(body: Any) -> GenerationRequest:
    """Construit la requête de génération à partir du corps JSON brut.

    Lève PantryValidationError si aucun ingrédient nommé n'est fourni:
    dans ce cas Gemini n'est jamais appelé.
    """
    if not isinstance(body, dict):
        body = {}

    pantry = normalize_pantry(body.get("pantry"))
    if not pantry:
        raise PantryValidationError()

    return GenerationRequest(
        pantry=pantry,
        mode=GenerationMode.parse(body.get("mode")),
        improve=bool(body.get("improve")),
    )
