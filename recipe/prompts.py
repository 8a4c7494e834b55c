from recipe.models import GenerationMode, PantryItem

PANTRY_SEPARATOR = ", "

MODE_CONSTRAINTS = {
    GenerationMode.NONE: "Recette standard.",
    GenerationMode.LEAN: "Recette faible en calories, cuisson saine, pas de gras inutile.",
    GenerationMode.PROTEIN: "Recette riche en protéines, prioriser viande/œufs/produits laitiers maigres/légumineuses.",
    GenerationMode.VEG: "Recette végétarienne uniquement, aucune viande ni poisson.",
}

PROMPT_TEMPLATE = """
Tu es un chef cuisinier. Génère STRICTEMENT un objet JSON valide (sans autre texte), au format EXACT:

{{
  "title": "Titre de la recette",
  "timeEstimate": "30 min",
  "ingredients": ["..."],
  "steps": ["..."],
  "missingIngredients": ["..."],
  "tips": ["..."]
}}

Règles:
- Ecris en français.
- "ingredients" = liste complète pour réaliser la recette, avec quantités quand possible.
- "missingIngredients" = uniquement ce qui n'est PAS dans le panier, à acheter pour une version meilleure (goût/texture/équilibre).
- "tips" = 3 conseils courts et utiles.
- Si improve=true, fais une version plus gourmande/qualitative (sans être irréaliste).

Panier utilisateur: {pantry}
Contrainte nutritionnelle: {constraint}
improve={improve}
"""


def format_item(item: PantryItem) -> str:
    return f"{item.name} ({item.qty})" if item.qty else item.name


def format_pantry(pantry: list[PantryItem]) -> str:
    """Ex.: pâtes (250g), tomates (3), sel"""
    return PANTRY_SEPARATOR.join(format_item(item) for item in pantry)


def build_prompt(pantry: list[PantryItem], mode: GenerationMode, improve: bool) -> str:
    """Prompt envoyé à Gemini. Fonction pure: même entrée, même texte."""
    return PROMPT_TEMPLATE.format(
        pantry=format_pantry(pantry),
        constraint=MODE_CONSTRAINTS.get(mode, MODE_CONSTRAINTS[GenerationMode.NONE]),
        improve="true" if improve else "false",
    ).strip()
