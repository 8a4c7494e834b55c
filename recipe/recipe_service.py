import logging
import time

import requests
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from app.config import Settings, get_settings
from recipe.errors import RecipeError
from recipe.gemini_client import GeminiClient
from recipe.models import Recipe
from recipe.pantry import parse_generation_request
from recipe.parsing import extract_json_object, normalize_recipe
from recipe.prompts import build_prompt

router = APIRouter()


def get_http_session():
    """Une session HTTP par requête, fermée à la fin."""
    with requests.Session() as session:
        yield session


@router.post("/api/generate", response_model=Recipe)
async def generate_recipe(
    request: Request,
    settings: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_http_session),
):
    """Génération d'une recette à partir du panier de l'utilisateur.

    Les erreurs sont renvoyées en texte brut: 400 pour un panier vide,
    500 pour tout le reste (clé absente, erreur Gemini, exception imprévue).
    """
    try:
        body = await request.json()
        generation = parse_generation_request(body)

        # La clé est vérifiée après le panier: un panier vide reste une 400
        client = GeminiClient(
            settings.gemini_api_key,
            model=settings.gemini_model,
            api_url=settings.gemini_api_url,
            session=session,
        )

        prompt = build_prompt(generation.pantry, generation.mode, generation.improve)
        logging.info(
            f"Generating recipe: {len(generation.pantry)} items, "
            f"mode={generation.mode.value}, improve={generation.improve}"
        )

        start_time = time.time()
        raw_text = await run_in_threadpool(client.generate, prompt)
        logging.debug(f"Raw reply from Gemini: {raw_text}")

        recipe = normalize_recipe(extract_json_object(raw_text), generation.pantry)
        logging.info(f"Recipe generated in {time.time() - start_time:.2f}s: '{recipe.title}'")
        return recipe

    except RecipeError as e:
        logging.warning(f"Recipe generation failed ({e.status_code}): {e}")
        return PlainTextResponse(str(e), status_code=e.status_code)
    except Exception as e:
        logging.exception("Unexpected error during recipe generation")
        return PlainTextResponse(f"Erreur: {str(e) or 'inconnue'}", status_code=500)
