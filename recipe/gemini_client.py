import json
import logging
from typing import Any

import requests

from recipe.errors import ConfigurationError, ProviderError, TransportError

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def extract_reply_text(reply: Any) -> str:
    """Premier fragment texte de la réponse Gemini.

    Sans fragment exploitable, on renvoie toute la réponse sérialisée:
    l'extracteur reçoit toujours une chaîne.
    """
    try:
        text = reply["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if isinstance(text, str) and text:
        return text
    return json.dumps(reply, ensure_ascii=False, separators=(",", ":"))


class GeminiClient:
    """Un appel generateContent, sans retry ni timeout spécifique."""

    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL,
                 api_url: str = DEFAULT_API_URL, session: requests.Session | None = None):
        if not api_key:
            raise ConfigurationError()
        self.api_key = api_key
        self.model = model
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.api_url}/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        payload = {
            "contents": [
                {
                    "parts": [{"text": prompt}],
                }
            ]
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        logging.debug(f"Sending prompt to Gemini ({self.model}):\n{prompt}")
        try:
            response = self.session.post(self.url, headers=headers, json=payload)
        except requests.exceptions.RequestException as e:
            logging.error(f"Error communicating with Gemini API: {e}")
            raise TransportError(str(e)) from e

        if not response.ok:
            logging.error(f"Gemini API returned {response.status_code}: {response.text}")
            raise ProviderError(response.text, provider_status=response.status_code)

        return extract_reply_text(response.json())
