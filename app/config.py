import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from recipe.gemini_client import DEFAULT_API_URL, DEFAULT_MODEL

load_dotenv()


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    gemini_api_url: str = DEFAULT_API_URL
    host: str = "localhost"
    port: int = 9000
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Paramètres lus depuis l'environnement (et le .env), à chaque appel."""
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_api_url=os.getenv("GEMINI_API_URL", DEFAULT_API_URL),
        host=os.getenv("HOST", "localhost"),
        port=int(os.getenv("PORT", "9000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def setup_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        force=True,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
