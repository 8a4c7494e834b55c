from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerationMode(str, Enum):
    NONE = "none"
    LEAN = "lean"
    PROTEIN = "protein"
    VEG = "veg"

    @classmethod
    def parse(cls, value: Any) -> "GenerationMode":
        """Mode inconnu ou absent -> none."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.NONE


class PantryItem(BaseModel):
    name: str
    qty: str = ""


class GenerationRequest(BaseModel):
    pantry: list[PantryItem]
    mode: GenerationMode = GenerationMode.NONE
    improve: bool = False


class Recipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    time_estimate: str = Field(alias="timeEstimate")
    # Les éléments viennent du modèle tels quels, on ne vérifie que le type liste
    ingredients: list[Any]
    steps: list[Any]
    missing_ingredients: list[Any] = Field(alias="missingIngredients")
    tips: list[Any]
