class RecipeError(Exception):
    """Erreur de génération, traduite en réponse texte par l'endpoint /api/generate."""

    status_code = 500


class PantryValidationError(RecipeError):
    status_code = 400

    def __init__(self, message: str = 'Paramètre "pantry" manquant ou vide.'):
        super().__init__(message)


class ConfigurationError(RecipeError):
    def __init__(self, message: str = "GEMINI_API_KEY manquant côté serveur."):
        super().__init__(message)


class GatewayError(RecipeError):
    pass


class ProviderError(GatewayError):
    """Gemini a répondu avec un statut d'erreur. body contient la réponse brute."""

    def __init__(self, body: str, provider_status: int | None = None):
        self.body = body
        self.provider_status = provider_status
        super().__init__(f"Erreur Gemini (texte): {body}")


class TransportError(GatewayError):
    def __init__(self, reason: str):
        super().__init__(f"Erreur: {reason}")
