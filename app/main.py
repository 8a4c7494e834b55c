from fastapi import FastAPI

from app.config import get_settings, setup_logging
from recipe import recipe_service

setup_logging(get_settings().log_level)

app = FastAPI(title="ChefBot")

app.include_router(recipe_service.router)

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
