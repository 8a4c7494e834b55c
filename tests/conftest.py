import json
from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from recipe.recipe_service import get_http_session


def make_response(status_code: int = 200, body=None, text: str | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(body=gemini_reply("{}"))
    return session


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def client(session, settings):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
