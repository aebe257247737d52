from types import SimpleNamespace

import pytest

from nutrilog import create_app
from nutrilog.extensions import db
from nutrilog.models.food import Food
from nutrilog.utils.auth import create_token


@pytest.fixture()
def app():
    app = create_app("config.TestingConfig")
    with app.app_context():
        db.create_all()
        db.session.add_all([
            Food(name="Chicken breast", calories=165, protein=31.0, carbs=0.0, fat=3.6),
            Food(name="White rice", calories=200, protein=2.7, carbs=28.0, fat=0.3),
            Food(name="Banana", calories=89, protein=1.1, carbs=22.8, fat=0.3, fiber=2.6, sugar=12.2, sodium=1),
        ])
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_headers(app):
    def _make(email="user@example.com", name="User Demo", image="https://example.com/a.png"):
        with app.app_context():
            token = create_token(email, name, image)
        return {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture()
def headers(make_headers):
    return make_headers()


def food_id(app, name):
    with app.app_context():
        return Food.query.filter_by(name=name).first().id


def gemini_response(text):
    """Build an object shaped like a google-genai GenerateContentResponse."""
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


class FakeGeminiClient:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []
        self.models = self

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture()
def fake_gemini(app, monkeypatch):
    """Install a fake Gemini client; set `.response` or `.exc` per test."""
    from nutrilog.services import ai_nutrition_service

    fake = FakeGeminiClient()
    app.config["GEMINI_API_KEY"] = "test-key"
    monkeypatch.setattr(ai_nutrition_service, "get_client", lambda api_key: fake)
    return fake
