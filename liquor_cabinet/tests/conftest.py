"""Configuration et fixtures pytest"""

import base64
import io
import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_liquor_cabinet.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

import httpx
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from liquor_cabinet.core.database import Base, engine, SessionLocal, get_db
from liquor_cabinet.core.dependencies import (
    get_completion_client,
    get_cocktail_image_client,
)
from liquor_cabinet.core.security import get_password_hash, create_access_token
from liquor_cabinet.main import app
from liquor_cabinet.models.user import User
from liquor_cabinet.models.bottle import Bottle
from liquor_cabinet.services.cocktail_image_client import CocktailImageClient

IMAGE_SEARCH_URL = "https://cocktails.test/api/json/v1/1/search.php"


class FakeCompletionClient:
    """Réponses préenregistrées du modèle, dans l'ordre des appels"""

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, payload):
        self.responses.append(payload if isinstance(payload, str) else json.dumps(payload))

    async def complete_text(self, prompt, max_tokens):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens})
        return self.responses.pop(0)

    async def complete_with_image(self, image_bytes, mime_type, prompt, max_tokens):
        self.calls.append(
            {
                "prompt": prompt,
                "max_tokens": max_tokens,
                "image_bytes": image_bytes,
                "mime_type": mime_type,
            }
        )
        return self.responses.pop(0)


def make_image_client(images=None, failing=()):
    """CocktailImageClient branché sur un transport httpx simulé"""
    images = images or {}
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        name = request.url.params.get("s")
        requested.append(name)
        if name in failing:
            raise httpx.ConnectError("connection refused", request=request)
        if name in images:
            return httpx.Response(
                200, json={"drinks": [{"strDrink": name, "strDrinkThumb": images[name]}]}
            )
        return httpx.Response(200, json={"drinks": None})

    client = CocktailImageClient(
        httpx.AsyncClient(transport=httpx.MockTransport(handler)), IMAGE_SEARCH_URL
    )
    client.requested = requested
    return client


@pytest.fixture(scope="function")
def db():
    """Fixture de base de données pour les tests"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def completion_client():
    return FakeCompletionClient()


@pytest.fixture
def image_client():
    return make_image_client()


@pytest.fixture(scope="function")
def client(db, completion_client, image_client):
    """Fixture du client de test FastAPI"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    app.dependency_overrides[get_cocktail_image_client] = lambda: image_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db):
    """Fixture d'un utilisateur de test"""
    user = User(
        email="test@example.com",
        name="Test User",
        password_hash=get_password_hash("testpass123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user2(db):
    """Fixture d'un second utilisateur"""
    user = User(
        email="test2@example.com",
        name="Test User 2",
        password_hash=get_password_hash("testpass123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_bottle(db, test_user):
    """Fixture d'une bouteille active (quantité 3)"""
    bottle = Bottle(
        user_id=test_user.id,
        brand="Maker's Mark",
        product_name="Bourbon",
        category="whisky",
        sub_category="bourbon",
        quantity=3,
    )
    db.add(bottle)
    db.commit()
    db.refresh(bottle)
    return bottle


@pytest.fixture
def auth_headers(test_user):
    """Fixture des headers d'authentification"""
    token = create_access_token({"sub": str(test_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers_user2(test_user2):
    token = create_access_token({"sub": str(test_user2.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def png_data_uri():
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 120, 40)).save(buffer, format="PNG")
    payload = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{payload}"


@pytest.fixture
def make_images():
    return make_image_client
