import pytest
from fastapi.testclient import TestClient

from main import app
from api.routers.dependencies import get_catalog_store, get_query_classifier
from api.services.ai_query_classifier import AIQueryClassifier
from api.services.catalog_normalizer import CatalogNormalizer
from api.services.catalog_store import CatalogStore
from api.services.query_classifier import QueryCategoryClassifier


@pytest.fixture
def client(static_generator):
    store = CatalogStore(normalizer=CatalogNormalizer(base_url="https://x.test"))
    store.load([{"code": "S1", "title": "Grey Sofa", "price": "49900", "image_url": "sofa.jpg"}])
    generator = static_generator('{"categories": ["sofa"], "room": "living room", "confidence": "high"}')
    classifier = QueryCategoryClassifier(ai_classifier=AIQueryClassifier(generator=generator, timeout=1.0))

    app.dependency_overrides[get_catalog_store] = lambda: store
    app.dependency_overrides[get_query_classifier] = lambda: classifier
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_products(client):
    response = client.get("/products")

    assert response.status_code == 200
    product = response.json()["products"][0]
    assert product["sku"] == "S1"
    assert product["price"] == "499.00"
    assert product["image_url"] == "https://x.test/sofa.jpg"
    assert product["cutout_local_path"] == ""


@pytest.mark.parametrize("path", ["/ai-query", "/ai-gemini"])
def test_query(client, path):
    response = client.post(path, json={"query": "a sofa for the lounge"})

    assert response.status_code == 200
    assert response.json() == {
        "categories": ["sofa"],
        "room": "living room",
        "confidence": "high",
        "source": "ai",
    }


def test_query_without_text(client):
    response = client.post("/ai-query", json={})

    assert response.status_code == 200
    assert response.json() == {"categories": [], "room": None, "confidence": "none", "source": "none"}


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert body["catalog_state"] == "loaded"
    assert body["catalog_size"] == 1


def test_root_lists_taxonomy(client):
    body = client.get("/").json()

    assert len(body["supported_categories"]) == 17
    assert "bedroom" in body["rooms"]


def test_ai_models(client):
    body = client.get("/ai-models").json()

    assert body["model"]
    assert isinstance(body["ai_enabled"], bool)
