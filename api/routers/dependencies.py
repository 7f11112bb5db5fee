from fastapi import Request

from api.services.catalog_store import CatalogStore
from api.services.query_classifier import QueryCategoryClassifier


def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_query_classifier(request: Request) -> QueryCategoryClassifier:
    return request.app.state.query_classifier
