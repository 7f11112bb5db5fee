from .schemas import (
    ProductRecord,
    CategoryQueryResult,
    QueryRequest,
    ProductsResponse,
    HealthResponse,
    AIModelsResponse,
    RootResponse
)

__all__ = [
    "ProductRecord",
    "CategoryQueryResult",
    "QueryRequest",
    "ProductsResponse",
    "HealthResponse",
    "AIModelsResponse",
    "RootResponse"
]
