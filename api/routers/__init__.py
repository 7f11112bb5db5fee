from .products import router as products_router
from .query import router as query_router
from .health import router as health_router

__all__ = [
    "products_router",
    "query_router",
    "health_router"
]
