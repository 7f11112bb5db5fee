from fastapi import APIRouter, Depends
import logging

from api.models import ProductsResponse
from api.services.catalog_store import CatalogStore
from api.routers.dependencies import get_catalog_store

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/products", response_model=ProductsResponse)
async def list_products(store: CatalogStore = Depends(get_catalog_store)):
    """Return the current catalog snapshot"""
    return ProductsResponse(products=list(store.list()))
