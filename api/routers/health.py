from fastapi import APIRouter, Depends
from datetime import datetime

from ..models import HealthResponse, RootResponse, AIModelsResponse
from ..services.catalog_store import CatalogStore
from .dependencies import get_catalog_store
from ..utils.constants import ALLOWED_CATEGORIES, ROOM_CATEGORIES
from config import settings

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check(store: CatalogStore = Depends(get_catalog_store)):
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        openai_configured=bool(settings.OPENAI_API_KEY),
        catalog_state=store.state,
        catalog_size=len(store),
        service=settings.API_TITLE
    )

@router.get("/ai-models", response_model=AIModelsResponse)
async def ai_models():
    """Report which model backs query classification"""
    enabled = bool(settings.OPENAI_API_KEY)
    return AIModelsResponse(
        model=settings.OPENAI_MODEL,
        ai_enabled=enabled,
        message="AI classification enabled" if enabled else "No OPENAI_API_KEY set; queries use keyword matching"
    )

@router.get("/", response_model=RootResponse)
async def root():
    """Root endpoint"""
    return RootResponse(
        message=f"{settings.API_TITLE} running",
        version=settings.API_VERSION,
        endpoints={
            "products": "/products",
            "ai-query": "/ai-query",
            "ai-models": "/ai-models",
            "health": "/health"
        },
        supported_categories=list(ALLOWED_CATEGORIES),
        rooms=list(ROOM_CATEGORIES)
    )
