from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import asyncio
import logging

from config import settings
from api.routers import products_router, query_router, health_router
from api.services.catalog_store import CatalogStore
from api.services.query_classifier import QueryCategoryClassifier

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting up {settings.API_TITLE}")
    app.state.catalog_store = CatalogStore()
    app.state.query_classifier = QueryCategoryClassifier()
    catalog_task = asyncio.create_task(
        app.state.catalog_store.load_csv_async(settings.CATALOG_CSV_PATH)
    )
    yield
    # Shutdown
    await catalog_task
    logger.info(f"Shutting down {settings.API_TITLE}")

app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_CREDENTIALS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

# Include routers
app.include_router(products_router)
app.include_router(query_router)
app.include_router(health_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
