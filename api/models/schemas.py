from pydantic import BaseModel, ConfigDict
from typing import List, Dict, Optional, Literal

Confidence = Literal["high", "medium", "low", "fallback", "none"]
Source = Literal["ai", "keyword_matching", "none"]


class ProductRecord(BaseModel):
    """Canonical catalog item. Every field is a string, empty when unknown."""
    model_config = ConfigDict(frozen=True)

    sku: str = ""
    title: str = ""
    price: str = ""
    description: str = ""
    colour: str = ""
    material: str = ""
    category: str = ""
    style: str = ""
    room: str = ""
    width: str = ""
    depth: str = ""
    height: str = ""
    image_url: str = ""
    cutout_local_path: str = ""

class CategoryQueryResult(BaseModel):
    categories: List[str] = []
    room: Optional[str] = None
    confidence: Confidence = "none"
    source: Source = "none"

class QueryRequest(BaseModel):
    """Request model for natural-language category queries."""
    query: Optional[str] = ""

class ProductsResponse(BaseModel):
    products: List[ProductRecord]

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    openai_configured: bool
    catalog_state: str
    catalog_size: int
    service: str

class AIModelsResponse(BaseModel):
    model: str
    ai_enabled: bool
    message: str

class RootResponse(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
    supported_categories: List[str]
    rooms: List[str]
