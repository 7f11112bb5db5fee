from fastapi import APIRouter, Depends
import logging
from datetime import datetime

from api.models import QueryRequest, CategoryQueryResult
from api.services.query_classifier import QueryCategoryClassifier
from api.routers.dependencies import get_query_classifier

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/ai-query", response_model=CategoryQueryResult)
@router.post("/ai-gemini", response_model=CategoryQueryResult, include_in_schema=False)
async def classify_query(
    request: QueryRequest,
    classifier: QueryCategoryClassifier = Depends(get_query_classifier),
):
    """
    Map a natural-language furniture query onto catalog categories.
    Classification failures degrade to keyword matching, so this never errors.
    """
    request_id = datetime.now().strftime("%Y%m%d%H%M%S%f")

    logger.info(f"Request ID: {request_id} - Classifying query of {len(request.query or '')} chars")
    result = await classifier.classify(request.query)
    logger.info(f"Request ID: {request_id} - source={result.source} categories={result.categories}")
    return result
