"""
Review proxy endpoints.

Route names match the paths the frontend already calls. Filtered endpoints
require skuCode; mock mode paginates locally, live mode forwards page/limit
upstream and returns the upstream body unchanged.
"""

from typing import Any, Awaitable, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_review_service
from src.error_handler import BadRequestError, ErrorHandler, ReviewProxyError
from src.integrations.contracts.reviews import ResourceCategory, ReviewQuery
from src.integrations.policy.review_service import ReviewService

router = APIRouter(tags=["Reviews"])
error_handler = ErrorHandler()


def review_query(
    skuCode: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
) -> ReviewQuery:
    return ReviewQuery(skuCode=skuCode, page=page, limit=limit)


def _require_sku(query: ReviewQuery) -> str:
    if not query.sku_code:
        raise BadRequestError("Missing skuCode")
    return query.sku_code


async def _guarded(label: str, call: Awaitable[Any]) -> Any:
    try:
        return await call
    except ReviewProxyError:
        raise
    except Exception as exc:
        status_code, body = error_handler.to_response(exc, fallback_message=f"Failed to fetch {label}")
        return JSONResponse(status_code=status_code, content=body)


async def _paginated(service: ReviewService, category: ResourceCategory, query: ReviewQuery) -> Any:
    sku_code = _require_sku(query)
    return await _guarded(
        service.label(category),
        service.list_paginated(category, sku_code, query.page, query.limit),
    )


@router.get("/getDeviceReviews")
@router.get("/getProducts")
async def get_device_reviews(service: ReviewService = Depends(get_review_service)):
    """Full device dataset, no filtering or pagination."""
    category = ResourceCategory.DEVICES
    return await _guarded(service.label(category), service.list_all(category))


@router.get("/getProductBySku")
async def get_product_by_sku(
    query: ReviewQuery = Depends(review_query),
    service: ReviewService = Depends(get_review_service),
):
    sku_code = _require_sku(query)
    return await _guarded("product", service.get_product(sku_code))


@router.get("/getFeaturedReviews")
async def get_featured_reviews(
    query: ReviewQuery = Depends(review_query),
    service: ReviewService = Depends(get_review_service),
):
    return await _paginated(service, ResourceCategory.FEATURED_REVIEWS, query)


@router.get("/getDeviceReviewsWithImages")
@router.get("/getReviewsWithImages")
async def get_reviews_with_images(
    query: ReviewQuery = Depends(review_query),
    service: ReviewService = Depends(get_review_service),
):
    return await _paginated(service, ResourceCategory.IMAGE_REVIEWS, query)


@router.get("/getReviewList")
async def get_review_list(
    query: ReviewQuery = Depends(review_query),
    service: ReviewService = Depends(get_review_service),
):
    return await _paginated(service, ResourceCategory.REVIEW_LIST, query)


@router.get("/productReviews")
async def get_product_reviews(service: ReviewService = Depends(get_review_service)):
    """Entire combined dataset, mock or live, unfiltered."""
    category = ResourceCategory.PRODUCT_REVIEWS
    return await _guarded(service.label(category), service.list_all(category))
