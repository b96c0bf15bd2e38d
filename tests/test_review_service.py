import httpx
import pytest

from src.error_handler import InternalError, NotFoundError, UpstreamError
from src.integrations.clients.mocks.local_review_fixtures import MockReviewClient
from src.integrations.clients.real_http.review_api import HttpReviewClient
from src.integrations.contracts.reviews import ResourceCategory
from src.integrations.policy.review_service import ReviewService, build_review_client

from tests.conftest import FEATURED, UpstreamRecorder


def test_build_review_client_follows_mock_flag(mock_settings, live_settings):
    assert isinstance(build_review_client(mock_settings), MockReviewClient)
    assert isinstance(build_review_client(live_settings), HttpReviewClient)


@pytest.mark.asyncio
async def test_resolve_filters_by_exact_sku_in_mock_mode(mock_settings):
    service = ReviewService(mock_settings)

    records = await service.resolve(ResourceCategory.FEATURED_REVIEWS, "SKU-1")

    assert [r["id"] for r in records] == [1, 3, 4]
    assert await service.resolve(ResourceCategory.FEATURED_REVIEWS, "sku-1") == []


@pytest.mark.asyncio
async def test_resolve_without_sku_returns_whole_dataset(mock_settings):
    service = ReviewService(mock_settings)

    assert await service.resolve(ResourceCategory.FEATURED_REVIEWS) == FEATURED


@pytest.mark.asyncio
async def test_list_paginated_mock_mode(mock_settings):
    service = ReviewService(mock_settings)

    result = await service.list_paginated(ResourceCategory.FEATURED_REVIEWS, "SKU-1", 2, 2)

    assert result == {
        "totalItems": 3,
        "totalPages": 2,
        "currentPage": 2,
        "data": [{"id": 4, "skuCode": "SKU-1", "title": "d"}],
    }


@pytest.mark.asyncio
async def test_list_paginated_live_mode_returns_upstream_shape(live_settings):
    upstream = UpstreamRecorder(body={"items": ["as", "is"], "next": None})
    service = ReviewService(live_settings, client=HttpReviewClient(live_settings, transport=upstream.transport))

    result = await service.list_paginated(ResourceCategory.REVIEW_LIST, "SKU-9", 3, 4)

    assert result == {"items": ["as", "is"], "next": None}
    assert dict(upstream.requests[0].url.params) == {"skuCode": "SKU-9", "page": "3", "limit": "4"}


@pytest.mark.asyncio
async def test_get_product_mock_mode(mock_settings):
    service = ReviewService(mock_settings)

    assert await service.get_product("SKU-2") == {"skuCode": "SKU-2", "name": "Phone Two"}


@pytest.mark.asyncio
async def test_get_product_unknown_sku_raises_not_found(mock_settings):
    service = ReviewService(mock_settings)

    with pytest.raises(NotFoundError) as excinfo:
        await service.get_product("SKU-404")

    assert excinfo.value.message == "Product not found"


@pytest.mark.asyncio
async def test_get_product_live_mode_queries_devices_url(live_settings):
    upstream = UpstreamRecorder(body={"skuCode": "SKU-7", "name": "Remote"})
    service = ReviewService(live_settings, client=HttpReviewClient(live_settings, transport=upstream.transport))

    assert await service.get_product("SKU-7") == {"skuCode": "SKU-7", "name": "Remote"}
    assert upstream.requests[0].url.path == "/devices"
    assert dict(upstream.requests[0].url.params) == {"skuCode": "SKU-7"}


@pytest.mark.asyncio
async def test_client_errors_carry_resource_label(live_settings):
    upstream = UpstreamRecorder(exc=httpx.ConnectTimeout("timed out"))
    service = ReviewService(live_settings, client=HttpReviewClient(live_settings, transport=upstream.transport))

    with pytest.raises(UpstreamError) as excinfo:
        await service.list_paginated(ResourceCategory.IMAGE_REVIEWS, "SKU-1", 1, 10)

    assert excinfo.value.message == "Failed to fetch image reviews"
    assert excinfo.value.detail["cause"] == "Could not reach upstream review API"


@pytest.mark.asyncio
async def test_non_list_fixture_cannot_be_filtered(mock_settings, mock_data_dir):
    (mock_data_dir / "reviewList.json").write_text('{"unexpected": true}', encoding="utf-8")
    service = ReviewService(mock_settings)

    with pytest.raises(InternalError) as excinfo:
        await service.list_paginated(ResourceCategory.REVIEW_LIST, "SKU-1", 1, 10)

    assert excinfo.value.message == "Failed to fetch review list"
