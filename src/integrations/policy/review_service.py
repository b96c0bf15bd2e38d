"""
Review Service

Chooses between local fixtures and the upstream review API and applies the
mock-mode rules on top of the raw data:
- SKU filtering (exact string match on the configured SKU field)
- pagination of filtered lists
- single-product lookup with NotFoundError

In live mode the upstream response shape is returned unmodified.
"""

import logging
from typing import Any, Dict, List, Optional

from src.error_handler import InternalError, NotFoundError, ReviewProxyError
from src.integrations.clients.mocks.local_review_fixtures import MockReviewClient
from src.integrations.clients.real_http.review_api import HttpReviewClient
from src.integrations.contracts.reviews import ResourceCategory, ReviewRecord, ReviewSourceClient
from src.utils.config_loader import Settings
from src.utils.pagination import paginate
from src.utils.resource_config_loader import ResourceConfig, default_resource_config

logger = logging.getLogger(__name__)


def build_review_client(settings: Settings, resources: Optional[ResourceConfig] = None) -> ReviewSourceClient:
    """The one place where mock vs upstream clients are selected."""
    if settings.use_mock:
        return MockReviewClient(settings.mock_data_dir, resources)
    return HttpReviewClient(settings, resources)


class ReviewService:
    def __init__(
        self,
        settings: Settings,
        client: Optional[ReviewSourceClient] = None,
        resources: Optional[ResourceConfig] = None,
    ):
        self.settings = settings
        self.resources = resources or default_resource_config()
        self.client = client or build_review_client(settings, self.resources)

    @property
    def use_mock(self) -> bool:
        return self.settings.use_mock

    def label(self, category: ResourceCategory) -> str:
        return self.resources.get(category).label

    async def resolve(
        self,
        category: ResourceCategory,
        sku_code: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        label: Optional[str] = None,
    ) -> Any:
        """
        Return the dataset for a category.

        Mock mode filters by sku_code when given; live mode forwards sku_code,
        page and limit upstream and returns the body as-is.
        """
        params: Dict[str, Any] = {"skuCode": sku_code, "page": page, "limit": limit}
        raw = await self._fetch(category, params, label)

        if not self.use_mock or sku_code is None:
            return raw
        return self._filter_by_sku(category, raw, sku_code, label)

    async def list_all(self, category: ResourceCategory) -> Any:
        return await self.resolve(category)

    async def list_paginated(
        self,
        category: ResourceCategory,
        sku_code: str,
        page: int,
        limit: int,
    ) -> Any:
        if not self.use_mock:
            return await self.resolve(category, sku_code, page, limit)

        records = await self.resolve(category, sku_code)
        logger.debug("Paginating %d %s records for sku=%s page=%s limit=%s", len(records), category.value, sku_code, page, limit)
        return paginate(records, page, limit).to_response()

    async def get_product(self, sku_code: str) -> Any:
        category = ResourceCategory.DEVICES
        if not self.use_mock:
            return await self.resolve(category, sku_code, label="product")

        matches = await self.resolve(category, sku_code, label="product")
        if not matches:
            raise NotFoundError("Product not found", detail={"skuCode": sku_code})
        return matches[0]

    async def _fetch(self, category: ResourceCategory, params: Dict[str, Any], label: Optional[str] = None) -> Any:
        label = label or self.label(category)
        try:
            return await self.client.fetch(category, params)
        except ReviewProxyError as exc:
            # Callers only see the resource-level message; the cause stays in detail.
            raise type(exc)(f"Failed to fetch {label}", detail={"cause": exc.message, **exc.detail}) from exc

    def _filter_by_sku(
        self,
        category: ResourceCategory,
        raw: Any,
        sku_code: str,
        label: Optional[str] = None,
    ) -> List[ReviewRecord]:
        if not isinstance(raw, list):
            raise InternalError(
                f"Failed to fetch {label or self.label(category)}",
                detail={"cause": f"{category.value} fixture is not a list"},
            )
        sku_field = self.resources.sku_field
        return [item for item in raw if isinstance(item, dict) and item.get(sku_field) == sku_code]
