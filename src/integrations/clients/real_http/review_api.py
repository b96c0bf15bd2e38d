"""
Upstream Review API HTTP Client.

Used when USE_MOCK is not "true". Issues one GET per request to the URL
configured for the resource category and returns the JSON body verbatim; the
upstream is trusted to filter by SKU and paginate.

No retries: a failed call surfaces immediately as UpstreamError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from src.error_handler import UpstreamError
from src.integrations.contracts.reviews import ResourceCategory, ReviewSourceClient
from src.utils.config_loader import Settings
from src.utils.resource_config_loader import ResourceConfig, default_resource_config

logger = logging.getLogger(__name__)


class HttpReviewClient(ReviewSourceClient):
    def __init__(
        self,
        settings: Settings,
        resources: Optional[ResourceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.resources = resources or default_resource_config()
        self.timeout_seconds = settings.upstream_timeout_seconds
        self._transport = transport

    async def fetch(
        self,
        category: ResourceCategory,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        definition = self.resources.get(category)
        url = self.settings.upstream_url(definition.url_setting)
        if not url:
            raise UpstreamError(
                f"{definition.url_setting.upper()} is not configured.",
                detail={"category": category.value},
            )

        query = {k: v for k, v in (params or {}).items() if v is not None}
        # Keeps any query string already on the configured URL.
        request_url = httpx.URL(url).copy_merge_params(query)
        try:
            logger.info("Fetching %s from upstream %s params=%s", category.value, url, query)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(request_url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Upstream returned {e.response.status_code} for {url}: {e.response.text[:200]}")
            raise UpstreamError(
                f"Upstream responded with status {e.response.status_code}",
                detail={"url": url, "status": e.response.status_code},
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to upstream review API {url}: {e}")
            raise UpstreamError(
                "Could not reach upstream review API",
                detail={"url": url, "reason": str(e)},
            ) from e
        except ValueError as e:
            logger.error(f"Upstream response from {url} is not JSON: {e}")
            raise UpstreamError(
                "Upstream response is not valid JSON",
                detail={"url": url},
            ) from e

        logger.info("Received upstream response for %s: status=%s", category.value, response.status_code)
        return data
