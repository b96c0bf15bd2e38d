"""
Local Review Fixtures Client (Mock).

Purpose:
- Serves review datasets from static JSON files when USE_MOCK=true.
- Does NOT make network calls.

Behavior:
- Each fetch re-reads the fixture file so edits show up without a restart.
- Fixtures that wrap their list in an envelope (e.g. {"featuredReviews": [...]})
  are unwrapped according to config/resources.yml.
- Query params are ignored; SKU filtering and pagination happen in ReviewService.

Swap:
HttpReviewClient in clients/real_http/review_api.py serves the same categories
from the upstream review API.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from src.error_handler import InternalError
from src.integrations.contracts.reviews import ResourceCategory, ReviewSourceClient
from src.utils.resource_config_loader import ResourceConfig, default_resource_config

logger = logging.getLogger(__name__)


class MockReviewClient(ReviewSourceClient):
    def __init__(self, data_dir: Path, resources: Optional[ResourceConfig] = None) -> None:
        self.data_dir = Path(data_dir)
        self.resources = resources or default_resource_config()

    async def fetch(
        self,
        category: ResourceCategory,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        definition = self.resources.get(category)
        path = self.data_dir / definition.fixture
        data = await asyncio.to_thread(self._read_fixture, path)

        if definition.envelope_key:
            if not isinstance(data, dict) or definition.envelope_key not in data:
                raise InternalError(
                    f"Mock fixture {path.name} has no '{definition.envelope_key}' key",
                    detail={"fixture": str(path)},
                )
            data = data[definition.envelope_key]

        logger.debug("Loaded mock fixture %s for %s", path.name, category.value)
        return data

    def _read_fixture(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise InternalError(
                f"Mock fixture not found: {path.name}",
                detail={"fixture": str(path)},
            ) from exc
        except json.JSONDecodeError as exc:
            raise InternalError(
                f"Mock fixture is not valid JSON: {path.name}",
                detail={"fixture": str(path), "reason": str(exc)},
            ) from exc
