"""
Review data contracts shared by the mock and real HTTP review clients.

Review records are passed through as opaque JSON objects; only the SKU field is
ever read. The paginated envelope is the shape the frontend receives in mock mode
(live mode returns whatever the upstream API returns).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ReviewRecord = Dict[str, Any]


class ResourceCategory(str, Enum):
    DEVICES = "devices"
    FEATURED_REVIEWS = "featured_reviews"
    IMAGE_REVIEWS = "image_reviews"
    REVIEW_LIST = "review_list"
    PRODUCT_REVIEWS = "product_reviews"


class PaginatedResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    data: List[Any] = Field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ReviewQuery(BaseModel):
    """Query parameters accepted by the filtered review endpoints."""

    sku_code: Optional[str] = Field(default=None, alias="skuCode")
    page: int = 1
    limit: int = 10

    @field_validator("sku_code", mode="before")
    @classmethod
    def _blank_sku_is_missing(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value)
        return value if value else None

    @field_validator("page", mode="before")
    @classmethod
    def _parse_page(cls, value: Any) -> int:
        return _parse_int(value, default=1)

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int:
        return _parse_int(value, default=10)


def _parse_int(value: Any, default: int) -> int:
    # Lenient like a leading-digits parse: "2abc" -> 2, "abc" -> default.
    if value is None:
        return default
    if isinstance(value, int):
        return value
    text = str(value).strip()
    sign = ""
    if text[:1] in {"-", "+"}:
        sign, text = text[:1], text[1:]
    digits = ""
    for ch in text:
        if ch not in "0123456789":
            break
        digits += ch
    if not digits:
        return default
    return int(sign + digits)


class ReviewSourceClient(ABC):
    """Every review data source (local fixtures or upstream HTTP) implements this."""

    @abstractmethod
    async def fetch(
        self,
        category: ResourceCategory,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Return the raw dataset for a category.

        Mock clients ignore params and return the full fixture; HTTP clients
        forward them as query parameters.
        """
