"""
Integrations layer.

This package contains all code that reads review data from a source:
- Local JSON fixtures (mock mode, USE_MOCK=true)
- The upstream review API (live mode)

Key rule:
- API endpoints MUST NOT read fixtures or call the upstream API directly.
- Endpoints call ReviewService (src/integrations/policy/review_service.py),
  which talks to a ReviewSourceClient.

Switching implementations:
- The selection of mock vs real clients happens in ONE place
  (build_review_client in src/integrations/policy/review_service.py).
"""

from .contracts.reviews import (
    PaginatedResult,
    ResourceCategory,
    ReviewQuery,
    ReviewRecord,
    ReviewSourceClient,
)

__all__ = [
    "PaginatedResult",
    "ResourceCategory",
    "ReviewQuery",
    "ReviewRecord",
    "ReviewSourceClient",
]
