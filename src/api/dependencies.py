from functools import lru_cache

from fastapi import Depends

from src.integrations.policy.review_service import ReviewService
from src.utils.config_loader import Settings, load_settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Built once per process; tests replace it through app.dependency_overrides.
    return load_settings()


def get_review_service(settings: Settings = Depends(get_settings)) -> ReviewService:
    return ReviewService(settings)
