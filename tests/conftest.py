"""Pytest fixtures for the review proxy tests."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_review_service, get_settings
from src.api.main import app
from src.integrations.clients.real_http.review_api import HttpReviewClient
from src.integrations.policy.review_service import ReviewService
from src.utils.config_loader import Settings

FEATURED = [
    {"id": 1, "skuCode": "SKU-1", "title": "a"},
    {"id": 2, "skuCode": "SKU-2", "title": "b"},
    {"id": 3, "skuCode": "SKU-1", "title": "c"},
    {"id": 4, "skuCode": "SKU-1", "title": "d"},
]

DEVICES = [
    {"skuCode": "SKU-1", "name": "Phone One"},
    {"skuCode": "SKU-2", "name": "Phone Two"},
]

IMAGE_REVIEWS = [
    {"id": "i1", "skuCode": "SKU-1", "images": ["x.jpg"]},
    {"id": "i2", "skuCode": "SKU-2", "images": ["y.jpg"]},
]

REVIEW_LIST = [
    {"id": "r1", "skuCode": "SKU-2", "text": "ok"},
    {"id": "r2", "skuCode": "SKU-2", "text": "fine"},
    {"id": "r3", "skuCode": "SKU-2", "text": "great"},
]

PRODUCT_REVIEWS = [{"skuCode": "SKU-1", "reviews": []}]


@pytest.fixture
def mock_data_dir(tmp_path):
    """Fixture directory laid out like data/mock."""
    files = {
        "devices.json": DEVICES,
        "featuredReviews.json": {"featuredReviews": FEATURED},
        "imageReviews.json": IMAGE_REVIEWS,
        "reviewList.json": REVIEW_LIST,
        "productReviews.json": PRODUCT_REVIEWS,
    }
    for name, body in files.items():
        (tmp_path / name).write_text(json.dumps(body), encoding="utf-8")
    return tmp_path


@pytest.fixture
def mock_settings(mock_data_dir):
    return Settings(use_mock=True, mock_data_dir=mock_data_dir)


@pytest.fixture
def live_settings():
    return Settings(
        use_mock=False,
        devices_api_url="https://reviews.example.com/devices",
        featured_reviews_api_url="https://reviews.example.com/featured",
        image_reviews_api_url="https://reviews.example.com/images",
        review_list_api_url="https://reviews.example.com/list",
        product_reviews_api_url="https://reviews.example.com/product-reviews",
    )


class UpstreamRecorder:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code=200, body=None, exc=None):
        self.status_code = status_code
        self.body = {"upstream": True} if body is None else body
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream():
    return UpstreamRecorder()


@pytest.fixture
def mock_client(mock_settings):
    app.dependency_overrides[get_settings] = lambda: mock_settings
    app.dependency_overrides[get_review_service] = lambda: ReviewService(mock_settings)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def live_client(live_settings, upstream):
    http_client = HttpReviewClient(live_settings, transport=upstream.transport)
    app.dependency_overrides[get_settings] = lambda: live_settings
    app.dependency_overrides[get_review_service] = lambda: ReviewService(live_settings, client=http_client)
    yield TestClient(app)
    app.dependency_overrides.clear()
