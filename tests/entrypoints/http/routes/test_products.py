"""
Test suite for the /v1/products routes.

The session dependency is overridden with an in-memory catalog session so
the routes run the real engine without touching files or a database:
- GET /v1/products returns the current view without changing it
- POST /v1/products/events applies one event and returns the new view
- GET /v1/products/filters reflects the applied events
- Malformed bodies and rejected updates return structured 422 errors
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_view.domain.catalog import Catalog, RawItem
from catalog_view.entrypoints.http.dependencies import get_catalog_session
from catalog_view.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_view.entrypoints.http.routes.products import router
from catalog_view.use_cases.catalog_session import CatalogSession


@pytest.fixture
def session() -> CatalogSession:
    catalog = Catalog.from_records(
        [
            RawItem(name="Nike Air Max Sneakers", price=8990, rating=4.7),
            RawItem(name="Levi's 501 Jeans", price=5490, rating=4.5),
            RawItem(name="Sony WH-1000XM5 Headphones", price=29990, rating=4.9),
            RawItem(name="Adidas Essentials Hoodie", price=4290, rating=4.2),
            RawItem(name="Puma Classic T-Shirt", price=1490, rating=3.8),
            RawItem(name="Leather Belt Accessory Set", price=2190, rating=4.0),
            RawItem(name="Adidas Ultraboost Running Shoes", price=12990, rating=4.8),
            RawItem(name="Sony Xperia 10 V", price=32990, rating=4.3),
            RawItem(name="Nike Tech Fleece Hoodie", price=7490, rating=4.6),
            RawItem(name="Wrangler Slim Jeans", price=5490, rating=3.9),
            RawItem(name="JBL Tune 510BT Headphones", price=3490, rating=4.4),
            RawItem(name="Canvas Tote Bag", price=1290, rating=3.5),
            RawItem(name="Puma Suede Sneakers", price=6490, rating=4.1),
        ]
    )
    return CatalogSession(catalog)


@pytest.fixture
def app(session: CatalogSession) -> FastAPI:
    """Create a test FastAPI app with the products router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_catalog_session] = lambda: session
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def post_event(client: TestClient, **body: object):
    return client.post("/v1/products/events", json=body)


# ==============================================================================
# GET /v1/products
# ==============================================================================


def test_get_products_default_view(client: TestClient) -> None:
    response = client.get("/v1/products")

    assert response.status_code == 200
    data = response.json()

    assert data["total_count"] == 13
    assert data["total_pages"] == 3
    assert data["current_page"] == 1
    assert data["per_page"] == 6
    assert [item["id"] for item in data["items"]] == [1, 2, 3, 4, 5, 6]
    assert data["items"][0] == {
        "id": 1,
        "name": "Nike Air Max Sneakers",
        "category": "footwear",
        "price": 8990,
        "rating": 4.7,
    }


def test_get_products_is_idempotent(client: TestClient) -> None:
    post_event(client, type="search-changed", text="hoodie")

    first = client.get("/v1/products").json()
    second = client.get("/v1/products").json()

    assert first == second
    assert first["total_count"] == 2


# ==============================================================================
# POST /v1/products/events
# ==============================================================================


def test_search_event(client: TestClient) -> None:
    response = post_event(client, type="search-changed", text="JEANS")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()["items"]] == [
        "Levi's 501 Jeans",
        "Wrangler Slim Jeans",
    ]


def test_category_and_brand_events_combine(client: TestClient) -> None:
    post_event(client, type="category-toggled", category="apparel", on=True)
    response = post_event(client, type="brand-toggled", token="Nike", on=True)

    assert [item["name"] for item in response.json()["items"]] == ["Nike Tech Fleece Hoodie"]


def test_rating_events_use_highest_threshold(client: TestClient) -> None:
    post_event(client, type="rating-toggled", value=3, on=True)
    response = post_event(client, type="rating-toggled", value=4, on=True)

    assert response.json()["total_count"] == 10


def test_sort_event_defaults_to_ascending(client: TestClient) -> None:
    response = post_event(client, type="sort-changed", sort_by="price")

    prices = [item["price"] for item in response.json()["items"]]
    assert prices == [1290, 1490, 2190, 3490, 4290, 5490]


def test_price_events_parse_raw_text(client: TestClient, session: CatalogSession) -> None:
    post_event(client, type="price-min-changed", value="4 290 $")
    response = post_event(client, type="price-max-changed", value=5490)

    assert session.state.price_min == 4290
    assert session.state.price_max == 5490
    assert response.json()["total_count"] == 3


def test_price_text_without_digits_is_zero(client: TestClient, session: CatalogSession) -> None:
    response = post_event(client, type="price-max-changed", value="any")

    assert response.status_code == 200
    assert session.state.price_max == 0
    assert response.json()["total_count"] == 0
    assert response.json()["total_pages"] == 1


def test_page_event_out_of_range_is_clamped(client: TestClient) -> None:
    response = post_event(client, type="page-changed", page=5)

    data = response.json()
    assert data["current_page"] == 3
    assert [item["name"] for item in data["items"]] == ["Puma Suede Sneakers"]


def test_filter_event_resets_page(client: TestClient) -> None:
    post_event(client, type="page-changed", page=2)

    response = post_event(client, type="search-changed", text="")

    assert response.json()["current_page"] == 1


# ==============================================================================
# GET /v1/products/filters
# ==============================================================================


def test_get_filters_default(client: TestClient) -> None:
    response = client.get("/v1/products/filters")

    assert response.status_code == 200
    assert response.json() == {
        "search": "",
        "categories": [],
        "brands": [],
        "min_ratings": [],
        "effective_min_rating": None,
        "price_min": 0,
        "price_max": 32990,
        "sort_by": "none",
        "sort_order": "asc",
        "page": 1,
        "per_page": 6,
    }


def test_get_filters_reflects_events(client: TestClient) -> None:
    post_event(client, type="category-toggled", category="footwear", on=True)
    post_event(client, type="category-toggled", category="apparel", on=True)
    post_event(client, type="rating-toggled", value=4, on=True)
    post_event(client, type="sort-changed", sort_by="rating", order="desc")

    data = client.get("/v1/products/filters").json()

    assert data["categories"] == ["apparel", "footwear"]
    assert data["min_ratings"] == [4]
    assert data["effective_min_rating"] == 4
    assert (data["sort_by"], data["sort_order"]) == ("rating", "desc")


# ==============================================================================
# Validation Errors
# ==============================================================================


def test_unknown_event_type_returns_422(client: TestClient) -> None:
    response = post_event(client, type="color-picked", color="red")

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_unknown_category_returns_422(client: TestClient, session: CatalogSession) -> None:
    response = post_event(client, type="category-toggled", category="toys", on=True)

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid request parameters"
    assert any(error["field"].endswith("category") for error in data["errors"])
    assert session.state.categories == set()


def test_page_below_one_returns_422(client: TestClient) -> None:
    response = post_event(client, type="page-changed", page=0)

    assert response.status_code == 422


def test_negative_price_is_rejected_by_domain(client: TestClient, session: CatalogSession) -> None:
    response = post_event(client, type="price-min-changed", value=-5)

    assert response.status_code == 422
    assert response.json() == {
        "detail": "price_min must be >= 0",
        "code": "VALIDATION_ERROR",
    }
    assert session.state.price_min == 0


def test_overlong_price_text_returns_structured_422(
    client: TestClient, session: CatalogSession
) -> None:
    response = post_event(client, type="price-max-changed", value="9" * 5000)

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid request parameters"
    assert data["code"] == "VALIDATION_ERROR"
    assert "Exceeds the limit" not in response.text
    assert session.state.price_max == 32990


def test_fractional_price_returns_422(client: TestClient, session: CatalogSession) -> None:
    response = post_event(client, type="price-min-changed", value=10.5)

    assert response.status_code == 422
    assert session.state.price_min == 0
