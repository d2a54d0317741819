"""
Unit tests for FastAPI application setup and configuration.

- build_app() creates a new, configured FastAPI instance per call
- Routers are registered (health at the root, products under /v1)
- OpenAPI schema documents the product routes
- Building the app never ingests the catalog; starting it does, once
"""

from __future__ import annotations

from unittest.mock import Mock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_view.entrypoints.http.app import build_app
from catalog_view.use_cases.catalog_session import CatalogSession


def test_build_app_returns_new_fastapi_instance() -> None:
    app1 = build_app()
    app2 = build_app()

    assert isinstance(app1, FastAPI)
    assert app1 is not app2


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Catalog View API"
    assert app.version == "0.1.0"
    assert "Filter, sort and paginate" in app.description
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_health_endpoint_responds() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_products_routes_are_under_v1_prefix() -> None:
    paths = build_app().openapi()["paths"]

    assert "/products" not in paths
    assert "get" in paths["/v1/products"]
    assert "get" in paths["/v1/products/filters"]
    assert "post" in paths["/v1/products/events"]


def test_openapi_documents_event_body_and_errors() -> None:
    schema = build_app().openapi()
    post = schema["paths"]["/v1/products/events"]["post"]

    assert post["tags"] == ["Products"]
    assert post["summary"] == "Apply a filter event"
    assert "requestBody" in post
    assert "422" in post["responses"]
    assert "PageChangedDTO" in schema["components"]["schemas"]
    assert "ErrorResponse" in schema["components"]["schemas"]


def test_build_app_does_not_load_catalog() -> None:
    with patch("catalog_view.entrypoints.http.dependencies.build_catalog_session") as build:
        build_app().openapi()

    build.assert_not_called()


def test_starting_app_loads_catalog_once() -> None:
    created = Mock(spec=CatalogSession)
    created.catalog = []

    with patch(
        "catalog_view.entrypoints.http.dependencies.build_catalog_session",
        return_value=created,
    ) as build:
        with TestClient(build_app()) as client:
            client.get("/health")
            client.get("/health")

    build.assert_called_once_with()


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app())

    assert client.get("/unknown").status_code == 404
    assert client.get("/v1/unknown").status_code == 404


def test_module_level_app_is_from_build_app() -> None:
    from catalog_view.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Catalog View API"
