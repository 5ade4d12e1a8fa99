"""Unit tests for product API routes."""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4
from datetime import datetime, timezone
from decimal import Decimal

from fastapi.testclient import TestClient
from fastapi import FastAPI

from storefront.api.routers.products import router
from storefront.api.dependencies import get_product_service
from storefront.application.dtos import ProductResponseDTO, RenameCategoryResponseDTO


@pytest.fixture
def test_setup():
    """Set up test fixtures."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")

    product_id = uuid4()
    product_response = ProductResponseDTO(
        id=product_id,
        store="docimdagringa",
        name="Pomada Modeladora",
        category="gels-pomadas",
        price=Decimal("24.90"),
        effective_price=Decimal("22.41"),
        has_active_discount=True,
        image_url="",
        image_url_2=None,
        image_url_3=None,
        description=None,
        active=True,
        stock=10,
        sku=None,
        discount_percentage=Decimal("10"),
        discount_expires_at=None,
        created_at=datetime.now(timezone.utc),
        updated_at=None,
    )

    mock_service = AsyncMock()
    app.dependency_overrides[get_product_service] = lambda: mock_service

    client = TestClient(app)

    return {
        "client": client,
        "product_id": product_id,
        "product_response": product_response,
        "mock_service": mock_service,
    }


def test_create_product_success(test_setup):
    """Test successful product creation."""
    test_setup["mock_service"].create_product.return_value = test_setup[
        "product_response"
    ]

    response = test_setup["client"].post(
        "/api/v1/products/",
        json={"name": "Pomada Modeladora", "category": "gels-pomadas", "price": "24.90"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == str(test_setup["product_id"])
    assert Decimal(data["effective_price"]) == Decimal("22.41")
    assert data["has_active_discount"] is True
    test_setup["mock_service"].create_product.assert_called_once()


def test_create_product_validation_error(test_setup):
    """A negative price never reaches the service."""
    response = test_setup["client"].post(
        "/api/v1/products/",
        json={"name": "Gel", "category": "gels", "price": "-1"},
    )

    assert response.status_code == 422
    test_setup["mock_service"].create_product.assert_not_called()


def test_get_products_passes_filters(test_setup):
    test_setup["mock_service"].get_products.return_value = [
        test_setup["product_response"]
    ]

    response = test_setup["client"].get(
        "/api/v1/products/?category=gels-pomadas&active_only=true&skip=5&limit=10"
    )

    assert response.status_code == 200
    assert len(response.json()) == 1
    test_setup["mock_service"].get_products.assert_called_once_with(
        skip=5, limit=10, category="gels-pomadas", active_only=True, search=None
    )


def test_get_products_search(test_setup):
    test_setup["mock_service"].get_products.return_value = []

    response = test_setup["client"].get("/api/v1/products/?search=pomada")

    assert response.status_code == 200
    test_setup["mock_service"].get_products.assert_called_once_with(
        skip=0, limit=100, category=None, active_only=False, search="pomada"
    )


def test_get_categories(test_setup):
    test_setup["mock_service"].get_categories.return_value = ["ceras", "gels"]

    response = test_setup["client"].get("/api/v1/products/categories")

    assert response.status_code == 200
    assert response.json() == ["ceras", "gels"]


def test_rename_category(test_setup):
    test_setup["mock_service"].rename_category.return_value = (
        RenameCategoryResponseDTO(old_name="gels", new_name="geis", updated_products=4)
    )

    response = test_setup["client"].post(
        "/api/v1/products/categories/rename",
        json={"old_name": "gels", "new_name": "geis"},
    )

    assert response.status_code == 200
    assert response.json()["updated_products"] == 4


def test_rename_category_same_name(test_setup):
    test_setup["mock_service"].rename_category.side_effect = ValueError(
        "New category name must differ from the current one"
    )

    response = test_setup["client"].post(
        "/api/v1/products/categories/rename",
        json={"old_name": "gels", "new_name": "gels"},
    )

    assert response.status_code == 400


def test_get_product_not_found(test_setup):
    test_setup["mock_service"].get_product_by_id.return_value = None

    response = test_setup["client"].get(f"/api/v1/products/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_update_product_not_found(test_setup):
    test_setup["mock_service"].update_product.return_value = None

    response = test_setup["client"].put(
        f"/api/v1/products/{uuid4()}", json={"name": "Novo nome"}
    )

    assert response.status_code == 404


def test_delete_product(test_setup):
    test_setup["mock_service"].delete_product.return_value = True

    response = test_setup["client"].delete(
        f"/api/v1/products/{test_setup['product_id']}"
    )

    assert response.status_code == 204


def test_invalid_uuid(test_setup):
    response = test_setup["client"].get("/api/v1/products/not-a-uuid")

    assert response.status_code == 422
