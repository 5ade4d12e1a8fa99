"""Shared pytest fixtures for storefront tests."""

from __future__ import annotations

import os
from decimal import Decimal
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio

from storefront.application.use_cases.checkout import CheckoutService
from storefront.application.use_cases.pix import PixService
from storefront.application.use_cases.store_settings import StoreSettingsService
from storefront.domain.entities import CustomerInfo, Product, ShippingRate
from storefront.infrastructure.database import DatabaseClient
from storefront.infrastructure.storage import RedisKeyValueStore
from storefront.infrastructure.store.order_repository_impl import OrderRepositoryImpl
from storefront.infrastructure.store.product_repository_impl import (
    ProductRepositoryImpl,
)
from storefront.infrastructure.store.shipping_rate_repository_impl import (
    ShippingRateRepositoryImpl,
)
from storefront.infrastructure.store.store_settings_repository_impl import (
    StoreSettingsRepositoryImpl,
)
from tests.fixtures import InMemoryKeyValueStore

STORE = "docimdagringa"
WHATSAPP_NUMBER = "5535991154125"
PIX_KEY = "63813434000120"


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Create a fresh in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def product_repository(kv_store: InMemoryKeyValueStore) -> ProductRepositoryImpl:
    return ProductRepositoryImpl(kv_store)


@pytest.fixture
def order_repository(kv_store: InMemoryKeyValueStore) -> OrderRepositoryImpl:
    return OrderRepositoryImpl(kv_store)


@pytest.fixture
def shipping_rate_repository(
    kv_store: InMemoryKeyValueStore,
) -> ShippingRateRepositoryImpl:
    return ShippingRateRepositoryImpl(kv_store)


@pytest.fixture
def store_settings_repository(
    kv_store: InMemoryKeyValueStore,
) -> StoreSettingsRepositoryImpl:
    return StoreSettingsRepositoryImpl(kv_store)


@pytest.fixture
def settings_service(
    store_settings_repository: StoreSettingsRepositoryImpl,
) -> StoreSettingsService:
    return StoreSettingsService(
        store_settings_repository, store=STORE, default_whatsapp_number=WHATSAPP_NUMBER
    )


@pytest.fixture
def pix_service() -> PixService:
    return PixService(
        pix_key=PIX_KEY, merchant_name="GRINGA STORE", merchant_city="SAO PAULO"
    )


@pytest.fixture
def checkout_service(
    product_repository: ProductRepositoryImpl,
    order_repository: OrderRepositoryImpl,
    shipping_rate_repository: ShippingRateRepositoryImpl,
    settings_service: StoreSettingsService,
    pix_service: PixService,
) -> CheckoutService:
    return CheckoutService(
        store=STORE,
        product_repository=product_repository,
        order_repository=order_repository,
        shipping_rate_repository=shipping_rate_repository,
        settings_service=settings_service,
        pix_service=pix_service,
    )


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for catalog products with sensible defaults."""

    def _make(**overrides: object) -> Product:
        fields: dict[str, object] = {
            "store": STORE,
            "name": "Pomada Modeladora",
            "category": "gels-pomadas",
            "price": Decimal("24.90"),
            "stock": 10,
        }
        fields.update(overrides)
        return Product(**fields)

    return _make


@pytest.fixture
def make_shipping_rate() -> Callable[..., ShippingRate]:
    def _make(**overrides: object) -> ShippingRate:
        fields: dict[str, object] = {
            "city": "Pouso Alegre",
            "neighborhood": "Centro",
            "price": Decimal("8.00"),
        }
        fields.update(overrides)
        return ShippingRate(**fields)

    return _make


@pytest.fixture
def customer() -> CustomerInfo:
    return CustomerInfo(
        responsible_name="Maria Souza",
        business_name="Barbearia Central",
        address="Rua das Flores, 123",
        phone="35999998888",
        email="maria@example.com",
    )


class TestDatabaseSettings:
    """Test settings for Redis connection."""

    __test__ = False

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url


@pytest_asyncio.fixture
async def redis_db_client() -> AsyncGenerator[DatabaseClient, None]:
    """Create a Redis database client for testing.

    Uses database 15 by default, or TEST_REDIS_URL if set.
    """
    import warnings

    test_redis_url = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")
    settings = TestDatabaseSettings(database_url=test_redis_url)
    client = DatabaseClient(settings)
    client.initialize_database()

    try:
        await client.ping()
    except Exception as e:
        warnings.warn(
            f"Redis not available at {test_redis_url}: {e}. "
            "Tests requiring Redis will be skipped.",
            UserWarning,
        )
        pytest.skip(f"Redis not available: {e}")

    yield client

    # Cleanup: flush test database
    try:
        async with client.get_connection() as conn:
            await conn.flushdb()
    except Exception:
        pass  # Ignore cleanup errors
    await client.close()


@pytest_asyncio.fixture
async def redis_store(redis_db_client: DatabaseClient) -> RedisKeyValueStore:
    """Create a Redis-backed key-value store for testing."""
    return RedisKeyValueStore(redis_db_client)
