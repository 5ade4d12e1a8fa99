"""FastAPI dependencies for the storefront API."""

from __future__ import annotations

from fastapi import Depends

from ..application.use_cases.checkout import CheckoutService
from ..application.use_cases.order import OrderService
from ..application.use_cases.pix import PixService
from ..application.use_cases.product import ProductService
from ..application.use_cases.shipping_rate import ShippingRateService
from ..application.use_cases.store_settings import StoreSettingsService
from ..domain.order_repository import OrderRepository
from ..domain.product_repository import ProductRepository
from ..domain.shipping_rate_repository import ShippingRateRepository
from ..domain.store_settings_repository import StoreSettingsRepository
from ..env import Settings, get_settings
from ..infrastructure.database import DatabaseClient, get_database_client
from ..infrastructure.storage import KeyValueStore, RedisKeyValueStore
from ..infrastructure.store.order_repository_impl import OrderRepositoryImpl
from ..infrastructure.store.product_repository_impl import ProductRepositoryImpl
from ..infrastructure.store.shipping_rate_repository_impl import (
    ShippingRateRepositoryImpl,
)
from ..infrastructure.store.store_settings_repository_impl import (
    StoreSettingsRepositoryImpl,
)


def get_database_client_with_settings(
    settings: Settings = Depends(get_settings),
) -> DatabaseClient:
    """Get database client with settings."""
    return get_database_client(settings)


def get_key_value_store(
    db_client: DatabaseClient = Depends(get_database_client_with_settings),
) -> KeyValueStore:
    """Get key-value store."""
    return RedisKeyValueStore(db_client)


def get_product_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ProductRepository:
    """Get product repository."""
    return ProductRepositoryImpl(store)


def get_order_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> OrderRepository:
    """Get order repository."""
    return OrderRepositoryImpl(store)


def get_shipping_rate_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ShippingRateRepository:
    """Get shipping rate repository."""
    return ShippingRateRepositoryImpl(store)


def get_store_settings_repository(
    store: KeyValueStore = Depends(get_key_value_store),
) -> StoreSettingsRepository:
    """Get store settings repository."""
    return StoreSettingsRepositoryImpl(store)


def get_product_service(
    product_repository: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    """Get product service."""
    return ProductService(product_repository, store=settings.store_slug)


def get_order_service(
    order_repository: OrderRepository = Depends(get_order_repository),
    settings: Settings = Depends(get_settings),
) -> OrderService:
    """Get order service."""
    return OrderService(order_repository, store=settings.store_slug)


def get_shipping_rate_service(
    shipping_rate_repository: ShippingRateRepository = Depends(
        get_shipping_rate_repository
    ),
) -> ShippingRateService:
    """Get shipping rate service."""
    return ShippingRateService(shipping_rate_repository)


def get_store_settings_service(
    settings_repository: StoreSettingsRepository = Depends(
        get_store_settings_repository
    ),
    settings: Settings = Depends(get_settings),
) -> StoreSettingsService:
    """Get store settings service."""
    return StoreSettingsService(
        settings_repository,
        store=settings.store_slug,
        default_whatsapp_number=settings.whatsapp_number,
    )


def get_pix_service(settings: Settings = Depends(get_settings)) -> PixService:
    """Get PIX service."""
    return PixService(
        pix_key=settings.pix_key,
        merchant_name=settings.pix_merchant_name,
        merchant_city=settings.pix_merchant_city,
    )


def get_checkout_service(
    product_repository: ProductRepository = Depends(get_product_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
    shipping_rate_repository: ShippingRateRepository = Depends(
        get_shipping_rate_repository
    ),
    settings_service: StoreSettingsService = Depends(get_store_settings_service),
    pix_service: PixService = Depends(get_pix_service),
    settings: Settings = Depends(get_settings),
) -> CheckoutService:
    """Get checkout service."""
    return CheckoutService(
        store=settings.store_slug,
        product_repository=product_repository,
        order_repository=order_repository,
        shipping_rate_repository=shipping_rate_repository,
        settings_service=settings_service,
        pix_service=pix_service,
    )
