"""Repository tests against a real Redis (skipped when Redis is unavailable)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from storefront.domain.entities import CustomerInfo, Order, OrderItem, StoreSettings
from storefront.infrastructure.storage import RedisKeyValueStore
from storefront.infrastructure.store.order_repository_impl import OrderRepositoryImpl
from storefront.infrastructure.store.product_repository_impl import (
    ProductRepositoryImpl,
)
from storefront.infrastructure.store.store_settings_repository_impl import (
    StoreSettingsRepositoryImpl,
)

STORE = "docimdagringa"


def make_order(order_number: int, created_at: datetime) -> Order:
    return Order(
        order_number=order_number,
        store=STORE,
        items=[
            OrderItem(
                product_id=uuid4(),
                product_name="Gel",
                quantity=1,
                unit_price=Decimal("5.00"),
                subtotal=Decimal("5.00"),
            )
        ],
        customer=CustomerInfo(
            responsible_name="Maria Souza",
            address="Rua das Flores, 123",
            phone="35999998888",
            email="maria@example.com",
        ),
        total_amount=Decimal("5.00"),
        created_at=created_at,
    )


@pytest.mark.asyncio
async def test_order_numbers_are_sequential(redis_store: RedisKeyValueStore) -> None:
    repository = OrderRepositoryImpl(redis_store)

    numbers = [await repository.next_order_number(STORE) for _ in range(3)]

    assert numbers == [1, 2, 3]
    assert await repository.next_order_number("outra-loja") == 1


@pytest.mark.asyncio
async def test_orders_listed_newest_first_and_by_status(
    redis_store: RedisKeyValueStore,
) -> None:
    repository = OrderRepositoryImpl(redis_store)
    now = datetime.now(timezone.utc)
    older = await repository.create(make_order(1, now - timedelta(minutes=5)))
    newer = await repository.create(make_order(2, now))

    assert [o.id for o in await repository.get_all(STORE)] == [newer.id, older.id]

    older.update_status("sent")
    await repository.update(older)

    assert [o.id for o in await repository.get_by_status(STORE, "pending")] == [
        newer.id
    ]
    assert [o.id for o in await repository.get_by_status(STORE, "sent")] == [older.id]
    assert [o.id for o in await repository.get_by_ids([older.id, uuid4()])] == [
        older.id
    ]

    assert await repository.delete(newer.id) is True
    assert await repository.get_by_id(newer.id) is None
    assert await repository.get_by_status(STORE, "pending") == []


@pytest.mark.asyncio
async def test_product_category_index_follows_updates(
    redis_store: RedisKeyValueStore, make_product
) -> None:
    repository = ProductRepositoryImpl(redis_store)
    product = await repository.create(make_product(category="gels"))

    product.update_details(category="ceras")
    await repository.update(product)

    assert await repository.get_by_category(STORE, "gels") == []
    [stored] = await repository.get_by_category(STORE, "ceras")
    assert stored.id == product.id
    assert stored.price == Decimal("24.90")
    assert await repository.get_categories(STORE) == ["ceras"]


@pytest.mark.asyncio
async def test_store_settings_round_trip(redis_store: RedisKeyValueStore) -> None:
    repository = StoreSettingsRepositoryImpl(redis_store)
    assert await repository.get(STORE) is None

    await repository.save(
        StoreSettings(store=STORE, whatsapp_number="5535991154125", observation="x")
    )

    stored = await repository.get(STORE)
    assert stored is not None
    assert stored.observation == "x"
