"""Use case tests for catalog listing over in-memory repositories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.use_cases.product import ProductService

BASE = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


async def seed(product_repository, make_product, specs):
    """Create products oldest first; `specs` is a list of (name, active, category)."""
    created = []
    for minutes, (name, active, category) in enumerate(specs):
        product = make_product(
            name=name,
            active=active,
            category=category,
            created_at=BASE + timedelta(minutes=minutes),
        )
        created.append(await product_repository.create(product))
    return created


@pytest.mark.asyncio
async def test_active_only_pages_are_filled_past_inactive_products(
    product_repository, make_product
) -> None:
    await seed(
        product_repository,
        make_product,
        [("Ativo 1", True, "gels"), ("Ativo 2", True, "gels"), ("Ativo 3", True, "gels")]
        + [(f"Inativo {i}", False, "gels") for i in range(1, 4)],
    )
    service = ProductService(product_repository, store="docimdagringa")

    first_page = await service.get_products(skip=0, limit=3, active_only=True)
    second_page = await service.get_products(skip=1, limit=3, active_only=True)

    assert [p.name for p in first_page] == ["Ativo 3", "Ativo 2", "Ativo 1"]
    assert [p.name for p in second_page] == ["Ativo 2", "Ativo 1"]


@pytest.mark.asyncio
async def test_active_only_walks_past_a_full_batch_of_inactive_products(
    product_repository, make_product
) -> None:
    await seed(
        product_repository,
        make_product,
        [(f"Ativo {i}", True, "gels") for i in range(5)]
        + [(f"Inativo {i}", False, "gels") for i in range(150)],
    )
    service = ProductService(product_repository, store="docimdagringa")

    result = await service.get_products(limit=10, active_only=True)

    assert len(result) == 5
    assert all(p.active for p in result)


@pytest.mark.asyncio
async def test_search_matches_names_case_insensitively(
    product_repository, make_product
) -> None:
    await seed(
        product_repository,
        make_product,
        [
            ("Pomada Matte", True, "gels-pomadas"),
            ("Gel Fixador", True, "gels-pomadas"),
            ("pomada black", True, "gels-pomadas"),
            ("Pomada Antiga", False, "gels-pomadas"),
            ("Pomada de Barba", True, "barba"),
        ],
    )
    service = ProductService(product_repository, store="docimdagringa")

    everything = await service.get_products(search="POMADA")
    active_in_category = await service.get_products(
        search="pomada", category="gels-pomadas", active_only=True
    )
    paged = await service.get_products(search="pomada", skip=1, limit=2)

    assert [p.name for p in everything] == [
        "Pomada de Barba",
        "Pomada Antiga",
        "pomada black",
        "Pomada Matte",
    ]
    assert [p.name for p in active_in_category] == ["pomada black", "Pomada Matte"]
    assert [p.name for p in paged] == ["Pomada Antiga", "pomada black"]


@pytest.mark.asyncio
async def test_blank_search_returns_unfiltered_page(
    product_repository, make_product
) -> None:
    await seed(
        product_repository,
        make_product,
        [("Gel", True, "gels"), ("Cera", False, "ceras")],
    )
    service = ProductService(product_repository, store="docimdagringa")

    result = await service.get_products(search="   ")

    assert [p.name for p in result] == ["Cera", "Gel"]
