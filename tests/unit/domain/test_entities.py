"""Validation and behaviour tests for storefront entities."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from storefront.domain.entities import (
    CustomerInfo,
    Order,
    OrderItem,
    StoreSettings,
)
from storefront.domain.money import format_brl, quantize_money

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestProduct:
    def test_effective_price_rounds_half_up(self, make_product) -> None:
        product = make_product(price=Decimal("9.99"), discount_percentage=Decimal("15"))
        # 9.99 * 0.85 = 8.4915
        assert product.effective_price(NOW) == Decimal("8.49")

    def test_discount_without_expiry_is_active(self, make_product) -> None:
        product = make_product(discount_percentage=Decimal("5"))
        assert product.has_active_discount(NOW)

    def test_zero_discount_is_inactive(self, make_product) -> None:
        product = make_product(discount_percentage=Decimal("0"))
        assert not product.has_active_discount(NOW)
        assert product.effective_price(NOW) == product.price

    def test_naive_expiry_is_treated_as_utc(self, make_product) -> None:
        product = make_product(
            discount_percentage=Decimal("5"),
            discount_expires_at=datetime(2025, 3, 1, 13, 0),
        )
        assert product.has_active_discount(NOW)
        assert not product.has_active_discount(NOW + timedelta(hours=2))

    def test_active_discount_percentage(self, make_product) -> None:
        product = make_product(
            discount_percentage=Decimal("15"),
            discount_expires_at=NOW + timedelta(days=1),
        )
        assert product.active_discount_percentage(NOW) == Decimal("15")
        assert product.active_discount_percentage(NOW + timedelta(days=2)) == 0
        assert make_product().active_discount_percentage(NOW) == 0

    def test_discount_above_100_is_rejected(self, make_product) -> None:
        with pytest.raises(ValidationError):
            make_product(discount_percentage=Decimal("101"))

    def test_negative_price_is_rejected(self, make_product) -> None:
        with pytest.raises(ValidationError):
            make_product(price=Decimal("-1"))

    def test_update_details_clears_optional_fields_only(self, make_product) -> None:
        product = make_product(discount_percentage=Decimal("10"), sku="SKU-1")
        product.update_details(discount_percentage=None, name=None, price=Decimal("5"))

        assert product.discount_percentage is None
        assert product.name == "Pomada Modeladora"
        assert product.price == Decimal("5")
        assert product.sku == "SKU-1"
        assert product.updated_at is not None

    def test_serializes_id_and_timestamps_as_strings(self, make_product) -> None:
        product = make_product()
        data = product.model_dump(mode="json")
        assert data["id"] == str(product.id)
        assert isinstance(data["created_at"], str)
        assert data["updated_at"] is None


class TestCustomerInfo:
    def test_strips_whitespace(self) -> None:
        customer = CustomerInfo(
            responsible_name="  Ana  ",
            address="Rua A, 10",
            phone="35999990000",
            email="ana@example.com",
        )
        assert customer.responsible_name == "Ana"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"responsible_name": "A"},
            {"address": "Rua"},
            {"phone": "1234"},
            {"email": "not-an-email"},
        ],
    )
    def test_rejects_invalid_fields(self, overrides) -> None:
        fields = {
            "responsible_name": "Ana Lima",
            "address": "Rua A, 10",
            "phone": "35999990000",
            "email": "ana@example.com",
        }
        fields.update(overrides)
        with pytest.raises(ValidationError):
            CustomerInfo(**fields)


class TestOrder:
    def _order(self, customer: CustomerInfo) -> Order:
        item = OrderItem(
            product_id=uuid4(),
            product_name="Gel",
            quantity=1,
            unit_price=Decimal("10.00"),
            subtotal=Decimal("10.00"),
        )
        return Order(
            order_number=1,
            store="docimdagringa",
            items=[item],
            customer=customer,
            total_amount=Decimal("10.00"),
        )

    def test_requires_at_least_one_item(self, customer) -> None:
        with pytest.raises(ValidationError):
            Order(
                order_number=1,
                store="docimdagringa",
                items=[],
                customer=customer,
                total_amount=Decimal("0"),
            )

    def test_defaults_to_pending(self, customer) -> None:
        assert self._order(customer).status == "pending"

    def test_update_status(self, customer) -> None:
        order = self._order(customer)
        order.update_status("sent")
        assert order.status == "sent"
        assert order.updated_at is not None

    def test_update_status_rejects_unknown(self, customer) -> None:
        order = self._order(customer)
        with pytest.raises(ValueError):
            order.update_status("lost")  # type: ignore[arg-type]

    def test_set_comments_keeps_omitted_comment(self, customer) -> None:
        order = self._order(customer)
        order.set_comments(internal_comments="ligar antes")
        order.set_comments(external_comments="saiu para entrega")
        assert order.internal_comments == "ligar antes"
        assert order.external_comments == "saiu para entrega"

    def test_json_round_trip_preserves_money(self, customer) -> None:
        order = self._order(customer)
        restored = Order.model_validate_json(order.model_dump_json())
        assert restored.total_amount == Decimal("10.00")
        assert restored.items[0].product_name == "Gel"


class TestStoreSettings:
    def test_whatsapp_number_keeps_digits_only(self) -> None:
        settings = StoreSettings(store="s", whatsapp_number="+55 (35) 99115-4125")
        assert settings.whatsapp_number == "5535991154125"

    def test_defaults_to_open(self) -> None:
        settings = StoreSettings(store="s", whatsapp_number="5535991154125")
        assert settings.is_open_manually
        assert settings.observation == ""

    def test_short_whatsapp_number_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StoreSettings(store="s", whatsapp_number="12-34")


def test_money_helpers() -> None:
    assert quantize_money(Decimal("0.125")) == Decimal("0.13")
    assert format_brl(Decimal("19.9")) == "R$ 19.90"
    assert format_brl(Decimal("0")) == "R$ 0.00"
