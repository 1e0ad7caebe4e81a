from decimal import Decimal

import pytest

from eshop.domain.errors import FieldError, ValidationError, ensure_valid
from eshop.domain.validation import (
    INT_MAX,
    validate_add_to_cart,
    validate_cart_remove,
    validate_cart_update,
    validate_product_create,
    validate_product_update,
    validate_search_term,
    validate_user_create,
)


def fields(errors: list[FieldError]) -> list[str]:
    return [e.field for e in errors]


class TestProductRules:
    def test_valid_product(self):
        assert validate_product_create("Mouse", Decimal("25.00"), 0) == []

    def test_name_bounds(self):
        assert validate_product_create("x" * 50, Decimal("1"), 1) == []
        assert fields(validate_product_create("x" * 51, Decimal("1"), 1)) == ["name"]
        assert fields(validate_product_create("   ", Decimal("1"), 1)) == ["name"]

    def test_messages(self):
        errors = validate_product_create("", Decimal("0"), -1)

        assert [e.to_dict() for e in errors] == [
            {"field": "name", "message": "Product name must be between 1 and 50 characters."},
            {"field": "price", "message": "Price must be greater than zero."},
            {"field": "stock", "message": "Stock level must be non-negative."},
        ]

    @pytest.mark.parametrize(
        "price, message",
        [
            (Decimal("0.001"), "Price must be greater than zero."),
            (Decimal("9.999"), "Price can have at most 2 decimal places."),
            (Decimal("100000000.00"), "Price must not exceed 99999999.99."),
        ],
    )
    def test_price_must_fit_two_decimal_places(self, price, message):
        assert [e.message for e in validate_product_create("Pin", price, 1)] == [message]

    @pytest.mark.parametrize("price", [Decimal("0.01"), Decimal("9.90"), Decimal("1E+2"), Decimal("99999999.99")])
    def test_price_bounds_accepted(self, price):
        assert validate_product_create("Pin", price, 1) == []

    def test_stock_upper_bound(self):
        assert validate_product_create("Pin", Decimal("1"), INT_MAX) == []
        assert [e.to_dict() for e in validate_product_create("Pin", Decimal("1"), INT_MAX + 1)] == [
            {"field": "stock", "message": "Stock level must not exceed 2147483647."}
        ]

    def test_update_checks_id_first(self):
        assert fields(validate_product_update(0, "", Decimal("1"), 1)) == ["id", "name"]

    def test_search_term(self):
        assert validate_search_term("mouse") == []
        assert fields(validate_search_term(" ")) == ["name"]


class TestCartRules:
    def test_add_reports_in_field_order(self):
        assert fields(validate_add_to_cart(0, 0, 0)) == ["productId", "userId", "quantity"]

    def test_ids_and_quantity_fit_int_column(self):
        assert validate_add_to_cart(INT_MAX, INT_MAX, INT_MAX) == []
        assert fields(validate_add_to_cart(INT_MAX + 1, 1, INT_MAX + 1)) == ["productId", "quantity"]
        assert fields(validate_cart_remove(INT_MAX + 1, 1)) == ["userId"]

    def test_update_and_remove(self):
        assert validate_cart_update(1, 1, 1) == []
        assert fields(validate_cart_update(1, -1, 0)) == ["productId", "quantity"]
        assert fields(validate_cart_remove(0, 2)) == ["userId"]


class TestUserRules:
    @pytest.mark.parametrize("email", ["nope", "@example.com", "jan@", "a@b@c"])
    def test_bad_email(self, email):
        assert fields(validate_user_create(email, "long-enough")) == ["email"]

    def test_password_length(self):
        assert fields(validate_user_create("jan@example.com", "short")) == ["password"]
        assert validate_user_create("jan@example.com", "exactly8") == []


def test_ensure_valid_raises_with_all_errors():
    errors = validate_add_to_cart(0, 1, 0)

    with pytest.raises(ValidationError) as exc_info:
        ensure_valid(errors)

    assert exc_info.value.errors == errors


def test_ensure_valid_passes_on_empty():
    ensure_valid([])
