# eshop/domain/validation.py
"""
Walidacja wejscia per ksztalt requestu.

Kazda funkcja zwraca liste FieldError (pusta = ok) i jest wolana przed serwisem.
Zakresy odpowiadaja kolumnom: Integer (int4) i Numeric(10, 2).
"""
from decimal import Decimal

from eshop.domain.errors import FieldError

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 254
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

INT_MAX = 2**31 - 1
PRICE_MIN = Decimal("0.01")
PRICE_MAX = Decimal("99999999.99")
PRICE_STEP = Decimal("0.01")


def _positive(value: int, field: str, label: str) -> list[FieldError]:
    if value is None or value <= 0:
        return [FieldError(field, f"{label} must be greater than zero.")]
    if value > INT_MAX:
        return [FieldError(field, f"{label} must not exceed {INT_MAX}.")]
    return []


def validate_product_id(product_id: int, field: str = "id") -> list[FieldError]:
    return _positive(product_id, field, "Product ID")


def validate_user_id(user_id: int, field: str = "userId") -> list[FieldError]:
    return _positive(user_id, field, "User ID")


def validate_quantity(quantity: int, field: str = "quantity") -> list[FieldError]:
    return _positive(quantity, field, "Quantity")


def validate_price(price: Decimal) -> list[FieldError]:
    if price is None or not price.is_finite() or price < PRICE_MIN:
        return [FieldError("price", "Price must be greater than zero.")]
    if price > PRICE_MAX:
        return [FieldError("price", f"Price must not exceed {PRICE_MAX}.")]
    # bez cichego zaokraglania do groszy
    if price != price.quantize(PRICE_STEP):
        return [FieldError("price", "Price can have at most 2 decimal places.")]
    return []


def validate_stock(stock: int) -> list[FieldError]:
    if stock is None or stock < 0:
        return [FieldError("stock", "Stock level must be non-negative.")]
    if stock > INT_MAX:
        return [FieldError("stock", f"Stock level must not exceed {INT_MAX}.")]
    return []


def validate_product_fields(name: str, price: Decimal, stock: int) -> list[FieldError]:
    errors = []

    if name is None or not name.strip() or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        errors.append(
            FieldError("name", f"Product name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters.")
        )

    errors.extend(validate_price(price))
    errors.extend(validate_stock(stock))

    return errors


def validate_product_create(name: str, price: Decimal, stock: int) -> list[FieldError]:
    return validate_product_fields(name, price, stock)


def validate_product_update(product_id: int, name: str, price: Decimal, stock: int) -> list[FieldError]:
    return validate_product_id(product_id) + validate_product_fields(name, price, stock)


def validate_search_term(name: str) -> list[FieldError]:
    if name is None or not name.strip():
        return [FieldError("name", "Search name cannot be empty.")]
    return []


def validate_add_to_cart(product_id: int, user_id: int, quantity: int) -> list[FieldError]:
    return (
        validate_product_id(product_id, field="productId")
        + validate_user_id(user_id)
        + validate_quantity(quantity)
    )


def validate_cart_update(user_id: int, product_id: int, quantity: int) -> list[FieldError]:
    return (
        validate_user_id(user_id)
        + validate_product_id(product_id, field="productId")
        + validate_quantity(quantity)
    )


def validate_cart_remove(user_id: int, product_id: int) -> list[FieldError]:
    return validate_user_id(user_id) + validate_product_id(product_id, field="productId")


def validate_user_create(email: str, password: str) -> list[FieldError]:
    errors = []

    if (
        email is None
        or not 3 <= len(email) <= EMAIL_MAX_LENGTH
        or email.count("@") != 1
        or email.startswith("@")
        or email.endswith("@")
    ):
        errors.append(FieldError("email", "Email must be a valid address."))

    if password is None or not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        errors.append(
            FieldError(
                "password",
                f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters.",
            )
        )

    return errors
