# eshop/domain/schemas.py
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

# Zakresy wartosci sprawdza eshop.domain.validation (400 z lista bledow pol),
# schematy opisuja tylko ksztalt requestu.


class ProductIn(BaseModel):
    """Schema dla tworzenia produktu."""

    name: str
    price: Decimal
    stock: int


class ProductUpdateIn(ProductIn):
    """Schema dla pelnej podmiany produktu."""

    id: int


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal
    stock: int

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def _serialize_price(self, price: Decimal) -> float:
        return float(price)


class ProductUpdateOut(BaseModel):
    message: str
    product: ProductOut


class MessageOut(BaseModel):
    message: str


class AddToCartIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., alias="productId")
    user_id: int = Field(..., alias="userId")
    quantity: int

    model_config = ConfigDict(populate_by_name=True)


class CartLineOut(BaseModel):
    """Pozycja koszyka (response), pola w camelCase."""

    product_id: int
    name: str
    price: Decimal
    quantity: int
    total_price: Decimal

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_serializer("price", "total_price")
    def _serialize_money(self, value: Decimal) -> float:
        return float(value)


class CartOut(BaseModel):
    message: str
    items: List[CartLineOut]


class UserCreate(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    email: str
    password: str


class UserOut(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ErrorOut(BaseModel):
    detail: str
    errors: List[FieldErrorOut] | None = None
