# eshop/domain/errors.py
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ShopError(Exception):
    """Bazowy blad domenowy, mapowany na status HTTP na granicy API."""


class ValidationError(ShopError):
    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors) or "Validation failed.")


class NotFoundError(ShopError):
    pass


class InsufficientStockError(ShopError):
    def __init__(self, product_id: int, available: int, requested: int):
        self.product_id = product_id
        self.available = available
        self.requested = requested
        super().__init__(f"Not enough stock available. Current stock: {available}")


class StoreError(ShopError):
    pass


def ensure_valid(errors: list[FieldError]) -> None:
    if errors:
        raise ValidationError(errors)
