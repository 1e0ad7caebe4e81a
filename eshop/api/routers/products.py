# eshop/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.data.database import get_db
from eshop.domain.errors import ensure_valid
from eshop.domain.schemas import (
    ErrorOut,
    MessageOut,
    ProductIn,
    ProductOut,
    ProductUpdateIn,
    ProductUpdateOut,
)
from eshop.domain.validation import (
    validate_product_create,
    validate_product_id,
    validate_product_update,
    validate_search_term,
)
from eshop.services.catalog_service import CatalogService

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)


def get_service(db: Session):
    return CatalogService(db)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return get_service(db).list_products()


@router.get("/search/{name}", response_model=List[ProductOut])
def search_products(name: str, db: Session = Depends(get_db)):
    """Wyszukiwanie po fragmencie nazwy, bez rozrozniania wielkosci liter."""
    ensure_valid(validate_search_term(name))
    return get_service(db).search_products(name)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    ensure_valid(validate_product_id(product_id))
    return get_service(db).get_product(product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    ensure_valid(validate_product_create(payload.name, payload.price, payload.stock))
    return get_service(db).create_product(payload.name, payload.price, payload.stock)


@router.put("", response_model=ProductUpdateOut)
def update_product(payload: ProductUpdateIn, db: Session = Depends(get_db)):
    ensure_valid(validate_product_update(payload.id, payload.name, payload.price, payload.stock))
    product = get_service(db).update_product(payload.id, payload.name, payload.price, payload.stock)
    return {"message": "Product updated successfully.", "product": product}


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    ensure_valid(validate_product_id(product_id))
    name = get_service(db).delete_product(product_id)
    return {"message": f"Product '{name}' deleted successfully."}
