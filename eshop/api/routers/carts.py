#eshop/api/routers/carts.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from eshop.data.database import get_db
from eshop.domain.errors import ensure_valid
from eshop.domain.schemas import AddToCartIn, CartOut, ErrorOut, MessageOut
from eshop.domain.validation import (
    validate_add_to_cart,
    validate_cart_remove,
    validate_cart_update,
    validate_user_id,
)
from eshop.services.cart_service import CartService

router = APIRouter(
    prefix="/cart",
    tags=["cart"],
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    user_id: int = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    ensure_valid(validate_user_id(user_id))
    return get_service(db).get_cart(user_id)


@router.post("", response_model=MessageOut)
def add_to_cart(payload: AddToCartIn, db: Session = Depends(get_db)):
    ensure_valid(validate_add_to_cart(payload.product_id, payload.user_id, payload.quantity))
    return get_service(db).add_to_cart(
        user_id=payload.user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.put("", response_model=MessageOut)
def update_quantity(
    user_id: int = Query(..., alias="userId"),
    product_id: int = Query(..., alias="productId"),
    quantity: int = Query(...),
    db: Session = Depends(get_db),
):
    ensure_valid(validate_cart_update(user_id, product_id, quantity))
    return get_service(db).update_quantity(user_id, product_id, quantity)


@router.delete("", response_model=MessageOut)
def remove_from_cart(
    user_id: int = Query(..., alias="userId"),
    product_id: int = Query(..., alias="productId"),
    db: Session = Depends(get_db),
):
    ensure_valid(validate_cart_remove(user_id, product_id))
    return get_service(db).remove_from_cart(user_id, product_id)
