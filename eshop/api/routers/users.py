from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.data.database import get_db
from eshop.domain.errors import ensure_valid
from eshop.domain.schemas import ErrorOut, UserCreate, UserOut
from eshop.domain.validation import validate_user_create, validate_user_id
from eshop.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    ensure_valid(validate_user_create(payload.email, payload.password))
    return UserService(db).create_user(payload.email, payload.password)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    ensure_valid(validate_user_id(user_id, field="id"))
    return UserService(db).get_user(user_id)
