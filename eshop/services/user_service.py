from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eshop.data.database import store_errors
from eshop.data.models.user import UserModel
from eshop.domain.errors import FieldError, NotFoundError, ValidationError
from eshop.repos.user_repo import UserRepo
from eshop.utils.logging import get_logger
from eshop.utils.passwords import hash_password

logger = get_logger(__name__)

EMAIL_TAKEN = FieldError("email", "Email is already registered.")


def user_to_dict(user: UserModel) -> dict:
    # hash hasla nigdy nie wychodzi poza serwis
    return {"id": user.id, "email": user.email}


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    def create_user(self, email: str, password: str) -> dict:
        email = email.strip().lower()

        with store_errors(self.db, "creating user"):
            if self.repo.get_user_by_email(email):
                raise ValidationError([EMAIL_TAKEN])

            user = UserModel(email=email, password_hash=hash_password(password))
            try:
                self.repo.create_user(user)
                self.repo.commit()
            except IntegrityError:
                # rownolegla rejestracja tego samego emaila
                self.repo.rollback()
                raise ValidationError([EMAIL_TAKEN])

            logger.info(f"Registered user {user.id}")
            return user_to_dict(user)

    def get_user(self, user_id: int) -> dict:
        with store_errors(self.db, f"loading user {user_id}"):
            user = self.repo.get_user(user_id)
            if not user:
                raise NotFoundError(f"User with ID {user_id} not found.")
            return user_to_dict(user)
