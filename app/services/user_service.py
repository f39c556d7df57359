from decimal import Decimal

from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.repos.user_repo import UserRepo
from app.utils.errors import BadRequestError
from app.utils.logging import get_logger
from app.utils.settings import DEFAULT_ADDRESS, DEFAULT_WALLET_MONEY

logger = get_logger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, name: str, email: str, wallet_money: Decimal | int = DEFAULT_WALLET_MONEY) -> UserModel:
        if self.repo.get_user_by_email(email):
            raise BadRequestError("Email already taken")

        user = UserModel(name=name, email=email, wallet_money=wallet_money, address=DEFAULT_ADDRESS)
        created = self.repo.create_user(user)
        logger.info(f"Created user {created.id} ({created.email})")
        return created

    def set_address(self, user: UserModel, address: str) -> str:
        user.address = address
        self.repo.save_user(user)
        logger.info(f"User {user.id} updated shipping address")
        return user.address

    def debit_wallet(self, user: UserModel, amount: Decimal) -> UserModel:
        user.wallet_money = user.wallet_money - amount
        return self.repo.save_user(user)

    @staticmethod
    def has_set_non_default_address(user: UserModel) -> bool:
        return user.address != DEFAULT_ADDRESS
