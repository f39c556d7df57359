from sqlalchemy import Column, Integer, String, Numeric

from app.data.database import Base
from app.utils.settings import DEFAULT_ADDRESS, DEFAULT_WALLET_MONEY


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)

    wallet_money = Column(Numeric(12, 2), nullable=False, default=DEFAULT_WALLET_MONEY)
    address = Column(String, nullable=False, default=DEFAULT_ADDRESS)
