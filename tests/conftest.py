"""
Shared fixtures.

The app runs against in-memory SQLite (single static connection); the schema
is recreated for every test so each test starts from an empty store.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATA"] = "false"

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.data.database import Base, SessionLocal, engine, init_db
from app.data.models.product import ProductModel
from app.main import app
from app.services.token_service import TokenType, generate_token
from app.services.user_service import UserService

VALID_ADDRESS = "221B Baker Street, London NW1 6XE"


@pytest.fixture(autouse=True)
def clean_database():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def products(db):
    """Two catalog products: a 100.00 keyboard and a 25.50 mouse."""
    items = [
        ProductModel(name="Keyboard", category="Electronics", cost=Decimal("100.00"), rating=4,
                     image="https://example.com/keyboard.png"),
        ProductModel(name="Mouse", category="Electronics", cost=Decimal("25.50"), rating=5,
                     image="https://example.com/mouse.png"),
    ]
    db.add_all(items)
    db.commit()
    for p in items:
        db.refresh(p)
    return items


@pytest.fixture
def user(db):
    return UserService(db).create_user("Alice", "alice@example.com")


@pytest.fixture
def other_user(db):
    return UserService(db).create_user("Bob", "bob@example.com")


def make_token(user_id, token_type=TokenType.ACCESS, minutes=60, secret=None):
    expires = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    if secret is None:
        return generate_token(user_id, expires, token_type)
    return generate_token(user_id, expires, token_type, secret=secret)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {make_token(user.id)}"}
