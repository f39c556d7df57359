# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal, init_db
from app.data.models.product import ProductModel
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.services.token_service import generate_auth_tokens
from app.services.user_service import UserService
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"name": "Keyboard", "category": "Electronics", "cost": Decimal("199.99"), "rating": 4,
     "image": "https://example.com/images/keyboard.png"},
    {"name": "Mouse", "category": "Electronics", "cost": Decimal("49.50"), "rating": 5,
     "image": "https://example.com/images/mouse.png"},
    {"name": "Monitor", "category": "Electronics", "cost": Decimal("899.00"), "rating": 4,
     "image": "https://example.com/images/monitor.png"},
    {"name": "Running Shoes", "category": "Fashion", "cost": Decimal("75.00"), "rating": 3,
     "image": "https://example.com/images/shoes.png"},
]

DEMO_USER = {"name": "Demo Customer", "email": "demo@example.com"}


def seed():
    db = SessionLocal()
    try:
        repo = ProductRepo(db)
        # not forcing: only seed if empty
        if not repo.has_products():
            repo.add_products([ProductModel(**p) for p in PRODUCTS])
            logger.info(f"Seeded {len(PRODUCTS)} products")

        if not UserRepo(db).get_user_by_email(DEMO_USER["email"]):
            UserService(db).create_user(DEMO_USER["name"], DEMO_USER["email"])
    finally:
        db.close()


if __name__ == "__main__":
    init_db()
    seed()

    session = SessionLocal()
    try:
        demo = UserRepo(session).get_user_by_email(DEMO_USER["email"])
        tokens = generate_auth_tokens(demo)
        print(f"Demo user {demo.email} (id {demo.id})")
        print(f"access token:  {tokens['access']['token']}")
        print(f"refresh token: {tokens['refresh']['token']}")
    finally:
        session.close()
