"""
Service-level tests for CartService.

These run the real service, repositories and models against SQLite; no
HTTP layer involved.
"""
from decimal import Decimal

import pytest

from app.services.cart_service import CartService, cart_total
from app.services.product_service import ProductService
from app.services.user_service import UserService
from app.data.database import SessionLocal
from app.data.models.cart import CartModel
from app.utils.errors import BadRequestError, InternalServerError, NotFoundError
from conftest import VALID_ADDRESS


@pytest.fixture
def service(db):
    return CartService(db, product_service=ProductService(db), user_service=UserService(db))


@pytest.fixture
def shipping_user(db, user):
    UserService(db).set_address(user, VALID_ADDRESS)
    return user


class TestGetCart:

    def test_missing_cart_is_not_found(self, service, user):
        with pytest.raises(NotFoundError) as exc:
            service.get_cart_by_user(user)

        assert exc.value.status_code == 404
        assert exc.value.message == "User does not have a cart"

    def test_returns_cart_after_first_add(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 2)

        cart = service.get_cart_by_user(user)

        assert cart.email == user.email
        assert [i.product_id for i in cart.items] == [products[0].id]


class TestAddProduct:

    def test_first_add_creates_cart_with_snapshot(self, service, user, products):
        cart = service.add_product_to_cart(user, products[0].id, 3)

        assert cart.email == "alice@example.com"
        assert cart.payment_option == "PAYMENT_OPTION_DEFAULT"
        assert len(cart.items) == 1
        item = cart.items[0]
        assert item.quantity == 3
        assert item.product["name"] == "Keyboard"
        assert item.product["cost"] == Decimal("100.00")

    def test_unknown_product_is_bad_request_and_creates_no_cart(self, service, user):
        with pytest.raises(BadRequestError) as exc:
            service.add_product_to_cart(user, 999, 1)

        assert exc.value.message == "Product doesn't exist in database"
        with pytest.raises(NotFoundError):
            service.get_cart_by_user(user)

    def test_adding_same_product_twice_keeps_one_item(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        with pytest.raises(BadRequestError) as exc:
            service.add_product_to_cart(user, products[0].id, 5)

        assert exc.value.status_code == 400
        assert exc.value.message.startswith("Product already in cart")
        cart = service.get_cart_by_user(user)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1

    def test_items_keep_insertion_order(self, service, user, products):
        service.add_product_to_cart(user, products[1].id, 1)
        cart = service.add_product_to_cart(user, products[0].id, 1)

        assert [i.product_id for i in cart.items] == [products[1].id, products[0].id]

    def test_carts_are_per_user(self, service, user, other_user, products):
        service.add_product_to_cart(user, products[0].id, 1)
        service.add_product_to_cart(other_user, products[0].id, 4)

        assert service.get_cart_by_user(user).items[0].quantity == 1
        assert service.get_cart_by_user(other_user).items[0].quantity == 4

    def test_lost_cart_creation_race_is_internal_error(self, service, user, products, monkeypatch):
        # another request created the cart between lookup and insert
        other = SessionLocal()
        other.add(CartModel(email=user.email, payment_option="PAYMENT_OPTION_DEFAULT"))
        other.commit()
        other.close()
        monkeypatch.setattr(service.repo, "get_cart_by_email", lambda email: None)

        with pytest.raises(InternalServerError) as exc:
            service.add_product_to_cart(user, products[0].id, 1)

        assert exc.value.status_code == 500
        assert exc.value.message == "Failed to create cart"


class TestUpdateProduct:

    def test_without_cart_is_bad_request(self, service, user, products):
        with pytest.raises(BadRequestError) as exc:
            service.update_product_in_cart(user, products[0].id, 2)

        assert exc.value.message == (
            "User does not have a cart. Use POST to create cart and add a product"
        )

    def test_unknown_product_is_bad_request(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        with pytest.raises(BadRequestError) as exc:
            service.update_product_in_cart(user, 999, 2)

        assert exc.value.message == "Product doesn't exist in database"

    def test_product_not_in_cart_is_bad_request(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        with pytest.raises(BadRequestError) as exc:
            service.update_product_in_cart(user, products[1].id, 2)

        assert exc.value.message == "Product not in cart"

    def test_overwrites_quantity(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        cart = service.update_product_in_cart(user, products[0].id, 7)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 7


class TestDeleteProduct:

    def test_without_cart_is_bad_request(self, service, user, products):
        with pytest.raises(BadRequestError):
            service.delete_product_from_cart(user, products[0].id)

    def test_missing_product_leaves_cart_unchanged(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        with pytest.raises(BadRequestError) as exc:
            service.delete_product_from_cart(user, products[1].id)

        assert exc.value.message == "Product not in cart"
        assert len(service.get_cart_by_user(user).items) == 1

    def test_removes_item(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)
        service.add_product_to_cart(user, products[1].id, 1)

        service.delete_product_from_cart(user, products[0].id)

        cart = service.get_cart_by_user(user)
        assert [i.product_id for i in cart.items] == [products[1].id]


class TestCheckout:

    def test_without_cart_is_not_found(self, service, shipping_user):
        with pytest.raises(NotFoundError) as exc:
            service.checkout(shipping_user)

        assert exc.value.message == "User has no Cart"

    def test_empty_cart_is_bad_request_and_wallet_untouched(self, db, service, shipping_user, products):
        service.add_product_to_cart(shipping_user, products[0].id, 1)
        service.delete_product_from_cart(shipping_user, products[0].id)

        with pytest.raises(BadRequestError) as exc:
            service.checkout(shipping_user)

        assert exc.value.message == "Cart has no items"
        db.refresh(shipping_user)
        assert shipping_user.wallet_money == Decimal("500.00")

    def test_default_address_is_bad_request(self, service, user, products):
        service.add_product_to_cart(user, products[0].id, 1)

        with pytest.raises(BadRequestError) as exc:
            service.checkout(user)

        assert exc.value.message == "User's address is not set"
        assert len(service.get_cart_by_user(user).items) == 1

    def test_insufficient_balance(self, db, service, shipping_user, products):
        # 6 x 100.00 > 500
        service.add_product_to_cart(shipping_user, products[0].id, 6)

        with pytest.raises(BadRequestError) as exc:
            service.checkout(shipping_user)

        assert exc.value.message == "Insufficient balance"
        db.refresh(shipping_user)
        assert shipping_user.wallet_money == Decimal("500.00")
        assert len(service.get_cart_by_user(shipping_user).items) == 1

    def test_debits_exact_total_and_empties_cart(self, db, service, shipping_user, products):
        service.add_product_to_cart(shipping_user, products[0].id, 2)
        service.add_product_to_cart(shipping_user, products[1].id, 3)
        expected = Decimal("100.00") * 2 + Decimal("25.50") * 3

        assert cart_total(service.get_cart_by_user(shipping_user)) == expected

        total = service.checkout(shipping_user)

        assert total == expected
        db.refresh(shipping_user)
        assert shipping_user.wallet_money == Decimal("500.00") - expected
        cart = service.get_cart_by_user(shipping_user)
        assert cart.items == []

    def test_total_equal_to_balance_is_allowed(self, db, service, shipping_user, products):
        service.add_product_to_cart(shipping_user, products[0].id, 5)

        service.checkout(shipping_user)

        db.refresh(shipping_user)
        assert shipping_user.wallet_money == Decimal("0.00")
