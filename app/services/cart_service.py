from decimal import Decimal
from sqlalchemy.orm import Session
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.repos.cart_repo import CartRepo
from app.services.product_service import ProductService
from app.services.user_service import UserService
from app.utils.errors import BadRequestError, InternalServerError, NotFoundError
from app.utils.settings import DEFAULT_PAYMENT_OPTION
from app.utils.logging import get_logger

logger = get_logger(__name__)

NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_MISSING = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)


def cart_total(cart: CartModel) -> Decimal:
    return sum((i.cost * i.quantity for i in cart.items), Decimal("0.00"))


class CartService:
    """
    Cart use cases, one cart per user (keyed by email).
    Every operation is a read-modify-write of a single cart, no locks, no retries;
    checkout saves the cart and the wallet separately.
    """

    def __init__(
        self,
        db: Session,
        product_service: ProductService,
        user_service: UserService,
    ):
        self.repo = CartRepo(db)
        self.product_service = product_service
        self.user_service = user_service

    #query
    def get_cart_by_user(self, user: UserModel) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)

        if not cart:
            raise NotFoundError("User does not have a cart")

        return cart

    #commands
    def add_product_to_cart(self, user: UserModel, product_id: int, quantity: int) -> CartModel:
        product = self.product_service.find_product(product_id)
        if not product:
            raise BadRequestError(PRODUCT_MISSING)

        cart = self.repo.get_cart_by_email(user.email)

        if not cart:
            #cart is created lazily together with its first item
            new_cart = CartModel(
                email=user.email,
                payment_option=DEFAULT_PAYMENT_OPTION,
                items=[self._snapshot(product, quantity)],
            )
            created = self.repo.create_cart(new_cart)
            if not created:
                logger.error(f"Could not create cart for {user.email}")
                raise InternalServerError("Failed to create cart")

            logger.info(f"Created cart {created.id} for {user.email} with product {product_id}")
            return created

        if any(i.product_id == product_id for i in cart.items):
            logger.warning(f"Product {product_id} already in cart {cart.id}")
            raise BadRequestError(PRODUCT_ALREADY_IN_CART)

        cart.items.append(self._snapshot(product, quantity))
        saved = self.repo.save_cart(cart)

        logger.info(f"Added product {product_id} x{quantity} to cart {cart.id}")
        return saved

    def update_product_in_cart(self, user: UserModel, product_id: int, quantity: int) -> CartModel:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise BadRequestError(NO_CART_FOR_UPDATE)

        if not self.product_service.find_product(product_id):
            raise BadRequestError(PRODUCT_MISSING)

        item = next((i for i in cart.items if i.product_id == product_id), None)
        if item is None:
            raise BadRequestError(PRODUCT_NOT_IN_CART)

        logger.info(
            f"Cart {cart.id}: product {product_id} quantity "
            f"{item.quantity} -> {quantity}"
        )
        item.quantity = quantity
        return self.repo.save_cart(cart)

    def delete_product_from_cart(self, user: UserModel, product_id: int) -> None:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise BadRequestError(NO_CART_FOR_UPDATE)

        item = next((i for i in cart.items if i.product_id == product_id), None)
        if item is None:
            raise BadRequestError(PRODUCT_NOT_IN_CART)

        #delete-orphan drops the row on commit
        cart.items.remove(item)
        self.repo.save_cart(cart)

        logger.info(f"Removed product {product_id} from cart {cart.id}")

    def checkout(self, user: UserModel) -> Decimal:
        cart = self.repo.get_cart_by_email(user.email)
        if not cart:
            raise NotFoundError("User has no Cart")

        if not cart.items:
            raise BadRequestError("Cart has no items")

        if not self.user_service.has_set_non_default_address(user):
            raise BadRequestError("User's address is not set")

        total = cart_total(cart)

        if total > user.wallet_money:
            logger.warning(
                f"Checkout rejected for {user.email}: total {total} > wallet {user.wallet_money}"
            )
            raise BadRequestError("Insufficient balance")

        #two independent writes: cart first, then wallet
        cart.items.clear()
        self.repo.save_cart(cart)
        self.user_service.debit_wallet(user, total)

        logger.info(
            f"Checkout for {user.email}: charged {total}, wallet left {user.wallet_money}"
        )
        return total

    @staticmethod
    def _snapshot(product: ProductModel, quantity: int) -> CartItemModel:
        return CartItemModel(
            product_id=product.id,
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
            quantity=quantity,
        )
