from __future__ import annotations

from django.db import transaction
from rest_framework import status

from apps.api.exceptions import ApplicationError
from apps.common import get_logger

from .domain import Cart
from .protocols import (
    CartMapperProtocol,
    CartProductRepositoryProtocol,
    CartRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartNotFoundError(ApplicationError):
    """Raised when no cart exists for the requested id."""

    def __init__(self, cart_id: int):
        super().__init__(
            "NOT_FOUND",
            "Cart not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"id": str(cart_id)},
        )
        self.cart_id = cart_id


class CartService:
    """
    Implements the create/get/update/delete cart use cases on top of the
    ORM repositories. Every method returns (or accepts) domain ``Cart``
    values; ORM records never leave this class.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        cart_products: CartProductRepositoryProtocol,
        cart_mapper: CartMapperProtocol,
    ):
        self.carts = carts
        self.cart_products = cart_products
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")

    def _require(self, cart_id: int):
        record = self.carts.get(id=cart_id)
        if record is None:
            self.logger.warning("Cart not found", cart_id=cart_id)
            raise CartNotFoundError(cart_id)
        return record

    def _reload(self, cart_id: int) -> Cart:
        return self.cart_mapper.from_record(self._require(cart_id))

    def create_cart(self, cart: Cart) -> Cart:
        # Ids are assigned by the database; an inbound id is not honoured.
        with transaction.atomic():
            record = self.carts.create()
            self.cart_products.replace_for_cart(record, cart.products)
        self.logger.info(
            "Cart created",
            cart_id=record.id,
            requested_id=cart.id,
            product_count=len(cart.products),
        )
        return self._reload(record.id)

    def get_cart_by_id(self, cart_id: int) -> Cart:
        self.logger.debug("Fetching cart", cart_id=cart_id)
        return self.cart_mapper.from_record(self._require(cart_id))

    def update_cart(self, cart_id: int, cart: Cart) -> Cart:
        with transaction.atomic():
            record = self._require(cart_id)
            self.cart_products.replace_for_cart(record, cart.products)
            self.carts.touch(record)
        if cart.id is not None and cart.id != cart_id:
            self.logger.debug(
                "Ignoring body id on cart update", cart_id=cart_id, body_id=cart.id
            )
        self.logger.info(
            "Cart updated", cart_id=cart_id, product_count=len(cart.products)
        )
        return self._reload(cart_id)

    def delete_cart(self, cart_id: int) -> None:
        record = self._require(cart_id)
        self.carts.delete(record)
        self.logger.info("Cart deleted", cart_id=cart_id)
