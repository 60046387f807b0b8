from __future__ import annotations

from typing import Optional, Protocol, Sequence, TYPE_CHECKING

from rest_framework.response import Response

from .domain import Cart, Product
from .dtos import CartDTO

if TYPE_CHECKING:
    from . import models


class CreateCartUseCase(Protocol):
    def create_cart(self, cart: Cart) -> Cart:
        ...


class GetCartUseCase(Protocol):
    def get_cart_by_id(self, cart_id: int) -> Cart:
        ...


class UpdateCartUseCase(Protocol):
    def update_cart(self, cart_id: int, cart: Cart) -> Cart:
        ...


class DeleteCartUseCase(Protocol):
    def delete_cart(self, cart_id: int) -> None:
        ...


class CartsApi(Protocol):
    """HTTP contract for the cart resource, one method per operation."""

    def create_cart(self, cart_dto: CartDTO) -> Response:
        ...

    def get_cart_by_id(self, cart_id: int) -> Response:
        ...

    def update_cart(self, cart_id: int, cart_dto: CartDTO) -> Response:
        ...

    def delete_cart(self, cart_id: int) -> Response:
        ...


class CartRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["models.Cart"]:
        ...

    def create(self, **data) -> "models.Cart":
        ...

    def touch(self, cart: "models.Cart") -> "models.Cart":
        ...

    def delete(self, cart: "models.Cart") -> None:
        ...


class CartProductRepositoryProtocol(Protocol):
    def replace_for_cart(
        self, cart: "models.Cart", products: Sequence[Product]
    ) -> None:
        ...


class CartMapperProtocol(Protocol):
    def from_record(self, record: "models.Cart") -> Cart:
        ...
