from __future__ import annotations

from .controller import CartController
from .mappers import CartMapper, ProductMapper
from .protocols import CartsApi
from .repositories import CartProductRepository, CartRepository
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        carts=CartRepository(),
        cart_products=CartProductRepository(),
        cart_mapper=CartMapper(ProductMapper()),
    )


def build_cart_controller() -> CartsApi:
    service = build_cart_service()
    return CartController(
        create_cart_use_case=service,
        get_cart_use_case=service,
        update_cart_use_case=service,
        delete_cart_use_case=service,
        mapper=CartMapper(ProductMapper()),
    )
