from typing import Optional

from rest_framework import status
from rest_framework.response import Response

from .dtos import CartDTO
from .mappers import CartMapper
from .protocols import (
    CreateCartUseCase,
    DeleteCartUseCase,
    GetCartUseCase,
    UpdateCartUseCase,
)
from .serializers import CartSerializer


class CartController:
    """
    Cart endpoint adapter. Turns wire carts into domain carts, calls exactly
    one use case and renders the result. Errors raised by a use case are
    left to the global exception handler.
    """

    def __init__(
        self,
        create_cart_use_case: CreateCartUseCase,
        get_cart_use_case: GetCartUseCase,
        update_cart_use_case: UpdateCartUseCase,
        delete_cart_use_case: DeleteCartUseCase,
        mapper: Optional[CartMapper] = None,
    ) -> None:
        self.create_cart_use_case = create_cart_use_case
        self.get_cart_use_case = get_cart_use_case
        self.update_cart_use_case = update_cart_use_case
        self.delete_cart_use_case = delete_cart_use_case
        self.mapper = mapper or CartMapper()

    def create_cart(self, cart_dto: CartDTO) -> Response:
        cart = self.mapper.to_domain(cart_dto)
        created = self.create_cart_use_case.create_cart(cart)
        return self._render(created, status.HTTP_201_CREATED)

    def get_cart_by_id(self, cart_id: int) -> Response:
        cart = self.get_cart_use_case.get_cart_by_id(cart_id)
        return self._render(cart)

    def update_cart(self, cart_id: int, cart_dto: CartDTO) -> Response:
        cart = self.mapper.to_domain(cart_dto)
        updated = self.update_cart_use_case.update_cart(cart_id, cart)
        return self._render(updated)

    def delete_cart(self, cart_id: int) -> Response:
        self.delete_cart_use_case.delete_cart(cart_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _render(self, cart, http_status=status.HTTP_200_OK) -> Response:
        dto = self.mapper.to_dto(cart)
        return Response(CartSerializer(dto).data, status=http_status)
