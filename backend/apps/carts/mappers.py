from typing import Optional

from . import models
from .domain import Cart, Product
from .dtos import CartDTO, ProductDTO


class ProductMapper:
    @staticmethod
    def to_domain(dto: ProductDTO) -> Product:
        return Product(id=dto.id, description=dto.description, amount=dto.amount)

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id, description=product.description, amount=product.amount
        )

    @staticmethod
    def from_record(record: models.CartProduct) -> Product:
        return Product(
            id=record.product_id,
            description=record.description,
            amount=record.amount,
        )


class CartMapper:
    """Structural, order-preserving copies between wire, domain and ORM shapes."""

    def __init__(self, product_mapper: Optional[ProductMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductMapper()

    def to_domain(self, dto: CartDTO) -> Cart:
        return Cart(
            id=dto.id,
            products=tuple(self.product_mapper.to_domain(p) for p in dto.products),
        )

    def to_dto(self, cart: Cart) -> CartDTO:
        return CartDTO(
            id=cart.id,
            products=[self.product_mapper.to_dto(p) for p in cart.products],
        )

    def from_record(self, record: models.Cart) -> Cart:
        items = record.cart_products.all()
        return Cart(
            id=record.id,
            products=tuple(self.product_mapper.from_record(i) for i in items),
        )
