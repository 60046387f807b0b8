from typing import Sequence

from django.utils import timezone

from apps.common.repository import GenericRepository

from .domain import Product
from .models import Cart, CartProduct


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)

    def _base_queryset(self):
        return self.model.objects.prefetch_related("cart_products")

    def touch(self, cart: Cart) -> Cart:
        cart.updated_at = timezone.now()
        cart.save(update_fields=["updated_at"])
        return cart


class CartProductRepository(GenericRepository[CartProduct]):
    def __init__(self):
        super().__init__(CartProduct)

    def replace_for_cart(self, cart: Cart, products: Sequence[Product]) -> None:
        self.model.objects.filter(cart=cart).delete()
        self.model.objects.bulk_create(
            [
                CartProduct(
                    cart=cart,
                    position=position,
                    product_id=product.id,
                    description=product.description,
                    amount=product.amount,
                )
                for position, product in enumerate(products)
            ]
        )
