from django.db import models


class Cart(models.Model):
    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Cart {self.id}"


class CartProduct(models.Model):
    cart = models.ForeignKey(
        Cart, on_delete=models.CASCADE, related_name="cart_products"
    )
    # Products are stored by value; the same product id may appear twice.
    position = models.PositiveIntegerField()
    product_id = models.BigIntegerField()
    description = models.TextField(blank=True)
    amount = models.FloatField()

    class Meta:
        db_table = "cart_products"
        ordering = ("position",)
        constraints = [
            models.UniqueConstraint(
                fields=("cart", "position"), name="cart_products_unique_position"
            )
        ]
