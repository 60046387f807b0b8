from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.models import Cart, CartProduct


class TestCarts(APITestCase):
    list_url = "/api/carts/"

    @staticmethod
    def detail_url(cart_id):
        return f"/api/carts/{cart_id}"

    def _create(self, products):
        res = self.client.post(self.list_url, {"products": products}, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        return res.data

    def test_create_and_get_cart(self):
        created = self._create([{"id": 1, "description": "Pen", "amount": 2}])
        self.assertIsNotNone(created["id"])
        self.assertEqual(
            created["products"], [{"id": 1, "description": "Pen", "amount": 2.0}]
        )

        res = self.client.get(self.detail_url(created["id"]))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, created)

    def test_create_ignores_body_id(self):
        res = self.client.post(
            self.list_url, {"id": 999, "products": []}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(res.data["id"], 999)
        self.assertEqual(res.data["products"], [])

    def test_products_keep_order_and_duplicates(self):
        products = [
            {"id": 3, "description": "Notebook", "amount": 1.5},
            {"id": 1, "description": "Pen", "amount": 2.0},
            {"id": 3, "description": "Notebook", "amount": 1.5},
        ]
        created = self._create(products)
        res = self.client.get(self.detail_url(created["id"]))
        self.assertEqual(res.data["products"], products)
        self.assertEqual(CartProduct.objects.filter(cart_id=created["id"]).count(), 3)

    def test_put_replaces_products(self):
        created = self._create([{"id": 1, "description": "Pen", "amount": 2}])
        replacement = [{"id": 8, "description": "Tape", "amount": 1.25}]
        res = self.client.put(
            self.detail_url(created["id"]),
            {"id": created["id"], "products": replacement},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"id": created["id"], "products": replacement})

    def test_put_trailing_slash_is_accepted(self):
        created = self._create([])
        res = self.client.put(
            f"{self.detail_url(created['id'])}/", {"products": []}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_put_missing_cart_returns_not_found(self):
        res = self.client.put(self.detail_url(12345), {"products": []}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "NOT_FOUND")

    def test_delete_cart(self):
        created = self._create([{"id": 1, "description": "Pen", "amount": 2}])
        res = self.client.delete(self.detail_url(created["id"]))
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Cart.objects.filter(id=created["id"]).exists())
        self.assertFalse(CartProduct.objects.filter(cart_id=created["id"]).exists())

        again = self.client.delete(self.detail_url(created["id"]))
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)

    def test_get_missing_cart_returns_error_envelope(self):
        res = self.client.get(self.detail_url(777))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(
            res.data["error"],
            {
                "code": "NOT_FOUND",
                "message": "Cart not found",
                "status": 404,
                "details": {"id": "777"},
            },
        )

    def test_oversized_product_id_returns_validation_error(self):
        res = self.client.post(
            self.list_url,
            {"products": [{"id": 2**70, "description": "Pen", "amount": 2}]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "VALIDATION_ERROR")
        self.assertEqual(Cart.objects.count(), 0)

    def test_oversized_path_id_returns_not_found(self):
        url = self.detail_url(2**70)
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)
        res = self.client.put(url, {"products": []}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "NOT_FOUND")

    def test_integral_amount_round_trips_as_integer(self):
        created = self._create([{"id": 1, "description": "Pen", "amount": 2}])
        res = self.client.get(self.detail_url(created["id"]))
        self.assertEqual(
            res.json(), {"id": created["id"], "products": [{"id": 1, "description": "Pen", "amount": 2}]}
        )
        self.assertIs(type(res.json()["products"][0]["amount"]), int)

    def test_invalid_payload_returns_validation_error(self):
        res = self.client.post(
            self.list_url,
            {"products": [{"id": 1, "description": "Pen", "amount": "many"}]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "VALIDATION_ERROR")
        self.assertEqual(Cart.objects.count(), 0)
