import pytest
from rest_framework.exceptions import ValidationError

from apps.carts.dtos import CartDTO, ProductDTO
from apps.carts.serializers import CartSerializer


def test_cart_serializer_builds_dto_in_order():
    serializer = CartSerializer(
        data={
            "id": None,
            "products": [
                {"id": 2, "description": "Ruler", "amount": 3},
                {"id": 1, "description": "Pen", "amount": 2.5},
            ],
        }
    )
    serializer.is_valid(raise_exception=True)
    dto = serializer.save()
    assert dto == CartDTO(
        id=None,
        products=[
            ProductDTO(id=2, description="Ruler", amount=3.0),
            ProductDTO(id=1, description="Pen", amount=2.5),
        ],
    )


def test_cart_serializer_id_is_optional():
    serializer = CartSerializer(data={"products": []})
    serializer.is_valid(raise_exception=True)
    assert serializer.save() == CartDTO(id=None, products=[])


def test_cart_serializer_requires_products():
    serializer = CartSerializer(data={"id": 1})
    with pytest.raises(ValidationError) as exc_info:
        serializer.is_valid(raise_exception=True)
    assert "products" in exc_info.value.detail


@pytest.mark.parametrize(
    "product",
    [
        {"description": "Pen", "amount": 2},
        {"id": 1, "amount": 2},
        {"id": 1, "description": "Pen"},
        {"id": "one", "description": "Pen", "amount": 2},
        {"id": 1, "description": "Pen", "amount": "lots"},
    ],
)
def test_cart_serializer_rejects_malformed_products(product):
    serializer = CartSerializer(data={"products": [product]})
    assert not serializer.is_valid()
    assert "products" in serializer.errors


def test_cart_serializer_renders_dto():
    dto = CartDTO(id=42, products=[ProductDTO(id=1, description="Pen", amount=2)])
    assert CartSerializer(dto).data == {
        "id": 42,
        "products": [{"id": 1, "description": "Pen", "amount": 2.0}],
    }


def test_cart_serializer_renders_missing_id_as_null():
    assert CartSerializer(CartDTO()).data == {"id": None, "products": []}


@pytest.mark.parametrize("product_id", [2**70, -(2**70), 2**63])
def test_cart_serializer_rejects_product_id_outside_64_bits(product_id):
    serializer = CartSerializer(
        data={"products": [{"id": product_id, "description": "Pen", "amount": 2}]}
    )
    assert not serializer.is_valid()
    assert "id" in serializer.errors["products"][0]


def test_cart_serializer_accepts_64_bit_bounds():
    serializer = CartSerializer(
        data={
            "id": 2**63 - 1,
            "products": [{"id": -(2**63), "description": "Pen", "amount": 2}],
        }
    )
    assert serializer.is_valid(), serializer.errors


def test_cart_serializer_rejects_cart_id_outside_64_bits():
    serializer = CartSerializer(data={"id": 2**70, "products": []})
    assert not serializer.is_valid()
    assert "id" in serializer.errors


def test_amount_keeps_integral_and_fractional_form():
    serializer = CartSerializer(
        data={
            "products": [
                {"id": 1, "description": "Pen", "amount": 2},
                {"id": 2, "description": "Ink", "amount": 1.5},
            ]
        }
    )
    serializer.is_valid(raise_exception=True)
    amounts = [p.amount for p in serializer.save().products]
    assert amounts == [2, 1.5]
    assert type(amounts[0]) is int
    assert type(amounts[1]) is float


def test_amount_read_back_as_float_renders_integral():
    rendered = CartSerializer(
        CartDTO(id=1, products=[ProductDTO(id=1, description="Pen", amount=2.0)])
    ).data
    assert rendered["products"][0]["amount"] == 2
    assert type(rendered["products"][0]["amount"]) is int


@pytest.mark.parametrize("amount", [True, "nan", "inf", None, [], 10**400])
def test_amount_rejects_non_numbers(amount):
    serializer = CartSerializer(
        data={"products": [{"id": 1, "description": "Pen", "amount": amount}]}
    )
    assert not serializer.is_valid()
    assert "amount" in serializer.errors["products"][0]
