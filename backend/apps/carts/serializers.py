import math

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from .dtos import CartDTO, ProductDTO

# Ids are signed 64-bit integers, matching the BigInteger columns.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def _parse_number(text):
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


@extend_schema_field(OpenApiTypes.NUMBER)
class AmountField(serializers.Field):
    """
    JSON number that keeps its integral/fractional form: ``2`` stays ``2``
    and ``1.5`` stays ``1.5``. Integral floats read back from storage render
    as integers.
    """

    default_error_messages = {
        "invalid": "A valid number is required.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = _parse_number(data.strip())
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        try:
            finite = math.isfinite(data)
        except OverflowError:
            finite = False
        if not finite:
            self.fail("invalid")
        return data

    def to_representation(self, value):
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ProductSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=ID_MIN, max_value=ID_MAX)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    amount = AmountField()

    def create(self, validated_data) -> ProductDTO:
        return ProductDTO(
            id=validated_data["id"],
            description=validated_data["description"],
            amount=validated_data["amount"],
        )


class CartSerializer(serializers.Serializer):
    """
    Wire contract for a cart. Used both to validate inbound payloads
    (``save()`` yields a ``CartDTO``) and to render ``CartDTO`` responses.
    """

    id = serializers.IntegerField(
        required=False, allow_null=True, min_value=ID_MIN, max_value=ID_MAX
    )
    products = ProductSerializer(many=True, allow_empty=True)

    def create(self, validated_data) -> CartDTO:
        product_serializer = ProductSerializer()
        return CartDTO(
            id=validated_data.get("id"),
            products=[product_serializer.create(p) for p in validated_data["products"]],
        )
