from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger

from .container import build_cart_controller
from .serializers import ID_MAX, CartSerializer

logger = get_logger(__name__).bind(component="carts", layer="view")

CART_ID_PARAMETER = OpenApiParameter("cart_id", int, OpenApiParameter.PATH)


def _cart_id(raw) -> int:
    # The route only admits digits; anything past the id column range cannot exist.
    cart_id = int(raw)
    if cart_id > ID_MAX:
        raise NotFound("Cart not found")
    return cart_id


class CartListView(APIView):
    permission_classes = [AllowAny]
    controller = build_cart_controller()
    log = logger.bind(view="CartListView")

    @extend_schema(
        summary="Create cart",
        description=(
            "Creates a cart holding the given products, in order. Any id sent in the body is "
            "ignored; the stored cart is returned with its assigned id. "
            "Amounts are JSON numbers and keep their integral or fractional form."
        ),
        request=CartSerializer,
        responses={
            201: CartSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cart_dto = serializer.save()
        self.log.debug("Create cart request", product_count=len(cart_dto.products))
        return self.controller.create_cart(cart_dto)


class CartDetailView(APIView):
    permission_classes = [AllowAny]
    controller = build_cart_controller()
    log = logger.bind(view="CartDetailView")

    @extend_schema(
        summary="Get cart",
        parameters=[CART_ID_PARAMETER],
        responses={
            200: CartSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, cart_id):
        return self.controller.get_cart_by_id(_cart_id(cart_id))

    @extend_schema(
        summary="Replace cart",
        description=(
            "Replaces the product list of the cart addressed by the path. The path id is "
            "authoritative; an id in the body is not compared against it."
        ),
        parameters=[CART_ID_PARAMETER],
        request=CartSerializer,
        responses={
            200: CartSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, cart_id):
        serializer = CartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cart_dto = serializer.save()
        self.log.debug(
            "Replace cart request",
            cart_id=cart_id,
            body_id=cart_dto.id,
            product_count=len(cart_dto.products),
        )
        return self.controller.update_cart(_cart_id(cart_id), cart_dto)

    @extend_schema(
        summary="Delete cart",
        parameters=[CART_ID_PARAMETER],
        responses={
            204: None,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, cart_id):
        return self.controller.delete_cart(_cart_id(cart_id))
