from django.urls import path, re_path

from .views import CartDetailView, CartListView

urlpatterns = [
    path("", CartListView.as_view(), name="api-carts-list"),
    # Detail accepts an optional trailing slash
    re_path(r"^(?P<cart_id>\d+)/?$", CartDetailView.as_view(), name="api-carts-detail"),
]
