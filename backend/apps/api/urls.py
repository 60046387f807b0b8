from django.urls import include, path

urlpatterns = [
    path("carts/", include("apps.carts.urls")),
]
