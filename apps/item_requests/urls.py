"""URL routing for item requests."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ItemRequestViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"requests", ItemRequestViewSet, basename="item-request")

urlpatterns = [
    path("", include(router.urls)),
]
