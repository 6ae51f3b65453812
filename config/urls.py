"""URL configuration for ShareIt.

The `urlpatterns` list routes URLs to views. Each domain app ships its own
router; paths are mounted at the root to keep the public contract
(`/users`, `/items`, `/bookings`, `/requests`).
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('', include('apps.users.urls')),
    path('', include('apps.items.urls')),
    path('', include('apps.item_requests.urls')),
    path('', include('apps.bookings.urls')),
]
