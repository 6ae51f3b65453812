"""
Pytest configuration and shared fixtures.
"""

import itertools

import pytest
from rest_framework.test import APIClient

from apps.items.models import Item
from apps.users.models import User

_sequence = itertools.count(1)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def as_user():
    """Build the acting-user header for a request."""

    def _headers(user):
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    return _headers


@pytest.fixture
def make_user(db):
    def _make_user(name="Alice", email=None):
        email = email or f"user{next(_sequence)}@example.com"
        return User.objects.create(name=name, email=email)

    return _make_user


@pytest.fixture
def make_item(db):
    def _make_item(owner, name="Ladder", description="Aluminium ladder, 3 m", is_available=True, request=None):
        return Item.objects.create(
            owner=owner,
            name=name,
            description=description,
            is_available=is_available,
            request=request,
        )

    return _make_item


@pytest.fixture
def owner(make_user):
    return make_user(name="Owner", email="owner@example.com")


@pytest.fixture
def renter(make_user):
    return make_user(name="Renter", email="renter@example.com")
