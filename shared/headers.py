"""Acting-user header parsing."""

from __future__ import annotations

from rest_framework import exceptions  # type: ignore

SHARER_USER_HEADER = "X-Sharer-User-Id"


def sharer_user_id(request) -> int:
    """Return the positive user id asserted by the caller.

    Existence of the user is checked by the services, not here.
    """
    raw = request.headers.get(SHARER_USER_HEADER)
    if raw is None or not str(raw).strip():
        raise exceptions.ValidationError({SHARER_USER_HEADER: ["This header is required."]})
    try:
        user_id = int(raw)
    except (TypeError, ValueError):
        raise exceptions.ValidationError({SHARER_USER_HEADER: ["A valid integer is required."]})
    if user_id <= 0:
        raise exceptions.ValidationError({SHARER_USER_HEADER: ["Must be a positive number."]})
    return user_id
