"""User directory: id-keyed lookup used by the other apps."""

from __future__ import annotations

from shared.exceptions import NotFoundError

from .models import User


class UserDirectory:
    """Read access to users by id."""

    def exists(self, user_id: int) -> bool:
        return User.objects.filter(pk=user_id).exists()

    def get_by_id(self, user_id: int) -> User:
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise NotFoundError(f"User not found: id={user_id}")

    def ensure_exists(self, user_id: int) -> None:
        if not self.exists(user_id):
            raise NotFoundError(f"User not found: id={user_id}")
