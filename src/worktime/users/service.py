from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str


class AuthService:
    """Use case: authenticate user (login) and resolve the session user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            logger.warning("Login failed for unknown user %r", username)
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("Login failed for user %r", username)
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.user_id, username=user.username)

    def get_session_user(self, user_id: int | None) -> SessionUser:
        if user_id is None:
            raise AuthenticationError("Not authenticated")

        user = self._users.get_by_id(int(user_id))
        if not user:
            raise AuthenticationError("Not authenticated")
        return SessionUser(user_id=user.user_id, username=user.username)

    def register(self, username: str, password: str) -> int:
        username = require_non_empty(username, "username")
        require_min_length(password, "password", 6)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists", ["username: already exists"])

        return self._users.create_user(username=username, password_hash=generate_password_hash(password))
