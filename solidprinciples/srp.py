"""Single responsibility: user storage kept apart from authentication."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class User:
    """A user account with its credentials."""

    user_name: str
    password: str


@dataclass
class UserRepository:
    """Holds the known users."""

    users: list[User] = field(default_factory=list)

    def add_user(self, user: User) -> None:
        self.users.append(user)


class UserNotFoundError(LookupError):
    """Raised when no user has the requested name."""

    def __init__(self, message: str = "user not found") -> None:
        super().__init__(message)


class AuthenticationService:
    """Checks credentials against the users known when it was created."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = UserRepository(list(user_repository.users))

    def authenticate_user(self, user_name: str, password: str) -> bool:
        """Return whether the password matches; raise if the user is unknown."""
        try:
            user = self._user_by_name(user_name)
        except UserNotFoundError as error:
            logger.warning("%s", error)
            raise
        return user.password == password

    def _user_by_name(self, user_name: str) -> User:
        user = next(
            (u for u in self._user_repository.users if u.user_name == user_name),
            None,
        )
        if user is None:
            raise UserNotFoundError()
        return user