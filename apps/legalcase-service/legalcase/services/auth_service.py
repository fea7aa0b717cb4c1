"""
Authentication service and login sessions.

Responsibilities:
- Register office users, storing only an Argon2id hash of the password
- Log users in and out of an explicit ``AuthSession`` owned by the caller
- Answer role and permission questions for the logged-in user
- Manage account state (enable/disable, password change)
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.repositories import users as user_repo
from legalcase.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    NoActiveSessionError,
    NotFoundError,
)
from legalcase.services.common import build_payload, require
from legalcase.utils.passwords import PasswordHashing, default_password_hashing
from legalcase.utils.role_permissions import role_has_permission

logger = logging.getLogger(__name__)


class AuthSession:
    """The logged-in user of one logical session, if any.

    Holds a read-model snapshot taken at login so it stays usable after the
    database session that produced it is closed.
    """

    def __init__(self):
        self._user: Optional[schemas.User] = None

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    @property
    def current_user(self) -> schemas.User:
        if self._user is None:
            raise NoActiveSessionError()
        return self._user

    def has_role(self, role: models.UserRole) -> bool:
        return self.current_user.role == models.UserRole(role)

    def is_admin(self) -> bool:
        """False when nobody is logged in."""
        return self.is_logged_in and self.current_user.role == models.UserRole.ADMIN

    def can(self, permission: str) -> bool:
        return role_has_permission(self.current_user.role, permission)

    def _start(self, user: schemas.User) -> None:
        self._user = user

    def _end(self) -> None:
        self._user = None


class AuthService:
    """Service class for user accounts and logins."""

    def __init__(self, db: Session, hasher: Optional[PasswordHashing] = None):
        self.db = db
        self.hasher = hasher or default_password_hashing()

    def register(
        self,
        username: str,
        password: str,
        email: str,
        first_name: str,
        last_name: str,
        role: models.UserRole = models.UserRole.VIEWER,
    ) -> models.User:
        """Create an enabled user account. Username and email must be unused."""
        if not password:
            raise InvalidArgumentError("Password is required")
        payload = build_payload(
            schemas.UserCreate,
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
        if user_repo.get_user_by_username(self.db, payload.username) is not None:
            raise DuplicateKeyError("username", payload.username)
        if user_repo.get_user_by_email(self.db, payload.email) is not None:
            raise DuplicateKeyError("email", payload.email)

        user = user_repo.create_user(self.db, payload, password_hash=self.hasher.hash(password))
        logger.info("Registered user %s (%s) with role %s", user.id, user.username, user.role.value)
        return user

    def login(self, session: AuthSession, username: str, password: str) -> bool:
        """Log ``username`` into ``session``.

        Returns False, leaving the session untouched, for unknown users,
        disabled accounts and wrong passwords.
        """
        user = user_repo.get_user_by_username(self.db, username) if username else None
        if user is None:
            logger.warning("Login failed for unknown user %r", username)
            return False
        if not user.enabled:
            logger.warning("Login refused for disabled user %s", user.username)
            return False
        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed for user %s: bad password", user.username)
            return False

        session._start(schemas.User.model_validate(user))
        logger.info("User %s logged in", user.username)
        return True

    def logout(self, session: AuthSession) -> None:
        if session.is_logged_in:
            logger.info("User %s logged out", session.current_user.username)
        session._end()

    def get_user(self, user_id: int) -> Optional[models.User]:
        return user_repo.get_user(self.db, user_id)

    def get_user_by_username(self, username: str) -> Optional[models.User]:
        return user_repo.get_user_by_username(self.db, username)

    def list_users(self, *, descending: bool = False) -> List[models.User]:
        return user_repo.get_users(self.db, descending=descending)

    def list_users_by_role(self, role: models.UserRole) -> List[models.User]:
        return user_repo.get_users_by_role(self.db, role)

    def set_user_enabled(self, user_id: int, enabled: bool) -> models.User:
        require(user_repo.get_user(self.db, user_id), "User", user_id)
        changes = build_payload(schemas.UserUpdate, enabled=enabled)
        if user_repo.update_user(self.db, user_id, changes) == 0:
            raise NotFoundError("User", user_id)
        logger.info("User %s %s", user_id, "enabled" if enabled else "disabled")
        return require(user_repo.get_user(self.db, user_id), "User", user_id)

    def change_password(self, user_id: int, old_password: str, new_password: str) -> bool:
        """Replace the password after verifying the old one; False if it does not match."""
        if not new_password:
            raise InvalidArgumentError("New password is required")
        user = require(user_repo.get_user(self.db, user_id), "User", user_id)
        if not self.hasher.verify(old_password, user.password_hash):
            logger.warning("Password change rejected for user %s", user.username)
            return False
        if user_repo.update_user_password(self.db, user_id, self.hasher.hash(new_password)) == 0:
            raise NotFoundError("User", user_id)
        logger.info("Password changed for user %s", user.username)
        return True

    def delete_user(self, user_id: int) -> None:
        require(user_repo.get_user(self.db, user_id), "User", user_id)
        if user_repo.delete_user(self.db, user_id) == 0:
            raise NotFoundError("User", user_id)
        logger.info("Deleted user %s", user_id)
