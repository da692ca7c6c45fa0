"""Auth service — registration, password hashing and the interactive session."""

from typing import List, Optional

import structlog
from passlib.context import CryptContext

from legalcase.application.services.base import build_payload, storage_errors
from legalcase.config import get_settings
from legalcase.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    UnauthorizedException,
)
from legalcase.domain.models.enums import UserRole
from legalcase.domain.models.user import User
from legalcase.domain.repositories.user_repository import UserRepository
from legalcase.domain.schemas.auth import UserCreate

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class UserSession:
    """The user logged in to one interactive console."""

    def __init__(self) -> None:
        self.user: Optional[User] = None

    def start(self, user: User) -> None:
        self.user = user

    def clear(self) -> None:
        self.user = None

    @property
    def active(self) -> bool:
        return self.user is not None


class AuthService:
    def __init__(self, user_repo: UserRepository, session: Optional[UserSession] = None):
        self.user_repo = user_repo
        self.session = session if session is not None else UserSession()

    def register(
        self,
        username: str,
        password: str,
        email: str,
        name: str,
        surname: str,
        role: UserRole,
    ) -> User:
        """Create an enabled account. Usernames and emails are unique."""
        with storage_errors("Could not register user", username=username):
            if self.user_repo.get_by_username(username) is not None:
                raise BusinessRuleViolationException(
                    "Username already exists", details={"username": username}
                )
            if self.user_repo.get_by_email(email) is not None:
                raise BusinessRuleViolationException(
                    "Email address is already in use", details={"email": email}
                )

            payload = build_payload(
                UserCreate,
                username=username,
                password=password,
                email=email,
                name=name,
                surname=surname,
                role=role,
            )
            data = payload.model_dump(exclude={"password"})
            data["password_hash"] = hash_password(payload.password)
            user = self.user_repo.create(data)
            logger.info("User registered", username=username, role=user.role)
            return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user for valid credentials of an enabled account."""
        with storage_errors("Could not authenticate user", username=username):
            user = self.user_repo.get_by_username(username)
        if not user or not password or not verify_password(password, user.password_hash):
            return None
        if not user.enabled:
            logger.warning("Login attempt for disabled account", username=username)
            return None
        return user

    def login(self, username: str, password: str) -> bool:
        user = self.authenticate(username, password)
        if user is None:
            logger.warning("Failed login attempt", username=username)
            return False
        self.session.start(user)
        logger.info("User logged in", username=username)
        return True

    def logout(self) -> None:
        if self.session.active:
            logger.info("User logged out", username=self.session.user.username)
        self.session.clear()

    def is_logged_in(self) -> bool:
        return self.session.active

    def get_current_user(self) -> User:
        if not self.session.active:
            raise UnauthorizedException()
        return self.session.user

    def has_role(self, role: UserRole) -> bool:
        return self.get_current_user().has_role(role)

    def is_admin(self) -> bool:
        return self.is_logged_in() and self.has_role(UserRole.ADMIN)

    def get_all_users(self) -> List[User]:
        with storage_errors("Could not retrieve users"):
            return self.user_repo.list()

    def set_user_enabled(self, user_id: int, enabled: bool) -> User:
        with storage_errors("Could not update user", user_id=user_id):
            user = self.user_repo.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundException("User not found", details={"user_id": user_id})
            user = self.user_repo.update(user, {"enabled": enabled})
            logger.info("User enabled flag changed", username=user.username, enabled=enabled)
            return user

    def ensure_default_admin(self, username: str, password: str, email: str) -> Optional[User]:
        """Seed an administrator when no user exists yet."""
        with storage_errors("Could not create default admin"):
            if self.user_repo.list(limit=1):
                return None
        user = self.register(username, password, email, "System", "Administrator", UserRole.ADMIN)
        logger.info("Default admin user created", username=username)
        return user
