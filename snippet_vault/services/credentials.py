"""Credential store: password digests and user lookup."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from snippet_vault.errors import DuplicateEmailError, InvalidCredentialsError, StorageUnavailableError
from snippet_vault.models.user import User
from snippet_vault.schemas.auth import Principal

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 12


def normalize_email(email: str) -> str:
    """Emails are stored and compared lower-cased."""
    return email.strip().lower()


class PasswordHasher:
    """Salted bcrypt digests via passlib.

    ``bcrypt_sha256`` pre-hashes the password, so bytes past bcrypt's 72-byte
    input limit still count.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.context = CryptContext(
            schemes=["bcrypt_sha256"], deprecated="auto", bcrypt_sha256__rounds=rounds
        )

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return self.context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(password, hashed_password)

    def dummy_verify(self) -> None:
        """Spend the time of one verification without a real digest."""
        self.context.dummy_verify()


class CredentialStore:
    """Authoritative source of user identity and password checks."""

    def __init__(self, db: Session, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def register(self, email: str, password: str, name: str | None = None) -> Principal:
        """Create a user, or raise DuplicateEmailError if the email is taken.

        Uniqueness is left to the ``users.email`` constraint so that two
        concurrent registrations cannot both succeed.
        """
        user = User(
            email=normalize_email(email),
            password_hash=self.hasher.hash(password),
            name=name,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmailError() from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to insert user")
            raise StorageUnavailableError() from e

        try:
            self.db.refresh(user)
        except SQLAlchemyError as e:
            logger.exception("Failed to reload registered user")
            raise StorageUnavailableError() from e

        logger.info(f"Registered user {user.id}")
        return Principal.model_validate(user)

    def verify_credentials(self, email: str, password: str) -> Principal:
        """Return the user for a matching email/password pair.

        Unknown emails still cost one bcrypt verification, so the response
        time does not reveal whether an account exists.
        """
        user = self._first_user(User.email == normalize_email(email))
        if user is None:
            self.hasher.dummy_verify()
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.info(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()
        return Principal.model_validate(user)

    def get_by_id(self, user_id: int) -> Principal | None:
        """Get a user by primary key."""
        user = self._first_user(User.id == user_id)
        return Principal.model_validate(user) if user is not None else None

    def _first_user(self, criterion) -> User | None:
        try:
            return self.db.query(User).filter(criterion).first()
        except SQLAlchemyError as e:
            logger.exception("Failed to read users table")
            raise StorageUnavailableError() from e
