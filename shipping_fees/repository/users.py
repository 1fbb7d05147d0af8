"""
User repository: data-access operations for the users table.

Repository rules:
- Pure data-access logic only
- Methods flush (inside a savepoint), but never commit or roll back; use session_scope() for the unit of work
- Missing rows and unique-email violations surface as RepositoryError subclasses
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shipping_fees.errors import DuplicateEmail, UserNotFound
from shipping_fees.repository.models import User

log = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: int) -> User:
        """Fetch a user by primary key."""
        user = self.session.get(User, user_id)
        if user is None:
            log.warning(f"User lookup failed: id={user_id}")
            raise UserNotFound(id=user_id)
        return user

    def get_by_email(self, email: str) -> User:
        """Fetch a user by exact email address."""
        user = self._find_by_email(email)
        if user is None:
            log.warning(f"User lookup failed: email={email}")
            raise UserNotFound(email=email)
        return user

    def create(self, email: str, name: str) -> User:
        """Insert a user and return it with id and created_at populated."""
        if self._find_by_email(email) is not None:
            log.warning(f"Duplicate email on create: {email}")
            raise DuplicateEmail(email)

        user = User(email=email, name=name)
        with self._savepoint(email):
            self.session.add(user)
        return user

    def update(self, user_id: int, email: str, name: str) -> None:
        user = self.session.get(User, user_id)
        if user is None:
            log.warning(f"Update of missing user: id={user_id}")
            raise UserNotFound(id=user_id)

        if email != user.email:
            other = self._find_by_email(email)
            if other is not None:
                log.warning(f"Duplicate email on update: id={user_id} email={email}")
                raise DuplicateEmail(email)

        with self._savepoint(email):
            user.email = email
            user.name = name

    def delete(self, user_id: int) -> None:
        user = self.session.get(User, user_id)
        if user is None:
            log.warning(f"Delete of missing user: id={user_id}")
            raise UserNotFound(id=user_id)
        self.session.delete(user)
        self.session.flush()

    def list(self) -> List[User]:
        """All users in insertion (id) order."""
        stmt = select(User).order_by(User.id.asc())
        return list(self.session.scalars(stmt).all())

    # ---- helpers ----
    def _find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return self.session.scalars(stmt).one_or_none()

    @contextmanager
    def _savepoint(self, email: str) -> Iterator[None]:
        # unique constraint can still fire if another session inserted the same email;
        # only the savepoint is rolled back, earlier work in the transaction survives
        try:
            with self.session.begin_nested():
                yield
        except IntegrityError as e:
            log.warning(f"Unique constraint on email: {email} ({e.orig})")
            raise DuplicateEmail(email) from e
