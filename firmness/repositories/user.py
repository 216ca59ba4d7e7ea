# firmness/repositories/user.py
from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from firmness.models import Role, User


class UserRepository:
    """
    Identity store used by login and registration.

    Users are keyed by a string id, so they sit outside ``GenericRepository``.
    Emails are stored lower-cased and looked up case-insensitively.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.session.execute(stmt).scalar_one_or_none()

    def get_roles(self, names: Iterable[str]) -> List[Role]:
        stmt = select(Role).where(Role.name.in_(list(names)))
        return list(self.session.execute(stmt).scalars().all())

    def add(self, user: User) -> User:
        self.session.add(user)
        return user

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
