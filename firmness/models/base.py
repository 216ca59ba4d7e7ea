# models/base.py
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Root SQLAlchemy base class."""
    pass


class Entity(Base):
    """
    Base for records handled by the generic repository.

    - Integer primary key assigned by the database on commit
    - The key is never reassigned once set
    """
    __abstract__ = True

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
