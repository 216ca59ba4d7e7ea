# firmness/repositories/base.py
from __future__ import annotations

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import ColumnElement, Select, exists, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from firmness.models.base import Entity

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Entity)


class GenericRepository(Generic[ModelType]):
    """
    Generic repository with CRUD and query helpers over any ``Entity``.

    - Writes are staged on the session; nothing reaches the database until
      ``commit()``, which persists every staged change atomically.
    - ``get_all``/``find`` are snapshot reads: rows loaded only for the read
      are detached from the session so they are not tracked for mutation.
    - Storage errors propagate as ``SQLAlchemyError``.
    """

    def __init__(self, session: Session, model: Type[ModelType]):
        self.session = session
        self.model = model

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _base_select(self) -> Select[tuple[ModelType]]:
        return select(self.model).order_by(self.model.id)

    def _snapshot(self, stmt: Select[tuple[ModelType]]) -> List[ModelType]:
        tracked = set(self.session.identity_map.keys())
        rows = list(self.session.execute(stmt).unique().scalars().all())
        for row in rows:
            if sa_inspect(row).key not in tracked:
                self.session.expunge(row)
        return rows

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def get_all(self) -> List[ModelType]:
        return self._snapshot(self._base_select())

    def get_by_id(self, id_: int) -> Optional[ModelType]:
        return self.session.get(self.model, id_)

    def exists(self, id_: int) -> bool:
        stmt = select(exists().where(self.model.id == id_))
        return bool(self.session.execute(stmt).scalar())

    def find(self, *criteria: ColumnElement[bool]) -> List[ModelType]:
        """
        Snapshot read filtered by SQLAlchemy boolean expressions.

        Example:
            >>> repo.find(Product.stock == 0, Product.is_active.is_(True))
        """
        return self._snapshot(self._base_select().where(*criteria))

    def first_or_default(self, *criteria: ColumnElement[bool]) -> Optional[ModelType]:
        rows = self._snapshot(self._base_select().where(*criteria).limit(1))
        return rows[0] if rows else None

    # ------------------------------------------------------------------ #
    # Staged writes
    # ------------------------------------------------------------------ #
    def add(self, entity: ModelType) -> ModelType:
        """Stage a new row. ``entity.id`` is assigned by ``commit()``."""
        self.session.add(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Stage modifications of an existing row keyed by ``entity.id``."""
        if entity in self.session:
            return entity
        return self.session.merge(entity)

    def delete(self, id_: int) -> None:
        """Stage removal of the row; does nothing when the id is absent."""
        entity = self.session.get(self.model, id_)
        if entity is not None:
            self.session.delete(entity)

    # ------------------------------------------------------------------ #
    # Unit of work boundary
    # ------------------------------------------------------------------ #
    def commit(self) -> int:
        """
        Persist all staged changes in one transaction.

        Returns:
            Number of rows added, modified or removed

        Raises:
            SQLAlchemyError: after rolling the session back
        """
        affected = (
            len(self.session.new)
            + len(self.session.deleted)
            + sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        )
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Commit failed: {exc}")
            self.session.rollback()
            raise
        logger.debug(f"Committed {affected} change(s) for {self.model.__name__}")
        return affected

    def rollback(self) -> None:
        """Discard every change staged since the last commit."""
        self.session.rollback()
