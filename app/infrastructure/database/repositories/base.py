"""Explicit unit of work on top of an SQLAlchemy async session.

Domain entities are plain dataclasses, so SQLAlchemy cannot see their
mutations. Each repository keeps an identity map of the entities it loaded
(entity ↔ ORM model) plus the entities scheduled for insertion or deletion.
``commit`` copies every tracked entity onto its model and writes all pending
work of every repository bound to the same session, in dependency order.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

E = TypeVar("E")
M = TypeVar("M")

_SESSION_KEY = "tracking_repositories"


class TrackingRepository(ABC, Generic[E, M]):
    """Shared persistence mechanics for the SQLAlchemy repositories."""

    model_class: ClassVar[type]
    entity_name: ClassVar[str]
    # lower values are inserted first and deleted last
    flush_order: ClassVar[int] = 0

    def __init__(self, session: AsyncSession):
        self._session = session
        self._identity: dict[int, tuple[E, M]] = {}
        self._new: list[E] = []
        self._removed: list[tuple[E, M]] = []
        session.info.setdefault(_SESSION_KEY, []).append(self)

    # ── Mapping hooks ────────────────────────────────────────────────

    @abstractmethod
    def _to_entity(self, model: M) -> E:
        """Map ORM model → domain entity."""
        ...

    @abstractmethod
    def _apply(self, entity: E, model: M) -> None:
        """Copy domain entity fields onto the ORM model."""
        ...

    # ── Reads ────────────────────────────────────────────────────────

    def _track(self, model: Any) -> E:
        tracked = self._identity.get(model.id)
        if tracked is not None:
            return tracked[0]
        entity = self._to_entity(model)
        self._identity[model.id] = (entity, model)
        return entity

    async def get_by_id(self, entity_id: int) -> E | None:
        tracked = self._identity.get(entity_id)
        if tracked is not None:
            return tracked[0]
        model = await self._session.get(self.model_class, entity_id)
        return self._track(model) if model else None

    async def get_all(self) -> list[E]:
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self._session.execute(stmt)
        return [self._track(model) for model in result.scalars().all()]

    # ── Pending work ─────────────────────────────────────────────────

    async def add(self, entity: E) -> None:
        if getattr(entity, "id", None) in self._identity:
            return
        if not any(pending is entity for pending in self._new):
            self._new.append(entity)

    async def remove(self, entity: E) -> None:
        for index, pending in enumerate(self._new):
            if pending is entity:
                del self._new[index]
                return

        entity_id = getattr(entity, "id", None)
        if entity_id is not None and entity_id not in self._identity:
            await self.get_by_id(entity_id)
        tracked = self._identity.pop(entity_id, None) if entity_id is not None else None
        if tracked is None:
            raise EntityNotFoundError(self.entity_name, entity_id if entity_id is not None else "?")
        self._removed.append(tracked)

    async def commit(self) -> None:
        repositories = sorted(
            self._session.info.get(_SESSION_KEY, [self]),
            key=lambda repository: repository.flush_order,
        )
        for repository in repositories:
            await repository._flush_upserts()
        for repository in reversed(repositories):
            await repository._flush_deletes()
        await self._session.commit()

    async def _flush_upserts(self) -> None:
        for entity, model in self._identity.values():
            self._apply(entity, model)

        inserted: list[tuple[E, M]] = []
        for entity in self._new:
            model = self.model_class()
            self._apply(entity, model)
            self._session.add(model)
            inserted.append((entity, model))
        self._new = []

        await self._session.flush()

        for entity, model in inserted:
            entity.id = model.id
            self._identity[model.id] = (entity, model)
        if inserted:
            logger.debug("Inserted %d %s row(s)", len(inserted), self.entity_name)

    async def _flush_deletes(self) -> None:
        if not self._removed:
            return
        for entity, model in self._removed:
            await self._before_delete(entity)
            await self._session.delete(model)
        count = len(self._removed)
        self._removed = []
        await self._session.flush()
        logger.debug("Deleted %d %s row(s)", count, self.entity_name)

    async def _before_delete(self, entity: E) -> None:
        """Hook to enforce referential policies before a row is deleted."""
