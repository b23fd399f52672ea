"""
Generic Repository SQLAlchemy Implementation

Provides CRUD and search operations for any entity derived from BaseEntity.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import exists, inspect, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import TextClause

from restful_crud.common.errors import CountNotFoundError, NotFoundError
from restful_crud.db.models import MAX_ID
from restful_crud.repositories.base import Query, Repository, T

logger = logging.getLogger(__name__)


class SQLAlchemyGenericRepository(Repository[T]):
    """
    Generic Repository SQLAlchemy Implementation

    Every write commits immediately; there is no transaction spanning calls.
    Database errors propagate unchanged.
    """

    def __init__(self, session: AsyncSession, model: type[T]):
        """
        Initialize Repository

        Args:
            session: Async database session (the request's unit of work)
            model: ORM entity class served by this repository
        """
        self.session = session
        self.model = model

    @property
    def _entity_name(self) -> str:
        return self.model.__name__

    def _not_found(self, id: int) -> NotFoundError:
        return NotFoundError(
            message=f"{self._entity_name} with id {id} not found",
            code=f"{self.model.__tablename__}_not_found",
            details={"id": id},
        )

    async def find_all(self) -> list[T]:
        """Get all entities"""
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def get(self, id: int) -> Optional[T]:
        """Get entity by ID"""
        # Identifiers the INTEGER column cannot hold match no row
        if not -MAX_ID - 1 <= id <= MAX_ID:
            return None
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        # Raises MultipleResultsFound if the identifier is not unique
        return result.scalar_one_or_none()

    async def find_by_id(self, id: int) -> T:
        """Get entity by ID"""
        entity = await self.get(id)
        if entity is None:
            raise self._not_found(id)
        return entity

    async def create(self, item: T) -> T:
        """Create entity"""
        self.session.add(item)
        await self.session.commit()
        await self.session.refresh(item)
        logger.debug("Created %s id=%s", self._entity_name, item.id)
        return item

    async def update(self, item: T) -> T:
        """Update entity (full replace)"""
        entity = await self.get(item.id)
        if entity is None:
            raise self._not_found(item.id)

        for attr in inspect(self.model).column_attrs:
            if attr.key == "id":
                continue
            setattr(entity, attr.key, getattr(item, attr.key))

        await self.session.commit()
        await self.session.refresh(entity)
        logger.debug("Updated %s id=%s", self._entity_name, entity.id)
        return entity

    async def delete(self, id: int) -> None:
        """Delete entity"""
        entity = await self.get(id)
        if entity is None:
            raise self._not_found(id)

        await self.session.delete(entity)
        await self.session.commit()
        logger.debug("Deleted %s id=%s", self._entity_name, id)

    async def exists(self, id: int) -> bool:
        """Check whether entity exists"""
        if not -MAX_ID - 1 <= id <= MAX_ID:
            return False
        result = await self.session.execute(
            select(exists().where(self.model.id == id))
        )
        return bool(result.scalar())

    async def find_with_paged_search(
        self, query: Query, params: Optional[Mapping[str, Any]] = None
    ) -> list[T]:
        """
        Run a search query and map rows to entities

        Args:
            query: A Select over the entity, or query text using named bind
                parameters (e.g. ``title LIKE :title``)
            params: Values for the bind parameters of a textual query

        Returns:
            list[T]: Matching entities
        """
        if isinstance(query, str):
            query = text(query)
        if isinstance(query, TextClause):
            query = select(self.model).from_statement(query)

        result = await self.session.execute(query, dict(params or {}))
        return list(result.scalars().all())

    async def get_count(
        self, query: Query, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        """
        Run a scalar count query on the session's connection

        Raises:
            CountNotFoundError: The query returned no value or a non-integer value
        """
        if isinstance(query, str):
            query = text(query)

        connection = await self.session.connection()
        result = await connection.execute(query, dict(params or {}))
        value = result.scalar()
        if value is None:
            raise CountNotFoundError(message="Count query returned no value")

        try:
            return int(str(value))
        except ValueError as e:
            raise CountNotFoundError(
                message="Count query returned a non-integer value",
                details={"value": str(value)},
            ) from e
