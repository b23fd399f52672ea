"""
Base Repository Interface Module

Defines the generic interface for data access, decoupling business logic from specific database implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from sqlalchemy.sql.expression import Executable

from restful_crud.db.models import BaseEntity

# Define generic type variable bound to the entity identity contract
T = TypeVar("T", bound=BaseEntity)

# A structured statement, or query text whose values are supplied as bound parameters
Query = Union[Executable, str]


class Repository(ABC, Generic[T]):
    """
    Base Repository Interface

    Defines identifier-keyed CRUD plus query-based search over one entity type.
    """

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Get all entities"""
        pass

    @abstractmethod
    async def find_by_id(self, id: int) -> T:
        """Get entity by ID, raises NotFoundError if absent"""
        pass

    @abstractmethod
    async def get(self, id: int) -> Optional[T]:
        """Get entity by ID, None if absent"""
        pass

    @abstractmethod
    async def create(self, item: T) -> T:
        """Create entity"""
        pass

    @abstractmethod
    async def update(self, item: T) -> T:
        """Replace every field of the stored entity with the given entity's values"""
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Delete entity, raises NotFoundError if absent"""
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Check whether an entity with the ID exists"""
        pass

    @abstractmethod
    async def find_with_paged_search(
        self, query: Query, params: Optional[Mapping[str, Any]] = None
    ) -> list[T]:
        """Run a search query and map the rows to entities"""
        pass

    @abstractmethod
    async def get_count(
        self, query: Query, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        """Run a scalar count query"""
        pass
