"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restful_crud.common.errors import UnsupportedApiVersionError
from restful_crud.config import get_settings
from restful_crud.db.models import MAX_ID, Book, Person
from restful_crud.db.session import get_db as _get_db
from restful_crud.repositories.sqlalchemy import SQLAlchemyGenericRepository
from restful_crud.domain.paged_search import MAX_PAGE, MAX_PAGE_SIZE
from restful_crud.services import BookService, PersonService


async def get_db():
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Repository Dependencies ============

def get_book_repo(db: DbSession) -> SQLAlchemyGenericRepository[Book]:
    """Get Book Repository"""
    return SQLAlchemyGenericRepository(db, Book)


def get_person_repo(db: DbSession) -> SQLAlchemyGenericRepository[Person]:
    """Get Person Repository"""
    return SQLAlchemyGenericRepository(db, Person)


# ============ Service Dependencies ============

def get_book_service(db: DbSession) -> BookService:
    """Get Book Service"""
    return BookService(get_book_repo(db))


def get_person_service(db: DbSession) -> PersonService:
    """Get Person Service"""
    return PersonService(get_person_repo(db))


# ============ Versioning Dependencies ============

async def require_api_version(
    version: str = Path(..., description="API version"),
) -> str:
    """
    Validate the version path segment

    Raises:
        UnsupportedApiVersionError: Version is not configured in API_VERSIONS
    """
    supported = get_settings().supported_api_versions
    if version not in supported:
        raise UnsupportedApiVersionError(version, supported)
    return version


# Dependency type aliases
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]

# Path parameter types, bounded so out-of-range values are rejected with 400
EntityId = Annotated[int, Path(ge=1, le=MAX_ID, description="Entity ID")]
PageSize = Annotated[int, Path(le=MAX_PAGE_SIZE, description="Items per page")]
PageNumber = Annotated[int, Path(le=MAX_PAGE, description="1-based page number")]
