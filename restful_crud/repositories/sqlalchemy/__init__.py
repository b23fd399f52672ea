"""
SQLAlchemy Repository Implementation Module Initialization
"""

from restful_crud.repositories.sqlalchemy.generic_repo import SQLAlchemyGenericRepository

__all__ = [
    "SQLAlchemyGenericRepository",
]
