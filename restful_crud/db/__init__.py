"""
Database Module Initialization
"""

from restful_crud.db.session import get_db, init_db, AsyncSessionLocal
from restful_crud.db.models import (
    Base,
    BaseEntity,
    MAX_ID,
    Book,
    Person,
)

__all__ = [
    "get_db",
    "init_db",
    "AsyncSessionLocal",
    "Base",
    "BaseEntity",
    "MAX_ID",
    "Book",
    "Person",
]
