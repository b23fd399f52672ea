"""
Service Layer Module Initialization
"""

from restful_crud.services.book_service import BookService
from restful_crud.services.person_service import PersonService

__all__ = [
    "BookService",
    "PersonService",
]
