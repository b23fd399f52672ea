"""
API Router Module Initialization
"""

from restful_crud.api.book import router as book_router
from restful_crud.api.person import router as person_router

__all__ = [
    "book_router",
    "person_router",
]
