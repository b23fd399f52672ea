"""
Data Access Layer Module Initialization
"""

from restful_crud.repositories.base import Repository

__all__ = [
    "Repository",
]
