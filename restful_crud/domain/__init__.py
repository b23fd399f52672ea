"""
Domain Model Module Initialization
"""

from restful_crud.domain.hypermedia import (
    HyperMediaLink,
    SupportsHyperMedia,
    RelationType,
    ResponseTypeFormat,
    HttpActionVerb,
)
from restful_crud.domain.book import BookVO
from restful_crud.domain.person import PersonVO
from restful_crud.domain.paged_search import PagedSearchVO

__all__ = [
    # Hypermedia
    "HyperMediaLink",
    "SupportsHyperMedia",
    "RelationType",
    "ResponseTypeFormat",
    "HttpActionVerb",
    # Book
    "BookVO",
    # Person
    "PersonVO",
    # Paged search
    "PagedSearchVO",
]
