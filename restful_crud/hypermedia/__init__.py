"""
Hypermedia Module Initialization
"""

from restful_crud.hypermedia.enricher import (
    BookEnricher,
    ContentResponseEnricher,
    ObjectContentResponseEnricher,
    PersonEnricher,
)
from restful_crud.hypermedia.filter import (
    HyperMediaFilterOptions,
    HyperMediaRoute,
    apply_hypermedia,
)

__all__ = [
    "BookEnricher",
    "ContentResponseEnricher",
    "ObjectContentResponseEnricher",
    "PersonEnricher",
    "HyperMediaFilterOptions",
    "HyperMediaRoute",
    "apply_hypermedia",
]
