"""
Content Response Enrichers

An enricher appends navigation links to the JSON payload of one transfer object type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from starlette.requests import Request

from restful_crud.domain.book import BookVO
from restful_crud.domain.hypermedia import (
    HttpActionVerb,
    HyperMediaLink,
    RelationType,
    ResponseTypeFormat,
)
from restful_crud.domain.person import PersonVO

T = TypeVar("T")


class ContentResponseEnricher(ABC, Generic[T]):
    """Base class for payload enrichers"""

    # Transfer object type this enricher handles
    content_type: type

    def can_enrich(self, content_type: Any) -> bool:
        return isinstance(content_type, type) and issubclass(content_type, self.content_type)

    def enrich(self, payload: dict[str, Any], request: Request) -> dict[str, Any]:
        """Append links to a serialized transfer object"""
        links = payload.get("links") or []
        links.extend(
            link.model_dump() for link in self.build_links(payload, self.base_url(request))
        )
        payload["links"] = links
        return payload

    def base_url(self, request: Request) -> str:
        version = request.path_params.get("version", "1")
        return f"{str(request.base_url).rstrip('/')}/{self.path(version)}"

    @abstractmethod
    def path(self, version: str) -> str:
        """Collection path without leading slash, e.g. api/book/v1"""

    @abstractmethod
    def build_links(self, payload: dict[str, Any], base_url: str) -> list[HyperMediaLink]:
        """Build the links for one item"""


class ObjectContentResponseEnricher(ContentResponseEnricher[T]):
    """
    Enricher for resources exposed as a standard CRUD collection.

    Every item gets GET/DELETE links on its own URL and POST/PUT links on the collection.
    """

    resource: str

    def path(self, version: str) -> str:
        return f"api/{self.resource}/v{version}"

    def build_links(self, payload: dict[str, Any], base_url: str) -> list[HyperMediaLink]:
        item_url = f"{base_url}/{payload.get('id')}"
        return [
            HyperMediaLink(
                rel=RelationType.SELF,
                href=item_url,
                type=ResponseTypeFormat.DEFAULT_GET,
                action=HttpActionVerb.GET,
            ),
            HyperMediaLink(
                rel=RelationType.SELF,
                href=base_url,
                type=ResponseTypeFormat.DEFAULT_POST,
                action=HttpActionVerb.POST,
            ),
            HyperMediaLink(
                rel=RelationType.SELF,
                href=base_url,
                type=ResponseTypeFormat.DEFAULT_PUT,
                action=HttpActionVerb.PUT,
            ),
            HyperMediaLink(
                rel=RelationType.SELF,
                href=item_url,
                type=ResponseTypeFormat.DEFAULT_DELETE,
                action=HttpActionVerb.DELETE,
            ),
        ]


class BookEnricher(ObjectContentResponseEnricher[BookVO]):
    content_type = BookVO
    resource = "book"


class PersonEnricher(ObjectContentResponseEnricher[PersonVO]):
    content_type = PersonVO
    resource = "person"
