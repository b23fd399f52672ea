"""
Hypermedia Response Filter

Injects navigation links into successful JSON responses after the endpoint
returns and before the body is sent. Routers opt in with
``APIRouter(route_class=HyperMediaRoute)``; the enrichers in use are read from
``app.state.hypermedia``.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Coroutine, Optional, get_args, get_origin

from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import Response

from restful_crud.domain.paged_search import PagedSearchVO
from restful_crud.hypermedia.enricher import ContentResponseEnricher

logger = logging.getLogger(__name__)


@dataclass
class HyperMediaFilterOptions:
    """Registered enrichers"""

    content_response_enricher_list: list[ContentResponseEnricher] = field(default_factory=list)

    def find(self, content_type: Any) -> Optional[ContentResponseEnricher]:
        for enricher in self.content_response_enricher_list:
            if enricher.can_enrich(content_type):
                return enricher
        return None


def _unwrap(response_model: Any, payload: Any) -> tuple[Any, list[Any]]:
    """
    Resolve the item type of a response model and the item payloads to enrich.

    Handles a single transfer object, ``list[VO]`` and ``PagedSearchVO[VO]``.
    """
    if get_origin(response_model) is list and isinstance(payload, list):
        args = get_args(response_model)
        return (args[0] if args else None), payload

    if (
        isinstance(response_model, type)
        and issubclass(response_model, PagedSearchVO)
        and isinstance(payload, dict)
    ):
        args = get_args(response_model.model_fields["items"].annotation)
        return (args[0] if args else None), payload.get("items") or []

    if isinstance(payload, dict):
        return response_model, [payload]
    return None, []


def apply_hypermedia(
    request: Request,
    response: Response,
    response_model: Any,
    options: Optional[HyperMediaFilterOptions],
) -> Response:
    """
    Enrich a response with links

    Non-2xx, empty and non-JSON responses are returned unchanged.
    """
    if options is None or response_model is None:
        return response
    if not 200 <= response.status_code < 300:
        return response
    if response.media_type != "application/json":
        return response
    body = getattr(response, "body", b"")
    if not body:
        return response

    payload = json.loads(body)
    item_type, items = _unwrap(response_model, payload)
    enricher = options.find(item_type)
    if enricher is None:
        logger.debug("No hypermedia enricher for %s", item_type)
        return response

    for item in items:
        if isinstance(item, dict):
            enricher.enrich(item, request)

    headers = {
        k: v for k, v in response.headers.items() if k.lower() != "content-length"
    }
    return JSONResponse(
        content=payload,
        status_code=response.status_code,
        headers=headers,
        background=response.background,
    )


class HyperMediaRoute(APIRoute):
    """Route class that runs the hypermedia filter on every response"""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def hypermedia_route_handler(request: Request) -> Response:
            response = await original_route_handler(request)
            options = getattr(request.app.state, "hypermedia", None)
            return apply_hypermedia(request, response, self.response_model, options)

        return hypermedia_route_handler
