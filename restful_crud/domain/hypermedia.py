"""
Hypermedia Domain Model

Defines the link model injected into transfer objects by the hypermedia filter.
"""

from pydantic import BaseModel, Field


class RelationType:
    """Link relation names"""

    SELF = "self"


class ResponseTypeFormat:
    """Media types advertised on links"""

    DEFAULT_GET = "application/json"
    DEFAULT_POST = "application/json"
    DEFAULT_PUT = "application/json"
    DEFAULT_DELETE = "int"


class HttpActionVerb:
    """HTTP verbs advertised on links"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class HyperMediaLink(BaseModel):
    """Navigation link"""

    rel: str = Field(..., description="Relation")
    href: str = Field(..., description="Target URL")
    type: str = Field(..., description="Response media type")
    action: str = Field(..., description="HTTP verb")


class SupportsHyperMedia(BaseModel):
    """Transfer object that carries navigation links"""

    # Populated by the response filter; ignored on input
    links: list[HyperMediaLink] = Field(default_factory=list, description="Navigation links")
