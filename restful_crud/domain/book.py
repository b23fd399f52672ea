"""
Book Domain Model

Defines the Book Data Transfer Object (VO) exchanged at the API boundary.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from restful_crud.db.models import MAX_ID
from restful_crud.domain.hypermedia import SupportsHyperMedia


class BookVO(SupportsHyperMedia):
    """
    Book Transfer Object

    `id` is ignored on create and required on update.
    """

    id: Optional[int] = Field(None, ge=1, le=MAX_ID, description="Book ID")
    title: str = Field(..., min_length=1, max_length=255, description="Title")
    author: str = Field(..., min_length=1, max_length=180, description="Author")
    launch_date: Optional[datetime] = Field(None, description="Launch Date")
    price: float = Field(0, ge=0, description="Price")

    model_config = ConfigDict(from_attributes=True)
