"""
Person Domain Model

Defines the Person Data Transfer Object (VO) exchanged at the API boundary.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from restful_crud.db.models import MAX_ID
from restful_crud.domain.hypermedia import SupportsHyperMedia


class PersonVO(SupportsHyperMedia):
    """Person Transfer Object"""

    id: Optional[int] = Field(None, ge=1, le=MAX_ID, description="Person ID")
    first_name: str = Field(..., min_length=1, max_length=80, description="First Name")
    last_name: str = Field(..., min_length=1, max_length=80, description="Last Name")
    address: Optional[str] = Field(None, max_length=100, description="Address")
    gender: Optional[str] = Field(None, max_length=6, description="Gender")

    model_config = ConfigDict(from_attributes=True)
