"""
Paged Search Domain Model
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# Upper bounds on paging parameters, keeping LIMIT/OFFSET inside the 64-bit range
MAX_PAGE_SIZE = 1000
MAX_PAGE = 1_000_000


class PagedSearchVO(BaseModel, Generic[T]):
    """One page of search results plus the parameters that produced it"""

    current_page: int = Field(..., ge=1, description="Page number (1-based)")
    page_size: int = Field(..., ge=1, description="Items per page")
    sort_fields: Optional[str] = Field(None, description="Column the results are sorted by")
    sort_direction: str = Field("asc", description="asc or desc")
    filters: dict[str, str] = Field(default_factory=dict, description="Applied filters")
    total_results: int = Field(0, ge=0, description="Total matching rows")
    items: list[T] = Field(default_factory=list, description="Results on this page")
