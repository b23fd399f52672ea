"""
Book API

Provides versioned CRUD and paged search endpoints for Books.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from restful_crud.api.deps import (
    BookServiceDep,
    EntityId,
    PageNumber,
    PageSize,
    require_api_version,
)
from restful_crud.common.errors import AppError
from restful_crud.domain.book import BookVO
from restful_crud.domain.paged_search import PagedSearchVO
from restful_crud.hypermedia import HyperMediaRoute

router = APIRouter(
    prefix="/book/v{version}",
    tags=["Book"],
    dependencies=[Depends(require_api_version)],
    route_class=HyperMediaRoute,
)


@router.get("", response_model=list[BookVO])
async def list_books(
    service: BookServiceDep,
):
    """
    Get all books
    """
    try:
        return await service.find_all()
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get(
    "/{sort_direction}/{page_size}/{page}",
    response_model=PagedSearchVO[BookVO],
)
async def search_books(
    sort_direction: str,
    page_size: PageSize,
    page: PageNumber,
    service: BookServiceDep,
    title: Optional[str] = Query(None, description="Filter by title"),
):
    """
    Search books by title

    Sample request:
        GET /api/book/v1/asc/10/1?title=python
    """
    try:
        return await service.find_with_paged_search(
            title=title,
            sort_direction=sort_direction,
            page_size=page_size,
            page=page,
        )
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("/{book_id}", response_model=BookVO)
async def get_book(
    book_id: EntityId,
    service: BookServiceDep,
):
    """
    Get a book by its ID
    """
    try:
        return await service.find_by_id(book_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("", response_model=BookVO, status_code=status.HTTP_200_OK)
async def create_book(
    service: BookServiceDep,
    book: BookVO = Body(...),
):
    """
    Create a book

    Sample request:
        POST /api/book/v1
        {
            "title": "Sample Book",
            "author": "John Doe"
        }
    """
    try:
        return await service.create(book)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.put("", response_model=BookVO)
async def update_book(
    service: BookServiceDep,
    book: BookVO = Body(...),
):
    """
    Update a book

    Every field is replaced; omitted optional fields are cleared.
    """
    try:
        return await service.update(book)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: EntityId,
    service: BookServiceDep,
):
    """
    Delete a book by its ID
    """
    try:
        await service.delete(book_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
