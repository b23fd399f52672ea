"""
Person API
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from restful_crud.api.deps import (
    PersonServiceDep,
    EntityId,
    PageNumber,
    PageSize,
    require_api_version,
)
from restful_crud.common.errors import AppError
from restful_crud.domain.paged_search import PagedSearchVO
from restful_crud.domain.person import PersonVO
from restful_crud.hypermedia import HyperMediaRoute

router = APIRouter(
    prefix="/person/v{version}",
    tags=["Person"],
    dependencies=[Depends(require_api_version)],
    route_class=HyperMediaRoute,
)


@router.get("", response_model=list[PersonVO])
async def list_persons(
    service: PersonServiceDep,
):
    """Get all persons"""
    try:
        return await service.find_all()
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get(
    "/{sort_direction}/{page_size}/{page}",
    response_model=PagedSearchVO[PersonVO],
)
async def search_persons(
    sort_direction: str,
    page_size: PageSize,
    page: PageNumber,
    service: PersonServiceDep,
    name: Optional[str] = Query(None, description="Filter by first or last name"),
):
    """Search persons by name"""
    try:
        return await service.find_with_paged_search(
            name=name,
            sort_direction=sort_direction,
            page_size=page_size,
            page=page,
        )
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("/{person_id}", response_model=PersonVO)
async def get_person(
    person_id: EntityId,
    service: PersonServiceDep,
):
    """Get a person by ID"""
    try:
        return await service.find_by_id(person_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("", response_model=PersonVO, status_code=status.HTTP_200_OK)
async def create_person(
    service: PersonServiceDep,
    person: PersonVO = Body(...),
):
    """Create a person"""
    try:
        return await service.create(person)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.put("", response_model=PersonVO)
async def update_person(
    service: PersonServiceDep,
    person: PersonVO = Body(...),
):
    """Update a person"""
    try:
        return await service.update(person)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: EntityId,
    service: PersonServiceDep,
):
    """Delete a person"""
    try:
        await service.delete(person_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
