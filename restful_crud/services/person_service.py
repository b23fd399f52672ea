"""
Person Service Module
"""

import logging
from typing import Optional

from sqlalchemy import func, or_, select

from restful_crud.common.errors import BadRequestError
from restful_crud.config import get_settings
from restful_crud.db.models import Person
from restful_crud.domain.paged_search import MAX_PAGE, MAX_PAGE_SIZE, PagedSearchVO
from restful_crud.domain.person import PersonVO
from restful_crud.repositories.base import Repository

logger = logging.getLogger(__name__)


class PersonService:
    """Person Service"""

    def __init__(self, repo: Repository[Person]):
        self.repo = repo

    async def find_all(self) -> list[PersonVO]:
        persons = await self.repo.find_all()
        return [self._to_vo(p) for p in persons]

    async def find_by_id(self, id: int) -> PersonVO:
        person = await self.repo.find_by_id(id)
        return self._to_vo(person)

    async def create(self, data: PersonVO) -> PersonVO:
        entity = self._to_entity(data)
        entity.id = None
        person = await self.repo.create(entity)
        logger.info("Person created: id=%s", person.id)
        return self._to_vo(person)

    async def update(self, data: PersonVO) -> PersonVO:
        if data.id is None:
            raise BadRequestError(
                message="Person id is required for update",
                code="missing_id",
            )
        person = await self.repo.update(self._to_entity(data))
        logger.info("Person updated: id=%s", person.id)
        return self._to_vo(person)

    async def delete(self, id: int) -> None:
        await self.repo.delete(id)
        logger.info("Person deleted: id=%s", id)

    async def exists(self, id: int) -> bool:
        return await self.repo.exists(id)

    async def find_with_paged_search(
        self,
        name: Optional[str],
        sort_direction: str,
        page_size: int,
        page: int,
    ) -> PagedSearchVO[PersonVO]:
        """
        Search persons whose first or last name contains `name`, sorted by first name
        """
        sort = "desc" if sort_direction and sort_direction.lower() == "desc" else "asc"
        size = page_size if page_size >= 1 else get_settings().DEFAULT_PAGE_SIZE
        size = min(size, MAX_PAGE_SIZE)
        current_page = min(max(page, 1), MAX_PAGE)

        query = select(Person)
        count_query = select(func.count()).select_from(Person)
        filters: dict[str, str] = {}
        if name:
            condition = or_(
                Person.first_name.icontains(name, autoescape=True),
                Person.last_name.icontains(name, autoescape=True),
            )
            query = query.where(condition)
            count_query = count_query.where(condition)
            filters["name"] = name

        order_column = Person.first_name.desc() if sort == "desc" else Person.first_name.asc()
        query = (
            query.order_by(order_column, Person.id)
            .offset((current_page - 1) * size)
            .limit(size)
        )

        persons = await self.repo.find_with_paged_search(query)
        total = await self.repo.get_count(count_query)

        return PagedSearchVO[PersonVO](
            current_page=current_page,
            page_size=size,
            sort_fields="first_name",
            sort_direction=sort,
            filters=filters,
            total_results=total,
            items=[self._to_vo(p) for p in persons],
        )

    def _to_entity(self, data: PersonVO) -> Person:
        return Person(
            id=data.id,
            first_name=data.first_name,
            last_name=data.last_name,
            address=data.address,
            gender=data.gender,
        )

    def _to_vo(self, person: Person) -> PersonVO:
        return PersonVO(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            address=person.address,
            gender=person.gender,
        )
