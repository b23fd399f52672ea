"""
Tests for BookService conversion and paged search.
"""

from datetime import datetime

import pytest
import pytest_asyncio

from restful_crud.common.errors import BadRequestError, NotFoundError
from restful_crud.db.models import Book
from restful_crud.domain.book import BookVO
from restful_crud.domain.paged_search import MAX_PAGE, MAX_PAGE_SIZE
from restful_crud.repositories.sqlalchemy import SQLAlchemyGenericRepository
from restful_crud.services import BookService


@pytest_asyncio.fixture
async def service(db_session):
    return BookService(SQLAlchemyGenericRepository(db_session, Book))


@pytest.mark.asyncio
class TestBookServiceCrud:

    async def test_create_ignores_payload_id(self, service):
        created = await service.create(BookVO(id=999, title="A", author="B"))
        assert created.id != 999
        assert created.title == "A"
        assert created.author == "B"
        assert created.links == []

    async def test_create_then_find_by_id(self, service):
        created = await service.create(
            BookVO(title="A", author="B", launch_date=datetime(2020, 5, 17), price=12.5)
        )

        fetched = await service.find_by_id(created.id)
        assert fetched == created

    async def test_update_requires_id(self, service):
        with pytest.raises(BadRequestError) as exc_info:
            await service.update(BookVO(title="A", author="B"))
        assert exc_info.value.status_code == 400

    async def test_update_missing_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.update(BookVO(id=42, title="A", author="B"))

    async def test_update_full_replace(self, service):
        created = await service.create(
            BookVO(title="A", author="B", launch_date=datetime(2020, 5, 17), price=12.5)
        )

        updated = await service.update(BookVO(id=created.id, title="C", author="D"))
        assert updated == BookVO(id=created.id, title="C", author="D", launch_date=None, price=0)

    async def test_delete_and_exists(self, service):
        created = await service.create(BookVO(title="A", author="B"))
        assert await service.exists(created.id) is True

        await service.delete(created.id)
        assert await service.exists(created.id) is False

        with pytest.raises(NotFoundError):
            await service.delete(created.id)


@pytest.mark.asyncio
class TestBookServicePagedSearch:

    @pytest_asyncio.fixture
    async def seeded(self, service):
        for title in ["Alpha", "Beta python", "Gamma Python", "Delta python", "Epsilon"]:
            await service.create(BookVO(title=title, author="Author"))
        return service

    async def test_filters_and_counts(self, seeded):
        page = await seeded.find_with_paged_search(
            title="python", sort_direction="asc", page_size=2, page=1
        )
        assert page.total_results == 3
        assert page.current_page == 1
        assert page.page_size == 2
        assert page.filters == {"title": "python"}
        assert [b.title for b in page.items] == ["Beta python", "Delta python"]

    async def test_second_page(self, seeded):
        page = await seeded.find_with_paged_search(
            title="python", sort_direction="asc", page_size=2, page=2
        )
        assert [b.title for b in page.items] == ["Gamma Python"]

    async def test_desc_sort(self, seeded):
        page = await seeded.find_with_paged_search(
            title=None, sort_direction="DESC", page_size=10, page=1
        )
        assert page.sort_direction == "desc"
        assert page.total_results == 5
        assert page.items[0].title == "Gamma Python"

    async def test_normalizes_invalid_parameters(self, seeded):
        page = await seeded.find_with_paged_search(
            title=None, sort_direction="sideways", page_size=0, page=0
        )
        assert page.sort_direction == "asc"
        assert page.page_size == 10
        assert page.current_page == 1
        assert page.items[0].title == "Alpha"

    async def test_title_with_quote_is_bound(self, seeded):
        page = await seeded.find_with_paged_search(
            title="' OR '1'='1", sort_direction="asc", page_size=10, page=1
        )
        assert page.total_results == 0
        assert page.items == []

    async def test_oversized_parameters_are_capped(self, seeded):
        page = await seeded.find_with_paged_search(
            title=None, sort_direction="asc", page_size=10**20, page=10**20
        )
        assert page.page_size == MAX_PAGE_SIZE
        assert page.current_page == MAX_PAGE
        assert page.total_results == 5
        assert page.items == []

    async def test_like_wildcards_match_literally(self, service):
        for title in ["100% Pure", "Plain", "snake_case", "snakeycase"]:
            await service.create(BookVO(title=title, author="Author"))

        page = await service.find_with_paged_search(
            title="%", sort_direction="asc", page_size=10, page=1
        )
        assert [b.title for b in page.items] == ["100% Pure"]
        assert page.total_results == 1

        page = await service.find_with_paged_search(
            title="e_c", sort_direction="asc", page_size=10, page=1
        )
        assert [b.title for b in page.items] == ["snake_case"]
