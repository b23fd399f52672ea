"""
Tests for query-based search and count in SQLAlchemyGenericRepository.
"""

import pytest
import pytest_asyncio
from sqlalchemy import func, select, text

from restful_crud.common.errors import CountNotFoundError
from restful_crud.db.models import Book
from restful_crud.repositories.sqlalchemy import SQLAlchemyGenericRepository


@pytest_asyncio.fixture
async def book_repo(db_session):
    repo = SQLAlchemyGenericRepository(db_session, Book)
    for title, author in [
        ("Python Tricks", "Dan Bader"),
        ("Fluent Python", "Luciano Ramalho"),
        ("Clean Code", "Robert Martin"),
    ]:
        await repo.create(Book(title=title, author=author, price=10))
    return repo


@pytest.mark.asyncio
async def test_paged_search_with_select(book_repo):
    query = (
        select(Book)
        .where(Book.title.ilike("%python%"))
        .order_by(Book.title.asc())
        .limit(1)
        .offset(1)
    )
    books = await book_repo.find_with_paged_search(query)
    assert [b.title for b in books] == ["Python Tricks"]


@pytest.mark.asyncio
async def test_paged_search_with_text_and_bound_params(book_repo):
    books = await book_repo.find_with_paged_search(
        "SELECT * FROM books WHERE author = :author",
        {"author": "Robert Martin"},
    )
    assert len(books) == 1
    assert isinstance(books[0], Book)
    assert books[0].title == "Clean Code"


@pytest.mark.asyncio
async def test_paged_search_does_not_interpolate_params(book_repo):
    books = await book_repo.find_with_paged_search(
        text("SELECT * FROM books WHERE title = :title"),
        {"title": "x' OR '1'='1"},
    )
    assert books == []


@pytest.mark.asyncio
async def test_get_count_with_select(book_repo):
    count = await book_repo.get_count(
        select(func.count()).select_from(Book).where(Book.title.ilike("%python%"))
    )
    assert count == 2


@pytest.mark.asyncio
async def test_get_count_with_text(book_repo):
    count = await book_repo.get_count(
        "SELECT COUNT(*) FROM books WHERE price >= :price", {"price": 5}
    )
    assert count == 3


@pytest.mark.asyncio
async def test_get_count_zero_matches_returns_zero(book_repo):
    count = await book_repo.get_count(
        select(func.count()).select_from(Book).where(Book.author == "Nobody")
    )
    assert count == 0


@pytest.mark.asyncio
async def test_get_count_no_rows_raises(book_repo):
    with pytest.raises(CountNotFoundError):
        await book_repo.get_count("SELECT id FROM books WHERE 1 = 0")


@pytest.mark.asyncio
async def test_get_count_non_numeric_raises(book_repo):
    with pytest.raises(CountNotFoundError) as exc_info:
        await book_repo.get_count(
            "SELECT title FROM books WHERE author = :author", {"author": "Dan Bader"}
        )
    assert exc_info.value.details == {"value": "Python Tricks"}
