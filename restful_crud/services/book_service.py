"""
Book Service Module

Provides business logic processing for Books.
"""

import logging
from typing import Optional

from sqlalchemy import func, select

from restful_crud.common.errors import BadRequestError
from restful_crud.config import get_settings
from restful_crud.db.models import Book
from restful_crud.domain.book import BookVO
from restful_crud.domain.paged_search import MAX_PAGE, MAX_PAGE_SIZE, PagedSearchVO
from restful_crud.repositories.base import Repository

logger = logging.getLogger(__name__)


class BookService:
    """
    Book Service

    Converts between BookVO and the Book entity and delegates persistence to the repository.
    """

    def __init__(self, repo: Repository[Book]):
        """
        Initialize Service

        Args:
            repo: Book Repository
        """
        self.repo = repo

    async def find_all(self) -> list[BookVO]:
        """Get all books"""
        books = await self.repo.find_all()
        return [self._to_vo(b) for b in books]

    async def find_by_id(self, id: int) -> BookVO:
        """
        Get book by ID

        Raises:
            NotFoundError: Book not found
        """
        book = await self.repo.find_by_id(id)
        return self._to_vo(book)

    async def create(self, data: BookVO) -> BookVO:
        """
        Create book

        Any identifier in the payload is ignored; the database assigns one.
        """
        entity = self._to_entity(data)
        entity.id = None
        book = await self.repo.create(entity)
        logger.info("Book created: id=%s title=%r", book.id, book.title)
        return self._to_vo(book)

    async def update(self, data: BookVO) -> BookVO:
        """
        Update book (full replace)

        Raises:
            BadRequestError: Payload has no identifier
            NotFoundError: Book not found
        """
        if data.id is None:
            raise BadRequestError(
                message="Book id is required for update",
                code="missing_id",
            )
        book = await self.repo.update(self._to_entity(data))
        logger.info("Book updated: id=%s", book.id)
        return self._to_vo(book)

    async def delete(self, id: int) -> None:
        """
        Delete book

        Raises:
            NotFoundError: Book not found
        """
        await self.repo.delete(id)
        logger.info("Book deleted: id=%s", id)

    async def exists(self, id: int) -> bool:
        """Check whether book exists"""
        return await self.repo.exists(id)

    async def find_with_paged_search(
        self,
        title: Optional[str],
        sort_direction: str,
        page_size: int,
        page: int,
    ) -> PagedSearchVO[BookVO]:
        """
        Search books by title, one page at a time

        Args:
            title: Case-insensitive literal substring of the title (optional);
                `%` and `_` match themselves
            sort_direction: "asc" or "desc"; anything else sorts ascending
            page_size: Items per page; non-positive values fall back to the default,
                values above MAX_PAGE_SIZE are capped
            page: 1-based page number, clamped to 1..MAX_PAGE

        Returns:
            PagedSearchVO[BookVO]: The requested page and the total match count
        """
        sort = "desc" if sort_direction and sort_direction.lower() == "desc" else "asc"
        size = page_size if page_size >= 1 else get_settings().DEFAULT_PAGE_SIZE
        size = min(size, MAX_PAGE_SIZE)
        current_page = min(max(page, 1), MAX_PAGE)
        offset = (current_page - 1) * size

        query = select(Book)
        count_query = select(func.count()).select_from(Book)
        filters: dict[str, str] = {}
        if title:
            query = query.where(Book.title.icontains(title, autoescape=True))
            count_query = count_query.where(Book.title.icontains(title, autoescape=True))
            filters["title"] = title

        order_column = Book.title.desc() if sort == "desc" else Book.title.asc()
        query = query.order_by(order_column, Book.id).offset(offset).limit(size)

        books = await self.repo.find_with_paged_search(query)
        total = await self.repo.get_count(count_query)

        return PagedSearchVO[BookVO](
            current_page=current_page,
            page_size=size,
            sort_fields="title",
            sort_direction=sort,
            filters=filters,
            total_results=total,
            items=[self._to_vo(b) for b in books],
        )

    def _to_entity(self, data: BookVO) -> Book:
        """Convert BookVO to a transient Book entity"""
        return Book(
            id=data.id,
            title=data.title,
            author=data.author,
            launch_date=data.launch_date,
            price=data.price,
        )

    def _to_vo(self, book: Book) -> BookVO:
        """Convert Book entity to BookVO"""
        return BookVO(
            id=book.id,
            title=book.title,
            author=book.author,
            launch_date=book.launch_date,
            price=book.price,
        )
