"""
SQLAlchemy ORM Model Definitions

Defines all database table structures for the system, including:
- books: Books Table
- person: Persons Table
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Largest identifier a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class BaseEntity(Base):
    """
    Entity Base Class

    Every persisted record type derives from this class and is identified by an
    integer primary key assigned by the database at insert time.
    """
    __abstract__ = True

    # Primary Key ID
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class Book(BaseEntity):
    """
    Books Table
    """
    __tablename__ = "books"

    # Author name
    author: Mapped[str] = mapped_column(String(180), nullable=False)
    # Launch date, optional
    launch_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    # Price, two decimal places
    price: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=False, default=0
    )
    # Title
    title: Mapped[str] = mapped_column(String(255), nullable=False)


class Person(BaseEntity):
    """
    Persons Table
    """
    __tablename__ = "person"

    first_name: Mapped[str] = mapped_column(String(80), nullable=False)
    last_name: Mapped[str] = mapped_column(String(80), nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(6), nullable=True)
