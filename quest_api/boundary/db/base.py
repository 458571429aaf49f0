"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and a reusable mixin for
string primary keys.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_id() -> str:
    """Mint a new string identifier."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class StringIdMixin:
    """
    Mixin providing a TEXT primary key to models.

    Identifiers are stored as plain strings so the relational rows share
    ids with their DynamoDB counterparts. A UUID v4 is minted when the
    caller does not supply one.

    Attributes:
        id: String primary key, auto-generated on insert
    """

    id: Mapped[str] = mapped_column(
        String,
        primary_key=True,
        default=generate_id,
        nullable=False,
    )
