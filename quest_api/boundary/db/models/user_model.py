"""
User ORM model.

Dependencies: sqlalchemy, quest_api.boundary.db.base
System role: User account persistence
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from quest_api.boundary.db.base import Base, StringIdMixin


class UserModel(Base, StringIdMixin):
    """
    User ORM model.

    Attributes:
        id: String primary key
        username: Login name, unique
        email: Contact address, unique
        password: Password hash (never the plain password)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
