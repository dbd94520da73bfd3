"""User ORM: persists the single resource exposed over HTTP.

Invariants:
    - id is an integer primary key assigned by the store, never by callers
    - name is non-nullable text
    - Rows are only ever inserted; no update or delete path exists
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from userapi.db.base import Base


class User(Base):
    """A user row. Handlers only ever hold request-scoped copies."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r})"
