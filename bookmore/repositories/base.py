"""Base repository class with common CRUD operations."""
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from bookmore.core.database import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            model = User

        repo = UserRepository(session)
        user = repo.get_by_id(1)

    Writes are flushed, never committed; the calling service owns the
    transaction.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single record by ID."""
        return self.session.get(self.model, id)

    def add(self, instance: T) -> T:
        """Persist a new record and assign its primary key."""
        self.session.add(instance)
        self.session.flush()
        return instance

    def delete(self, instance: T) -> None:
        self.session.delete(instance)
        self.session.flush()

    def newest_first(self, query: Query) -> Query:
        """Stable listing order: creation time, then id, both descending"""
        return query.order_by(self.model.created_at.desc(), self.model.id.desc())
