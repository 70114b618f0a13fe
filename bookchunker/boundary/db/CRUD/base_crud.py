"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create and Read operations that can be inherited and
extended by model-specific CRUD classes. Methods never commit: the caller
owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookchunker.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def create(self, session: Session, **kwargs) -> ModelT:
        """
        Create a new record in the current transaction.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        return instance

    def get_by_id(self, session: Session, id: int) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Database session
            id: Integer primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = session.execute(stmt)
        return result.scalar_one_or_none()

    def get_all(
        self,
        session: Session,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records in primary key order with optional pagination.

        Args:
            session: Database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).order_by(self.model.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = session.execute(stmt)
        return result.scalars().all()

    def count(self, session: Session) -> int:
        """
        Count all records.

        Args:
            session: Database session

        Returns:
            Number of rows in the model's table
        """
        stmt = select(func.count()).select_from(self.model)
        return session.execute(stmt).scalar_one()

    def exists(self, session: Session, id: int) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Database session
            id: Integer primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = session.execute(stmt)
        return result.scalar_one_or_none() is not None
