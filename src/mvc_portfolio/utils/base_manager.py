"""Base data access manager.

This module provides the generic CRUD, pagination and search operations that
the entity managers build on. Managers take a request-scoped SQLAlchemy
session and return pydantic schema objects, never ORM instances.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

import pytz
from pydantic import BaseModel
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from mvc_portfolio.core.exceptions import DatabaseError
from mvc_portfolio.schemas.common import PaginatedResult

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


class BaseManager(Generic[SchemaT]):
    """Generic persistence operations for one table.

    Subclasses set ``model_class``, ``schema_class``, the entity names and
    ``search_fields``.
    """

    model_class: Type[Any]
    schema_class: Type[SchemaT]
    entity_name: str = "entity"
    entity_plural: str = "entities"
    search_fields: Tuple[str, ...] = ()

    # Sample-data managers set this to True
    is_sample: bool = False

    def __init__(self, db: Session):
        """Initialize the manager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    @contextmanager
    def database_errors(self, failure_message: str) -> Iterator[None]:
        """Translate driver errors into a DatabaseError with a generic message.

        Args:
            failure_message: Message shown to API clients, e.g.
                "Failed to fetch users".
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("%s: %s", failure_message, e)
            raise DatabaseError(failure_message) from e

    def to_schema(self, model: Any) -> SchemaT:
        return self.schema_class.model_validate(model)

    def _query(self) -> Query:
        return self.db.query(self.model_class)

    def _newest_first(self, query: Query) -> Query:
        return query.order_by(self.model_class.created_at.desc())

    def _get_model(self, entity_id: str) -> Optional[Any]:
        return self._query().filter(self.model_class.id == entity_id).first()

    def find_by_id(self, entity_id: str) -> Optional[SchemaT]:
        """Get an entity by ID.

        Returns:
            The entity, or None if it does not exist.
        """
        with self.database_errors(f"Failed to fetch {self.entity_plural}"):
            model = self._get_model(entity_id)
        return self.to_schema(model) if model else None

    def find_all(self) -> List[SchemaT]:
        """List all entities, newest first."""
        with self.database_errors(f"Failed to fetch {self.entity_plural}"):
            models = self._newest_first(self._query()).all()
        return [self.to_schema(m) for m in models]

    def find_with_pagination(self, page: int = 1, limit: int = 10) -> PaginatedResult[SchemaT]:
        """Get one page of entities, newest first.

        Args:
            page: 1-based page number.
            limit: Page size.

        Returns:
            PaginatedResult with ``total_pages = ceil(total / limit)``.
        """
        offset = (page - 1) * limit
        with self.database_errors(f"Failed to fetch {self.entity_plural}"):
            total = self._query().count()
            models = self._newest_first(self._query()).offset(offset).limit(limit).all()
        return PaginatedResult.build(
            [self.to_schema(m) for m in models], total=total, page=page, limit=limit
        )

    def search(self, query: str) -> List[SchemaT]:
        """Case-insensitive wildcard search over ``search_fields``."""
        pattern = f"%{query}%"
        conditions = [getattr(self.model_class, field).ilike(pattern) for field in self.search_fields]
        with self.database_errors(f"Failed to search {self.entity_plural}"):
            models = self._newest_first(self._query().filter(or_(*conditions))).all()
        return [self.to_schema(m) for m in models]

    def create(self, data: Dict[str, Any]) -> SchemaT:
        """Insert a new entity.

        Args:
            data: Column values keyed by attribute name.

        Returns:
            The created entity.
        """
        now = utc_now()
        model = self.model_class(**data, created_at=now, updated_at=now)
        with self.database_errors(f"Failed to create {self.entity_name}"):
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        return self.to_schema(model)

    def update(self, entity_id: str, data: Dict[str, Any]) -> Optional[SchemaT]:
        """Apply a partial update and refresh ``updated_at``.

        Args:
            entity_id: ID of the entity to update.
            data: Attribute values to change; other attributes are kept.

        Returns:
            The updated entity, or None if it does not exist.
        """
        with self.database_errors(f"Failed to update {self.entity_name}"):
            model = self._get_model(entity_id)
            if model is None:
                return None
            for key, value in data.items():
                setattr(model, key, value)
            model.updated_at = utc_now()
            self.db.commit()
            self.db.refresh(model)
        return self.to_schema(model)

    def delete(self, entity_id: str) -> bool:
        """Hard-delete an entity.

        Returns:
            True if a row was deleted, False if it did not exist.
        """
        with self.database_errors(f"Failed to delete {self.entity_name}"):
            model = self._get_model(entity_id)
            if model is None:
                return False
            self.db.delete(model)
            self.db.commit()
        logger.info("Deleted %s: %s", self.entity_name, entity_id)
        return True
