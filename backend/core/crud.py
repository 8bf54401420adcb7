# backend/core/crud.py

"""
Shared data-access layer.

Each module service composes a ``CRUDRepository`` for its model instead of
repeating the same query/add/commit boilerplate. Filters are simple column
equality checks and ordering is by a single column, which covers every
list screen in the back office.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from sqlalchemy.orm import Query, Session

from .database import Base
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class CRUDRepository(Generic[ModelType]):
    """Parameterized CRUD operations for one model"""

    def __init__(self, model: Type[ModelType], db: Session, label: Optional[str] = None):
        self.model = model
        self.db = db
        self.label = label or model.__name__

    def query(self, filters: Optional[Dict[str, Any]] = None) -> Query:
        query = self.db.query(self.model)
        for field, value in (filters or {}).items():
            if value is None:
                continue
            query = query.filter(getattr(self.model, field) == value)
        return query

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[ModelType]:
        query = self.query(filters)
        if order_by:
            column = getattr(self.model, order_by)
            query = query.order_by(column.desc() if descending else column.asc())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return self.query(filters).count()

    def get(self, obj_id: int) -> Optional[ModelType]:
        return self.db.query(self.model).filter(self.model.id == obj_id).first()

    def get_or_404(self, obj_id: int) -> ModelType:
        obj = self.get(obj_id)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")
        return obj

    def create(self, data: Dict[str, Any], commit: bool = True) -> ModelType:
        obj = self.model(**data)
        self.db.add(obj)
        if commit:
            self.db.commit()
            self.db.refresh(obj)
        else:
            self.db.flush()
        logger.info(f"Created {self.label} {obj.id}")
        return obj

    def update(self, obj_id: int, data: Dict[str, Any], commit: bool = True) -> ModelType:
        obj = self.get_or_404(obj_id)
        for key, value in data.items():
            setattr(obj, key, value)
        if commit:
            self.db.commit()
            self.db.refresh(obj)
        logger.info(f"Updated {self.label} {obj_id}")
        return obj

    def delete(self, obj_id: int, commit: bool = True) -> None:
        obj = self.get_or_404(obj_id)
        self.db.delete(obj)
        if commit:
            self.db.commit()
        logger.info(f"Deleted {self.label} {obj_id}")
