"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from legalcase.domain.repositories.base import BaseRepository
from legalcase.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)

LIKE_ESCAPE = "\\"


def contains_ignoring_case(column, term: str):
    """Case-insensitive substring filter; `%` and `_` in ``term`` match literally."""
    escaped = (
        term.upper()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return func.upper(column).like(f"%{escaped}%", escape=LIKE_ESCAPE)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: int) -> Optional[ModelType]:
        if id is None:
            return None
        return self.db.get(self.model, id)

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        query = self.db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, obj_in: Any) -> ModelType:
        db_obj = self.model(**self._as_dict(obj_in))
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any = None) -> ModelType:
        update_data = self._as_dict(obj_in) if obj_in is not None else {}

        for field in update_data:
            if hasattr(db_obj, field):
                setattr(db_obj, field, update_data[field])

        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: int) -> int:
        obj = self.get_by_id(id)
        if obj is None:
            return 0
        self.db.delete(obj)
        self._commit()
        # Cascades leave the deleted rows in other objects' loaded collections
        self.db.expire_all()
        return 1

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    @staticmethod
    def _as_dict(obj_in: Any) -> dict:
        # Pydantic models contribute only the fields that were explicitly set
        if hasattr(obj_in, "model_dump"):
            return obj_in.model_dump(exclude_unset=True)
        return dict(obj_in)
