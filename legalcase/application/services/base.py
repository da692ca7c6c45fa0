"""Helpers shared by the domain services."""

from contextlib import contextmanager
from typing import Any, Iterator, Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from legalcase.core.exceptions import BusinessRuleViolationException, StorageError

logger = structlog.get_logger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


@contextmanager
def storage_errors(message: str, **context: Any) -> Iterator[None]:
    """Re-raise any store failure inside the block as ``StorageError(message)``."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception(message, **context)
        raise StorageError(message, details={"cause": type(exc).__name__}) from exc


def build_payload(schema: Type[SchemaType], **data: Any) -> SchemaType:
    """Validate service arguments into ``schema``.

    Arguments passed as ``None`` for optional fields still count as set, so
    partial-update schemas should be built with only the fields to change.
    """
    try:
        return schema(**data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "input"
        raise BusinessRuleViolationException(
            f"Invalid value for {field}: {first.get('msg', 'invalid')}",
            details={"field": field},
        ) from exc
