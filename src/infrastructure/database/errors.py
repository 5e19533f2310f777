from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import StorageError

logger = structlog.get_logger(__name__)


@contextmanager
def storage_errors(operation: str, **context: Any) -> Iterator[None]:
    """Log a driver failure and re-raise it as StorageError without its internals."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("database_operation_failed", operation=operation, error=str(exc), **context)
        raise StorageError(f"Failed to {operation}.") from exc
