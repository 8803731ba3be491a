"""
Transaction helpers.

Wrap service operations so multi-statement writes are all-or-nothing and
driver errors surface as DatabaseError.

Dependencies: sqlalchemy, backend.core.exceptions, backend.observability
System role: Unit-of-work boundary for service operations
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.core.exceptions import DatabaseError
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


@asynccontextmanager
async def transaction(db: AsyncSession, operation: str) -> AsyncIterator[AsyncSession]:
    """
    Run a block of writes as one transaction.

    Commits when the block exits normally. Any exception rolls back every
    statement issued in the block; SQLAlchemy errors are re-raised as
    DatabaseError, domain errors propagate unchanged.

    Args:
        db: Async database session
        operation: Operation name for logs and error context

    Yields:
        AsyncSession: The same session

    Raises:
        DatabaseError: If any statement or the commit fails
    """
    try:
        yield db
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        log_exception_with_context(logger, f"{operation} failed, rolled back", e, operation=operation)
        raise DatabaseError(f"Database operation failed: {operation}", operation=operation) from e
    except Exception:
        await db.rollback()
        raise


@asynccontextmanager
async def database_errors(operation: str) -> AsyncIterator[None]:
    """
    Translate SQLAlchemy errors raised by read-only work into DatabaseError.

    Args:
        operation: Operation name for logs and error context

    Raises:
        DatabaseError: If a query fails
    """
    try:
        yield
    except SQLAlchemyError as e:
        log_exception_with_context(logger, f"{operation} failed", e, operation=operation)
        raise DatabaseError(f"Database operation failed: {operation}", operation=operation) from e
