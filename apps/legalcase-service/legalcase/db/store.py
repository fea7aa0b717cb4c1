"""
Store-error translation shared by the repository modules.

Every repository function runs inside ``store_operation``: driver and ORM
failures roll the session back and surface as ``StoreError``, while unique
constraint violations on natural keys surface as ``DuplicateKeyError``.
"""
from __future__ import annotations

import functools
import logging
import re
from typing import Callable, Optional, Sequence, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from legalcase.errors import DuplicateKeyError, StoreError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

_UNIQUE_MARKERS = ("unique", "duplicate")


def conflicting_field(exc: IntegrityError, unique_fields: Sequence[str]) -> Optional[str]:
    """Return the natural-key column a unique violation names, if any.

    SQLite reports ``UNIQUE constraint failed: clients.email``; PostgreSQL
    reports ``Key (email)=(...) already exists``.
    """
    message = str(exc.orig if exc.orig is not None else exc).lower()
    if not any(marker in message for marker in _UNIQUE_MARKERS):
        return None
    for field in unique_fields:
        if re.search(rf"\b{re.escape(field.lower())}\b", message):
            return field
    return None


def store_operation(operation: str, unique_fields: Sequence[str] = ()) -> Callable[[F], F]:
    """Translate store failures raised by the wrapped repository function.

    The wrapped function must take the ``Session`` as its first argument.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(db: Session, *args, **kwargs):
            try:
                return func(db, *args, **kwargs)
            except IntegrityError as e:
                db.rollback()
                field = conflicting_field(e, unique_fields)
                if field is not None:
                    logger.warning("Unique key conflict on %s during %s", field, operation)
                    raise DuplicateKeyError(field) from e
                logger.error("Integrity failure during %s: %s", operation, e.orig)
                raise StoreError(operation, str(e.orig)) from e
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception("Store failure during %s", operation)
                raise StoreError(operation, str(e)) from e

        return wrapper  # type: ignore[return-value]

    return decorator
