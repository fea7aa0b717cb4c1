"""
Row-level helpers shared by the per-domain repositories.

Updates and deletes report affected-row counts: 1 when the row existed,
0 when it did not. Callers treat 0 as not-found.
"""
from __future__ import annotations

from typing import Any, Dict, Type

from sqlalchemy.orm import Session

from legalcase.db.models import now_utc


def apply_update(db: Session, model: Type[Any], entity_id: int, changes: Dict[str, Any]) -> int:
    """Overwrite ``changes`` on the row and refresh ``updated_at``."""
    values = dict(changes)
    values["updated_at"] = now_utc()
    count = (
        db.query(model)
        .filter(model.id == entity_id)
        .update(values, synchronize_session="fetch")
    )
    db.commit()
    return count


def delete_instance(db: Session, model: Type[Any], entity_id: int) -> int:
    """Delete through the ORM so relationship cascades apply."""
    instance = db.get(model, entity_id)
    if instance is None:
        return 0
    db.delete(instance)
    db.commit()
    return 1


def like_pattern(term: str) -> str:
    """Substring LIKE pattern with wildcard characters in ``term`` escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
