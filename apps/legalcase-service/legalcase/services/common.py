"""
Helpers shared by the domain services.
"""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from legalcase.errors import InvalidArgumentError, NotFoundError

SchemaT = TypeVar("SchemaT", bound=BaseModel)
EntityT = TypeVar("EntityT")


def _describe(error: ValidationError, label: str = "value") -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or label}: {err['msg']}" for err in error.errors()
    )


def build_payload(schema_cls: Type[SchemaT], **fields: Any) -> SchemaT:
    """Validate service arguments into a schema; bad input is an InvalidArgumentError."""
    try:
        return schema_cls(**fields)
    except ValidationError as e:
        raise InvalidArgumentError(_describe(e)) from e


def validate_value(adapter: TypeAdapter, value: Any, label: str) -> Any:
    """Validate a single service argument the same way ``build_payload`` does."""
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidArgumentError(_describe(e, label)) from e


def resolve_changes(schema_cls: Type[SchemaT], changes: Optional[SchemaT], fields: dict) -> SchemaT:
    """Accept either a prepared update schema or keyword fields, not both."""
    if changes is not None and fields:
        raise InvalidArgumentError("Pass either an update schema or keyword fields, not both")
    if changes is not None:
        return changes
    return build_payload(schema_cls, **fields)


def require(entity: Optional[EntityT], label: str, key: Any) -> EntityT:
    if entity is None:
        raise NotFoundError(label, key)
    return entity


def require_search_term(term: Optional[str]) -> str:
    """An empty term matches everything; a missing one is an InvalidArgumentError."""
    if term is None:
        raise InvalidArgumentError("Search term is required")
    return term
