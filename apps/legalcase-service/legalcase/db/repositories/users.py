"""
User repository functions.

Implements user CRUD and lookups by username, email, role and name. The
password hash is written here but never returned through read schemas.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.store import store_operation
from legalcase.db.repositories.base import apply_update, delete_instance, like_pattern


@store_operation("create user", unique_fields=("username", "email"))
def create_user(db: Session, user: schemas.UserCreate, *, password_hash: str) -> models.User:
    db_user = models.User(
        username=user.username,
        password_hash=password_hash,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role,
        enabled=user.enabled,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


@store_operation("retrieve user")
def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


@store_operation("retrieve user by username")
def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


@store_operation("retrieve user by email")
def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


@store_operation("retrieve users")
def get_users(db: Session, *, descending: bool = False) -> List[models.User]:
    order = models.User.id.desc() if descending else models.User.id.asc()
    return db.query(models.User).order_by(order).all()


@store_operation("retrieve users by role")
def get_users_by_role(db: Session, role: models.UserRole) -> List[models.User]:
    return db.query(models.User).filter(models.User.role == role).order_by(models.User.id).all()


@store_operation("search users")
def search_users_by_name(db: Session, term: str) -> List[models.User]:
    pattern = like_pattern(term)
    return (
        db.query(models.User)
        .filter(
            or_(
                models.User.first_name.ilike(pattern, escape="\\"),
                models.User.last_name.ilike(pattern, escape="\\"),
            )
        )
        .order_by(models.User.id)
        .all()
    )


@store_operation("update user", unique_fields=("email",))
def update_user(db: Session, user_id: int, user: schemas.UserUpdate) -> int:
    return apply_update(db, models.User, user_id, user.model_dump(exclude_unset=True))


@store_operation("update user password")
def update_user_password(db: Session, user_id: int, password_hash: str) -> int:
    return apply_update(db, models.User, user_id, {"password_hash": password_hash})


@store_operation("delete user")
def delete_user(db: Session, user_id: int) -> int:
    return delete_instance(db, models.User, user_id)
