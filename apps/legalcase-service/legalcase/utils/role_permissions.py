"""
Role-based permission utilities for office users.

Maps each ``UserRole`` to the coarse capabilities presentation layers gate
navigation on. Adding a capability means adding a key to every role here.
"""

from typing import Dict, FrozenSet, Set

from legalcase.db.models.enums import UserRole


PERMISSION_READ = "can_read"
PERMISSION_WRITE = "can_write"
PERMISSION_MANAGE_USERS = "can_manage_users"

ROLE_PERMISSIONS: Dict[UserRole, Dict[str, bool]] = {
    UserRole.ADMIN: {
        PERMISSION_READ: True,
        PERMISSION_WRITE: True,
        PERMISSION_MANAGE_USERS: True,
    },
    UserRole.LAWYER: {
        PERMISSION_READ: True,
        PERMISSION_WRITE: True,
        PERMISSION_MANAGE_USERS: False,
    },
    UserRole.ASSISTANT: {
        PERMISSION_READ: True,
        PERMISSION_WRITE: True,
        PERMISSION_MANAGE_USERS: False,
    },
    UserRole.VIEWER: {
        PERMISSION_READ: True,
        PERMISSION_WRITE: False,
        PERMISSION_MANAGE_USERS: False,
    },
}

ALL_PERMISSIONS: FrozenSet[str] = frozenset({PERMISSION_READ, PERMISSION_WRITE, PERMISSION_MANAGE_USERS})

# Derived role groups
WRITE_ROLES: FrozenSet[UserRole] = frozenset(
    role for role, perms in ROLE_PERMISSIONS.items() if perms[PERMISSION_WRITE]
)
MANAGE_ROLES: FrozenSet[UserRole] = frozenset(
    role for role, perms in ROLE_PERMISSIONS.items() if perms[PERMISSION_MANAGE_USERS]
)


def get_role_permissions(role: UserRole) -> Dict[str, bool]:
    """
    Get the permissions for a given role.

    Raises:
        ValueError: If role is not recognized
    """
    try:
        role = UserRole(role)
    except ValueError:
        raise ValueError(f"Unknown role: {role}. Allowed roles: {[r.value for r in UserRole]}")
    return ROLE_PERMISSIONS[role].copy()


def role_has_permission(role: UserRole, permission: str) -> bool:
    if permission not in ALL_PERMISSIONS:
        raise ValueError(f"Unknown permission '{permission}'. Allowed: {sorted(ALL_PERMISSIONS)}")
    return get_role_permissions(role)[permission]


def get_write_roles() -> Set[UserRole]:
    """Get the set of roles allowed to change case data."""
    return set(WRITE_ROLES)


def get_manage_roles() -> Set[UserRole]:
    """Get the set of roles allowed to manage user accounts."""
    return set(MANAGE_ROLES)
