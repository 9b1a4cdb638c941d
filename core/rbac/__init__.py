"""
RBAC Module - Role hierarchy, permission inheritance and module visibility.

- roles.py: Immutable role, hierarchy and permission tables
- permissions.py: Resolution and access decisions
"""

from core.rbac.roles import (
    Role,
    WILDCARD,
    SENSITIVE_ROLES,
    RECRUITMENT_ROLES,
    ADMIN_AREA_ROLES,
)
from core.rbac.permissions import (
    MODULES,
    hierarchy_level,
    permissions_for_role,
    has_permission,
    has_role,
    can_manage_role,
    module_access,
    redirect_path_for_role,
)

__all__ = [
    'Role',
    'WILDCARD',
    'SENSITIVE_ROLES',
    'RECRUITMENT_ROLES',
    'ADMIN_AREA_ROLES',
    'MODULES',
    'hierarchy_level',
    'permissions_for_role',
    'has_permission',
    'has_role',
    'can_manage_role',
    'module_access',
    'redirect_path_for_role',
]
