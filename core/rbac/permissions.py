#!/usr/bin/env python3
"""
Permission resolution and access decisions.

Every function takes a role (Role member or plain string) and returns a
value; a refusal is ``False``, never an exception. The HTTP layer decides
how to turn a refusal into a response.

Two authorization policies coexist on purpose:
- has_permission: ALL-of over a permission list (fine-grained guards)
- has_role: membership of the role in an allowed-role list (coarse guards)
"""

from typing import Any, Dict, FrozenSet, Iterable, Tuple
import logging

from core.rbac.roles import (
    Role,
    WILDCARD,
    ROLE_HIERARCHY,
    BASE_PERMISSIONS,
    NON_INHERITABLE_FRAGMENTS,
    SENSITIVE_ROLES,
    LANDING_PATHS,
    DEFAULT_LANDING_PATH,
)
from core.utils import normalize_role

logger = logging.getLogger(__name__)

# module -> (substring keywords, exact permission names)
MODULE_KEYWORDS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    'candidates': (("candidate", "view_applications"), ()),
    'jobs': (("jobs",), ("manage_jobs",)),
    'applications': (("applications",), ()),
    'interviews': (("interview",), ()),
    'onboarding': (("onboarding",), ()),
    'employees': (("manage_employees",), ()),
    'contracts': (("contracts",), ()),
    'payroll': (("payroll",), ()),
    'reports': (("reports", "analytics"), ()),
    'users': ((), ("manage_users",)),
    'settings': (("settings",), ()),
    'hr_management': (("manage_employees", "hr"), ()),
}

MODULES = ('dashboard',) + tuple(MODULE_KEYWORDS)


def hierarchy_level(role: Any) -> int:
    """Hierarchy level of a role; 0 for unknown roles."""
    return ROLE_HIERARCHY.get(normalize_role(role), 0)


def _is_inheritable(permission: str) -> bool:
    return not any(fragment in permission for fragment in NON_INHERITABLE_FRAGMENTS)


def permissions_for_role(role: Any) -> FrozenSet[str]:
    """
    Resolve the effective permission set of a role.

    Admin keeps its own base set (the wildcard). Any other role gets its base
    set plus the inheritable permissions of every lower, non-admin role.
    Unknown roles get nothing.
    """
    key = normalize_role(role)
    if key not in BASE_PERMISSIONS:
        return frozenset()

    own = BASE_PERMISSIONS[key]
    if key == Role.ADMIN.value:
        return own

    level = ROLE_HIERARCHY[key]
    inherited = set()
    for other, other_level in ROLE_HIERARCHY.items():
        if other == Role.ADMIN.value or other_level >= level:
            continue
        inherited.update(p for p in BASE_PERMISSIONS.get(other, ()) if _is_inheritable(p))

    return frozenset(own | inherited)


def has_permission(role: Any, required_permissions: Iterable[str]) -> bool:
    """True when the role holds the wildcard or every required permission."""
    permissions = permissions_for_role(role)
    if WILDCARD in permissions:
        return True
    return set(required_permissions) <= permissions


def has_role(role: Any, allowed_roles: Iterable[Any]) -> bool:
    """True when the role is one of ``allowed_roles``."""
    key = normalize_role(role)
    return key is not None and key in {normalize_role(r) for r in allowed_roles}


def can_manage_role(acting_role: Any, target_role: Any) -> bool:
    """
    Whether ``acting_role`` may create or manage accounts of ``target_role``.

    Sensitive roles are admin-only. Otherwise the actor must sit strictly
    above the target in the hierarchy.
    """
    acting = normalize_role(acting_role)
    target = normalize_role(target_role)

    if target in SENSITIVE_ROLES and acting != Role.ADMIN.value:
        return False
    return hierarchy_level(acting) > hierarchy_level(target)


def _grants_module(permissions: FrozenSet[str], module: str) -> bool:
    substrings, exact = MODULE_KEYWORDS[module]
    return any(
        permission in exact or any(keyword in permission for keyword in substrings)
        for permission in permissions
    )


def module_access(role: Any) -> Dict[str, bool]:
    """Visibility flag per application module. The dashboard is always visible."""
    permissions = permissions_for_role(role)
    full_access = WILDCARD in permissions

    access = {'dashboard': True}
    for module in MODULE_KEYWORDS:
        access[module] = full_access or _grants_module(permissions, module)
    return access


def redirect_path_for_role(role: Any) -> str:
    """Landing page after login."""
    return LANDING_PATHS.get(normalize_role(role), DEFAULT_LANDING_PATH)
