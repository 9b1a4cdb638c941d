#!/usr/bin/env python3
"""
Role tables - roles, hierarchy levels and base permissions.

All tables are read-only views; nothing at runtime may add a role or
grant a permission.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping


class Role(str, Enum):
    """Capability tiers a user account can hold."""
    CANDIDATE = "candidate"
    EMPLOYEE = "employee"
    RECRUITER = "recruiter"
    MANAGER = "manager"
    HR = "hr"
    ADMIN = "admin"


WILDCARD = "*"

ROLE_HIERARCHY: Mapping[str, int] = MappingProxyType({
    Role.CANDIDATE.value: 1,
    Role.EMPLOYEE.value: 2,
    Role.RECRUITER.value: 3,
    Role.MANAGER.value: 4,
    Role.HR.value: 5,
    Role.ADMIN.value: 10,
})

BASE_PERMISSIONS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    Role.ADMIN.value: frozenset({WILDCARD}),
    Role.HR.value: frozenset({
        "view_candidates",
        "manage_employees",
        "view_applications",
        "manage_contracts",
        "manage_payroll",
        "manage_leaves",
    }),
    Role.RECRUITER.value: frozenset({
        "view_candidates",
        "manage_jobs",
        "view_applications",
        "score_candidates",
        "conduct_interviews",
    }),
    Role.MANAGER.value: frozenset({
        "view_team",
        "approve_leaves",
        "view_reports",
        "manage_team_performance",
    }),
    Role.EMPLOYEE.value: frozenset({
        "view_profile",
        "submit_requests",
        "view_payslips",
    }),
    Role.CANDIDATE.value: frozenset({
        "view_jobs",
        "submit_applications",
        "view_application_status",
    }),
})

# Permissions containing these fragments stay with the role that owns them
NON_INHERITABLE_FRAGMENTS = ("manage_system_", "create_sensitive_", "backup_restore_")

# Only an admin may create or reassign these
SENSITIVE_ROLES: FrozenSet[str] = frozenset({
    Role.HR.value,
    Role.MANAGER.value,
    Role.RECRUITER.value,
    Role.ADMIN.value,
})

# Coarse role groups used by route guards
RECRUITMENT_ROLES = (Role.ADMIN.value, Role.HR.value, Role.RECRUITER.value)
ADMIN_AREA_ROLES = (Role.ADMIN.value, Role.HR.value, Role.RECRUITER.value, Role.MANAGER.value)

LANDING_PATHS: Mapping[str, str] = MappingProxyType({
    Role.ADMIN.value: "/admin",
    Role.HR.value: "/hr",
    Role.RECRUITER.value: "/admin/jobs",
    Role.MANAGER.value: "/admin/dashboard",
    Role.EMPLOYEE.value: "/employee",
})
DEFAULT_LANDING_PATH = "/dashboard"
