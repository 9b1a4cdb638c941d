#!/usr/bin/env python3
"""
Role endpoints - permissions, module visibility and role management rules.
"""

from fastapi import APIRouter, Depends, Query

from core.rbac import (
    hierarchy_level,
    permissions_for_role,
    module_access,
    can_manage_role,
    redirect_path_for_role,
)
from ..dependencies import get_current_role
from ..models.responses import (
    RolePermissionsResponse,
    ModuleAccessResponse,
    ManageRoleResponse,
    SessionAccessResponse,
)

router = APIRouter(prefix="/api", tags=["roles"])


@router.get("/roles/can-manage", response_model=ManageRoleResponse)
def check_can_manage(
    acting: str = Query(..., description="Role performing the change"),
    target: str = Query(..., description="Role being created or managed")
):
    """
    Whether ``acting`` may create or manage users holding ``target``.

    Only admins manage hr, manager, recruiter and admin accounts; otherwise the
    acting role must rank strictly higher.
    """
    return ManageRoleResponse(
        acting_role=acting,
        target_role=target,
        allowed=can_manage_role(acting, target)
    )


@router.get("/roles/{role}/permissions", response_model=RolePermissionsResponse)
def get_role_permissions(role: str):
    """Effective permissions of a role, inherited ones included."""
    return RolePermissionsResponse(
        role=role,
        hierarchy_level=hierarchy_level(role),
        permissions=sorted(permissions_for_role(role))
    )


@router.get("/roles/{role}/modules", response_model=ModuleAccessResponse)
def get_role_modules(role: str):
    """Which application modules a role can see."""
    return ModuleAccessResponse(role=role, modules=module_access(role))


@router.get("/session/access", response_model=SessionAccessResponse)
def get_session_access(role: str = Depends(get_current_role)):
    """Permissions, visible modules and landing page for the caller's role."""
    return SessionAccessResponse(
        role=role,
        hierarchy_level=hierarchy_level(role),
        permissions=sorted(permissions_for_role(role)),
        modules=module_access(role),
        redirect_path=redirect_path_for_role(role)
    )
