"""API route handlers."""

from .rankings import router as rankings_router
from .applications import router as applications_router
from .roles import router as roles_router
