"""HTTP surface: routers, dependencies and exception handlers."""

from .errors import register_exception_handlers
from .router import api_router

__all__ = ["api_router", "register_exception_handlers"]
