"""
API v1 endpoints.
"""

from .health import router as health_router
from .export import router as export_router

__all__ = ["health_router", "export_router"]
