"""Routers package - API endpoint routers."""
from .health import router as health_router
from .methods import router as methods_router
from .assessments import router as assessments_router

__all__ = [
    "health_router",
    "methods_router",
    "assessments_router",
]
