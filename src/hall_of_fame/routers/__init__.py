"""API routers."""

from .persons import router as persons_router

__all__ = [
    "persons_router",
]
