"""Reusable FastAPI dependencies."""

from .points import get_container, get_point_service

__all__ = [
    "get_container",
    "get_point_service",
]
