"""Service HTTP routes."""

from .srcset import srcset_bp
from .urls import urls_bp

__all__ = ["srcset_bp", "urls_bp"]
