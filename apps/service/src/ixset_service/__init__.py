"""
ixset Service - Flask JSON API over ixset_core

This app builds image URLs and srcset attributes for clients that
cannot link the library directly, such as front-end build steps.

Deployment:
    pip install ixset
    flask --app ixset_service.app:create_app run
"""

from .app import create_app
from .config import Config

__all__ = ["create_app", "Config"]
