"""
Command-line front end for ixset_core.

It prints image URLs, srcset attributes and the default width table
for use in templates and build scripts.

Deployment:
    pip install ixset
    ixset srcset test.imgix.net image.png -p w=640
"""

from .cli import cli, main
from .config import CliConfig

__all__ = ["cli", "main", "CliConfig"]
