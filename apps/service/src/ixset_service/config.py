"""Configuration management for the ixset service."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ixset_core import Scheme


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")



def _env_scheme(name: str = "IXSET_SCHEME") -> Scheme:
    raw = os.getenv(name, "https").strip().lower()
    try:
        return Scheme(raw)
    except ValueError:
        raise ValueError(f"{name} must be http or https, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Service configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 5001
    default_domain: str | None = None
    scheme: Scheme = Scheme.HTTPS
    ix: bool = False
    debug: bool = False

    @classmethod
    def load(cls) -> Config:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("IXSET_HOST", "127.0.0.1"),
            port=int(os.getenv("IXSET_PORT", "5001")),
            default_domain=os.getenv("IXSET_DEFAULT_DOMAIN") or None,
            scheme=_env_scheme(),
            ix=_env_flag("IXSET_IX"),
            debug=_env_flag("IXSET_DEBUG"),
        )
