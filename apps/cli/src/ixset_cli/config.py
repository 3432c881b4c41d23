"""Configuration for the ixset CLI."""

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
class CliConfig:
    """CLI defaults, overridable per command."""

    scheme: Scheme = Scheme.HTTPS
    ix: bool = False

    @classmethod
    def load(cls) -> CliConfig:
        """Load from environment variables."""
        return cls(
            scheme=_env_scheme(),
            ix=_env_flag("IXSET_IX"),
        )
