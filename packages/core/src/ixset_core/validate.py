"""Emptiness checks shared by Url and SrcsetConfig."""

from __future__ import annotations

from .errors import DomainError, ParamError, PathError


def domain(d: str) -> None:
    if not d:
        raise DomainError("domain cannot be empty")


def path(p: str) -> None:
    if not p:
        raise PathError("path cannot be empty")


def param_pair(k: str, v: str) -> None:
    if not k:
        raise ParamError("key cannot be empty")
    if not v:
        raise ParamError("value cannot be empty")
