"""
Request body parsing for the ixset service.

Bodies are JSON objects:
    {
        "domain": "test.imgix.net",      # optional if IXSET_DEFAULT_DOMAIN is set
        "path": "image.png",
        "params": [["w", "640"], ["fit", "crop"]],  # or {"w": "640", "fit": "crop"}
        "scheme": "https",
        "lib": "ixlib=custom-1.0", "ix": false,
        "token": "...",
        # srcset only
        "targets": [1024, 512], "ratios": [1, 2, 3, 4, 5],
        "qualities": [75, 50, 35, 23, 20], "variable_quality": true
    }
"""

from __future__ import annotations

from typing import Any

from ixset_core import Scheme, SrcsetConfig, Url, ixlib

from .config import Config


class PayloadError(ValueError):
    """Raised when a request body is malformed."""
    pass


def _require_str(data: dict[str, Any], key: str, default: str | None = None) -> str | None:
    value = data.get(key, default)
    if value is not None and not isinstance(value, str):
        raise PayloadError(f"'{key}' must be a string")
    return value


def _parse_bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise PayloadError(f"'{key}' must be a boolean")
    return value


def _scalar(value: Any, key: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise PayloadError(f"parameter '{key}' must be a string or number")
    return str(value)


def parse_params(raw: Any) -> list[tuple[str, str]]:
    """Accept [[k, v], ...] or {k: v, ...}; order is preserved either way."""
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [(str(k), _scalar(v, str(k))) for k, v in raw.items()]
    if isinstance(raw, list):
        pairs = []
        for item in raw:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise PayloadError("each parameter must be a [key, value] pair")
            k, v = item
            if not isinstance(k, str):
                raise PayloadError("parameter keys must be strings")
            pairs.append((k, _scalar(v, k)))
        return pairs
    raise PayloadError("'params' must be a list of pairs or an object")


def parse_int_list(data: dict[str, Any], key: str) -> list[int] | None:
    raw = data.get(key)
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw):
        raise PayloadError(f"'{key}' must be a list of integers")
    return raw


def _parse_scheme(data: dict[str, Any], config: Config) -> Scheme:
    raw = _require_str(data, "scheme")
    if raw is None:
        return config.scheme
    try:
        return Scheme(raw.lower())
    except ValueError:
        raise PayloadError(f"unsupported scheme: {raw}")


def _parse_lib(data: dict[str, Any], config: Config) -> str | None:
    lib = _require_str(data, "lib")
    if lib is not None:
        return lib
    if _parse_bool(data, "ix", config.ix):
        return ixlib()
    return None


def _body(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise PayloadError("request body must be a JSON object")
    return data


def build_url(data: Any, config: Config) -> Url:
    """
    Build a Url from a request body.

    Raises PayloadError: If the body is malformed
    Raises ixset_core.Error: If a component is empty
    """
    data = _body(data)
    domain = _require_str(data, "domain", config.default_domain)
    path = _require_str(data, "path")
    if domain is None:
        raise PayloadError("'domain' is required")
    if path is None:
        raise PayloadError("'path' is required")

    url = Url.new(domain).path(path).params(parse_params(data.get("params")))
    url = url.scheme(_parse_scheme(data, config))
    lib = _parse_lib(data, config)
    if lib is not None:
        url = url.lib(lib)
    token = _require_str(data, "token")
    if token is not None:
        url = url.token(token)
    return url


def build_srcset_config(data: Any, config: Config) -> SrcsetConfig:
    """
    Build a SrcsetConfig from a request body.

    Domain and path are left unset when missing so that to_url()
    reports them.
    """
    data = _body(data)
    srcset = SrcsetConfig().scheme(_parse_scheme(data, config))

    domain = _require_str(data, "domain", config.default_domain)
    if domain is not None:
        srcset = srcset.domain(domain)
    path = _require_str(data, "path")
    if path is not None:
        srcset = srcset.path(path)

    srcset = srcset.params(parse_params(data.get("params")))
    lib = _parse_lib(data, config)
    if lib is not None:
        srcset = srcset.lib(lib)
    token = _require_str(data, "token")
    if token is not None:
        srcset = srcset.token(token)

    targets = parse_int_list(data, "targets")
    if targets is not None:
        srcset = srcset.targets(targets)
    ratios = parse_int_list(data, "ratios")
    if ratios is not None:
        srcset = srcset.ratios(ratios)
    qualities = parse_int_list(data, "qualities")
    if qualities is not None:
        srcset = srcset.qualities(qualities)

    return srcset.variable_quality(_parse_bool(data, "variable_quality", True))
