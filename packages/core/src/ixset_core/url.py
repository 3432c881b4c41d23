"""
URL value used to build image-delivery URLs.

A URL is made of four parts:

            domain
        ┌──────┴──────┐
https://www.example.com/image/path.png?w=320&h=640
└─┬─┘                  └──────┬─────┘ └────┬────┘
scheme                      path        params

Every builder method validates its input and returns a new Url, so a
Url handed to the srcset engine never changes underneath it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from . import constants, validate
from .errors import JoinError

Param = tuple[str, str]


class Scheme(str, Enum):
    """The scheme a URL is rendered with."""

    HTTPS = "https"
    HTTP = "http"

    def __str__(self) -> str:
        return self.value


class Url:
    """
    Primary structure used to generate image URLs.

    Parameters are kept as an ordered list of (key, value) pairs rather
    than a dict: the query string lists them in the order they were
    added, repeated keys included (WYSIWYG).

    Example:
        >>> Url.new("example.domain.net").param("w", "320").path("test").join()
        'https://example.domain.net/test?w=320'
    """

    __slots__ = ("_scheme", "_domain", "_path", "_params", "_lib", "_token")

    def __init__(
        self,
        domain: str = "",
        *,
        scheme: Scheme = Scheme.HTTPS,
        path: str | None = None,
        params: tuple[Param, ...] = (),
        lib: str = "",
        token: str | None = None,
    ):
        self._scheme = Scheme(scheme)
        self._domain = domain
        self._path = path
        self._params = tuple(params)
        self._lib = lib
        self._token = token

    @classmethod
    def new(cls, domain: str) -> Url:
        """
        Construct a Url for a domain.

        Raises DomainError: If the domain is empty
        """
        validate.domain(domain)
        return cls(domain)

    def _replace(self, **changes) -> Url:
        fields = {
            "domain": self._domain,
            "scheme": self._scheme,
            "path": self._path,
            "params": self._params,
            "lib": self._lib,
            "token": self._token,
        }
        fields.update(changes)
        domain = fields.pop("domain")
        return Url(domain, **fields)

    def domain(self, d: str) -> Url:
        """Set the domain, e.g. "example.domain.net"."""
        validate.domain(d)
        return self._replace(domain=d)

    def path(self, p: str) -> Url:
        """Set the path to the image file, e.g. "image/path.png"."""
        validate.path(p)
        return self._replace(path=p)

    def param(self, k: str, v: str) -> Url:
        """Append a single key-value parameter, e.g. ("w", "320")."""
        validate.param_pair(k, v)
        return self._replace(params=self._params + ((k, v),))

    def params(self, p: Iterable[Param]) -> Url:
        """
        Append key-value parameters in the order given.

        Raises ParamError: If any key or value is empty. No parameter is
        added in that case.
        """
        pairs = tuple((k, v) for k, v in p)
        for k, v in pairs:
            validate.param_pair(k, v)
        return self._replace(params=self._params + pairs)

    def lib(self, s: str) -> Url:
        """
        Set the raw library tag rendered ahead of the query string.

        Any string is accepted; an empty string removes the tag. See
        ix() for the default ixlib value.
        """
        return self._replace(lib=s)

    def token(self, t: str) -> Url:
        """Store a signing token. Tokens are kept but URLs are not signed."""
        return self._replace(token=t)

    def scheme(self, s: Scheme | str) -> Url:
        return self._replace(scheme=Scheme(s))

    def ix(self) -> Url:
        """Opt in to the ixlib diagnostics tag, e.g. "ixlib=python-0.1.0"."""
        return self._replace(lib=constants.ixlib())

    def get_scheme(self) -> Scheme:
        return self._scheme

    def get_domain(self) -> str:
        return self._domain

    def get_path(self) -> str | None:
        return self._path

    def get_params(self) -> tuple[Param, ...]:
        return self._params

    def has_params(self) -> bool:
        return bool(self._params)

    def get_lib(self) -> str:
        return self._lib

    def get_token(self) -> str | None:
        return self._token

    def join(self) -> str:
        """
        Render the URL as {scheme}://{domain}/{path}?{lib}&{query}.

        The "?" and "&" are dropped when the lib tag or the query is
        empty. Nothing is percent-encoded.

        Raises JoinError: If no path has been set
        """
        if self._path is None:
            raise JoinError("cannot join when path is None")

        base = f"{self._scheme.value}://{self._domain}/{self._path}"
        query = self.join_params(self._params)

        if self._lib and query:
            return f"{base}?{self._lib}&{query}"
        if self._lib:
            return f"{base}?{self._lib}"
        if query:
            return f"{base}?{query}"
        return base

    @staticmethod
    def join_params(p: Iterable[Param]) -> str:
        """Join pairs as k0=v0&k1=v1 in order. Empty input gives ""."""
        parts = []
        for k, v in p:
            assert k, "parameter key cannot be empty"
            assert v, "parameter value cannot be empty"
            parts.append(f"{k}={v}")
        return "&".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return (
            self._scheme == other._scheme
            and self._domain == other._domain
            and self._path == other._path
            and self._params == other._params
            and self._lib == other._lib
            and self._token == other._token
        )

    def __hash__(self) -> int:
        return hash((self._scheme, self._domain, self._path, self._params, self._lib, self._token))

    def __repr__(self) -> str:
        return (
            f"Url(domain={self._domain!r}, scheme={self._scheme.value!r}, "
            f"path={self._path!r}, params={self._params!r}, lib={self._lib!r})"
        )
