"""
Srcset generation.

A srcset attribute is a list of image candidate strings separated by
commas. Each candidate is a URL followed by either a width descriptor
("640w") or a pixel density descriptor ("2x").

Candidates are generated in one of two modes:
- Viewport: one candidate per target width (w=100 ... w=8192)
- Pixel density: one candidate per device pixel ratio (dpr=1 ... dpr=5),
  used when the parameters already fix the rendered size ("w", or
  "ar" together with "h"). Quality drops as dpr rises unless variable
  quality is turned off.

See https://html.spec.whatwg.org/multipage/images.html#srcset-attributes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Sequence

from . import validate
from .constants import SRCSET_DPR_QUALITIES, SRCSET_TARGET_DPR_RATIOS, SRCSET_TARGET_WIDTHS
from .errors import JoinError, ParamError
from .url import Param, Scheme, Url

logger = logging.getLogger(__name__)

SRCSET_SEPARATOR = ",\n"
DPR_LIST_LENGTH = 5


class Action(str, Enum):
    """How the candidates of a srcset vary."""

    ART_DIRECTION = "art_direction"
    PIXEL_DENSITY = "pixel_density"
    VIEWPORT = "viewport"


def infer_action(url: Url) -> Action:
    """
    Pick the srcset mode for a URL's parameters.

    An explicit width, or an aspect ratio with a height, already fixes the
    rendered footprint, so only the pixel density is left to vary. Art
    direction is never inferred.
    """
    keys = {k for k, _ in url.get_params()}
    if "w" in keys or ("ar" in keys and "h" in keys):
        return Action.PIXEL_DENSITY
    return Action.VIEWPORT


def _descriptor(action: Action) -> tuple[str, str]:
    """(descriptor suffix, query key) for an action."""
    if action is Action.VIEWPORT:
        return "w", "w"
    if action is Action.PIXEL_DENSITY:
        return "x", "dpr"
    raise NotImplementedError("art direction srcsets are not implemented")


def candidate(url: Url, value: int | str, action: Action, extra: str = "") -> str:
    """
    Build one image candidate string.

    extra is a raw "&k=v" segment placed before the width or dpr segment,
    e.g. "&q=75" renders "...&q=75&dpr=1 1x".
    """
    descriptor, key = _descriptor(action)
    base = url.join()
    segment = f"{extra}&{key}={value}"
    if not (url.has_params() or url.get_lib()):
        segment = "?" + segment[1:]
    return f"{base}{segment} {value}{descriptor}"


def create_srcset(url: Url, values: Iterable[int], action: Action) -> list[str]:
    return [candidate(url, v, action) for v in values]


def create_variable_quality_set(
    url: Url,
    ratios: Iterable[int],
    action: Action,
    qualities: Iterable[int],
) -> list[str]:
    """One candidate per (ratio, quality) pair; extra ratios or qualities are dropped."""
    return [candidate(url, r, action, f"&q={q}") for r, q in zip(ratios, qualities)]


def _int_list(values: Iterable[int], name: str, length: int | None = None) -> tuple[int, ...]:
    items = tuple(values)
    if not items:
        raise ParamError(f"{name} cannot be empty")
    if length is not None and len(items) != length:
        raise ParamError(f"{name} must have exactly {length} elements, got {len(items)}")
    return items


@dataclass(frozen=True)
class SrcsetConfig:
    """
    Builder for srcset overrides.

    Every setter returns a new config. Unset values fall back to the
    defaults in constants when the srcset is built.

    Example:
        >>> SrcsetConfig().domain("test.imgix.net").path("image.png").targets([640, 320]).srcset_attr()
        'https://test.imgix.net/image.png?w=640 640w,\\nhttps://test.imgix.net/image.png?w=320 320w'
    """

    scheme_: Scheme | None = None
    domain_: str | None = None
    path_: str | None = None
    params_: tuple[Param, ...] = ()
    lib_: str | None = None
    token_: str | None = None
    targets_: tuple[int, ...] | None = None
    ratios_: tuple[int, ...] | None = None
    qualities_: tuple[int, ...] | None = None
    use_variable_quality: bool = True

    def scheme(self, s: Scheme | str) -> SrcsetConfig:
        return replace(self, scheme_=Scheme(s))

    def domain(self, d: str) -> SrcsetConfig:
        validate.domain(d)
        return replace(self, domain_=d)

    def path(self, p: str) -> SrcsetConfig:
        validate.path(p)
        return replace(self, path_=p)

    def params(self, p: Iterable[Param]) -> SrcsetConfig:
        """Replace the parameters; order is kept in every candidate."""
        pairs = tuple((k, v) for k, v in p)
        for k, v in pairs:
            validate.param_pair(k, v)
        return replace(self, params_=pairs)

    def lib(self, s: str) -> SrcsetConfig:
        return replace(self, lib_=s)

    def token(self, t: str) -> SrcsetConfig:
        return replace(self, token_=t)

    def targets(self, targets: Sequence[int]) -> SrcsetConfig:
        """Widths for viewport candidates, used in the order given."""
        return replace(self, targets_=_int_list(targets, "targets"))

    def ratios(self, ratios: Sequence[int]) -> SrcsetConfig:
        return replace(self, ratios_=_int_list(ratios, "ratios", DPR_LIST_LENGTH))

    def qualities(self, qualities: Sequence[int]) -> SrcsetConfig:
        return replace(self, qualities_=_int_list(qualities, "qualities", DPR_LIST_LENGTH))

    def variable_quality(self, state: bool) -> SrcsetConfig:
        return replace(self, use_variable_quality=bool(state))

    def get_targets(self) -> tuple[int, ...]:
        return self.targets_ if self.targets_ is not None else SRCSET_TARGET_WIDTHS

    def get_ratios(self) -> tuple[int, ...]:
        return self.ratios_ if self.ratios_ is not None else SRCSET_TARGET_DPR_RATIOS

    def get_qualities(self) -> tuple[int, ...]:
        return self.qualities_ if self.qualities_ is not None else SRCSET_DPR_QUALITIES

    def uses_variable_quality(self) -> bool:
        return self.use_variable_quality

    def to_url(self) -> Url:
        """
        Materialise the Url every candidate is built from.

        Raises JoinError: If domain or path was never set
        """
        missing = [name for name, value in (("domain", self.domain_), ("path", self.path_)) if value is None]
        if missing:
            raise JoinError(f"cannot build a url without {' and '.join(missing)}")

        url = Url.new(self.domain_).path(self.path_).params(self.params_)
        if self.scheme_ is not None:
            url = url.scheme(self.scheme_)
        if self.lib_ is not None:
            url = url.lib(self.lib_)
        if self.token_ is not None:
            url = url.token(self.token_)
        return url

    def build_srcset_with_action(self) -> tuple[Action, list[str]]:
        """Build the candidates and report which mode produced them."""
        url = self.to_url()
        action = infer_action(url)
        logger.debug("Building %s srcset for %s", action.value, url.get_path())

        if action is Action.VIEWPORT:
            srcset = create_srcset(url, self.get_targets(), action)
        elif action is Action.PIXEL_DENSITY and self.uses_variable_quality():
            srcset = create_variable_quality_set(url, self.get_ratios(), action, self.get_qualities())
        elif action is Action.PIXEL_DENSITY:
            srcset = create_srcset(url, self.get_ratios(), action)
        else:
            raise NotImplementedError("art direction srcsets are not implemented")

        logger.debug("Built %d candidates", len(srcset))
        return action, srcset

    def build_srcset(self) -> list[str]:
        return self.build_srcset_with_action()[1]

    def srcset_attr(self) -> str:
        return SRCSET_SEPARATOR.join(self.build_srcset())


def srcset_attr(config: SrcsetConfig) -> str:
    """Render the srcset attribute value for a config."""
    return config.srcset_attr()


@dataclass(frozen=True)
class SourceSet:
    """A srcset built from a finished Url with the default tables."""

    src: Url
    action: Action
    srcset: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_url(cls, url: Url) -> SourceSet:
        """
        Build candidates for url using the default widths or ratios.

        Unlike SrcsetConfig, pixel density candidates carry no quality
        parameter.
        """
        action = infer_action(url)
        if action is Action.VIEWPORT:
            srcset = create_srcset(url, SRCSET_TARGET_WIDTHS, action)
        elif action is Action.PIXEL_DENSITY:
            srcset = create_srcset(url, SRCSET_TARGET_DPR_RATIOS, action)
        else:
            raise NotImplementedError("art direction srcsets are not implemented")
        return cls(src=url, action=action, srcset=tuple(srcset))

    def attr(self) -> str:
        return SRCSET_SEPARATOR.join(self.srcset)
