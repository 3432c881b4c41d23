"""
CLI for building image URLs and srcset attributes.

Usage:
    ixset url test.imgix.net image.png -p w=320 -p fit=crop
    ixset srcset test.imgix.net image.png -p w=640 --qualities 100,90,80,70,60
    ixset srcset test.imgix.net image.png --targets 1024,512,256
    ixset widths --max-width 4000
"""

from __future__ import annotations

import logging
import sys

import click

from ixset_core import (
    Error,
    Scheme,
    SrcsetConfig,
    Url,
    ixlib,
    lib_version,
    target_widths,
)
from ixset_core.constants import IMAGE_MAX_WIDTH, IMAGE_MIN_WIDTH, SRCSET_WIDTH_TOLERANCE

from .config import CliConfig

logger = logging.getLogger(__name__)


def _parse_params(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[tuple[str, str]]:
    """Turn repeated k=v options into ordered pairs."""
    pairs = []
    for raw in values:
        if "=" not in raw:
            raise click.BadParameter(f"expected key=value, got {raw!r}")
        k, v = raw.split("=", 1)
        pairs.append((k, v))
    return pairs


def _parse_int_list(ctx: click.Context, param: click.Parameter, value: str | None) -> list[int] | None:
    if value is None:
        return None
    try:
        return [int(item) for item in value.split(",") if item.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma separated integers, got {value!r}")


def _common_options(func):
    """Options shared by the url and srcset commands."""
    decorators = [
        click.argument("domain"),
        click.argument("path"),
        click.option("-p", "--param", "params", multiple=True, callback=_parse_params,
                     help="Query parameter as key=value, repeatable, order kept"),
        click.option("--scheme", type=click.Choice([s.value for s in Scheme]), default=None,
                     help="URL scheme (default from IXSET_SCHEME)"),
        click.option("--lib", default=None, help="Raw lib tag placed ahead of the query"),
        click.option("--ix", is_flag=True, help="Add the ixlib diagnostics tag (default from IXSET_IX)"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _resolve_lib(config: CliConfig, lib: str | None, ix: bool) -> str | None:
    if lib is not None:
        return lib
    if ix or config.ix:
        return ixlib()
    return None


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Build image URLs and srcset attributes."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    try:
        ctx.obj = CliConfig.load()
    except ValueError as e:
        raise click.UsageError(str(e))


@cli.command("url")
@_common_options
@click.option("--token", default=None, help="Signing token (stored, not applied)")
@click.pass_obj
def url_cmd(config: CliConfig, domain: str, path: str, params: list[tuple[str, str]],
            scheme: str | None, lib: str | None, ix: bool, token: str | None) -> None:
    """Print the URL for DOMAIN and PATH."""
    try:
        url = Url.new(domain).path(path).params(params).scheme(scheme or config.scheme)
        resolved_lib = _resolve_lib(config, lib, ix)
        if resolved_lib is not None:
            url = url.lib(resolved_lib)
        if token is not None:
            url = url.token(token)
        click.echo(url.join())
    except Error as e:
        raise click.ClickException(str(e)) from e


@cli.command("srcset")
@_common_options
@click.option("--targets", callback=_parse_int_list, default=None,
              help="Comma separated widths for viewport candidates")
@click.option("--ratios", callback=_parse_int_list, default=None,
              help="Five comma separated device pixel ratios")
@click.option("--qualities", callback=_parse_int_list, default=None,
              help="Five comma separated qualities, one per ratio")
@click.option("--variable-quality/--no-variable-quality", default=True,
              help="Lower the quality as the pixel ratio rises")
@click.pass_obj
def srcset_cmd(config: CliConfig, domain: str, path: str, params: list[tuple[str, str]],
               scheme: str | None, lib: str | None, ix: bool,
               targets: list[int] | None, ratios: list[int] | None,
               qualities: list[int] | None, variable_quality: bool) -> None:
    """Print the srcset attribute for DOMAIN and PATH."""
    try:
        srcset = (
            SrcsetConfig()
            .scheme(scheme or config.scheme)
            .domain(domain)
            .path(path)
            .params(params)
            .variable_quality(variable_quality)
        )
        resolved_lib = _resolve_lib(config, lib, ix)
        if resolved_lib is not None:
            srcset = srcset.lib(resolved_lib)
        if targets is not None:
            srcset = srcset.targets(targets)
        if ratios is not None:
            srcset = srcset.ratios(ratios)
        if qualities is not None:
            srcset = srcset.qualities(qualities)
        click.echo(srcset.srcset_attr())
    except Error as e:
        raise click.ClickException(str(e)) from e


@cli.command("widths")
@click.option("--min-width", default=IMAGE_MIN_WIDTH, type=int, show_default=True)
@click.option("--max-width", default=IMAGE_MAX_WIDTH, type=int, show_default=True)
@click.option("--tolerance", default=SRCSET_WIDTH_TOLERANCE, type=float, show_default=True,
              help="Maximum size difference between neighbouring widths, in percent")
def widths_cmd(min_width: int, max_width: int, tolerance: float) -> None:
    """Print the derived target widths, one per line."""
    try:
        widths = target_widths(min_width, max_width, tolerance)
    except ValueError as e:
        raise click.BadParameter(str(e))
    logger.debug("Derived %d widths", len(widths))
    for w in widths:
        click.echo(w)


@cli.command("version")
def version_cmd() -> None:
    """Print the library version."""
    click.echo(lib_version())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
