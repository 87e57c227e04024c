"""Command-line interface for bd-shortcodes.

This module defines the CLI commands using the Click framework. Site data is
read from ``shortcodes.yaml`` in the current directory unless ``--config``
points elsewhere.

Commands:
- list: Show the registered shortcode tags.
- render: Render a single shortcode.
- template: Render a Jinja2 template file with shortcodes available.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .config import ConfigError, load_config, load_config_file
from .registry import ShortcodeRegistry, UnknownShortcodeError, create_default_registry
from .site import SiteHost
from .templates import ShortcodeTemplateEngine


def _parse_value(raw: str) -> str | bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return raw


def _parse_attributes(pairs: tuple[str, ...]) -> dict[str, str | bool]:
    """Turn ``key=value`` arguments into an attribute mapping."""
    atts: dict[str, str | bool] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"Expected KEY=VALUE, got '{pair}'", param_hint="ATTRIBUTES"
            )
        atts[key.strip()] = _parse_value(value)
    return atts


def _build_registry(config_path: Path | None) -> ShortcodeRegistry:
    try:
        if config_path is not None:
            data = load_config_file(config_path)
        else:
            data = load_config(Path.cwd())
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    return create_default_registry(SiteHost(data))


@click.group()
@click.version_option(version=__version__, prog_name="bd-shortcodes")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    required=False,
    help="Site configuration file (defaults to ./shortcodes.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool):
    """Render content shortcodes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.obj = config_path


@cli.command(name="list")
@click.pass_obj
def list_tags(config_path: Path | None):
    """Show the registered shortcode tags."""
    registry = _build_registry(config_path)
    for tag in registry.tags():
        click.echo(tag)


@cli.command()
@click.argument("tag")
@click.argument("attributes", nargs=-1)
@click.option("--content", default=None, help="Content enclosed by the tag")
@click.pass_obj
def render(
    config_path: Path | None,
    tag: str,
    attributes: tuple[str, ...],
    content: str | None,
):
    """Render a single shortcode, e.g. `render date format=Y-m-d`."""
    atts = _parse_attributes(attributes)
    registry = _build_registry(config_path)
    try:
        output = registry.render(tag, atts, content)
    except UnknownShortcodeError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(output)


@cli.command()
@click.argument(
    "template_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.pass_obj
def template(config_path: Path | None, template_file: Path):
    """Render a Jinja2 template file with shortcodes available."""
    registry = _build_registry(config_path)
    engine = ShortcodeTemplateEngine(registry, template_dir=template_file.parent)
    try:
        output = engine.render_file(template_file)
    except UnknownShortcodeError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(output, nl=False)


def main():
    """Entry point for the CLI application."""
    cli()
