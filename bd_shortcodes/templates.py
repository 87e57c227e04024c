"""Jinja2 integration for bd-shortcodes.

Shortcodes are exposed to templates as global functions, so a layout can
write ``{{ site_name() }}`` or ``{{ shortcode("admin-email") }}`` where CMS
content would write ``[site-name]`` or ``[admin-email]``.

Key function:
- install_shortcodes: Add shortcode globals to a Jinja2 environment.

Key class:
- ShortcodeTemplateEngine: Renders template strings and files with shortcodes.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .registry import ShortcodeRegistry

__all__ = ["ShortcodeTemplateEngine", "global_name", "install_shortcodes"]


def global_name(tag: str) -> str:
    """Return the template global name for a tag.

    Examples:
        >>> global_name("archive-title")
        'archive_title'
    """
    return tag.replace("-", "_")


def _bind(registry: ShortcodeRegistry, tag: str) -> Callable[..., Markup]:
    def render(content: str | None = None, **atts: Any) -> Markup:
        return Markup(registry.render(tag, atts, content))

    render.__name__ = global_name(tag)
    return render


def install_shortcodes(env: Environment, registry: ShortcodeRegistry) -> None:
    """Install shortcode globals in a Jinja environment.

    Adds a generic ``shortcode(tag, content=None, **atts)`` function and one
    function per registered tag. Output is marked safe because shortcodes
    return markup.

    Per-tag functions are created for the tags registered at call time.
    Tags registered later are reachable through ``shortcode()`` right away
    and get their own function when this is called again.

    Args:
        env: Jinja2 environment to modify.
        registry: Registry providing the shortcodes.
    """

    def shortcode(tag: str, content: str | None = None, **atts: Any) -> Markup:
        return Markup(registry.render(tag, atts, content))

    env.globals["shortcode"] = shortcode
    for tag in registry.tags():
        env.globals[global_name(tag)] = _bind(registry, tag)


class ShortcodeTemplateEngine:
    """Template rendering engine with shortcodes installed.

    Attributes:
        registry: Registry providing the shortcodes.
        env: Jinja2 environment.
    """

    def __init__(self, registry: ShortcodeRegistry, template_dir: Path | None = None):
        """Initialize the template engine.

        Args:
            registry: Registry providing the shortcodes.
            template_dir: Optional directory for template lookups and
                includes.
        """
        self.registry = registry
        loader = FileSystemLoader([template_dir]) if template_dir else None
        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=True),
            enable_async=False,
        )
        install_shortcodes(self.env, registry)

    def render_string(self, template: str, context: dict[str, Any] | None = None) -> str:
        """Render a template string.

        Args:
            template: Template string to render.
            context: Variables to make available in the template.

        Returns:
            Rendered string.
        """
        tmpl = self.env.from_string(template)
        return tmpl.render(**(context or {}))

    def render_file(self, path: Path, context: dict[str, Any] | None = None) -> str:
        """Render a template file.

        Args:
            path: Path to the template file.
            context: Variables to make available in the template.

        Returns:
            Rendered string.
        """
        return self.render_string(path.read_text(encoding="utf-8"), context)
