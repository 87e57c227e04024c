"""BD shortcodes.

This package provides a handful of content shortcodes: short tags embedded in
page content that render dynamic text such as the current date, the site name,
the admin email, a monthly archive list, a navigation menu, the site logo and
the current post or archive title.

Every shortcode is a stateless renderer function. Data comes from a host
platform through the Host protocol, so the same renderers work against a real
CMS adapter or the YAML-backed SiteHost shipped here.

Architecture:
- registry: ShortcodeRegistry maps tag names to renderers.
- shortcodes: The eight renderer functions.
- attributes: Attribute defaults and alias resolution.
- hooks: Named filter chains applied to renderer output.
- templates: Jinja2 binding that exposes shortcodes to templates.
"""

__all__ = ["__version__"]
__version__ = "2.2.0"
