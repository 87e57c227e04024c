import io
from datetime import datetime

import pytest

from bd_shortcodes.phpdate import format_date
from bd_shortcodes.registry import create_default_registry


class FakeHost:
    """In-memory host that records the queries shortcodes make."""

    def __init__(self):
        self.bloginfo = {"name": "Example Site", "admin_email": "admin@example.com"}
        self.options = {"blogname": "SiteBlogName"}
        self.theme_mods = {}
        self.title = "Hello World"
        self.archive_title = "Category: News"
        self.today = datetime(2024, 1, 5, 9, 30)
        self.nav_calls = []
        self.image_calls = []

    def current_date(self, fmt):
        return format_date(fmt, self.today)

    def get_bloginfo(self, key):
        return self.bloginfo.get(key, "")

    def get_option(self, key):
        return self.options.get(key)

    def get_archives(self, args):
        return f"<li>archives {args}</li>"

    def nav_menu(self, args):
        self.nav_calls.append(dict(args))
        return f"<ul>{args.get('menu')}</ul>"

    def get_theme_mod(self, key):
        return self.theme_mods.get(key)

    def get_attachment_image(self, attachment_id, size, icon, attrs):
        self.image_calls.append((attachment_id, size, icon, dict(attrs)))
        return (
            f'<img data-id="{attachment_id}" data-size="{size}" '
            f'class="{attrs["class"]}" alt="{attrs["alt"]}" />'
        )

    def get_the_title(self):
        return self.title

    def get_the_archive_title(self):
        return self.archive_title


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def registry(host, output):
    return create_default_registry(host, output=output)
