import io
from datetime import date, datetime

import pytest

from bd_shortcodes.attributes import MenuAttributes
from bd_shortcodes.protocols import Host
from bd_shortcodes.registry import create_default_registry
from bd_shortcodes.site import SiteHost


@pytest.fixture
def site_data():
    return {
        "name": "My Site",
        "admin_email": "admin@example.com",
        "url": "https://example.com",
        "theme_mods": {"custom_logo": 42},
        "attachments": {
            42: {
                "src": "/uploads/logo.png",
                "width": 200,
                "height": 80,
                "alt": "Logo",
                "sizes": {
                    "thumbnail": {"src": "/uploads/logo-150.png", "width": 150, "height": 60},
                    "icon": "/uploads/logo-32.png",
                },
            }
        },
        "menus": {
            "primary": [
                {"title": "Home", "url": "/"},
                {
                    "title": "Blog",
                    "url": "/blog/",
                    "children": [{"title": "News & Notes", "url": "/blog/news/"}],
                },
            ],
            "Footer Links": [{"title": "Privacy", "url": "/privacy/"}],
        },
        "posts": [
            {"title": "One", "date": date(2024, 1, 5)},
            {"title": "Two", "date": "2024-01-20"},
            {"title": "Three", "date": datetime(2023, 12, 1, 8, 0)},
            {"title": "Broken", "date": "someday"},
        ],
        "current": {"title": "One", "archive_title": "Month: January 2024"},
    }


def _menu_args(**atts):
    return MenuAttributes.from_atts(atts).as_args()


def test_site_host_satisfies_protocol(site_data):
    assert isinstance(SiteHost(site_data), Host)


def test_current_date_uses_clock():
    host = SiteHost({}, clock=lambda tz: datetime(2024, 1, 5))
    assert host.current_date("Y-m-d") == "2024-01-05"


def test_unknown_timezone_falls_back_to_local_time():
    received = []

    def clock(tz):
        received.append(tz)
        return datetime(2024, 1, 5)

    host = SiteHost({"timezone": "Nowhere/Special"}, clock=clock)
    assert host.current_date("m/d/Y") == "01/05/2024"
    assert received == [None]


def test_bloginfo_and_options(site_data):
    host = SiteHost(site_data)
    assert host.get_bloginfo("name") == "My Site"
    assert host.get_bloginfo("admin_email") == "admin@example.com"
    assert host.get_bloginfo("url") == "https://example.com"
    assert host.get_option("blogname") == "My Site"
    assert SiteHost({"name": "A", "blogname": "B"}).get_option("blogname") == "B"


def test_theme_mod_lookup(site_data):
    assert SiteHost(site_data).get_theme_mod("custom_logo") == 42
    assert SiteHost({"custom_logo": {"ID": 3}}).get_theme_mod("custom_logo") == {"ID": 3}
    assert SiteHost({}).get_theme_mod("custom_logo") is None


def test_monthly_archives(site_data):
    html = SiteHost(site_data).get_archives("type=monthly")
    assert html == (
        "\t<li><a href='https://example.com/2024/01/'>January 2024</a></li>\n"
        "\t<li><a href='https://example.com/2023/12/'>December 2023</a></li>\n"
    )


def test_yearly_and_unknown_archives(site_data):
    host = SiteHost(site_data)
    assert host.get_archives("type=yearly").count("<li>") == 2
    assert host.get_archives("type=weekly") == ""


def test_archives_without_site_url():
    host = SiteHost({"posts": [{"date": date(2024, 3, 1)}]})
    assert host.get_archives("type=monthly") == "\t<li><a href='/2024/03/'>March 2024</a></li>\n"


def test_nav_menu_renders_nested_lists(site_data):
    html = SiteHost(site_data).nav_menu(_menu_args(name="primary", container="nav"))
    assert html.startswith(
        '<nav class="menu-primary-container"><ul id="menu-primary" class="menu">'
    )
    assert '<li class="menu-item"><a href="/">Home</a></li>' in html
    assert '<li class="menu-item menu-item-has-children"><a href="/blog/">Blog</a>' in html
    assert '<ul class="sub-menu"><li class="menu-item"><a href="/blog/news/">News &amp; Notes</a></li></ul>' in html
    assert html.endswith("</ul></nav>")


def test_nav_menu_custom_id_and_class(site_data):
    html = SiteHost(site_data).nav_menu(
        _menu_args(menu="footer-links", id="foot", menu_class="links")
    )
    assert html == (
        '<ul id="foot" class="links"><li class="menu-item">'
        '<a href="/privacy/">Privacy</a></li></ul>'
    )


def test_nav_menu_defaults_to_first_menu(site_data):
    html = SiteHost(site_data).nav_menu(_menu_args())
    assert 'id="menu-primary"' in html


def test_nav_menu_ignores_unknown_container(site_data):
    html = SiteHost(site_data).nav_menu(_menu_args(menu="primary", container="section"))
    assert html.startswith("<ul ")


def test_nav_menu_missing(site_data):
    host = SiteHost(site_data)
    assert host.nav_menu(_menu_args(menu="nope")) == ""
    assert SiteHost({}).nav_menu(_menu_args(menu="primary")) == ""


def test_nav_menu_fallback_callback(site_data):
    args = _menu_args(menu="nope")
    args["fallback_cb"] = lambda menu_args: f"missing {menu_args['menu']}"
    assert SiteHost(site_data).nav_menu(args) == "missing nope"


def test_nav_menu_echo(site_data):
    output = io.StringIO()
    host = SiteHost(site_data, output=output)
    assert host.nav_menu(_menu_args(menu="primary", echo=True)) is None
    assert output.getvalue().startswith('<ul id="menu-primary"')
    assert host.nav_menu(_menu_args(menu="primary", echo="false")) is not None


def test_attachment_image(site_data):
    host = SiteHost(site_data)
    assert host.get_attachment_image(42, "full", False, {"class": "", "alt": ""}) == (
        '<img src="/uploads/logo.png" width="200" height="80" '
        'class="attachment-full size-full" alt="Logo" />'
    )


def test_attachment_image_sizes_and_attrs(site_data):
    host = SiteHost(site_data)
    html = host.get_attachment_image("42", "thumbnail", False, {"class": "brand", "alt": 'A "B"'})
    assert html == (
        '<img src="/uploads/logo-150.png" width="150" height="60" '
        'class="brand" alt="A &#34;B&#34;" />'
    )
    html = host.get_attachment_image(42, "icon", False, {})
    assert html == '<img src="/uploads/logo-32.png" class="attachment-icon size-icon" alt="Logo" />'


def test_unknown_attachment(site_data):
    assert SiteHost(site_data).get_attachment_image(7, "full", False, {}) == ""


def test_current_titles(site_data):
    host = SiteHost(site_data)
    assert host.get_the_title() == "One"
    assert host.get_the_archive_title() == "Month: January 2024"
    assert SiteHost({}).get_the_title() is None


def test_shortcodes_against_site_host(site_data):
    registry = create_default_registry(SiteHost(site_data))
    assert registry.render("logo") == (
        '<div class="site-logo"><img src="/uploads/logo.png" width="200" height="80" '
        'class="attachment-full size-full" alt="Logo" /></div>'
    )
    assert registry.render("menu", {"name": "Footer Links"}).startswith(
        '<ul id="menu-footer-links" class="menu">'
    )
    assert "January 2024" in registry.render("archives")
    assert registry.render("site-name") == "My Site"


def test_archives_skip_and_log_non_date_values(caplog):
    host = SiteHost({"posts": [{"date": 2024}, {"date": date(2024, 3, 1)}, {"title": "No date"}]})
    with caplog.at_level("WARNING", logger="bd_shortcodes.site"):
        html = host.get_archives("type=monthly")
    assert html == "\t<li><a href='/2024/03/'>March 2024</a></li>\n"
    assert "non-date value 2024" in caplog.text
    assert len(caplog.records) == 1


def test_menus_and_attachments_must_be_mappings(caplog):
    host = SiteHost(
        {
            "name": "Listy",
            "menus": [{"title": "Home", "url": "/"}],
            "attachments": [{"src": "/logo.png"}],
            "theme_mods": {"custom_logo": 1},
        }
    )
    with caplog.at_level("WARNING", logger="bd_shortcodes.site"):
        assert host.nav_menu(_menu_args(name="primary")) == ""
        assert host.nav_menu(_menu_args()) == ""
        assert host.get_attachment_image(1, "full", False, {}) == ""
    assert "Ignoring menus" in caplog.text
    assert "Ignoring attachments" in caplog.text

    registry = create_default_registry(host)
    assert registry.render("menu") == ""
    assert registry.render("logo") == '<div class="site-logo"></div>'
