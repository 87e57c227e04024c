from bd_shortcodes.utils import join_root_url, slugify


def test_slugify():
    assert slugify("Primary Menu") == "primary-menu"
    assert slugify("  Footer / Links!  ") == "footer-links"
    assert slugify("main") == "main"


def test_join_root_url():
    assert join_root_url("https://example.com", "/2024/01/") == "https://example.com/2024/01/"
    assert join_root_url("https://example.com/", "2024/") == "https://example.com/2024/"
    assert join_root_url("", "/2024/") == "/2024/"


def test_join_root_url_keeps_absolute_urls():
    assert join_root_url("https://example.com", "https://cdn.test/a.png") == "https://cdn.test/a.png"
    assert join_root_url("https://example.com", "//cdn.test/a.png") == "//cdn.test/a.png"
