from brackets.images import is_absolute_url, resolve_image_url

BASE = "https://api.example.com"


def test_relative_path_joins_base_url() -> None:
    assert resolve_image_url("team_logo.png", BASE) == "https://api.example.com/team_logo.png"


def test_single_leading_slash_is_dropped() -> None:
    assert resolve_image_url("/team_logo.png", BASE) == "https://api.example.com/team_logo.png"


def test_absolute_url_is_returned_unchanged() -> None:
    url = "https://cdn.example.com/x.png"

    assert resolve_image_url(url, BASE) == url
    assert resolve_image_url(url, "http://127.0.0.1:3000") == url
    assert resolve_image_url("HTTP://CDN.example.com/x.png", BASE) == "HTTP://CDN.example.com/x.png"


def test_resolution_is_idempotent() -> None:
    once = resolve_image_url("/uploads/a.png", BASE)

    assert once is not None
    assert resolve_image_url(once, BASE) == once


def test_trailing_slash_on_base_and_missing_path() -> None:
    assert resolve_image_url("a.png", BASE + "/") == "https://api.example.com/a.png"
    assert resolve_image_url(None, BASE) is None


def test_scheme_detection_requires_http_prefix() -> None:
    assert is_absolute_url("https://x")
    assert not is_absolute_url("httpfoo/x.png")
    assert not is_absolute_url("ftp://x/y.png")
