from fastapi import Request

from src.domain.services.negotiation import accepts_html, is_known_image_proxy_bot


def make_request(**headers: str) -> Request:
    raw = [(k.replace("_", "-").lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_accepts_html_browser_accept():
    assert accepts_html(make_request(accept="text/html,application/xhtml+xml")) is True


def test_accepts_html_with_quality_params():
    req = make_request(accept="image/webp,*/*;q=0.8, TEXT/HTML;q=0.9")
    assert accepts_html(req) is True


def test_accepts_html_false_for_json_and_missing():
    assert accepts_html(make_request(accept="application/json")) is False
    assert accepts_html(make_request()) is False


def test_accepts_html_ignores_wildcards_and_refused_types():
    assert accepts_html(make_request(accept="*/*")) is False
    assert accepts_html(make_request(accept="text/html;q=0, image/svg+xml")) is False


def test_accepts_html_malformed_header_is_false():
    assert accepts_html(make_request(accept=",;,")) is False


def test_image_proxy_bot_detection():
    camo = make_request(user_agent="GitHub-Camo (https://github.com/atmos/camo)")
    assert is_known_image_proxy_bot(camo) is True


def test_image_proxy_bot_false_for_browsers_and_missing():
    browser = make_request(user_agent="Mozilla/5.0 (X11; Linux x86_64) Gecko/20100101 Firefox/131.0")
    assert is_known_image_proxy_bot(browser) is False
    assert is_known_image_proxy_bot(make_request()) is False
