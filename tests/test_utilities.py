import pytest

import hls_relay.utilities as u


def test_base_path_keeps_trailing_slash():
    assert u.get_base_path("https://a.com/path/index.m3u8?x=1") == "https://a.com/path/"
    assert u.get_base_path("https://a.com/index.m3u8") == "https://a.com/"

def test_resolve_url():
    base = "https://a.com/path/"
    assert u.resolve_url("http://b.com/x.ts", base) == "http://b.com/x.ts"
    assert u.resolve_url("//b.com/x.ts", base) == "https://b.com/x.ts"
    assert u.resolve_url("x.ts", base) == "https://a.com/path/x.ts"
    assert u.resolve_url("/x.ts", base) == "https://a.com/x.ts"

def test_encode_uri_component():
    assert u.encode_uri_component("https://a.com/a b?c=d&e") == "https%3A%2F%2Fa.com%2Fa%20b%3Fc%3Dd%26e"
    assert u.encode_uri_component("-_.!~*'()") == "-_.!~*'()"

@pytest.mark.parametrize("value", [None, "", "not-a-url", "/relative/path.m3u8", "ftp://a.com/x", "http://"])
def test_parse_target_url_rejects(value):
    with pytest.raises(u.InvalidTargetError):
        u.parse_target_url(value)

def test_parse_target_url_accepts_http_and_https():
    assert u.parse_target_url("https://hls.krussdomi.com/a/b.m3u8").host == "hls.krussdomi.com"
    assert u.parse_target_url("http://127.0.0.1:8000/seg.ts").port == 8000

@pytest.mark.parametrize("value, expected", [
    (None, None),
    ("", None),
    ("https", "https"),
    ("https, http", "https"),
    (" relay.example ,internal:8080", "relay.example"),
    (" , http", None),
])
def test_first_forwarded_value(value, expected):
    assert u.first_forwarded_value(value) == expected
