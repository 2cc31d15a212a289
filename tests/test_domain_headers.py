from hls_relay.domain_headers import DOMAIN_HEADERS, get_domain_headers


def test_substring_match_returns_rule_headers():
    assert get_domain_headers("hls.krussdomi.com") == {
        "Origin": "https://hls.krussdomi.com",
        "Referer": "https://hls.krussdomi.com/",
    }

def test_unknown_host_gets_no_overrides():
    assert get_domain_headers("unknown.example.com") == {}

def test_empty_hostname():
    assert get_domain_headers("") == {}
    assert get_domain_headers(None) == {}

def test_first_matching_rule_wins():
    rules = (
        ("cdn.example", {"Origin": "https://first"}),
        ("example", {"Origin": "https://second"}),
    )
    assert get_domain_headers("video.cdn.example.org", rules) == {"Origin": "https://first"}
    assert get_domain_headers("www.example.org", rules) == {"Origin": "https://second"}

def test_akamai_hosts_use_krussdomi_referer():
    headers = get_domain_headers("vod-123.akamaized.net")
    assert headers["Referer"] == "https://bl.krussdomi.com/"

def test_returned_headers_are_a_copy():
    headers = get_domain_headers("embed.su")
    headers["Origin"] = "https://evil"
    assert get_domain_headers("embed.su")["Origin"] == "https://embed.su"

def test_every_rule_sets_origin_and_referer():
    for domain, headers in DOMAIN_HEADERS:
        assert set(headers) == {"Origin", "Referer"}, domain
        assert headers["Referer"] == headers["Origin"] + "/"
