import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)


def _site(url):
    return MappingProxyType({"Origin": url, "Referer": url + "/"})

# checked in order, first host substring match wins
DOMAIN_HEADERS = (
    ("kwikie.ru", _site("https://kwik.si")),
    ("padorupado.ru", _site("https://kwik.si")),
    ("krussdomi.com", _site("https://hls.krussdomi.com")),
    ("megacloud.blog", _site("https://megacloud.blog")),
    ("megacloud.club", _site("https://megacloud.club")),
    ("vmeas.cloud", _site("https://vidmoly.to")),
    ("embed.su", _site("https://embed.su")),
    ("akamaized.net", _site("https://bl.krussdomi.com")),
    ("premilkyway.com", _site("https://uqloads.xyz")),
    ("anih1.top", _site("https://ee.anih1.top")),
    ("xyk3.top", _site("https://ee.anih1.top")),
)


def get_domain_headers(hostname, rules=DOMAIN_HEADERS):
    """Return the Origin/Referer overrides for hostname, or {} if no rule applies."""
    if not hostname:
        return {}

    for domain, headers in rules:
        if domain in hostname:
            logger.debug(f"using {domain} headers for {hostname}")
            return dict(headers)

    return {}
