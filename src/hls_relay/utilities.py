from urllib.parse import quote, urljoin
from yarl import URL

# same unreserved set as javascript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"
ALLOWED_SCHEMES = ("http", "https")


class InvalidTargetError(ValueError):
    pass


def encode_uri_component(value):
    return quote(value, safe=URI_COMPONENT_SAFE)

def get_base_path(target_url):
    """Everything up to and including the final '/' of the target url."""
    return target_url[:target_url.rfind('/') + 1]

def resolve_url(ref, base_path):
    """Make a playlist reference absolute.

    Absolute http(s) urls are returned as is, scheme relative ones
    (//host/path) are upgraded to https and anything else is joined
    onto base_path. Raises ValueError when the reference can't be joined.
    """
    if ref.startswith('http'):
        return ref
    if ref.startswith('//'):
        return 'https:' + ref
    return urljoin(base_path, ref)

def proxied_url(proxy_base_url, absolute_url):
    return f"{proxy_base_url}?url={encode_uri_component(absolute_url)}"

def parse_target_url(target_url):
    if not target_url:
        raise InvalidTargetError("Missing url parameter")

    try:
        url = URL(target_url)
    except (ValueError, TypeError) as err:
        raise InvalidTargetError(f"Invalid url parameter: {err}") from err

    if not url.is_absolute() or url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise InvalidTargetError(f"Invalid url parameter: {target_url}")

    return url

def first_forwarded_value(value):
    """First hop of a comma separated X-Forwarded-* header, or None."""
    if not value:
        return None
    return value.split(',', 1)[0].strip() or None

def get_proxy_base_url(request):
    """Url of this endpoint as seen by the caller, used as the rewrite prefix."""
    scheme = first_forwarded_value(request.headers.get('X-Forwarded-Proto')) or request.scheme
    host = first_forwarded_value(request.headers.get('X-Forwarded-Host')) or request.host
    return f"{scheme}://{host}{request.path}"
