import logging
import re

from . import utilities as u

logger = logging.getLogger(__name__)

LINE_SPLIT = re.compile(r'\r?\n')
URI_ATTRIBUTE = re.compile(r'URI="([^"]+)"')


def _rewrite_uri_attributes(line, proxy_base_url, base_path):

    def replace(match):
        uri = match.group(1)
        if uri.startswith(proxy_base_url):
            return match.group(0)

        try:
            absolute = u.resolve_url(uri, base_path)
        except ValueError as err:
            logger.debug(f"failed to resolve URI attribute {uri}: {err}")
            absolute = uri

        return f'URI="{u.proxied_url(proxy_base_url, absolute)}"'

    return URI_ATTRIBUTE.sub(replace, line)

def _rewrite_media_line(line, proxy_base_url, base_path):
    trimmed = line.strip()
    try:
        absolute = u.resolve_url(trimmed, base_path)
    except ValueError as err:
        logger.debug(f"keeping unresolvable line {line}: {err}")
        return line
    return u.proxied_url(proxy_base_url, absolute)

def rewrite_playlist_urls(playlist_content, proxy_base_url, target_url):
    """Route every url referenced by an HLS playlist back through the proxy.

    Tag lines carrying URI="..." attributes (keys, maps, media renditions) get
    each attribute rewritten in place, bare reference lines (segments and
    variant playlists) are replaced by a proxied url, everything else is kept
    verbatim. Lines already pointing at proxy_base_url are left alone so the
    output can be fed back in unchanged.
    """
    base_path = u.get_base_path(target_url)
    rewritten = []

    for line in LINE_SPLIT.split(playlist_content):
        trimmed = line.strip()

        if 'URI="' in line:
            rewritten.append(_rewrite_uri_attributes(line, proxy_base_url, base_path))

        elif trimmed and not trimmed.startswith('#') and not trimmed.startswith(proxy_base_url):
            rewritten.append(_rewrite_media_line(line, proxy_base_url, base_path))

        else:
            rewritten.append(line)

    return '\n'.join(rewritten)
