import asyncio
import logging
import aiohttp
from aiohttp import web
import hls_relay.config as config
import hls_relay.utilities as u
from hls_relay.domain_headers import get_domain_headers
from hls_relay.proxy_handler import rewrite_playlist_urls

logger = logging.getLogger(__name__)

EXAMPLE_TARGET = "https://example.com/video.m3u8"


def cors_headers(content_type=None):
    headers = dict(config.CORS_HEADERS)
    if content_type:
        headers["Content-Type"] = content_type
    return headers

def build_upstream_headers(hostname, range_header=None):
    """Defaults, then the host's origin/referer overrides, then the caller's Range."""
    headers = dict(config.DEFAULT_UPSTREAM_HEADERS)
    headers.update(get_domain_headers(hostname))
    if range_header:
        headers["Range"] = range_header
    return headers

def is_playlist(target, content_type):
    return target.path.endswith(".m3u8") or "mpegurl" in (content_type or "").lower()


class WebServer:
    def __init__(self, host=config.HOST, port=config.PORT, upstream_timeout=config.UPSTREAM_TIMEOUT):

        self.host = host
        self.port = port
        self.upstream_timeout = aiohttp.ClientTimeout(total=upstream_timeout)
        self.app = web.Application()

        self.app.router.add_route("*", config.PROXY_PATH, self.handle_proxy)
        self.app.router.add_route("*", "/", self.handle_proxy)

    def start(self):
        logger.info(f"Starting web server at http://{self.host}:{self.port}{config.PROXY_PATH}")
        web.run_app(self.app, host=self.host, port=self.port)

    async def handle_proxy(self, request: web.Request):
        client_ip = request.remote or "unknown"
        logger.info(f"Received request from {client_ip}: {request.method} {request.path_qs}")

        if request.method == "OPTIONS":
            return self.serve_options()

        proxy_base_url = u.get_proxy_base_url(request)
        target_url = request.query.get("url")

        try:
            target = u.parse_target_url(target_url)
        except u.InvalidTargetError as err:
            logger.warning(f"rejecting request: {err}")
            return self.serve_bad_request(str(err), proxy_base_url)

        try:
            return await self.relay(request, target, target_url, proxy_base_url)
        except Exception as err:
            logger.exception(f"Proxy error for {target_url}")
            return self.serve_error(err, target_url)

    async def relay(self, request, target, target_url, proxy_base_url):
        headers = build_upstream_headers(target.host, request.headers.get("Range"))

        logger.info(f"Proxying: {request.method} {target_url}")
        async with aiohttp.ClientSession(timeout=self.upstream_timeout) as session:
            async with session.request(request.method, target_url, headers=headers) as res:
                logger.info(f"response received, status {res.status}")
                content_type = res.headers.get("Content-Type")

                if is_playlist(target, content_type):
                    content = await res.text(errors="replace")
                    return self.serve_playlist(content, proxy_base_url, target_url)

                data = await res.read()
                return self.serve_media_file(res, data)

    def serve_playlist(self, content, proxy_base_url, target_url):
        logger.info(f"rewriting playlist {target_url}")
        playlist = rewrite_playlist_urls(content, proxy_base_url, target_url)

        headers = cors_headers()
        headers["Cache-Control"] = config.PLAYLIST_CACHE_CONTROL
        return web.Response(
            text=playlist,
            content_type=config.PLAYLIST_CONTENT_TYPE,
            headers=headers
        )

    def serve_media_file(self, res, data):
        headers = cors_headers()
        for name in config.FORWARDED_HEADERS:
            value = res.headers.get(name)
            if value:
                headers[name] = value

        # the client library has already decoded the body
        if "Content-Encoding" in res.headers:
            headers.pop("Content-Length", None)

        if res.status >= 400:
            logger.error(f"Upstream error {res.status} for {res.url}")

        return web.Response(status=res.status, body=data, headers=headers)

    def serve_bad_request(self, message, proxy_base_url):
        return web.json_response(
            {
                "error": message,
                "usage": f"Add ?url={EXAMPLE_TARGET}",
                "example": f"{proxy_base_url}?url={EXAMPLE_TARGET}",
            },
            status=400,
            headers=cors_headers()
        )

    def serve_error(self, err, target_url):
        if isinstance(err, asyncio.TimeoutError) and not str(err):
            message = f"Upstream request timed out after {self.upstream_timeout.total:g}s"
        else:
            message = str(err) or err.__class__.__name__

        return web.json_response(
            {
                "error": "Proxy request failed",
                "message": message,
                "target": target_url,
            },
            status=500,
            headers=cors_headers()
        )

    def serve_options(self):
        return web.Response(status=204, headers=cors_headers())


def create_app(argv=None):
    """Application factory for ``python -m aiohttp.web hls_relay.web_server:create_app``."""
    return WebServer().app
