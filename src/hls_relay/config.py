import os
from types import MappingProxyType

APP = "hls_relay"

HOST = os.getenv("HLS_RELAY_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))

# keep below the hosting platform's own execution limit
UPSTREAM_TIMEOUT = float(os.getenv("HLS_RELAY_TIMEOUT", 25))

LOG_DIR = os.getenv("HLS_RELAY_LOG_DIR") or os.path.join(
    os.getenv("LOCALAPPDATA") or os.path.expanduser("~/.local/state"), APP)

PROXY_PATH = "/api/proxy"
PLAYLIST_CONTENT_TYPE = "application/vnd.apple.mpegurl"
PLAYLIST_CACHE_CONTROL = "public, max-age=300"

CORS_HEADERS = MappingProxyType({
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Range, Authorization",
    "Access-Control-Expose-Headers": "Content-Length, Content-Range",
})

DEFAULT_UPSTREAM_HEADERS = MappingProxyType({
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9",
    # bodies are relayed byte for byte, so ask for them undecoded
    "Accept-Encoding": "identity",
})

# upstream response headers copied onto forwarded (non playlist) responses
FORWARDED_HEADERS = ("Content-Type", "Content-Length", "Content-Range", "Accept-Ranges")
