"""
Networking package

Subpackages:
- protocols: URL protocol implementations (HTTP, HTTPS, file, about:blank)
"""
from .protocols import (
    URL,
    Response,
    HTTPBase,
    HTTPURL,
    HTTPSURL,
    FileURL,
    AboutBlankURL,
    URLFactory,
)

from .fetch import (
    fetch,
    fetch_async,
    decode_body,
    parse_from_url,
    parse_from_url_async,
    get_network_executor,
    shutdown_network_executor,
)

__all__ = [
    # Protocols
    'URL',
    'Response',
    'HTTPBase',
    'HTTPURL',
    'HTTPSURL',
    'FileURL',
    'AboutBlankURL',
    'URLFactory',
    # Fetch
    'fetch',
    'fetch_async',
    'decode_body',
    'parse_from_url',
    'parse_from_url_async',
    'get_network_executor',
    'shutdown_network_executor',
]
