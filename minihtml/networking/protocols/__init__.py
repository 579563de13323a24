"""URL protocol implementations"""
from .base_url import URL, Response
from .http_base import HTTPBase
from .http_url import HTTPURL
from .https_url import HTTPSURL
from .file_url import FileURL
from .about_blank_url import AboutBlankURL
from .url_factory import URLFactory

__all__ = [
    'URL',
    'Response',
    'HTTPBase',
    'HTTPURL',
    'HTTPSURL',
    'FileURL',
    'AboutBlankURL',
    'URLFactory',
]
