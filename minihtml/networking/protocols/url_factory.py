from urllib.parse import urljoin

from ...common.errors import UnsupportedURLError
from .base_url import URL
from .http_url import HTTPURL
from .https_url import HTTPSURL
from .file_url import FileURL
from .about_blank_url import AboutBlankURL


class URLFactory:
    @staticmethod
    def parse(url: str) -> URL:
        url = url.strip()
        if url == "about:blank":
            return AboutBlankURL()

        if "://" not in url:
            raise UnsupportedURLError(f"Missing schema: {url!r}")
        schema, rest = url.split("://", 1)
        schema = schema.lower()

        if schema == "http":
            return HTTPURL(schema, rest)
        elif schema == "https":
            return HTTPSURL(schema, rest)
        elif schema == "file":
            return FileURL(schema, rest)
        else:
            raise UnsupportedURLError(f"Unsupported schema: {schema}")

    @staticmethod
    def resolve(current_url: URL, url: str) -> URL:
        """상대 경로(리다이렉트 Location 등)를 현재 URL 기준 절대 URL 로"""
        if "://" in url:
            return URLFactory.parse(url)
        return URLFactory.parse(urljoin(str(current_url), url))
