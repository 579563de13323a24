"""about:blank URL implementation"""
from .base_url import URL, Response


class AboutBlankURL(URL):
    def __init__(self, schema="about", raw_url="blank"):
        super().__init__(schema, raw_url)

    def _parse_host_and_path(self, raw):
        self.host = None
        self.path = raw

    def __str__(self):
        return "about:blank"

    def request(self, timeout=None):
        return Response(200, {}, b"")
