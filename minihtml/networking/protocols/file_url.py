"""file:// URL implementation"""
from ...common.errors import FetchError
from .base_url import URL, Response


class FileURL(URL):
    def _parse_host_and_path(self, raw):
        # FileURL의 경우 raw_url이 바로 파일 경로
        self.host = None
        self.path = raw

    def __str__(self):
        return f"{self.schema}://{self.path}"

    def request(self, timeout=None):
        try:
            with open(self.path, "rb") as f:
                body = f.read()
        except OSError as e:
            raise FetchError(f"cannot read {self.path}: {e}") from e
        return Response(200, {}, body)
