import gzip
import logging
import socket
import zlib
from functools import lru_cache

from fake_useragent import UserAgent

from ...common.constants import DEFAULT_TIMEOUT
from ...common.errors import FetchError
from .base_url import URL, Response

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _user_agents() -> UserAgent:
    return UserAgent()


class HTTPBase(URL):
    """HTTP 와 HTTPS 공통 요청/응답 처리. 요청마다 새 연결을 열고 Connection: close"""

    def __init__(self, raw_schema, raw_url, user_agent=None):
        super().__init__(raw_schema, raw_url)
        self.user_agent = user_agent or _user_agents().random

    def _open_socket(self, timeout):
        s = socket.socket(
            family=socket.AF_INET,
            type=socket.SOCK_STREAM,
            proto=socket.IPPROTO_TCP,
        )
        s.settimeout(timeout)
        return s

    def _wrap_socket(self, s):
        """HTTPS 에서 TLS 로 감싼다"""
        return s

    def request(self, timeout: float = DEFAULT_TIMEOUT) -> Response:
        s = self._open_socket(timeout)
        try:
            s = self._wrap_socket(s)
            s.connect((self.host, self.port))
            self._send_http_request(s)
            return self._read_http_response(s)
        except (OSError, ValueError) as e:
            raise FetchError(f"request to {self} failed: {e}") from e
        finally:
            s.close()

    def host_header(self) -> str:
        if self.port == self.default_port:
            return self.host
        return f"{self.host}:{self.port}"

    def _send_http_request(self, s):
        req = (
            f"GET {self.path} HTTP/1.1\r\n"
            f"Host: {self.host_header()}\r\n"
            f"User-Agent: {self.user_agent}\r\n"
            f"Connection: close\r\n"
            f"Accept-Encoding: gzip\r\n"
            f"\r\n"
        )
        s.sendall(req.encode("utf-8"))

    def _read_http_response(self, s: socket.socket) -> Response:
        response = s.makefile("rb")
        try:
            status_line = response.readline().decode("iso-8859-1")
            status_parts = status_line.strip().split(" ", 2)
            if len(status_parts) < 2 or not status_parts[1].isdigit():
                raise FetchError(f"Invalid HTTP status line: {status_line!r}")
            status = int(status_parts[1])

            headers = {}
            while True:
                line = response.readline().decode("iso-8859-1")
                if line in ("\r\n", "\n", ""):
                    break
                if ":" not in line:
                    continue
                h, v = line.split(":", 1)
                headers[h.casefold()] = v.strip()

            if headers.get("transfer-encoding", "").lower() == "chunked":
                body = self._read_chunked(response)
            elif "content-length" in headers:
                body = response.read(int(headers["content-length"]))
            else:
                body = response.read()
        finally:
            response.close()

        if headers.get("content-encoding", "").lower() == "gzip":
            try:
                body = gzip.decompress(body)
            except (OSError, EOFError, zlib.error) as e:
                raise FetchError(f"corrupt gzip body from {self}: {e}") from e

        logger.debug("%s -> %d (%d bytes)", self, status, len(body))
        return Response(status, headers, body)

    def _read_chunked(self, response) -> bytes:
        body = b""
        while True:
            chunk_size_line = response.readline().decode("iso-8859-1").strip()
            if not chunk_size_line:
                break
            # 청크 확장(;name=value)은 무시
            chunk_size = int(chunk_size_line.split(";", 1)[0], 16)

            if chunk_size == 0:
                response.readline()  # 마지막 \r\n 읽기
                break

            body += response.read(chunk_size)
            response.readline()  # \r\n 읽기
        return body
