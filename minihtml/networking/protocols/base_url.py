"""Base URL class"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict

from ...common.constants import DEFAULT_TIMEOUT
from ...common.errors import UnsupportedURLError


@dataclass
class Response:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class URL(ABC):
    default_port = None

    def __init__(self, raw_schema, raw_url):
        self.schema = raw_schema
        self.raw_url = raw_url
        self.host = None
        self.path = "/"
        self.port = self.default_port

        self._parse_host_and_path(raw_url)

    def __str__(self):
        if self.port is None or self.port == self.default_port:
            return f"{self.schema}://{self.host}{self.path}"
        return f"{self.schema}://{self.host}:{self.port}{self.path}"

    def _parse_host_and_path(self, raw):
        # fragment 는 서버로 보내지 않는다
        raw = raw.split("#", 1)[0]
        if "/" not in raw:
            raw += "/"

        self.host, path = raw.split("/", 1)
        self.path = "/" + path

        if ":" in self.host:
            self.host, port = self.host.split(":", 1)
            try:
                self.port = int(port)
            except ValueError:
                raise UnsupportedURLError(f"invalid port in {self.schema}://{raw}") from None

        if not self.host:
            raise UnsupportedURLError(f"missing host in {self.schema}://{raw}")

    def origin(self):
        if self.port is None:
            return f"{self.schema}://{self.host}"
        return f"{self.schema}://{self.host}:{self.port}"

    @abstractmethod
    def request(self, timeout: float = DEFAULT_TIMEOUT) -> Response:
        pass
