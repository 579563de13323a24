import gzip
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from minihtml.profiling import Tracer

PAGE = b'<html><body><ul id="items"><li>a</li><li>b</li></ul></body></html>'


class PageHandler(BaseHTTPRequestHandler):
    # /redirect-elsewhere 의 Location (테스트에서 지정)
    redirect_target = "about:blank"

    def do_GET(self):
        if self.path == "/":
            self._send(200, PAGE)
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/loop":
            self.send_response(302)
            self.send_header("Location", "/loop")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/gzip":
            self._send(200, gzip.compress(PAGE), {"Content-Encoding": "gzip"})
        elif self.path == "/chunked":
            self.send_response(200)
            self.send_header("Transfer-Encoding", "chunked")
            self.end_headers()
            for start in range(0, len(PAGE), 16):
                chunk = PAGE[start:start + 16]
                self.wfile.write(b"%x\r\n%s\r\n" % (len(chunk), chunk))
            self.wfile.write(b"0\r\n\r\n")
        elif self.path == "/redirect-elsewhere":
            self.send_response(302)
            self.send_header("Location", self.redirect_target)
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/bad-gzip":
            # 올바른 gzip 헤더 뒤에 deflate 가 아닌 바이트
            body = b"\x1f\x8b\x08\x00\x00\x00\x00\x00\x00\xff" + b"\xff" * 16
            self._send(200, body, {"Content-Encoding": "gzip"})
        elif self.path == "/host":
            self._send(200, self.headers["Host"].encode("ascii"))
        elif self.path == "/latin":
            self._send(200, b"<p title=\"caf\xe9\"></p>")
        else:
            self._send(404, b"<h1>not found</h1>")

    def _send(self, status, body, headers=None):
        self.send_response(status)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(body)))
        for name, value in (headers or {}).items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def http_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), PageHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def tracer(tmp_path):
    tracer = Tracer.get()
    tracer.enable(str(tmp_path / "trace.json"))
    yield tracer
    tracer.enabled = False
    tracer.clear()
