"""
Fetch-and-parse convenience

네트워크 I/O 는 여기에만 있고 파서는 동기 함수로 남는다.
비동기 버전은 공유 ThreadPoolExecutor 에서 블로킹 fetch 를 돌린다.
"""
import asyncio
import atexit
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional, Union

from ..common.constants import DEFAULT_ENCODING, DEFAULT_TIMEOUT, MAX_NETWORK_WORKERS, MAX_REDIRECTS
from ..common.errors import FetchError, HTTPStatusError
from ..dom.element import Element
from ..parsing import ParserOptions, parse
from ..profiling import MeasureTime, set_thread_name
from .protocols import URL, URLFactory

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = (301, 302, 303, 307, 308)
# 원격 응답이 로컬 파일 등으로 보내지 못하도록
REDIRECT_SCHEMAS = ("http", "https")

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_network_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=MAX_NETWORK_WORKERS,
                thread_name_prefix="NetworkWorker",
                initializer=set_thread_name,
                initargs=("NetworkWorker",),
            )
        return _executor


def shutdown_network_executor():
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=False)
            _executor = None


atexit.register(shutdown_network_executor)


@MeasureTime.trace("fetch", "network")
def fetch(url: Union[str, URL], timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """URL 의 본문 바이트. 2xx 가 아니면 HTTPStatusError"""
    if isinstance(url, str):
        url = URLFactory.parse(url)

    for _ in range(MAX_REDIRECTS + 1):
        logger.info("fetching %s", url)
        response = url.request(timeout=timeout)

        if response.status in REDIRECT_STATUSES and "location" in response.headers:
            target = URLFactory.resolve(url, response.headers["location"])
            if target.schema not in REDIRECT_SCHEMAS:
                raise FetchError(f"refusing redirect from {url} to {target}")
            url = target
            continue
        if not response.ok:
            raise HTTPStatusError(str(url), response.status)
        return response.body

    raise FetchError(f"too many redirects (>{MAX_REDIRECTS}) ending at {url}")


async def fetch_async(url: Union[str, URL], timeout: float = DEFAULT_TIMEOUT) -> bytes:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_network_executor(), partial(fetch, url, timeout))


def decode_body(body: bytes) -> str:
    # 잘못된 바이트는 U+FFFD 로 대체
    return body.decode(DEFAULT_ENCODING, errors="replace")


def parse_from_url(
    url: Union[str, URL],
    options: Optional[ParserOptions] = None,
    timeout: float = DEFAULT_TIMEOUT,
    **overrides,
) -> Element:
    return parse(decode_body(fetch(url, timeout)), options, **overrides)


async def parse_from_url_async(
    url: Union[str, URL],
    options: Optional[ParserOptions] = None,
    timeout: float = DEFAULT_TIMEOUT,
    **overrides,
) -> Element:
    body = await fetch_async(url, timeout)
    return parse(decode_body(body), options, **overrides)
