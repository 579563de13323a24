"""
parse / fetch 구간을 Chrome Tracing 형식으로 기록

    Tracer.get().enable("trace.json")   # 기본은 꺼져 있음
    root = parse(html)                   # parse_html 구간이 기록된다
    Tracer.get().finish()                # enable 했다면 종료 시 자동 호출

결과 파일은 chrome://tracing 에서 열 수 있습니다.
"""
import atexit
import json
import logging
import threading
import time
from functools import wraps
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Tracer:
    """프로세스 전역 이벤트 수집기"""

    _instance: Optional["Tracer"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self.enabled = False
        self.output_file = "trace.json"
        self.events: List[Dict] = []
        self.thread_names: Dict[int, str] = {}
        self.lock = threading.Lock()
        self.origin = time.perf_counter()
        self._exit_hook = False

    @classmethod
    def get(cls) -> "Tracer":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
        return cls._instance

    def enable(self, output_file: Optional[str] = None):
        if output_file:
            self.output_file = output_file
        self.clear()
        self.enabled = True
        if not self._exit_hook:
            atexit.register(self.finish)
            self._exit_hook = True

    def clear(self):
        with self.lock:
            self.events.clear()
            self.origin = time.perf_counter()

    def set_thread_name(self, name: str):
        self.thread_names[threading.get_ident()] = name

    def _record(self, phase: str, name: str, category: str):
        if not self.enabled:
            return
        event = {
            "name": name,
            "cat": category,
            "ph": phase,  # 'B' = begin, 'E' = end
            "ts": (time.perf_counter() - self.origin) * 1_000_000,
            "pid": 1,
            "tid": threading.get_ident(),
        }
        with self.lock:
            self.events.append(event)

    def begin(self, name: str, category: str = "function"):
        self._record("B", name, category)

    def end(self, name: str, category: str = "function"):
        self._record("E", name, category)

    def finish(self):
        """수집을 멈추고 JSON 으로 저장"""
        if not self.enabled:
            return
        self.enabled = False

        with self.lock:
            names = [
                {"name": "thread_name", "ph": "M", "pid": 1, "tid": tid, "args": {"name": name}}
                for tid, name in self.thread_names.items()
            ]
            with open(self.output_file, "w") as f:
                json.dump({"traceEvents": names + self.events, "displayTimeUnit": "ms"}, f)

        logger.info("trace saved to %s (open it in chrome://tracing)", self.output_file)


class MeasureTime:
    """with 블록 또는 데코레이터로 한 구간을 B/E 이벤트 쌍으로 기록"""

    def __init__(self, name: str, category: str = "function"):
        self.name = name
        self.category = category
        self.tracer = Tracer.get()

    def __enter__(self):
        self.tracer.begin(self.name, self.category)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracer.end(self.name, self.category)
        return False

    @staticmethod
    def trace(name: str, category: str = "function") -> Callable:
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                with MeasureTime(name, category):
                    return func(*args, **kwargs)
            return wrapper
        return decorator


def set_thread_name(name: str):
    Tracer.get().set_thread_name(name)
