"""Utilities for recording and logging calls to demonstration routines."""

import functools
import logging
import time
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class CallRecorder:
    """Thread-safe in-memory record of traced calls."""

    def __init__(self) -> None:
        self._durations: Dict[str, List[float]] = {}
        self._lock = Lock()

    def record(self, key: str, duration: float) -> None:
        with self._lock:
            self._durations.setdefault(key, []).append(duration)

    def count(self, key: str) -> int:
        with self._lock:
            return len(self._durations.get(key, []))

    def last_duration(self, key: str) -> Optional[float]:
        with self._lock:
            durations = self._durations.get(key)
            return durations[-1] if durations else None

    def snapshot(self) -> Dict[str, int]:
        """Call counts per key."""
        with self._lock:
            return {key: len(durations) for key, durations in self._durations.items()}

    def clear(self) -> None:
        with self._lock:
            self._durations.clear()


call_recorder = CallRecorder()


def traced(label: Optional[str] = None) -> Callable:
    """Log and record every call to the decorated callable.

    Args:
        label: Key the calls are recorded under. Defaults to the callable's
            module and qualified name.
    """

    def decorator(func: Callable) -> Callable:
        key = label or f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug(f"Running '{key}'")
            started = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - started
                call_recorder.record(key, elapsed)
                logger.debug(f"Finished '{key}' in {elapsed * 1000:.2f} ms")

        wrapper.trace_key = key
        return wrapper

    return decorator
