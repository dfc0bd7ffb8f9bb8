"""
Cooperative cancellation for SDK calls.

A CancelToken is created by the caller and passed to any SDK function.
Cancelling it makes an in-flight call return early with RequestCancelled.
"""

import threading
import time
from typing import Callable, List, Optional

from etherpad_mcp.sdk.errors import RequestCancelled


class CancelToken:
    """
    Thread-safe cancellation signal.

    Args:
        timeout: Optional deadline in seconds. When it elapses the token
            cancels itself.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: List[Callable[[], None]] = []
        self._timer: Optional[threading.Timer] = None
        self._deadline: Optional[float] = None

        if timeout is not None:
            self._deadline = time.monotonic() + timeout
            self._timer = threading.Timer(timeout, self.cancel)
            self._timer.daemon = True
            self._timer.start()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Cancel the token. Idempotent; callbacks run exactly once."""
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []

        if self._timer is not None:
            self._timer.cancel()

        for callback in callbacks:
            callback()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or timeout. Returns True if cancelled."""
        return self._event.wait(timeout)

    def add_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register a callback to run on cancellation.

        Runs immediately if the token is already cancelled.

        Returns:
            A function that unregisters the callback.
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return lambda: self._remove_callback(callback)

        callback()
        return lambda: None

    def raise_if_cancelled(self, endpoint: str = "request") -> None:
        if self._event.is_set():
            raise RequestCancelled(endpoint)

    def _remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)
