"""
Etherpad-Lite HTTP Client.

Handles URL composition, API key injection, transport, cancellation and
response decoding. Every operation of the API goes through
EtherpadClient.make_request(); the per-operation functions live in the
sibling modules (sdk.pads, sdk.groups, etc.).
"""

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

import requests

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.errors import (
    EtherpadDecodeError,
    EtherpadError,
    EtherpadURLError,
    RequestCancelled,
)
from etherpad_mcp.sdk.types import (
    API_KEY_PARAM,
    CURRENT_VERSION,
    DEFAULT_BASE_URL,
    ReturnCode,
    describe_code,
)

logger = logging.getLogger(__name__)

# Lower bound for a transport timeout derived from a nearly expired deadline
MIN_DEADLINE_TIMEOUT = 0.001


@dataclass
class Response:
    """Decoded Etherpad response envelope."""
    code: int
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code == ReturnCode.OK

    @property
    def status(self) -> str:
        return describe_code(self.code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "status": self.status,
            "message": self.message,
            "data": self.data,
        }

    @classmethod
    def from_json(cls, body: Any, raw: str = "") -> "Response":
        """
        Build a Response from a decoded JSON value.

        Raises:
            EtherpadDecodeError: If body is not a {code, message, data} object
        """
        if not isinstance(body, dict):
            raise EtherpadDecodeError(
                f"Expected a JSON object, got {type(body).__name__}", raw
            )

        missing = [key for key in ("code", "message", "data") if key not in body]
        if missing:
            raise EtherpadDecodeError(f"Response is missing fields: {missing}", raw)

        code = body["code"]
        message = body["message"]
        data = body["data"]

        if not isinstance(code, int) or isinstance(code, bool):
            raise EtherpadDecodeError(f"Invalid code field: {code!r}", raw)
        if not isinstance(message, str):
            raise EtherpadDecodeError(f"Invalid message field: {message!r}", raw)
        # Etherpad sends "data": null alongside most errors
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise EtherpadDecodeError(f"Invalid data field: {data!r}", raw)

        return cls(code=code, message=message, data=data)


def to_text(value: Any) -> str:
    """Convert a parameter value to the text sent on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EtherpadClient:
    """
    Etherpad-Lite HTTP API transport.

    Holds the endpoint configuration (base URL, API version, fixed
    parameters, timeout, error policy) and performs the requests.

    Args:
        api_key: The Etherpad API key (contents of APIKEY.txt)
        base_url: URL of the API, e.g. "http://pad.example.com/api"
        api_version: API version segment of every request URL
        timeout: Client timeout in seconds, None for no timeout
        raise_etherpad_errors: Raise EtherpadError for responses with a
            non-zero code instead of returning them
        base_params: Extra parameters sent with every request
        session: requests.Session to use (a new one by default)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = CURRENT_VERSION,
        timeout: Optional[float] = None,
        raise_etherpad_errors: bool = False,
        base_params: Optional[Dict[str, Any]] = None,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ValueError("Missing API key")

        self._lock = threading.Lock()
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._timeout = timeout
        self._raise_etherpad_errors = raise_etherpad_errors

        self._base_params: Dict[str, Any] = dict(base_params or {})
        self._base_params[API_KEY_PARAM] = api_key

        self._session = session or requests.Session()

    def __repr__(self) -> str:
        return f"EtherpadClient(base_url={self.base_url!r}, api_version={self.api_version!r})"

    def __enter__(self) -> "EtherpadClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        with self._lock:
            return self._base_url

    @property
    def api_version(self) -> str:
        with self._lock:
            return self._api_version

    @property
    def timeout(self) -> Optional[float]:
        with self._lock:
            return self._timeout

    @property
    def raise_etherpad_errors(self) -> bool:
        with self._lock:
            return self._raise_etherpad_errors

    @property
    def base_params(self) -> Dict[str, Any]:
        """Copy of the parameters sent with every request."""
        with self._lock:
            return dict(self._base_params)

    def configure(
        self,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        api_key: Optional[str] = None,
        raise_etherpad_errors: Optional[bool] = None,
    ) -> None:
        """
        Change the client configuration.

        Arguments left as None are not changed. Requests already in flight
        keep the configuration they started with.
        """
        with self._lock:
            if base_url:
                self._base_url = base_url.rstrip("/")
            if api_version:
                self._api_version = api_version
            if api_key:
                self._base_params[API_KEY_PARAM] = api_key
            if raise_etherpad_errors is not None:
                self._raise_etherpad_errors = raise_etherpad_errors

    def set_timeout(self, timeout: Optional[float]) -> None:
        """Set the client timeout in seconds (None disables it)."""
        with self._lock:
            self._timeout = timeout

    def build_url(self, endpoint: str) -> str:
        """Return the request URL for an operation, without the query string."""
        with self._lock:
            base_url, api_version = self._base_url, self._api_version
        return _compose_url(base_url, api_version, endpoint)

    def make_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Response:
        """
        Call an API operation.

        Args:
            endpoint: Operation name (e.g. "createPad")
            params: Per-call parameters; None values are not sent
            cancel: Optional CancelToken aborting the call

        Returns:
            The decoded Response envelope

        Raises:
            EtherpadURLError: If the base URL is malformed
            RequestCancelled: If cancel fired before the call completed
            requests.RequestException: On transport failure
            EtherpadDecodeError: If the body is not a valid envelope
            EtherpadError: If raise_etherpad_errors is set and code != 0
        """
        with self._lock:
            base_url = self._base_url
            api_version = self._api_version
            base_params = dict(self._base_params)
            timeout = self._timeout
            raise_errors = self._raise_etherpad_errors

        url = _compose_url(base_url, api_version, endpoint)
        query = build_query(base_params, params)

        logger.debug(
            "GET %s params=%s",
            endpoint,
            [key for key, _ in query if key != API_KEY_PARAM],
        )

        if cancel is None:
            response = self._session.get(url, params=query, timeout=timeout)
        else:
            response = self._send_cancellable(endpoint, url, query, timeout, cancel)

        result = _decode(endpoint, response)
        logger.debug("%s -> %s", endpoint, result.status)

        if raise_errors and not result.ok:
            raise EtherpadError(result.code, result.message, result)

        return result

    def close(self) -> None:
        """Release the HTTP session."""
        self._session.close()

    def _send_cancellable(
        self,
        endpoint: str,
        url: str,
        query: List[Tuple[str, str]],
        timeout: Optional[float],
        cancel: CancelToken,
    ) -> requests.Response:
        cancel.raise_if_cancelled(endpoint)

        # Each send owns its thread, so an abandoned request never delays later calls
        future: Future = Future()
        worker = threading.Thread(
            target=_run_into,
            args=(future, self._session.get, url),
            kwargs={"params": query, "timeout": _deadline_timeout(timeout, cancel)},
            name=f"etherpad-{endpoint}",
            daemon=True,
        )

        finished = threading.Event()
        future.add_done_callback(lambda _: finished.set())
        remove_callback = cancel.add_callback(finished.set)
        worker.start()
        try:
            finished.wait()
        finally:
            remove_callback()

        if cancel.cancelled:
            logger.debug("%s cancelled", endpoint)
            future.add_done_callback(_close_abandoned)
            raise RequestCancelled(endpoint)

        return future.result()


def build_query(
    base_params: Dict[str, Any],
    params: Optional[Dict[str, Any]],
) -> List[Tuple[str, str]]:
    """
    Merge fixed and per-call parameters into sorted (key, text) pairs.

    Per-call values override fixed ones, except the API key.
    """
    merged = {key: value for key, value in base_params.items() if value is not None}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if key == API_KEY_PARAM:
            logger.warning("Ignoring per-call value for %r", API_KEY_PARAM)
            continue
        merged[key] = value

    return [(key, to_text(merged[key])) for key in sorted(merged)]


def _compose_url(base_url: str, api_version: str, endpoint: str) -> str:
    url = f"{base_url}/{api_version}/{endpoint}"
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        # Raises on a non-numeric or out of range port
        parts.port
    except ValueError as e:
        raise EtherpadURLError(f"Invalid Etherpad base URL {base_url!r}: {e}", url) from e

    if parts.scheme not in ("http", "https") or not hostname:
        raise EtherpadURLError(f"Invalid Etherpad base URL {base_url!r}", url)
    return url


def _decode(endpoint: str, response: requests.Response) -> Response:
    # The HTTP status is not checked: Etherpad answers 401/500 with an envelope too
    try:
        body = response.json()
    except ValueError as e:
        raise EtherpadDecodeError(
            f"Response from {endpoint} is not valid JSON", response.text
        ) from e
    return Response.from_json(body, raw=response.text)


def _close_abandoned(future: Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()


def _run_into(future: Future, fn, *args, **kwargs) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        result = fn(*args, **kwargs)
    except Exception as e:
        future.set_exception(e)
    else:
        future.set_result(result)


def _deadline_timeout(timeout: Optional[float], cancel: CancelToken) -> Optional[float]:
    """Cap the transport timeout at the time left on the token's deadline."""
    remaining = cancel.remaining()
    if remaining is None:
        return timeout
    remaining = max(remaining, MIN_DEADLINE_TIMEOUT)
    if timeout is None:
        return remaining
    return min(timeout, remaining)
