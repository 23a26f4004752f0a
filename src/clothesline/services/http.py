"""
Shared HTTP session for the weather provider, ip-api.com and the ESP32.

Every outbound request goes through ``session``: one connection pool, one
User-Agent and a default timeout.  Nothing is retried here.  A failed lookup
is reported straight back and the user asks again from the dashboard.

Usage::

    from clothesline.services.http import session

    resp = session.get(url, params={"q": "Paris", "appid": key})
"""

from __future__ import annotations

from collections.abc import Callable

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

USER_AGENT = "clothesline/0.1"

#: Zero retries; error statuses come back as ordinary responses.
DEFAULT_RETRY = Retry(
    total=0,
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 10  # seconds

#: One aggregation keeps four lookups in flight; leave room for the device poller.
POOL_SIZE = 8


def build_adapter(retry: Retry | None = None) -> HTTPAdapter:
    """Connection-pooling adapter mounted for both schemes."""
    return HTTPAdapter(
        max_retries=retry or DEFAULT_RETRY,
        pool_connections=POOL_SIZE,
        pool_maxsize=POOL_SIZE,
    )


def _with_default_timeout(
    send: Callable[..., requests.Response], timeout: float
) -> Callable[..., requests.Response]:
    def _send(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return send(prepared, **kwargs)

    return _send


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a configured ``requests.Session``.

    Args:
        retry: Retry strategy for the adapter (defaults to ``DEFAULT_RETRY``).
        timeout: Applied to any request sent without an explicit ``timeout=``.
    """
    s = requests.Session()
    adapter = build_adapter(retry)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = USER_AGENT
    s.send = _with_default_timeout(s.send, timeout)  # type: ignore[method-assign]
    return s


session: requests.Session = create_session()
