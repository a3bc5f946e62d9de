"""
HTTP access to the instance API.

All plumbing requests go through `request`, using a `Transport` supplied by the caller.  Hosts that
provide their own request primitive can wrap it in a `Transport` subclass; otherwise `connect`
builds a `RequestsTransport` from the environment or a config file.
"""

import configparser
from contextlib import contextmanager
import json
import logging
import os.path
from typing import Any, Generator, Mapping, Optional

from requests import Session as RequestsSession


LOG = logging.getLogger(__name__)

JSON = "application/json"

CONFIG_PATH = os.path.expanduser("~/.domolib.cnf")
"""
Default location of the config file, overridden by `DOMOLIB_CONFIG` in the environment.
"""

DEFAULT_TIMEOUT = 30.0


class Transport:
    """
    Capability to send a single API request and return its parsed response.

    Implementations should raise an exception for any failed request; timeouts and retries, if any,
    are their responsibility.
    """

    def send_request(self, method: str, url: str, body: Any = None,
                     headers: Optional[Mapping[str, str]] = None, content_type: str = JSON) -> Any:
        raise NotImplementedError

    def close(self) -> None:
        pass


class RequestsTransport(Transport):
    """
    Transport backed by a `requests` session, authenticating with a developer access token.
    """

    def __init__(self, host: str, token: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[RequestsSession] = None):
        if "://" not in host:
            host = "https://{}".format(host)
        self.base_url = host.rstrip("/")
        self.timeout = timeout
        self.session = session or RequestsSession()
        self.session.headers["Accept"] = JSON
        if token:
            self.session.headers["X-DOMO-Developer-Token"] = token

    def url(self, path: str) -> str:
        """
        Resolve an API path against the instance host.  Paths may omit their leading slash.
        """
        if "://" in path:
            return path
        return "{}/{}".format(self.base_url, path.lstrip("/"))

    def send_request(self, method: str, url: str, body: Any = None,
                     headers: Optional[Mapping[str, str]] = None, content_type: str = JSON) -> Any:
        kwargs = {"headers": dict(headers or ()), "timeout": self.timeout}
        if body is not None:
            kwargs["headers"]["Content-Type"] = content_type
            if content_type == JSON:
                kwargs["data"] = json.dumps(body)
            else:
                kwargs["data"] = body
        resp = self.session.request(method, self.url(url), **kwargs)
        resp.raise_for_status()
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return "<{}: {}>".format(self.__class__.__name__, self.base_url)


def _read_config(path: Optional[str] = None) -> Mapping[str, str]:
    parser = configparser.ConfigParser()
    parser.read(path or os.getenv("DOMOLIB_CONFIG") or CONFIG_PATH)
    if parser.has_section("api"):
        return parser["api"]
    return {}


def connect(host: Optional[str] = None, token: Optional[str] = None,
            timeout: Optional[float] = None) -> RequestsTransport:
    """
    Create a transport for the configured instance.

    Unset arguments are read from `DOMO_INSTANCE`, `DOMO_ACCESS_TOKEN` and `DOMO_TIMEOUT` in the
    environment, then from the `[api]` section (`host`, `token` and `timeout` keys) of the config
    file.
    """
    config = _read_config()
    host = host or os.getenv("DOMO_INSTANCE") or config.get("host")
    if not host:
        raise RuntimeError("No API host configured, set DOMO_INSTANCE or add it to {}"
                           .format(os.getenv("DOMOLIB_CONFIG") or CONFIG_PATH))
    token = token or os.getenv("DOMO_ACCESS_TOKEN") or config.get("token")
    if timeout is None:
        raw = os.getenv("DOMO_TIMEOUT") or config.get("timeout") or DEFAULT_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            source = os.getenv("DOMOLIB_CONFIG") or CONFIG_PATH
            raise RuntimeError("Invalid API timeout {!r}, check DOMO_TIMEOUT or {}"
                               .format(raw, source)) from None
    transport = RequestsTransport(host, token, timeout)
    LOG.debug("Connected transport: %r", transport)
    return transport


def _snapshot(body: Any) -> str:
    # Bodies that can't be serialised (e.g. non-string keys) are logged by repr instead.
    try:
        return json.dumps(body, indent=2, default=str)
    except (TypeError, ValueError):
        return repr(body)


@contextmanager
def context(transport: Optional[Transport] = None) -> Generator[Transport, None, None]:
    """
    Run multiple API requests with a single transport:

        with context() as transport:
            delete_access_token(transport, token_id)
            delete_page_and_cards(transport, page_id)
    """
    transport = transport or connect()
    try:
        yield transport
    finally:
        transport.close()


def request(transport: Transport, method: str, url: str, body: Any = None,
            headers: Optional[Mapping[str, str]] = None, content_type: str = JSON) -> Any:
    """
    Send a request via the transport and return its response.

    Failures are logged along with the request payload, and the original exception is re-raised.
    """
    LOG.debug("Request: %s %s", method, url)
    try:
        return transport.send_request(method, url, body, headers, content_type)
    except Exception:
        LOG.error("Error with %s request to %s\nPayload:\n%s", method, url, _snapshot(body),
                  exc_info=True)
        raise
