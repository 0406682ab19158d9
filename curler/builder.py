"""Request blueprint assembled with chained calls."""

from __future__ import annotations

from typing import Any, Callable

from curler.cookies import parse_cookie
from curler.response import ExceptionType, RequestType, Response
from curler.utils import split_string, url_encode

PreRequestHandler = Callable[["Builder"], Any]
ResponseHandler = Callable[[Response], Any]
ExceptionHandler = Callable[[ExceptionType, BaseException], Any]
FinalHandler = Callable[[], Any]

_FORBIDDEN_HEADERS = frozenset(
    {
        "accept-charset",
        "accept-encoding",
        "access-control-request-headers",
        "access-control-request-method",
        "content-length",
        "content-encoding",
        "date",
        "host",
        "origin",
    }
)


class Builder:
    """A reusable description of one HTTP request."""

    def __init__(self, host: str) -> None:
        if not host:
            raise ValueError("Host must be not empty.")
        scheme_end = host.find("://")
        if scheme_end == -1:
            raise ValueError("Host must be valid link (http://example.com)")
        cut = host.find("/", scheme_end + 3)
        if cut == -1:
            cut = host.find("?", scheme_end + 3)
        self.host: str = host if cut == -1 else host[:cut]
        self.reset()

    def reset(self) -> Builder:
        """Restore every setting except the host to its default."""
        self.request_type = RequestType.GET
        self.path = ""
        self.query: dict[str, str] = {}
        self.body = b""
        self.cookies: list[tuple[str, str]] = []
        self.headers: list[tuple[str, str]] = []
        self.referer = ""
        self.user_agent = ""
        self.redirects_enabled = True
        self.keep_cookie_headers = False
        return self.reset_callbacks()

    def set_request_type(self, request_type: RequestType) -> Builder:
        self.request_type = RequestType(request_type)
        return self

    def set_path(self, path: str) -> Builder:
        """Set the path, dropping any query part and adding a leading slash."""
        if not path:
            self.path = ""
            return self
        path = path.partition("?")[0]
        self.path = path if path.startswith("/") else "/" + path
        return self

    def set_parameter(self, key: str, value: str) -> Builder:
        """Add a query parameter; a key already set keeps its first value."""
        self.query.setdefault(key, value)
        return self

    def set_body(self, body: str | bytes) -> Builder:
        self.body = body.encode("utf-8") if isinstance(body, str) else bytes(body)
        return self

    def add_header(self, key: str, value: str) -> Builder:
        """Add a header; Referer, User-Agent and Cookie are handled specially.

        Headers the transport manages itself are silently ignored.
        """
        name = key.lower()
        if name == "referer":
            self.referer = value
        elif name == "user-agent":
            self.user_agent = value
        elif name == "cookie":
            self.cookies = []
            for full in split_string(value, ";"):
                cookie = parse_cookie(full)
                self.cookies.append((cookie.key, cookie.value))
        elif name not in _FORBIDDEN_HEADERS:
            self.headers.append((key, value))
        return self

    def add_cookie(self, key: str, value: str) -> Builder:
        self.cookies.append((key, value))
        return self

    def reset_headers(self) -> Builder:
        """Drop all headers, including Referer and User-Agent."""
        self.headers = []
        self.referer = ""
        self.user_agent = ""
        return self

    def reset_cookies(self) -> Builder:
        self.cookies = []
        return self

    def reset_referer(self) -> Builder:
        self.referer = ""
        return self

    def reset_user_agent(self) -> Builder:
        self.user_agent = ""
        return self

    def set_referer(self, referer: str) -> Builder:
        self.referer = referer
        return self

    def set_user_agent(self, agent: str) -> Builder:
        self.user_agent = agent
        return self

    def follow_redirects(self, state: bool = True) -> Builder:
        self.redirects_enabled = state
        return self

    def save_cookies_in_headers(self, state: bool = False) -> Builder:
        """Keep Set-Cookie headers in the response headers as well."""
        self.keep_cookie_headers = state
        return self

    def pre_request(self, callback: PreRequestHandler | None) -> Builder:
        """Called before the request is queued; if it raises, the request is dropped."""
        self.pre_request_callback = callback
        return self

    def on_complete(self, callback: ResponseHandler | None) -> Builder:
        """Called with the response once the request has finished."""
        self.complete_callback = callback
        return self

    def on_error(self, callback: ResponseHandler | None) -> Builder:
        """Called when the transport fails and the request cannot be completed."""
        self.error_callback = callback
        return self

    def on_exception(self, callback: ExceptionHandler | None) -> Builder:
        """Called when any other callback, except the final one, raises."""
        self.exception_callback = callback
        return self

    def on_destroy(self, callback: FinalHandler | None) -> Builder:
        """Called last, when the request is discarded."""
        self.destroy_callback = callback
        return self

    def reset_callbacks(self) -> Builder:
        self.pre_request_callback: PreRequestHandler | None = None
        self.complete_callback: ResponseHandler | None = None
        self.error_callback: ResponseHandler | None = None
        self.exception_callback: ExceptionHandler | None = None
        self.destroy_callback: FinalHandler | None = None
        return self

    def build_url(self) -> str:
        """Host, path and encoded query string."""
        url = self.host + self.path
        if self.query:
            url += "?" + "&".join(
                f"{url_encode(key)}={url_encode(value)}" for key, value in self.query.items()
            )
        return url

    def cookie_header(self) -> str:
        """Cookies joined into a Cookie header value; empty when there are none."""
        return ";".join(f"{key}={value}" for key, value in self.cookies)