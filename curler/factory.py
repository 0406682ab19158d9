"""Runs requests described by builders, synchronously or in the background."""

from __future__ import annotations

import contextlib
import http.client
import threading
import urllib.error
import urllib.request
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable

from curler.builder import Builder
from curler.cookies import parse_cookie
from curler.response import ExceptionType, RequestType, Response
from curler.status import StatusCode

DEFAULT_USER_AGENT = "curler/1.0"

_BODYLESS = frozenset({RequestType.GET, RequestType.HEAD})


class _TransportFailure(Exception):
    """The request could not be carried out at the transport level."""


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    def redirect_request(self, req, fp, code, msg, headers, newurl):  # noqa: D102
        return None


@dataclass(frozen=True)
class _Plan:
    """A snapshot of everything needed to send one request."""

    url: str
    request_type: RequestType
    headers: tuple[tuple[str, str], ...]
    body: bytes | None
    follow_redirects: bool
    keep_cookie_headers: bool

    @classmethod
    def from_builder(cls, builder: Builder) -> _Plan:
        headers = list(builder.headers)
        cookies = builder.cookie_header()
        if cookies:
            headers.append(("Cookie", cookies))
        if builder.referer:
            headers.append(("Referer", builder.referer))
        headers.append(("User-Agent", builder.user_agent or DEFAULT_USER_AGENT))
        request_type = builder.request_type
        return cls(
            url=builder.build_url(),
            request_type=request_type,
            headers=tuple(headers),
            body=None if request_type in _BODYLESS else builder.body,
            follow_redirects=builder.redirects_enabled,
            keep_cookie_headers=builder.keep_cookie_headers,
        )


def _call_guarded(
    callback: Callable[..., Any],
    args: tuple[Any, ...],
    kind: ExceptionType,
    on_exception: Callable[[ExceptionType, BaseException], Any] | None,
) -> None:
    try:
        callback(*args)
    except Exception as exc:
        if on_exception is not None:
            with contextlib.suppress(Exception):
                on_exception(kind, exc)


class Factory:
    """Sends requests, limiting how many run at once.

    ``max_connections`` of zero or less means no limit; ``timeout_ms`` of zero
    or less means no timeout.
    """

    def __init__(self, max_connections: int = 0, timeout_ms: int = 0) -> None:
        self.max_connections = max(max_connections, 0)
        self.timeout_ms = max(timeout_ms, 0)
        self._timeout = self.timeout_ms / 1000 if self.timeout_ms else None
        self._slots = (
            threading.BoundedSemaphore(self.max_connections) if self.max_connections else None
        )
        self._state = threading.Condition()
        self._pending = 0
        self._closed = False

    def create_request(self, host: str) -> Builder:
        """A new builder for the given host; raises ValueError for an invalid host."""
        return Builder(host)

    def push_request(self, builder: Builder) -> None:
        """Queue a request; results arrive through the builder's callbacks."""
        plan = _Plan.from_builder(builder)
        on_exception = builder.exception_callback

        if builder.pre_request_callback is not None:
            try:
                builder.pre_request_callback(builder)
            except Exception as exc:
                if on_exception is not None:
                    with contextlib.suppress(Exception):
                        on_exception(ExceptionType.ON_PRE_REQUEST, exc)
                return

        on_complete = builder.complete_callback
        on_error = builder.error_callback
        on_destroy = builder.destroy_callback

        def job() -> None:
            try:
                response, ok = self._execute(plan)
                if ok:
                    if on_complete is not None:
                        _call_guarded(
                            on_complete, (response,), ExceptionType.ON_POST_REQUEST, on_exception
                        )
                elif on_error is not None:
                    _call_guarded(on_error, (response,), ExceptionType.ON_ERROR, on_exception)
            finally:
                if on_destroy is not None:
                    with contextlib.suppress(Exception):
                        on_destroy()

        self._submit(job)

    def sync_request(self, builder: Builder) -> Response:
        """Send a request and wait for its response; the builder's callbacks are ignored."""
        plan = _Plan.from_builder(builder)
        future: Future[Response] = Future()

        def job() -> None:
            try:
                response, _ = self._execute(plan)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(response)

        self._submit(job)
        return future.result()

    def close(self) -> None:
        """Refuse new requests and wait until every queued one has finished."""
        with self._state:
            self._closed = True
            self._state.wait_for(lambda: self._pending == 0)

    def __enter__(self) -> Factory:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _submit(self, job: Callable[[], None]) -> None:
        with self._state:
            if self._closed:
                raise RuntimeError("factory is closed")
            self._pending += 1
        threading.Thread(target=self._run, args=(job,), daemon=True).start()

    def _run(self, job: Callable[[], None]) -> None:
        try:
            with self._slots if self._slots is not None else contextlib.nullcontext():
                job()
        finally:
            with self._state:
                self._pending -= 1
                self._state.notify_all()

    def _execute(self, plan: _Plan) -> tuple[Response, bool]:
        try:
            return self._perform(plan), True
        except _TransportFailure as exc:
            failed = Response(code=StatusCode.FAILED, type=plan.request_type, error=str(exc))
            return failed, False

    def _perform(self, plan: _Plan) -> Response:
        request = urllib.request.Request(
            plan.url, data=plan.body, method=plan.request_type.method
        )
        for name, value in plan.headers:
            request.add_header(name, value)
        opener = (
            urllib.request.build_opener()
            if plan.follow_redirects
            else urllib.request.build_opener(_NoRedirect)
        )
        response = Response(type=plan.request_type)
        try:
            with opener.open(request, timeout=self._timeout) as raw:
                self._fill(response, raw, plan)
        except urllib.error.HTTPError as err:
            with err:
                self._fill(response, err, plan)
        except urllib.error.URLError as exc:
            raise _TransportFailure(str(exc.reason)) from exc
        except (OSError, ValueError, http.client.HTTPException) as exc:
            raise _TransportFailure(str(exc) or type(exc).__name__) from exc
        return response

    @staticmethod
    def _fill(response: Response, raw: Any, plan: _Plan) -> None:
        code = raw.getcode()
        items = list(raw.headers.items())
        try:
            body = raw.read()
        except (OSError, http.client.HTTPException) as exc:
            raise _TransportFailure(str(exc) or type(exc).__name__) from exc

        if plan.request_type is RequestType.HEAD:
            version = getattr(raw, "version", 11)
            reason = getattr(raw, "reason", "") or ""
            lines = [f"HTTP/{version // 10}.{version % 10} {code} {reason}\r\n"]
            lines.extend(f"{name}: {value}\r\n" for name, value in items)
            lines.append("\r\n")
            body = "".join(lines).encode("latin-1", errors="replace") + body

        response.body = body
        for name, value in items:
            response.add_header(name, value)

        with contextlib.suppress(ValueError):
            for value in response.headers.get("set-cookie", []):
                response.add_cookie(parse_cookie(value))
        if not plan.keep_cookie_headers:
            response.headers.pop("set-cookie", None)

        response.code = StatusCode.from_code(code)