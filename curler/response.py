"""Request kinds, callback failure kinds and the response container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from curler.cookies import Cookie
from curler.status import StatusCode


class RequestType(IntEnum):
    """HTTP methods the client can send."""

    GET = 0
    HEAD = 1
    POST = 2
    PUT = 3
    DELETE = 4
    PATCH = 5

    @property
    def method(self) -> str:
        """The method name as it goes on the wire."""
        return self.name


class ExceptionType(IntEnum):
    """Which user callback raised an exception."""

    ON_ERROR = 0
    ON_PRE_REQUEST = 1
    ON_POST_REQUEST = 2


@dataclass
class Response:
    """Everything received for one request.

    ``headers`` maps lower-cased header names to every value received for them;
    ``cookies`` maps cookie names to every cookie received under that name.
    """

    code: StatusCode = StatusCode.NULL
    type: RequestType = RequestType.GET
    headers: dict[str, list[str]] = field(default_factory=dict)
    cookies: dict[str, list[Cookie]] = field(default_factory=dict)
    body: bytes = b""
    error: str = ""

    def add_header(self, name: str, value: str) -> None:
        """Record one header value under its lower-cased name."""
        self.headers.setdefault(name.lower(), []).append(value)

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of a header, looked up case-insensitively."""
        values = self.headers.get(name.lower())
        return values[0] if values else default

    def add_cookie(self, cookie: Cookie) -> None:
        """Record one received cookie under its name."""
        self.cookies.setdefault(cookie.key, []).append(cookie)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    def save_to_file(self, filename: str | Path, overwrite: bool = False) -> None:
        """Write the whole body to a file.

        Raises FileExistsError when the file exists and overwrite is false,
        and OSError when the file cannot be written.
        """
        path = Path(filename)
        mode = "wb" if overwrite else "xb"
        with path.open(mode) as handle:
            handle.write(self.body)