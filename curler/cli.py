"""Command line entry point: send one request and print the body."""

from __future__ import annotations

import argparse
import sys
from urllib.parse import parse_qsl, urlsplit

from curler.factory import Factory
from curler.response import RequestType
from curler.status import StatusCode

DEFAULT_URL = "https://www.example.com/"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curler", description="Send one HTTP request and print the response body."
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="address to request")
    parser.add_argument(
        "-X",
        "--request",
        type=str.upper,
        choices=[member.name for member in RequestType],
        help="HTTP method (GET, or POST when data is given)",
    )
    parser.add_argument(
        "-H", "--header", action="append", default=[], help="extra header as 'Name: value'"
    )
    parser.add_argument("-d", "--data", help="request body")
    parser.add_argument("-A", "--user-agent", help="User-Agent to send")
    parser.add_argument(
        "--timeout", type=int, default=0, help="timeout in milliseconds (0 for none)"
    )
    parser.add_argument(
        "--no-redirects", action="store_true", help="do not follow redirects"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns 0 on a completed request and 1 on a transport failure."""
    parser = _parser()
    args = parser.parse_args(argv)

    with Factory(timeout_ms=args.timeout) as factory:
        try:
            builder = factory.create_request(args.url)
        except ValueError as exc:
            parser.error(str(exc))

        parts = urlsplit(args.url)
        builder.set_path(parts.path)
        for key, value in parse_qsl(parts.query, keep_blank_values=True):
            builder.set_parameter(key, value)

        for header in args.header:
            name, sep, value = header.partition(":")
            if not sep or not name.strip():
                parser.error(f"invalid header: {header!r}")
            builder.add_header(name.strip(), value.strip())

        method = args.request or ("POST" if args.data is not None else "GET")
        builder.set_request_type(RequestType[method])
        if args.data is not None:
            builder.set_body(args.data)
        if args.user_agent:
            builder.set_user_agent(args.user_agent)
        builder.follow_redirects(not args.no_redirects)

        response = factory.sync_request(builder)

    if response.code is StatusCode.FAILED:
        print(f"curler: {response.error}", file=sys.stderr)
        return 1
    sys.stdout.write(response.text)
    if response.text and not response.text.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())