# curler

A small HTTP client built around a reusable request blueprint. You describe
a request once with a `Builder`, then hand it to a `Factory`, which sends it
either synchronously, returning the `Response`, or in the background,
reporting the result through callbacks. Requests are sent with the standard
library's `urllib`; no third-party packages are needed.

## Installation

```
pip install .
```

## Quick start

```python
from curler.factory import Factory

with Factory() as factory:
    blueprint = factory.create_request("https://www.example.com/")

    # Synchronous: the builder's callbacks are ignored, the response is returned.
    response = factory.sync_request(blueprint)
    print(response.code.phrase())
    print(response.text)
```

`Factory(max_connections=0, timeout_ms=0)` takes an upper bound on how many
requests run at the same time and a per-request timeout in milliseconds.
Zero or a negative value means "no limit" and "no timeout" respectively.
Each request runs on its own thread; when a limit is set, the extra ones wait
for a free slot.

`close()`, or leaving the `with` block, stops the factory from accepting new
requests and waits until every queued request has finished. Sending a
request through a closed factory raises `RuntimeError`.

## Describing a request

`create_request(host)` returns a `Builder` (from `curler.builder`). The host
must be a full link such as `http://example.com`; anything from the first
`/` (or, if there is none, the first `?`) after the host part is dropped. An
empty host, or one without `://`, raises `ValueError`.

Every builder method returns the builder, so calls can be chained:

```python
from curler.response import RequestType

blueprint = (
    factory.create_request("https://www.example.com")
    .set_request_type(RequestType.POST)
    .set_path("/api/items")
    .set_parameter("page", "1")
    .set_body('{"name": "widget"}')
    .add_header("Content-Type", "application/json")
    .add_cookie("session", "token")
    .set_user_agent("my-app/2.0")
    .follow_redirects(True)
)
```

- `set_request_type` takes a `RequestType`: `GET`, `HEAD`, `POST`, `PUT`,
  `DELETE` or `PATCH`. The body is only sent for `POST`, `PUT`, `DELETE` and
  `PATCH`.
- `set_path` drops any `?query` part and adds a leading `/` when missing; an
  empty path clears it.
- `set_parameter` adds a query parameter; a key that is already set keeps its
  first value. Keys and values are encoded with `url_encode`.
- `set_body` takes `str` (encoded as UTF-8) or `bytes`.
- `add_header("Referer", ...)` and `add_header("User-Agent", ...)` act like
  `set_referer` and `set_user_agent`. `add_header("Cookie", "a=1; b=2")`
  replaces the cookie list with the cookies in the value.
- Headers the transport manages itself (`Host`, `Content-Length`,
  `Content-Encoding`, `Origin`, `Date`, `Accept-Charset`, `Accept-Encoding`,
  `Access-Control-Request-Headers`, `Access-Control-Request-Method`) are
  silently ignored.
- Without a user agent, requests are sent as `curler/1.0`.
- `follow_redirects(False)` returns a redirect response as it is, instead of
  following it.
- `save_cookies_in_headers(True)` keeps `Set-Cookie` in the response headers
  as well as in the parsed cookies.

`reset()` restores everything but the host to its default.
`reset_headers()` (which also clears referer and user agent),
`reset_cookies()`, `reset_referer()`, `reset_user_agent()` and
`reset_callbacks()` clear parts of it. `build_url()` and `cookie_header()`
show the URL and the `Cookie` header value that will be sent.

## Background requests with callbacks

```python
from curler.response import ExceptionType

def on_complete(response):
    print(response.code.phrase(), len(response.body))

def on_error(response):
    print("failed:", response.error)

def on_exception(kind: ExceptionType, error: BaseException):
    print("a callback raised during", kind.name, error)

blueprint = (
    factory.create_request("https://www.example.com/")
    .pre_request(lambda builder: None)
    .on_complete(on_complete)
    .on_error(on_error)
    .on_exception(on_exception)
    .on_destroy(lambda: print("request finished"))
)
factory.push_request(blueprint)
```

- `pre_request` runs before the request is queued, with the builder as its
  argument. If it raises, the request is dropped and `on_exception` receives
  `ExceptionType.ON_PRE_REQUEST`.
- `on_complete` receives the response once any HTTP status has been received,
  error statuses such as 404 included. If it raises, `on_exception` receives
  `ExceptionType.ON_POST_REQUEST`.
- `on_error` receives a response whose `code` is `StatusCode.FAILED` and
  whose `error` holds a message when the transfer itself failed (connection
  refused, timeout, bad URL). If it raises, `on_exception` receives
  `ExceptionType.ON_ERROR`.
- `on_destroy` runs last for every queued request. Exceptions raised by it,
  or by `on_exception`, are ignored.

The URL, headers and body are taken from the builder when `push_request` is
called, so the builder can be changed and reused afterwards.

## Responses

`curler.response.Response` holds:

- `code`: a `StatusCode` (`StatusCode.FAILED` after a transport failure);
- `type`: the `RequestType` that was sent;
- `headers`: a dict from lower-cased header names to lists of values;
  `header(name, default=None)` returns the first value of a header;
- `cookies`: a dict from cookie names to lists of parsed `Cookie` objects;
- `body`: the raw bytes, and `text`, the body decoded as UTF-8;
- `error`: a message, empty on success.

For `HEAD` requests the body holds the status line and the response headers
as text.

`response.save_to_file(filename, overwrite=False)` writes the body to a file.
Without `overwrite` an existing file raises `FileExistsError`; other write
failures raise `OSError`.

## Status codes, cookies and utilities

```python
from curler.cookies import parse_cookie, parse_http_date
from curler.status import StatusCode
from curler.utils import url_decode, url_encode

url_encode("a b&c")                  # 'a+b&c'
url_decode("a+b%21")                 # 'a b!'
StatusCode.from_code(404).phrase()   # 'Not Found'
StatusCode.from_code(299)            # StatusCode.CUSTOM_CODE, phrase 'Custom'

cookie = parse_cookie("id=token; Path=/; Secure; SameSite=Strict")
cookie.path, cookie.secure, cookie.same_site  # ('/', True, SameSitePolicy.STRICT)
parse_http_date("Sun, 06 Nov 1994 08:49:37 GMT")  # 784111777
```

- `url_encode` encodes text as UTF-8, turns spaces into `+` and percent-escapes
  every byte except letters, digits and ``-_.!~*'()&=/\?``.
- `parse_cookie` understands `Path`, `Domain`, `Expires`, `Max-Age`,
  `Secure`, `HttpOnly` and `SameSite`; a `Max-Age` that does not start with an
  integer raises `ValueError`.
- `parse_http_date` reads RFC 822, RFC 850, asctime dates and RFC 850 dates
  with four-digit years, and returns `NEVER_EXPIRES` when none of them match.
- `char_to_hex` and `split_string` are also available in `curler.utils`.

## Command line

```
curler [URL] [-X METHOD] [-H "Name: value"]... [-d DATA] [-A AGENT]
       [--timeout MS] [--no-redirects]
```

sends one request synchronously (by default to `https://www.example.com/`)
and prints the response body. Without `-X` the method is `GET`, or `POST`
when `-d` is given. The command exits with status 1 and prints the error when
the transfer fails, and with status 0 otherwise, whatever the HTTP status.

## Limitations

- Cookies received in responses are parsed but not stored or sent back on
  later requests; there is no cookie jar.
- Requests are HTTP/1.1 only, through `urllib`; there is no connection reuse
  between requests.

## Running the tests

```
pip install .[test]
pytest
```