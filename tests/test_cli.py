import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from curler.cli import main


class _Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def log_message(self, format, *args):
        pass

    def _handle(self):
        length = int(self.headers.get("Content-Length") or 0)
        received = self.rfile.read(length) if length else b""
        if self.path.startswith("/redirect"):
            data = b"moved"
            self.send_response(302)
            self.send_header("Location", "/echo")
        else:
            payload = {
                "method": self.command,
                "path": self.path,
                "headers": {k.lower(): v for k, v in self.headers.items()},
                "body": received.decode("utf-8"),
            }
            data = json.dumps(payload).encode("utf-8")
            self.send_response(200)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _handle


@pytest.fixture(scope="module")
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _echo(capsys):
    return json.loads(capsys.readouterr().out)


def test_get_prints_body(base_url, capsys):
    assert main([base_url + "/echo?x=1"]) == 0
    echoed = _echo(capsys)
    assert echoed["method"] == "GET"
    assert echoed["path"] == "/echo?x=1"
    assert echoed["headers"]["user-agent"] == "curler/1.0"


def test_data_implies_post(base_url, capsys):
    assert main([base_url + "/echo", "-d", "abc"]) == 0
    echoed = _echo(capsys)
    assert echoed["method"] == "POST"
    assert echoed["body"] == "abc"


def test_explicit_method_and_headers(base_url, capsys):
    args = [base_url + "/echo", "-X", "put", "-d", "abc", "-H", "X-Test: value", "-A", "agent"]
    assert main(args) == 0
    echoed = _echo(capsys)
    assert echoed["method"] == "PUT"
    assert echoed["headers"]["x-test"] == "value"
    assert echoed["headers"]["user-agent"] == "agent"


def test_no_redirects(base_url, capsys):
    assert main([base_url + "/redirect", "--no-redirects"]) == 0
    assert capsys.readouterr().out == "moved\n"


def test_redirect_followed(base_url, capsys):
    assert main([base_url + "/redirect"]) == 0
    assert _echo(capsys)["path"] == "/echo"


def test_connection_failure_returns_one(capsys):
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    assert main([f"http://127.0.0.1:{port}/"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("curler: ")


def test_invalid_host_exits():
    with pytest.raises(SystemExit) as info:
        main(["example.com"])
    assert info.value.code == 2


def test_invalid_header_exits(base_url):
    with pytest.raises(SystemExit) as info:
        main([base_url + "/echo", "-H", "no-colon"])
    assert info.value.code == 2