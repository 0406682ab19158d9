import pytest

from curler.cookies import Cookie
from curler.response import ExceptionType, RequestType, Response
from curler.status import StatusCode


def test_defaults():
    response = Response()
    assert response.code is StatusCode.NULL
    assert response.type is RequestType.GET
    assert response.headers == {}
    assert response.cookies == {}
    assert response.body == b""
    assert response.error == ""


@pytest.mark.parametrize(
    "value, method",
    [(0, "GET"), (1, "HEAD"), (2, "POST"), (3, "PUT"), (4, "DELETE"), (5, "PATCH")],
)
def test_request_type_values_and_method_names(value, method):
    assert RequestType(value).method == method


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, ExceptionType.ON_ERROR),
        (1, ExceptionType.ON_PRE_REQUEST),
        (2, ExceptionType.ON_POST_REQUEST),
    ],
)
def test_exception_type_values(value, expected):
    assert ExceptionType(value) is expected


def test_headers_are_multi_valued_and_case_insensitive():
    response = Response()
    response.add_header("Set-Cookie", "a=1")
    response.add_header("set-cookie", "b=2")
    assert response.headers["set-cookie"] == ["a=1", "b=2"]
    assert response.header("SET-COOKIE") == "a=1"
    assert response.header("missing") is None
    assert response.header("missing", "x") == "x"


def test_cookies_grouped_by_name():
    response = Response()
    response.add_cookie(Cookie(key="id", value="1"))
    response.add_cookie(Cookie(key="id", value="2"))
    assert [c.value for c in response.cookies["id"]] == ["1", "2"]


def test_text_decodes_body():
    response = Response(body="héllo".encode("utf-8"))
    assert response.text == "héllo"


def test_save_to_file_writes_body(tmp_path):
    target = tmp_path / "out.bin"
    response = Response(body=b"\x00\x01payload")
    response.save_to_file(target)
    assert target.read_bytes() == b"\x00\x01payload"


def test_save_to_file_refuses_existing_without_overwrite(tmp_path):
    target = tmp_path / "out.bin"
    target.write_bytes(b"old")
    with pytest.raises(FileExistsError):
        Response(body=b"new").save_to_file(target)
    assert target.read_bytes() == b"old"


def test_save_to_file_overwrites_when_asked(tmp_path):
    target = tmp_path / "out.bin"
    target.write_bytes(b"old content")
    Response(body=b"new").save_to_file(str(target), overwrite=True)
    assert target.read_bytes() == b"new"


def test_save_to_file_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Response(body=b"x").save_to_file(tmp_path / "nope" / "out.bin", overwrite=True)