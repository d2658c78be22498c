import pytest

from acidkit.http import (
    CaseInsensitiveDict,
    HttpContentType,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    HttpStatus,
    content_type_to_string,
    get_as,
    method_to_string,
    status_to_string,
    string_to_content_type,
    string_to_method,
)


def test_method_spelling_from_source():
    assert method_to_string(HttpMethod.MSEARCH) == "M-SEARCH"
    assert string_to_method("M-SEARCH") is HttpMethod.MSEARCH
    assert int(HttpMethod.SOURCE) == 33


@pytest.mark.parametrize(
    "method", [m for m in HttpMethod if m is not HttpMethod.INVALID_METHOD]
)
def test_method_round_trip(method):
    assert string_to_method(method_to_string(method)) is method


def test_unknown_method():
    assert string_to_method("FETCH") is HttpMethod.INVALID_METHOD
    assert string_to_method("get") is HttpMethod.INVALID_METHOD
    assert method_to_string(999) == "<unknown>"


def test_status_phrases():
    assert status_to_string(HttpStatus.NOT_FOUND) == "Not Found"
    assert status_to_string(511) == "Network Authentication Required"
    assert status_to_string(299) == "<unknown>"


def test_content_type_round_trip():
    for ctype in HttpContentType:
        assert string_to_content_type(content_type_to_string(ctype)) is ctype
    assert content_type_to_string(HttpContentType.APPLICATION_JSON) == "application/json"
    assert string_to_content_type("text/csv") is HttpContentType.INVALID_TYPE


def test_case_insensitive_dict():
    d = CaseInsensitiveDict({"Content-Length": "10"})
    assert d["content-length"] == "10"
    assert "CONTENT-LENGTH" in d
    d["CONTENT-length"] = "20"
    assert len(d) == 1
    assert d["Content-Length"] == "20"
    del d["content-length"]
    assert "Content-Length" not in d


def test_case_insensitive_dict_order_and_equality():
    d = CaseInsensitiveDict([("b", "2"), ("A", "1"), ("c", "3")])
    assert list(d) == ["A", "b", "c"]
    assert d == {"a": "1", "B": "2", "C": "3"}


def test_get_as():
    m = CaseInsensitiveDict({"n": "42", "bad": "x"})
    assert get_as(m, "N", int) == 42
    assert get_as(m, "bad", int, -1) == -1
    assert get_as(m, "missing", int, 7) == 7
    assert get_as(m, "missing", int) == 0


def test_request_defaults_and_headers():
    req = HttpRequest()
    assert req.version == 0x11
    assert req.close is True
    assert req.method is HttpMethod.GET
    req.set_header("Host", "example.com")
    assert req.get_header("host") == "example.com"
    assert req.has_header("HOST")
    req.del_header("HoSt")
    assert not req.has_header("Host")
    assert req.get_header("Host", "none") == "none"


def test_request_params_and_cookies():
    req = HttpRequest(params={"Page": "3"})
    assert req.get_param_as("page", int) == 3
    req.set_param("q", "abc")
    assert req.has_param("Q")
    req.del_param("q")
    assert not req.has_param("q")
    req.set_cookie("session", "token")
    assert req.get_cookie("SESSION") == "token"
    assert req.get_cookie_as("session", int, 5) == 5
    req.del_cookie("session")
    assert not req.has_cookie("session")


def test_request_content_type():
    req = HttpRequest()
    assert req.content_type() is HttpContentType.INVALID_TYPE
    req.set_content_type(HttpContentType.TEXT_HTML)
    assert req.get_header("content-type") == "text/html"
    assert req.content_type() is HttpContentType.TEXT_HTML


def test_response_headers_and_status():
    resp = HttpResponse(status=404)
    assert resp.status is HttpStatus.NOT_FOUND
    resp.set_header("Content-Length", "12")
    assert resp.get_header_as("content-length", int) == 12
    assert resp.has_header("CONTENT-LENGTH")
    resp.del_header("content-length")
    assert resp.get_header("Content-Length") == ""
    resp.set_content_type(HttpContentType.APPLICATION_PDF)
    assert resp.content_type() is HttpContentType.APPLICATION_PDF


def test_response_invalid_status():
    with pytest.raises(ValueError):
        HttpResponse(status=999)