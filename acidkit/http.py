"""HTTP methods, status codes, content types and request/response records."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")

_UNKNOWN = "<unknown>"
_MISSING: Any = object()


class HttpMethod(enum.IntEnum):
    """Request methods, each with its wire spelling in ``text``."""

    text: str

    def __new__(cls, number: int, text: str) -> HttpMethod:
        obj = int.__new__(cls, number)
        obj._value_ = number
        obj.text = text
        return obj

    DELETE = 0, "DELETE"
    GET = 1, "GET"
    HEAD = 2, "HEAD"
    POST = 3, "POST"
    PUT = 4, "PUT"
    CONNECT = 5, "CONNECT"
    OPTIONS = 6, "OPTIONS"
    TRACE = 7, "TRACE"
    COPY = 8, "COPY"
    LOCK = 9, "LOCK"
    MKCOL = 10, "MKCOL"
    MOVE = 11, "MOVE"
    PROPFIND = 12, "PROPFIND"
    PROPPATCH = 13, "PROPPATCH"
    SEARCH = 14, "SEARCH"
    UNLOCK = 15, "UNLOCK"
    BIND = 16, "BIND"
    REBIND = 17, "REBIND"
    UNBIND = 18, "UNBIND"
    ACL = 19, "ACL"
    REPORT = 20, "REPORT"
    MKACTIVITY = 21, "MKACTIVITY"
    CHECKOUT = 22, "CHECKOUT"
    MERGE = 23, "MERGE"
    MSEARCH = 24, "M-SEARCH"
    NOTIFY = 25, "NOTIFY"
    SUBSCRIBE = 26, "SUBSCRIBE"
    UNSUBSCRIBE = 27, "UNSUBSCRIBE"
    PATCH = 28, "PATCH"
    PURGE = 29, "PURGE"
    MKCALENDAR = 30, "MKCALENDAR"
    LINK = 31, "LINK"
    UNLINK = 32, "UNLINK"
    SOURCE = 33, "SOURCE"
    INVALID_METHOD = 34, _UNKNOWN


class HttpStatus(enum.IntEnum):
    """Response status codes, each with its reason phrase in ``phrase``."""

    phrase: str

    def __new__(cls, code: int, phrase: str) -> HttpStatus:
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.phrase = phrase
        return obj

    CONTINUE = 100, "Continue"
    SWITCHING_PROTOCOLS = 101, "Switching Protocols"
    PROCESSING = 102, "Processing"
    OK = 200, "OK"
    CREATED = 201, "Created"
    ACCEPTED = 202, "Accepted"
    NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information"
    NO_CONTENT = 204, "No Content"
    RESET_CONTENT = 205, "Reset Content"
    PARTIAL_CONTENT = 206, "Partial Content"
    MULTI_STATUS = 207, "Multi-Status"
    ALREADY_REPORTED = 208, "Already Reported"
    IM_USED = 226, "IM Used"
    MULTIPLE_CHOICES = 300, "Multiple Choices"
    MOVED_PERMANENTLY = 301, "Moved Permanently"
    FOUND = 302, "Found"
    SEE_OTHER = 303, "See Other"
    NOT_MODIFIED = 304, "Not Modified"
    USE_PROXY = 305, "Use Proxy"
    TEMPORARY_REDIRECT = 307, "Temporary Redirect"
    PERMANENT_REDIRECT = 308, "Permanent Redirect"
    BAD_REQUEST = 400, "Bad Request"
    UNAUTHORIZED = 401, "Unauthorized"
    PAYMENT_REQUIRED = 402, "Payment Required"
    FORBIDDEN = 403, "Forbidden"
    NOT_FOUND = 404, "Not Found"
    METHOD_NOT_ALLOWED = 405, "Method Not Allowed"
    NOT_ACCEPTABLE = 406, "Not Acceptable"
    PROXY_AUTHENTICATION_REQUIRED = 407, "Proxy Authentication Required"
    REQUEST_TIMEOUT = 408, "Request Timeout"
    CONFLICT = 409, "Conflict"
    GONE = 410, "Gone"
    LENGTH_REQUIRED = 411, "Length Required"
    PRECONDITION_FAILED = 412, "Precondition Failed"
    PAYLOAD_TOO_LARGE = 413, "Payload Too Large"
    URI_TOO_LONG = 414, "URI Too Long"
    UNSUPPORTED_MEDIA_TYPE = 415, "Unsupported Media Type"
    RANGE_NOT_SATISFIABLE = 416, "Range Not Satisfiable"
    EXPECTATION_FAILED = 417, "Expectation Failed"
    MISDIRECTED_REQUEST = 421, "Misdirected Request"
    UNPROCESSABLE_ENTITY = 422, "Unprocessable Entity"
    LOCKED = 423, "Locked"
    FAILED_DEPENDENCY = 424, "Failed Dependency"
    UPGRADE_REQUIRED = 426, "Upgrade Required"
    PRECONDITION_REQUIRED = 428, "Precondition Required"
    TOO_MANY_REQUESTS = 429, "Too Many Requests"
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large"
    UNAVAILABLE_FOR_LEGAL_REASONS = 451, "Unavailable For Legal Reasons"
    INTERNAL_SERVER_ERROR = 500, "Internal Server Error"
    NOT_IMPLEMENTED = 501, "Not Implemented"
    BAD_GATEWAY = 502, "Bad Gateway"
    SERVICE_UNAVAILABLE = 503, "Service Unavailable"
    GATEWAY_TIMEOUT = 504, "Gateway Timeout"
    HTTP_VERSION_NOT_SUPPORTED = 505, "HTTP Version Not Supported"
    VARIANT_ALSO_NEGOTIATES = 506, "Variant Also Negotiates"
    INSUFFICIENT_STORAGE = 507, "Insufficient Storage"
    LOOP_DETECTED = 508, "Loop Detected"
    NOT_EXTENDED = 510, "Not Extended"
    NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required"


class HttpContentType(enum.Enum):
    """Content types known by name; the value is the MIME string."""

    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"
    TEXT_XML = "text/xml"
    IMAGE_GIF = "image/gif"
    IMAGE_JPEG = "image/jpeg"
    IMAGE_PNG = "image/png"
    APPLICATION_XHTML = "application/xhtml+xml"
    APPLICATION_ATOM = "application/atom+xml"
    APPLICATION_JSON = "application/json"
    APPLICATION_PDF = "application/pdf"
    APPLICATION_MSWORD = "application/msword"
    APPLICATION_STREAM = "application/octet-stream"
    APPLICATION_URLENCODED = "application/x-www-form-urlencoded"
    APPLICATION_FORM_DATA = "application/form-data"
    INVALID_TYPE = ""


_METHOD_BY_TEXT = {
    method.text: method for method in HttpMethod if method is not HttpMethod.INVALID_METHOD
}
_CONTENT_TYPE_BY_TEXT = {
    ctype.value: ctype for ctype in HttpContentType if ctype is not HttpContentType.INVALID_TYPE
}


def string_to_method(text: str) -> HttpMethod:
    """Method for its wire spelling, or INVALID_METHOD."""
    return _METHOD_BY_TEXT.get(text, HttpMethod.INVALID_METHOD)


def method_to_string(method: HttpMethod | int) -> str:
    """Wire spelling of a method, or '<unknown>'."""
    try:
        return HttpMethod(method).text
    except ValueError:
        return _UNKNOWN


def status_to_string(status: HttpStatus | int) -> str:
    """Reason phrase of a status code, or '<unknown>'."""
    try:
        return HttpStatus(status).phrase
    except ValueError:
        return _UNKNOWN


def string_to_content_type(text: str) -> HttpContentType:
    """Content type for a MIME string, or INVALID_TYPE."""
    return _CONTENT_TYPE_BY_TEXT.get(text, HttpContentType.INVALID_TYPE)


def content_type_to_string(content_type: HttpContentType) -> str:
    """MIME string of a content type (empty for INVALID_TYPE)."""
    return content_type.value


class CaseInsensitiveDict(MutableMapping[str, str]):
    """String mapping whose keys compare without regard to case.

    Iteration runs in case-insensitive key order; the most recently set
    spelling of each key is kept.
    """

    def __init__(
        self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None, **kwargs: str
    ) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)
        self.update(kwargs)

    def __setitem__(self, key: str, value: str) -> None:
        self._store[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._store[key.lower()][1]

    def __delitem__(self, key: str) -> None:
        lowered = key.lower()
        if lowered not in self._store:
            raise KeyError(key)
        self._store.pop(lowered)

    def __iter__(self) -> Iterator[str]:
        return (self._store[lowered][0] for lowered in sorted(self._store))

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._store

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            other = CaseInsensitiveDict(other)
            return {k: v for k, (_, v) in self._store.items()} == {
                k: v for k, (_, v) in other._store.items()
            }
        return NotImplemented

    def copy(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self.items())

    def __repr__(self) -> str:
        return f"CaseInsensitiveDict({dict(self.items())!r})"


def get_as(
    mapping: Mapping[str, str], key: str, kind: Callable[[str], T], default: Any = _MISSING
) -> T:
    """Convert ``mapping[key]`` with ``kind``.

    A missing key or a failed conversion gives ``default``, which when
    omitted is ``kind()``.
    """
    if default is _MISSING:
        default = kind()
    if key not in mapping:
        return default
    try:
        return kind(mapping[key])
    except (ValueError, TypeError, ArithmeticError):
        return default


def _as_ci(value: Mapping[str, str] | None) -> CaseInsensitiveDict:
    if isinstance(value, CaseInsensitiveDict):
        return value
    return CaseInsensitiveDict(value or {})


@dataclass
class HttpRequest:
    """An HTTP request: line, headers, query parameters, cookies and body."""

    version: int = 0x11
    close: bool = True
    websocket: bool = False
    method: HttpMethod = HttpMethod.GET
    path: str = "/"
    query: str = ""
    fragment: str = ""
    body: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    params: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    cookies: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    def __post_init__(self) -> None:
        self.headers = _as_ci(self.headers)
        self.params = _as_ci(self.params)
        self.cookies = _as_ci(self.cookies)

    def get_header(self, key: str, default: str = "") -> str:
        return self.headers.get(key, default)

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def del_header(self, key: str) -> None:
        self.headers.pop(key, None)

    def has_header(self, key: str) -> bool:
        return key in self.headers

    def get_param(self, key: str, default: str = "") -> str:
        return self.params.get(key, default)

    def set_param(self, key: str, value: str) -> None:
        self.params[key] = value

    def del_param(self, key: str) -> None:
        self.params.pop(key, None)

    def has_param(self, key: str) -> bool:
        return key in self.params

    def get_cookie(self, key: str, default: str = "") -> str:
        return self.cookies.get(key, default)

    def set_cookie(self, key: str, value: str) -> None:
        self.cookies[key] = value

    def del_cookie(self, key: str) -> None:
        self.cookies.pop(key, None)

    def has_cookie(self, key: str) -> bool:
        return key in self.cookies

    def get_header_as(self, key: str, kind: Callable[[str], T], default: Any = _MISSING) -> T:
        return get_as(self.headers, key, kind, default)

    def get_param_as(self, key: str, kind: Callable[[str], T], default: Any = _MISSING) -> T:
        return get_as(self.params, key, kind, default)

    def get_cookie_as(self, key: str, kind: Callable[[str], T], default: Any = _MISSING) -> T:
        return get_as(self.cookies, key, kind, default)

    def content_type(self) -> HttpContentType:
        """Content type named by the Content-Type header."""
        return string_to_content_type(self.get_header("Content-Type"))

    def set_content_type(self, content_type: HttpContentType) -> None:
        self.set_header("Content-Type", content_type_to_string(content_type))


@dataclass
class HttpResponse:
    """An HTTP response: status line, headers, cookies and body."""

    version: int = 0x11
    close: bool = True
    websocket: bool = False
    status: HttpStatus = HttpStatus.OK
    reason: str = ""
    body: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    cookies: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.headers = _as_ci(self.headers)
        self.status = HttpStatus(self.status)

    def get_header(self, key: str, default: str = "") -> str:
        return self.headers.get(key, default)

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def del_header(self, key: str) -> None:
        self.headers.pop(key, None)

    def has_header(self, key: str) -> bool:
        return key in self.headers

    def get_header_as(self, key: str, kind: Callable[[str], T], default: Any = _MISSING) -> T:
        return get_as(self.headers, key, kind, default)

    def content_type(self) -> HttpContentType:
        """Content type named by the Content-Type header."""
        return string_to_content_type(self.get_header("Content-Type"))

    def set_content_type(self, content_type: HttpContentType) -> None:
        self.set_header("Content-Type", content_type_to_string(content_type))