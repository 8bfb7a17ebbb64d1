"""cURL command parser.

Walks the tokens of a curl invocation and maps each recognized flag onto
a RequestRecord. Parsing is best-effort: unknown flags are skipped and a
valued flag with nothing after it is ignored.
"""

import re
from typing import Callable, NamedTuple

from .base import BasicAuth, RequestRecord
from .tokenize import tokenize

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_ACCEPT_ENCODING = "gzip, deflate, br"


class _CurlState:
    """Mutable accumulator for a single parse."""

    def __init__(self):
        self.method = "GET"
        self.explicit_method = False
        self.url = ""
        self.headers: dict[str, str] = {}
        self.body: str | None = None
        self.content_type: str | None = None
        self.auth: BasicAuth | None = None
        self.follow_redirects = True
        self.insecure = False

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value
        if key.lower() == "content-type":
            self.content_type = value

    def has_header(self, name: str) -> bool:
        return any(key.lower() == name.lower() for key in self.headers)

    def imply_method(self, method: str) -> None:
        if not self.explicit_method:
            self.method = method

    def build(self) -> RequestRecord:
        return RequestRecord(
            method=self.method,
            url=self.url,
            headers=self.headers,
            body=self.body,
            content_type=self.content_type,
            auth=self.auth,
            follow_redirects=self.follow_redirects,
            insecure=self.insecure,
        )


class Flag(NamedTuple):
    """A curl option: whether it consumes the next token, and its effect."""

    takes_value: bool
    apply: Callable[[_CurlState, str | None], None]


def _set_method(state: _CurlState, value: str | None) -> None:
    state.method = value.upper()
    state.explicit_method = True


def _set_header(state: _CurlState, value: str | None) -> None:
    colon = value.find(":")
    if colon > 0:
        state.set_header(value[:colon].strip(), value[colon + 1:].strip())


def _set_data(state: _CurlState, value: str | None) -> None:
    state.body = value
    state.imply_method("POST")


def _append_urlencoded(state: _CurlState, value: str | None) -> None:
    state.body = f"{state.body}&{value}" if state.body else value
    state.imply_method("POST")
    if not state.content_type:
        state.set_header("Content-Type", FORM_CONTENT_TYPE)


def _set_json(state: _CurlState, value: str | None) -> None:
    _set_data(state, value)
    if not state.has_header("Content-Type"):
        state.set_header("Content-Type", JSON_CONTENT_TYPE)
    if not state.has_header("Accept"):
        state.set_header("Accept", JSON_CONTENT_TYPE)


def _set_auth(state: _CurlState, value: str | None) -> None:
    user, _, password = value.partition(":")
    state.auth = BasicAuth(user=user, password=password)


def _follow_redirects(state: _CurlState, value: str | None) -> None:
    state.follow_redirects = True


def _insecure(state: _CurlState, value: str | None) -> None:
    state.insecure = True


def _head(state: _CurlState, value: str | None) -> None:
    state.imply_method("HEAD")


def _set_url(state: _CurlState, value: str | None) -> None:
    state.url = value


def _compressed(state: _CurlState, value: str | None) -> None:
    if not state.has_header("Accept-Encoding"):
        state.headers["Accept-Encoding"] = DEFAULT_ACCEPT_ENCODING


def _header_setter(name: str) -> Callable[[_CurlState, str | None], None]:
    def apply(state: _CurlState, value: str | None) -> None:
        state.set_header(name, value)

    return apply


def _spellings(names: tuple[str, ...], flag: Flag) -> dict[str, Flag]:
    return {name: flag for name in names}


FLAGS: dict[str, Flag] = {
    **_spellings(("-X", "--request"), Flag(True, _set_method)),
    **_spellings(("-H", "--header"), Flag(True, _set_header)),
    **_spellings(("-d", "--data", "--data-raw", "--data-binary", "--data-ascii"), Flag(True, _set_data)),
    "--data-urlencode": Flag(True, _append_urlencoded),
    "--json": Flag(True, _set_json),
    **_spellings(("-u", "--user"), Flag(True, _set_auth)),
    **_spellings(("-L", "--location"), Flag(False, _follow_redirects)),
    **_spellings(("-k", "--insecure"), Flag(False, _insecure)),
    **_spellings(("-I", "--head"), Flag(False, _head)),
    **_spellings(("-A", "--user-agent"), Flag(True, _header_setter("User-Agent"))),
    **_spellings(("-b", "--cookie"), Flag(True, _header_setter("Cookie"))),
    **_spellings(("-e", "--referer"), Flag(True, _header_setter("Referer"))),
    "--compressed": Flag(False, _compressed),
    "--url": Flag(True, _set_url),
}


def normalize_command(text: str) -> str:
    """Collapse backslash line continuations and drop a leading ``curl``."""
    normalized = re.sub(r"\\\r?\n\s*", " ", text).strip()
    return re.sub(r"^curl\s+", "", normalized)


def _looks_like_url(token: str) -> bool:
    return not token.startswith("-") and (token.startswith("http") or token.startswith("/"))


def parse_curl(text: str) -> RequestRecord:
    """Parse a curl command line into a RequestRecord.

    When several URL-shaped bare tokens appear, the last one wins.
    """
    tokens = tokenize(normalize_command(text))
    state = _CurlState()

    i = 0
    while i < len(tokens):
        token = tokens[i]
        flag = FLAGS.get(token)
        if flag is None:
            if _looks_like_url(token):
                state.url = token
        elif not flag.takes_value:
            flag.apply(state, None)
        elif i + 1 < len(tokens):
            flag.apply(state, tokens[i + 1])
            i += 1
        i += 1

    return state.build()
