"""axios snippet extractor.

Same best-effort approach as the fetch extractor, plus axios shorthand
calls (``axios.get(url)``, ``axios.post(url, data)``) and the ``auth``
config block.
"""

import re

from .base import BasicAuth, RequestRecord
from .fetch import QUOTED, METHOD_RE, extract_headers

SHORTHAND_RE = re.compile(r"axios\.(get|post|put|patch|delete|head|options)\s*\(\s*" + QUOTED)
SHORTHAND_DATA_RE = re.compile(
    r"axios\.(?:post|put|patch)\s*\(\s*['\"`][^'\"`]+['\"`]\s*,\s*(['\"`]([^'\"`]+)['\"`]|\{[^}]+\})",
    re.DOTALL,
)
URL_RE = re.compile(r"url\s*:\s*" + QUOTED)
AUTH_BLOCK_RE = re.compile(r"auth\s*:\s*\{([^}]+)\}", re.DOTALL)
USERNAME_RE = re.compile(r"username\s*:\s*" + QUOTED)
PASSWORD_RE = re.compile(r"password\s*:\s*" + QUOTED)
DATA_RE = re.compile(r"data\s*:\s*(['\"`]([^'\"`]+)['\"`]|\{[^}]+\})", re.DOTALL)


def _extract_auth(code: str) -> BasicAuth | None:
    block = AUTH_BLOCK_RE.search(code)
    if not block:
        return None
    user = USERNAME_RE.search(block.group(1))
    if not user:
        return None
    password = PASSWORD_RE.search(block.group(1))
    return BasicAuth(user=user.group(1), password=password.group(1) if password else "")


def _match_literal(match: re.Match | None) -> str | None:
    """Return the unquoted string or the raw object literal of a data match."""
    if not match:
        return None
    return match.group(2) or match.group(1)


def parse_axios(code: str) -> RequestRecord:
    """Extract a RequestRecord from axios code."""
    fields: dict = {}

    shorthand = SHORTHAND_RE.search(code)
    if shorthand:
        fields["method"] = shorthand.group(1)
        fields["url"] = shorthand.group(2)
    else:
        url = URL_RE.search(code)
        if url:
            fields["url"] = url.group(1)
        method = METHOD_RE.search(code)
        if method:
            fields["method"] = method.group(1)

    fields["headers"] = extract_headers(code)

    auth = _extract_auth(code)
    if auth:
        fields["auth"] = auth

    body = _match_literal(DATA_RE.search(code)) or _match_literal(SHORTHAND_DATA_RE.search(code))
    if body:
        fields["body"] = body

    return RequestRecord(**fields)
