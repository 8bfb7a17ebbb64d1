"""fetch() snippet extractor.

Pulls request fields out of JavaScript fetch code with independent regex
searches. This is not a JavaScript parser: missing or unusual constructs
leave the matching field at its default instead of raising.
"""

import re

from .base import RequestRecord

QUOTED = r"['\"`]([^'\"`]+)['\"`]"

URL_RE = re.compile(r"fetch\s*\(\s*" + QUOTED)
METHOD_RE = re.compile(r"method\s*:\s*['\"`](\w+)['\"`]")
HEADERS_BLOCK_RE = re.compile(r"headers\s*:\s*\{([^}]+)\}", re.DOTALL)
HEADER_PAIR_RE = re.compile(QUOTED + r"\s*:\s*" + QUOTED)
BODY_STRING_RE = re.compile(r"body\s*:\s*" + QUOTED)
BODY_STRINGIFY_RE = re.compile(r"body\s*:\s*JSON\.stringify\s*\(([^)]+)\)", re.DOTALL)


def extract_headers(code: str) -> dict[str, str]:
    """Collect quoted ``'key': 'value'`` pairs from the first headers block."""
    block = HEADERS_BLOCK_RE.search(code)
    if not block:
        return {}
    return {key: value for key, value in HEADER_PAIR_RE.findall(block.group(1))}


def parse_fetch(code: str) -> RequestRecord:
    """Extract a RequestRecord from fetch() code."""
    fields: dict = {}

    url = URL_RE.search(code)
    if url:
        fields["url"] = url.group(1)

    method = METHOD_RE.search(code)
    if method:
        fields["method"] = method.group(1)

    fields["headers"] = extract_headers(code)

    stringify = BODY_STRINGIFY_RE.search(code)
    body_string = BODY_STRING_RE.search(code)
    if stringify:
        fields["body"] = stringify.group(1).strip()
    elif body_string:
        fields["body"] = body_string.group(1)

    return RequestRecord(**fields)
