"""Auto-detect the format of request input text."""

import json

from .axios import parse_axios
from .base import RequestRecord, UnknownFormatError
from .curl import parse_curl
from .fetch import parse_fetch
from .postman import parse_postman

INPUT_FORMATS = ("curl", "fetch", "axios", "postman")


def detect_format(text: str) -> str:
    """Detect the format of the given input.

    Returns: 'curl', 'postman', 'fetch', 'axios', or 'unknown'.
    """
    trimmed = text.strip()
    if trimmed.startswith("curl ") or trimmed.startswith("curl\n"):
        return "curl"

    try:
        data = json.loads(trimmed)
        if isinstance(data, dict) and "info" in data and "item" in data:
            return "postman"
    except (ValueError, RecursionError):
        pass

    if "fetch(" in trimmed or "fetch (" in trimmed:
        return "fetch"
    if "axios" in trimmed:
        return "axios"

    return "unknown"


def parse_input(text: str, fmt: str) -> list[RequestRecord]:
    """Parse input text of a known format into one or more RequestRecords."""
    if fmt == "curl":
        return [parse_curl(text)]
    elif fmt == "fetch":
        return [parse_fetch(text)]
    elif fmt == "axios":
        return [parse_axios(text)]
    elif fmt == "postman":
        return parse_postman(text)
    raise UnknownFormatError(f"Unknown format: {fmt}")
