"""cURL command generator."""

from curlgen.parser.base import RequestRecord

from .base import BaseGenerator

SEPARATOR = " \\\n  "


def shell_quote(value: str) -> str:
    """Single-quote a shell argument, encoding embedded quotes as '\\''."""
    return "'" + value.replace("'", "'\\''") + "'"


class CurlGenerator(BaseGenerator):
    """Generates a multi-line curl command."""

    name = "curl"

    def generate(self, request: RequestRecord) -> str:
        parts = ["curl"]

        if request.method != "GET":
            parts.append(f"-X {request.method}")

        parts.append(shell_quote(request.url))

        for key, value in request.headers.items():
            parts.append(f"-H {shell_quote(f'{key}: {value}')}")

        if request.auth:
            parts.append(f"-u {shell_quote(f'{request.auth.user}:{request.auth.password}')}")

        if request.body:
            parts.append(f"-d {shell_quote(request.body)}")

        if request.insecure:
            parts.append("-k")

        return SEPARATOR.join(parts)
