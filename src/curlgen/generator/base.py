"""Shared helpers for code generators."""

import json

from curlgen.parser.base import RequestRecord


class BaseGenerator:
    """Renders a RequestRecord as source text in one target format."""

    name = ""

    def generate(self, request: RequestRecord) -> str:
        raise NotImplementedError

    # -- literal helpers ------------------------------------------------------

    @staticmethod
    def _quote(value: str) -> str:
        """Wrap a value in a single-quoted JavaScript string literal."""
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    @staticmethod
    def _json_literal(body: str) -> str | None:
        """Return the body as an inline literal if it is valid JSON, else None."""
        try:
            json.loads(body)
        except (ValueError, RecursionError):
            return None
        return body.strip()

    def _body_literal(self, body: str) -> str:
        return self._json_literal(body) or self._quote(body)
