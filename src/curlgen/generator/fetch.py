"""fetch() code generator."""

from curlgen.parser.base import RequestRecord

from .base import BaseGenerator

AUTH_HEADER = "Authorization"


class FetchGenerator(BaseGenerator):
    """Generates an awaited fetch() call that prints the JSON response."""

    name = "fetch"

    def generate(self, request: RequestRecord) -> str:
        lines: list[str] = []

        if request.auth:
            credentials = f"{request.auth.user}:{request.auth.password}"
            lines.append(f"const credentials = btoa({self._quote(credentials)});")
            lines.append("")

        url = self._quote(request.url)
        if not request.has_options():
            lines.append(f"const response = await fetch({url});")
        else:
            lines.append(f"const response = await fetch({url}, {{")
            lines.append(f"  method: {self._quote(request.method)},")
            lines.extend(self._render_headers(request))
            if request.body:
                lines.append(f"  body: {self._render_body(request.body)},")
            lines.append("});")

        lines.append("")
        lines.append("const data = await response.json();")
        lines.append("console.log(data);")

        return "\n".join(lines)

    def _render_headers(self, request: RequestRecord) -> list[str]:
        headers = dict(request.headers)
        if request.auth:
            headers[AUTH_HEADER] = ""
        if not headers:
            return []

        lines = ["  headers: {"]
        for key, value in headers.items():
            if key == AUTH_HEADER and request.auth:
                lines.append(f"    {self._quote(key)}: `Basic ${{credentials}}`,")
            else:
                lines.append(f"    {self._quote(key)}: {self._quote(value)},")
        lines.append("  },")
        return lines

    def _render_body(self, body: str) -> str:
        literal = self._json_literal(body)
        if literal is not None:
            return f"JSON.stringify({literal})"
        return self._quote(body)
