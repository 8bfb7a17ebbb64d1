"""axios code generator."""

from curlgen.parser.base import RequestRecord

from .base import BaseGenerator

IMPORT_LINE = "import axios from 'axios';"


class AxiosGenerator(BaseGenerator):
    """Generates an axios call using a config object, or axios.get for bare GETs."""

    name = "axios"

    def generate(self, request: RequestRecord) -> str:
        lines = [IMPORT_LINE, ""]

        if not request.has_options():
            lines.append(f"const {{ data }} = await axios.get({self._quote(request.url)});")
            lines.append("console.log(data);")
            return "\n".join(lines)

        lines.append("const { data } = await axios({")
        lines.extend(self._render_config(request))
        lines.append("});")
        lines.append("")
        lines.append("console.log(data);")

        return "\n".join(lines)

    def _render_config(self, request: RequestRecord) -> list[str]:
        config = [
            f"  method: {self._quote(request.method.lower())},",
            f"  url: {self._quote(request.url)},",
        ]

        if request.headers:
            config.append("  headers: {")
            for key, value in request.headers.items():
                config.append(f"    {self._quote(key)}: {self._quote(value)},")
            config.append("  },")

        if request.auth:
            config.append("  auth: {")
            config.append(f"    username: {self._quote(request.auth.user)},")
            config.append(f"    password: {self._quote(request.auth.password)},")
            config.append("  },")

        if request.body:
            config.append(f"  data: {self._body_literal(request.body)},")

        return config
