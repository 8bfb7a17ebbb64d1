"""CLI entry point for curlgen."""

import sys
from pathlib import Path

import click

from curlgen.generator.registry import OUTPUT_FORMATS, get_generator
from curlgen.parser.base import RequestRecord
from curlgen.parser.detect import INPUT_FORMATS, detect_format, parse_input

VERSION = "1.0.0"


class CurlgenError(click.ClickException):
    """A fatal, user-facing error: red prefix on stderr, exit code 1."""

    def show(self, file=None):
        click.echo(f"{click.style('Error:', fg='red')} {self.format_message()}", err=True)


def _read_file(file_path: str) -> str:
    try:
        return Path(file_path).resolve().read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise CurlgenError(f"Can't read file: {file_path}\n{e}") from e


def _read_stdin() -> str:
    """Drain piped stdin; an interactive terminal yields no input."""
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    try:
        return sys.stdin.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise CurlgenError(f"Can't read stdin\n{e}") from e


def _render(req: RequestRecord, to_fmt: str, as_json: bool, as_yaml: bool) -> str:
    if as_json:
        return req.to_json()
    if as_yaml:
        return req.to_yaml()
    return get_generator(to_fmt).generate(req)


def _convert(text: str, to_fmt: str, from_fmt: str | None, as_json: bool, as_yaml: bool, show_all: bool, verbose: bool) -> None:
    fmt = from_fmt or detect_format(text)
    if fmt == "unknown":
        raise CurlgenError("Can't detect input format. Use --from to specify.")
    if fmt not in INPUT_FORMATS:
        raise CurlgenError(f"Unknown format: {fmt}")
    if not (as_json or as_yaml) and to_fmt not in OUTPUT_FORMATS:
        raise CurlgenError(f"Unknown output format: {to_fmt}. Use {', '.join(OUTPUT_FORMATS)}.")

    if verbose:
        click.echo(f"Input format: {fmt}", err=True)

    requests = parse_input(text, fmt)
    if verbose:
        click.echo(f"Parsed {len(requests)} request(s).", err=True)

    if fmt == "postman" and not show_all and len(requests) > 1:
        click.secho(
            f"Found {len(requests)} requests. Use --all to convert all, or showing first only.\n",
            fg="yellow",
        )
        requests = requests[:1]

    for i, req in enumerate(requests):
        if len(requests) > 1:
            click.secho(f"--- Request {i + 1} ---", fg="cyan", bold=True)
            click.secho(f"{req.method} {req.url}\n", dim=True)

        click.echo(_render(req, to_fmt, as_json, as_yaml))

        if i < len(requests) - 1:
            click.echo()


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
@click.argument("input_parts", nargs=-1, type=click.UNPROCESSED)
@click.option("--to", "to_fmt", default="fetch", show_default=True, envvar="CURLGEN_TO", help=f"Output format: {', '.join(OUTPUT_FORMATS)}.")
@click.option("--from", "from_fmt", default=None, envvar="CURLGEN_FROM", help=f"Input format: {', '.join(INPUT_FORMATS)} (auto-detected).")
@click.option("-f", "--file", "file_path", default=None, help="Read input from file.")
@click.option("--json", "as_json", is_flag=True, help="Output the parsed request as JSON.")
@click.option("--yaml", "as_yaml", is_flag=True, help="Output the parsed request as YAML.")
@click.option("--all", "show_all", is_flag=True, help="For Postman: convert all requests.")
@click.option("--verbose", is_flag=True, help="Report the detected format on stderr.")
@click.version_option(VERSION, "-v", "--version", prog_name="curlgen", message="%(prog)s v%(version)s")
def main(input_parts: tuple[str, ...], to_fmt: str, from_fmt: str | None, file_path: str | None, as_json: bool, as_yaml: bool, show_all: bool, verbose: bool):
    """Convert between cURL, fetch, and axios code.

    INPUT is a curl command, a fetch/axios snippet or a Postman collection.
    It may also come from --file or be piped on stdin.
    """
    text = " ".join(input_parts)

    if file_path:
        text = _read_file(file_path)

    if not text:
        text = _read_stdin()

    if not text:
        raise CurlgenError("No input provided. Use --help for usage.")

    try:
        _convert(text, to_fmt, from_fmt, as_json, as_yaml, show_all, verbose)
    except click.ClickException:
        raise
    except Exception as e:
        raise CurlgenError(str(e)) from e
