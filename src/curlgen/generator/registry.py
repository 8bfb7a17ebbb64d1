"""Lookup of generators by output format name."""

from curlgen.parser.base import UnknownFormatError

from .axios import AxiosGenerator
from .base import BaseGenerator
from .curl import CurlGenerator
from .fetch import FetchGenerator

GENERATORS: dict[str, type[BaseGenerator]] = {
    gen.name: gen for gen in (FetchGenerator, AxiosGenerator, CurlGenerator)
}

OUTPUT_FORMATS = tuple(GENERATORS)


def get_generator(name: str) -> BaseGenerator:
    """Return a generator instance for the given output format name."""
    try:
        return GENERATORS[name]()
    except KeyError:
        raise UnknownFormatError(
            f"Unknown output format: {name}. Use {', '.join(OUTPUT_FORMATS)}."
        ) from None
