"""Registry of supported build-system generators.

Maps a generator id (as given on the command line) to the class that
implements it.  The table is fixed at import time and never mutated; adding
a build-system family means adding one entry here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from cppgen.errors import UnsupportedGeneratorError

from .build_gen import BuildGenerator
from .cmake_gen import CMakeGenerator
from .templates import TemplateRenderer

GENERATORS: Mapping[str, type[BuildGenerator]] = MappingProxyType({
    "cmake": CMakeGenerator,
})


def supported_generators() -> list[str]:
    """Return the registered generator ids, sorted."""
    return sorted(GENERATORS)


def get_generator(
    generator_id: str, renderer: TemplateRenderer | None = None
) -> BuildGenerator:
    """Return a fresh generator instance for *generator_id*.

    Raises:
        UnsupportedGeneratorError: if *generator_id* is not registered.
    """
    try:
        generator_cls = GENERATORS[generator_id]
    except KeyError:
        raise UnsupportedGeneratorError(generator_id, GENERATORS) from None
    return generator_cls(renderer)
