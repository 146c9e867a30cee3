"""Exceptions raised by cppgen.

Every failure a synthesis run can hit is a subclass of ``CppgenError`` so the
CLI can report it with a single ``except`` clause.  All of them are terminal
for the run: nothing is retried and nothing already written is rolled back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class CppgenError(Exception):
    """Base class for every cppgen failure."""


class InvalidConfigurationError(CppgenError):
    """Raised when a configuration is rejected before synthesis begins."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems = list(problems)
        detail = "; ".join(self.problems) or "unknown problem"
        super().__init__(f"Invalid configuration: {detail}")


class UnsupportedGeneratorError(CppgenError):
    """Raised when a generator id is not present in the registry."""

    def __init__(self, generator_id: str, supported: Iterable[str] = ()) -> None:
        self.generator_id = generator_id
        self.supported = sorted(supported)
        message = f"Specified unsupported generator: {generator_id!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class SynthesisError(CppgenError):
    """Raised when a directory or file of the project cannot be created.

    Wraps the underlying ``OSError`` (available as ``__cause__``) and names
    the path that failed.
    """

    def __init__(self, path: Path, what: str, reason: str) -> None:
        self.path = Path(path)
        self.what = what
        super().__init__(f'Failed to create {what} "{self.path}": {reason}')
