"""Build-system generator contract.

A ``BuildGenerator`` knows one family of build tooling.  Given a
``ScaffoldConfig`` it produces the text of the build descriptor plus the
command lines needed to configure and compile the generated tree.  All three
operations are pure text composition; the ``ProjectGenerator`` decides where
the results are written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cppgen.config import ScaffoldConfig

from .templates import TemplateRenderer

# Commands that install Conan packages from inside the build directory.
CONAN_INSTALL_PREFIX: tuple[str, ...] = (
    "cd build",
    "conan install .. --build missing",
    "cd ..",
)


class BuildGenerator(ABC):
    """Abstract build-system generator.

    Subclasses are stateless: a fresh instance is created for every
    synthesis run and nothing is shared between runs.

    Attributes:
        descriptor_filename: Canonical name of the build descriptor written
            at the project root (e.g. ``CMakeLists.txt``).
        source_ext: Extension of the C++ translation units the descriptor
            refers to.
    """

    descriptor_filename: str = ""
    source_ext: str = "cpp"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    @abstractmethod
    def generate_build_file(self, config: ScaffoldConfig) -> str:
        """Return the full text of the build descriptor for *config*."""

    @abstractmethod
    def configure_command(self, config: ScaffoldConfig) -> str:
        """Return the command that configures the build tree."""

    @abstractmethod
    def build_command(self, config: ScaffoldConfig) -> str:
        """Return the command that compiles an already-configured tree."""

    def setup_command(self, config: ScaffoldConfig) -> str:
        """Return the command sequence that prepares the build tree.

        With Conan enabled the dependency install step runs from the build
        directory strictly before the configure command.
        """
        lines: list[str] = []
        if config.use_conan:
            lines.extend(CONAN_INSTALL_PREFIX)
        lines.append(self.configure_command(config))
        return "\n".join(lines)
