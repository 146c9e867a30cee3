"""CMake build descriptor generation.

Renders ``CMakeLists.txt`` from the ``cmake/CMakeLists.txt.j2`` template and
provides the Ninja-based configure command and the ``cmake --build`` command
for the generated project.
"""

from __future__ import annotations

from typing import Any

from cppgen.config import ArtifactKind, ScaffoldConfig
from cppgen.errors import InvalidConfigurationError

from .build_gen import BuildGenerator


class CMakeGenerator(BuildGenerator):
    """Generates a ``CMakeLists.txt`` plus CMake/Ninja helper commands."""

    descriptor_filename = "CMakeLists.txt"

    _TEMPLATE = "cmake/CMakeLists.txt.j2"
    _MIN_VERSION = "3.20"
    _PROJECT_VERSION = "0.1.0"
    _CXX_STANDARD = "c++20"

    def generate_build_file(self, config: ScaffoldConfig) -> str:
        return self.renderer.render(self._TEMPLATE, self._build_context(config))

    def configure_command(self, config: ScaffoldConfig) -> str:
        return "cmake -G Ninja -S . -B build -DCMAKE_EXPORT_COMPILE_COMMANDS=1"

    def build_command(self, config: ScaffoldConfig) -> str:
        return "cmake --build ./build"

    def _build_context(self, config: ScaffoldConfig) -> dict[str, Any]:
        """Build the Jinja2 template context for ``CMakeLists.txt``."""
        try:
            kind = ArtifactKind(config.artifact_kind)
        except ValueError as exc:
            raise InvalidConfigurationError(
                [f"artifact_kind: unsupported value {config.artifact_kind!r}"]
            ) from exc

        return {
            "name": config.name,
            "is_library": kind is ArtifactKind.LIBRARY,
            "use_clang_tidy": config.use_clang_tidy,
            "use_conan": config.use_conan,
            "source_ext": self.source_ext,
            "cmake_min_version": self._MIN_VERSION,
            "project_version": self._PROJECT_VERSION,
            "cxx_standard": self._CXX_STANDARD,
        }
