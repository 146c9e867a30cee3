"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and generates a complete C++ project directory:
the ``src``/``include``/``build`` skeleton, a starter ``main.cpp``, the build
descriptor of the selected generator, ``setup``/``build`` helper scripts and
the optional Conan manifest and clang-tidy policy.
"""

from __future__ import annotations

import stat
from pathlib import Path

from cppgen.config import ScaffoldConfig, ScriptStyle
from cppgen.errors import SynthesisError

from .build_gen import BuildGenerator
from .registry import get_generator
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

SUBDIRECTORIES: tuple[str, ...] = ("src", "include", "build")

MAIN_SOURCE = "src/main.cpp"
CONAN_MANIFEST = "conanfile.txt"
CLANG_TIDY_FILE = ".clang-tidy"
GITIGNORE_FILE = ".gitignore"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    The build-system generator is resolved from the registry when the
    ``ProjectGenerator`` is constructed, so an unsupported generator id
    fails before anything touches the filesystem.

    Synthesis is not transactional: the first failing directory or file
    aborts the run with a :class:`~cppgen.errors.SynthesisError` and whatever
    was already created is left in place.

    Attributes:
        config: The (frozen) project configuration.
        build_gen: The build-system generator used for this run.
        created: Every directory and file created so far, in creation order.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        build_gen: BuildGenerator | None = None,
    ) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.build_gen = build_gen or get_generator(config.generator, self.renderer)
        self.created: list[Path] = []

    # -- Public API --------------------------------------------------------

    def render_artifacts(self) -> dict[str, str]:
        """Render every file of the project without touching the filesystem.

        Returns:
            Ordered mapping of project-relative POSIX path to file content.
        """
        config = self.config
        ext = config.script_ext

        artifacts: dict[str, str] = {
            MAIN_SOURCE: self.renderer.render("main.cpp.j2"),
            self.build_gen.descriptor_filename: self.build_gen.generate_build_file(config),
            f"setup.{ext}": self._render_script(self.build_gen.setup_command(config)),
            f"build.{ext}": self._render_script(self.build_gen.build_command(config)),
        }

        if config.use_conan:
            artifacts[CONAN_MANIFEST] = self.renderer.render(
                "conanfile.txt.j2", {"generator": config.generator}
            )

        if config.use_clang_tidy:
            artifacts[CLANG_TIDY_FILE] = self.renderer.render("clang-tidy.j2")

        artifacts[GITIGNORE_FILE] = self.renderer.render("gitignore.j2")
        return artifacts

    def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the complete project structure.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  A subdirectory named after the project is created
                inside it and must not exist yet.

        Returns:
            Path to the generated project root.

        Raises:
            SynthesisError: if a directory or file cannot be created.
        """
        project_root = Path(output_dir) / self.config.name
        artifacts = self.render_artifacts()

        # 1. Create the skeleton directory structure
        self._create_directory_structure(project_root)

        # 2. Write source, descriptor, scripts and optional config files
        for rel_path, content in artifacts.items():
            self._write_file(project_root / rel_path, content)

        # 3. Shell scripts must be runnable straight after generation
        if self.config.script_style is ScriptStyle.SH:
            for script in ("setup", "build"):
                self._make_executable(project_root / f"{script}.{self.config.script_ext}")

        return project_root

    # -- Directory structure -----------------------------------------------

    def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and its subdirectories.

        The root is created without ``exist_ok`` so an existing project is
        never merged into or overwritten.
        """
        for directory in (root, *(root / sub for sub in SUBDIRECTORIES)):
            try:
                directory.mkdir()
            except OSError as exc:
                raise SynthesisError(directory, "directory", _reason(exc)) from exc
            self.created.append(directory)

    # -- File output -------------------------------------------------------

    def _render_script(self, command: str) -> str:
        """Wrap a command sequence in the configured script flavour."""
        template = f"scripts/script.{self.config.script_ext}.j2"
        return self.renderer.render(template, {"command": command})

    def _write_file(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise SynthesisError(path, "file", _reason(exc)) from exc
        self.created.append(path)

    def _make_executable(self, path: Path) -> None:
        """Set the executable bit on a file."""
        try:
            current = path.stat().st_mode
            path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as exc:
            raise SynthesisError(path, "file", _reason(exc)) from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _reason(exc: OSError) -> str:
    """Human-readable cause of an ``OSError``."""
    return exc.strerror or str(exc)
