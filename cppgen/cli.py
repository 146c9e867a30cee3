"""Command-line front end for cppgen.

Parses arguments into a validated ``ScaffoldConfig``, runs the scaffolder
and reports the outcome.  Exit status is 0 on success and 1 on any failure
(invalid configuration, unsupported generator, filesystem error).

Usage::

    cppgen --name demo
    cppgen -n mylib --config-type lib --use-conan --use-clang-tidy
    python -m cppgen -n demo --script-style sh -o ./projects
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from cppgen import __version__
from cppgen.config import ArtifactKind, ScaffoldConfig, ScriptStyle, env_fields
from cppgen.errors import CppgenError, InvalidConfigurationError
from cppgen.scaffolder import ProjectGenerator, supported_generators
from cppgen.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Every option defaults to ``None`` so that values from ``--config`` and
    the ``CPPGEN_*`` environment variables are only overridden by options
    that were actually given.
    """
    parser = argparse.ArgumentParser(
        prog="cppgen",
        description="C++ Project Generator -- this tool generates a base C++ project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cppgen --name demo\n"
            "  cppgen -n mylib --config-type lib --use-conan --use-clang-tidy\n"
            "  cppgen -n demo --script-style sh -o ./projects\n"
        ),
    )

    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name, also the name of the created directory (default: project)",
    )
    parser.add_argument(
        "--config-type",
        choices=[kind.value for kind in ArtifactKind],
        default=None,
        help="Build an executable or a library (default: exec)",
    )
    parser.add_argument(
        "--use-clang-tidy",
        action="store_true",
        default=None,
        help="Emit a .clang-tidy policy and enable clang-tidy in the build",
    )
    parser.add_argument(
        "--use-conan",
        action="store_true",
        default=None,
        help="Emit conanfile.txt and wire Conan into the build",
    )
    parser.add_argument(
        "--generator", "-g",
        default=None,
        help=f"Build-system generator, one of: {', '.join(supported_generators())} (default: cmake)",
    )
    parser.add_argument(
        "--script-style",
        choices=[style.value for style in ScriptStyle],
        default=None,
        help="Write setup/build scripts as batch files or shell scripts (default: bat)",
    )
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory in which the project directory is created (default: .)",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Load settings from a JSON file previously written by ScaffoldConfig.save",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ScaffoldConfig:
    """Turn parsed arguments into a validated configuration.

    Settings stack as: ``--config`` file, then ``CPPGEN_*`` environment
    variables, then options given on the command line.

    Raises:
        InvalidConfigurationError: if the resulting configuration is invalid
            or the ``--config`` file cannot be read.
    """
    overrides: dict[str, Any] = {
        "name": args.name,
        "artifact_kind": args.config_type,
        "use_clang_tidy": args.use_clang_tidy,
        "use_conan": args.use_conan,
        "generator": args.generator,
        "script_style": args.script_style,
    }

    if args.config is None:
        return ScaffoldConfig.from_env(**overrides)

    try:
        base = ScaffoldConfig.load(Path(args.config))
    except OSError as exc:
        raise InvalidConfigurationError(
            [f"cannot read {args.config}: {exc.strerror or exc}"]
        ) from exc

    fields = base.model_dump()
    fields.update(env_fields())
    fields.update({key: value for key, value in overrides.items() if value is not None})
    return ScaffoldConfig.create(**fields)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``cppgen`` and ``python -m cppgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        generator = ProjectGenerator(config)

        console.print("Creating C++ project...")
        project_root = generator.generate(Path(args.output))
    except CppgenError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(_describe_created(generator.created, project_root), title=str(project_root))
    print_success("Done.")


def _describe_created(paths: list[Path], root: Path) -> dict[str, str]:
    """Map each created path, relative to *root*, to 'directory' or 'file'."""
    described: dict[str, str] = {}
    for path in paths:
        label = path.relative_to(root).as_posix() if path != root else "."
        described[label] = "directory" if path.is_dir() else "file"
    return described


if __name__ == "__main__":
    main()
