"""cppgen configuration.

A single, immutable description of the project to scaffold.  The model uses
Pydantic v2 so every field is validated at construction time; once a
``ScaffoldConfig`` exists it is known to be well formed and the scaffolder
treats it as read-only for the whole synthesis run.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cppgen.errors import InvalidConfigurationError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """What the generated project builds."""
    EXECUTABLE = "exec"
    LIBRARY = "lib"


class ScriptStyle(str, Enum):
    """Flavour of the generated ``setup``/``build`` helper scripts."""
    BAT = "bat"
    SH = "sh"


# ---------------------------------------------------------------------------
# Project name rules
# ---------------------------------------------------------------------------

_RESERVED_CHARS = set('<>:"/\\|?*')

_RESERVED_DEVICE_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


def name_problem(name: str) -> str | None:
    """Return why *name* cannot be used as a project directory, or ``None``.

    The name has to be a single path segment that every mainstream
    filesystem accepts, because it becomes the root directory of the
    generated project.
    """
    if not name:
        return "project name must not be empty"
    if name in (".", ".."):
        return f"project name {name!r} is not a directory name"
    if name != name.strip():
        return "project name must not start or end with whitespace"
    bad = sorted({ch for ch in name if ch in _RESERVED_CHARS})
    if bad:
        return f"project name contains reserved characters: {' '.join(bad)}"
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in name):
        return "project name contains control characters"
    if name.endswith("."):
        return "project name must not end with a dot"
    if name.split(".")[0].upper() in _RESERVED_DEVICE_NAMES:
        return f"project name {name!r} is a reserved device name"
    return None


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------

class ScaffoldConfig(BaseModel):
    """Everything the scaffolder needs to know about the project to create.

    Instances are frozen.  Build them with :meth:`create` (or
    :meth:`from_env` / :meth:`load`) to get an
    :class:`~cppgen.errors.InvalidConfigurationError` instead of a raw
    Pydantic ``ValidationError`` on bad input.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="project", description="Project and root directory name")
    artifact_kind: ArtifactKind = Field(
        default=ArtifactKind.EXECUTABLE,
        description="Build an executable ('exec') or a library ('lib')",
    )
    use_clang_tidy: bool = Field(default=False, description="Emit .clang-tidy and the lint hook")
    use_conan: bool = Field(default=False, description="Emit conanfile.txt and Conan integration")
    generator: str = Field(default="cmake", min_length=1, description="Build-system generator id")
    script_style: ScriptStyle = Field(
        default=ScriptStyle.BAT,
        description="Write helper scripts as Windows batch ('bat') or POSIX shell ('sh')",
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        problem = name_problem(value)
        if problem is not None:
            raise ValueError(problem)
        return value

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def script_ext(self) -> str:
        """File extension of the helper scripts."""
        return self.script_style.value

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, **fields: Any) -> "ScaffoldConfig":
        """Validate *fields* and build a configuration.

        Raises:
            InvalidConfigurationError: listing every rejected field.
        """
        try:
            return cls(**fields)
        except ValidationError as exc:
            raise InvalidConfigurationError(_describe_errors(exc)) from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a configuration from environment variables.

        Recognised variables (all optional):
            CPPGEN_NAME, CPPGEN_CONFIG_TYPE, CPPGEN_USE_CLANG_TIDY,
            CPPGEN_USE_CONAN, CPPGEN_GENERATOR, CPPGEN_SCRIPT_STYLE.

        Keyword *overrides* win over the environment; ``None`` values are
        ignored so callers can pass "not specified" straight through.
        """
        fields = env_fields()
        fields.update({key: value for key, value in overrides.items() if value is not None})
        return cls.create(**fields)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            InvalidConfigurationError: if the file is not UTF-8 text or its
                content does not validate.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidConfigurationError([f"{path} is not UTF-8 text: {exc.reason}"]) from exc
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidConfigurationError(_describe_errors(exc)) from exc


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

def env_fields() -> dict[str, Any]:
    """Collect configuration fields set through ``CPPGEN_*`` variables.

    Only variables that are present and non-empty appear in the result.
    """
    fields: dict[str, Any] = {}
    if os.environ.get("CPPGEN_NAME"):
        fields["name"] = os.environ["CPPGEN_NAME"]
    if os.environ.get("CPPGEN_CONFIG_TYPE"):
        fields["artifact_kind"] = os.environ["CPPGEN_CONFIG_TYPE"]
    if os.environ.get("CPPGEN_USE_CLANG_TIDY"):
        fields["use_clang_tidy"] = _env_flag(os.environ["CPPGEN_USE_CLANG_TIDY"])
    if os.environ.get("CPPGEN_USE_CONAN"):
        fields["use_conan"] = _env_flag(os.environ["CPPGEN_USE_CONAN"])
    if os.environ.get("CPPGEN_GENERATOR"):
        fields["generator"] = os.environ["CPPGEN_GENERATOR"]
    if os.environ.get("CPPGEN_SCRIPT_STYLE"):
        fields["script_style"] = os.environ["CPPGEN_SCRIPT_STYLE"]
    return fields


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _env_flag(value: str) -> bool:
    """Interpret an environment variable as a boolean switch."""
    return value.strip().lower() in ("1", "true", "yes", "on")


def _describe_errors(exc: ValidationError) -> list[str]:
    """Flatten a Pydantic ``ValidationError`` into one line per problem."""
    problems: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "config"
        problems.append(f"{location}: {error['msg']}")
    return problems
