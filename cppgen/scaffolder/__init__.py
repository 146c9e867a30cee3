"""cppgen scaffolder -- generates C++ project structures.

This module takes a ``ScaffoldConfig`` and renders a ready-to-build C++
project directory: source skeleton, build descriptor, helper scripts and the
optional Conan and clang-tidy files.

Quick usage::

    from cppgen.config import ScaffoldConfig
    from cppgen.scaffolder import ProjectGenerator

    config = ScaffoldConfig.create(name="demo", use_conan=True)
    generator = ProjectGenerator(config)
    project_path = generator.generate("/tmp/output")
"""

from cppgen.scaffolder.build_gen import BuildGenerator
from cppgen.scaffolder.cmake_gen import CMakeGenerator
from cppgen.scaffolder.generator import ProjectGenerator
from cppgen.scaffolder.registry import get_generator, supported_generators
from cppgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "BuildGenerator",
    "CMakeGenerator",
    "ProjectGenerator",
    "TemplateRenderer",
    "get_generator",
    "supported_generators",
]
