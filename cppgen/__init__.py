"""cppgen -- scaffolds new C++ projects (CMake, optional Conan and clang-tidy)."""

__version__ = "0.1.0"
