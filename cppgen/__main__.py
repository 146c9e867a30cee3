"""Allow ``python -m cppgen``."""

from cppgen.cli import main

if __name__ == "__main__":
    main()
