"""Package entry point for ``python -m byte_converter``."""

from byte_converter.cli import main

if __name__ == "__main__":
    main()
