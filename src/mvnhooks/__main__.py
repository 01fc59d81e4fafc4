"""Entry point for ``python -m mvnhooks``."""

import sys

from mvnhooks.cli import run


def main() -> None:
    """Install git hooks and exit with the resulting status."""
    sys.exit(run())


if __name__ == "__main__":
    main()
