"""Main entry point for scriptmark CLI when run as a module."""

from scriptmark.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
