"""Main entry point for collabrank CLI when run as a module."""

from collabrank.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
