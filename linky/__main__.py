"""Entry point for running linky as a module."""

from linky.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
