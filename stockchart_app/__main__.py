"""Entry point for ``python -m stockchart_app``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
