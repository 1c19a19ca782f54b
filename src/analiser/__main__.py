"""Allow ``python -m analiser``."""

from analiser.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
