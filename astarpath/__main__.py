"""Allow ``python -m astarpath``."""

from astarpath.cli import main

if __name__ == "__main__":
    main()
