"""Allow ``python -m pathcycle``."""

from pathcycle.cli import main

if __name__ == "__main__":
    main()
