"""Allow running as ``python -m tvcode``."""

from tvcode.cli import main

if __name__ == "__main__":
    main()
