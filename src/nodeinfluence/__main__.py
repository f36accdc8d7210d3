"""Allow ``python -m nodeinfluence``."""

from nodeinfluence.cli.app import main

if __name__ == "__main__":
    main()
