"""Allow ``python -m edith``."""

from .cli import main

if __name__ == "__main__":
    main()
