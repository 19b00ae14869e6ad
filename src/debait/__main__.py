"""Allow running as `python -m debait`."""

from debait.cli import main

if __name__ == "__main__":
    main()
