"""Allow running as `python -m expr_calc`."""

from .cli import main

if __name__ == "__main__":
    main()
