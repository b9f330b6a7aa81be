"""
Package entry point.

Allows running the application via:

    python -m retreat

This simply forwards execution to retreat.cli.main().
"""

from retreat.cli import main

if __name__ == "__main__":
    main()
