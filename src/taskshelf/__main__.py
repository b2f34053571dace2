"""Entry point for taskshelf when run as a module.

This allows the package to be run with: python -m taskshelf
"""

from taskshelf.main import main

if __name__ == "__main__":
    main()
