"""Package entry point for ``python -m strutil``.

WHY: Python's ``-m`` flag looks for ``__main__.py`` inside the package.

HOW: Delegates to the CLI's main() function.
"""

from strutil.cli import main

if __name__ == "__main__":
    main()
