"""Package entry point for ``python -m hyphenate_german``.

WHY: Users run the hyphenator as ``python -m hyphenate_german input.txt``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from hyphenate_german.cli import main

if __name__ == "__main__":
    main()
