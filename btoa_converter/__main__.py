"""Package entry point for ``python -m btoa_converter``.

WHY: Lets users run the converter without the ``btoa`` console script
being on PATH.

HOW: Delegates to the CLI's main() function.
"""

from btoa_converter.cli import main

if __name__ == "__main__":
    main()
