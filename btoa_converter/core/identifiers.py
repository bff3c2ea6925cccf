"""Symbol stem derivation from input file names.

WHY: The exported symbols are named after the input file
(``login-screen.bmp`` -> ``login_screen_bmp_file``). File names routinely
contain characters that no assembler accepts in a bare identifier.

HOW: derive_stem() drops directory components, then sanitize_identifier()
replaces every character outside ``[A-Za-z0-9_]`` with ``_``. Both are pure
functions; the caller's path is left untouched for opening the file.

RULES:
- '.' and '-' never survive sanitization
- Every other legal character is copied verbatim, in place
- Length is preserved (one replacement per offending character)
- No deduplication or leading-digit handling
"""

from __future__ import annotations

import os
import re
from pathlib import Path

_ILLEGAL_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identifier(name: str) -> str:
    """Replace characters that are not legal in a bare assembler identifier."""
    return _ILLEGAL_IDENTIFIER_CHARS.sub("_", name)


def derive_stem(path: str | Path) -> str:
    """Build the symbol stem for an input file path.

    Args:
        path: Input file path as given on the command line.

    Returns:
        The sanitized base name, e.g. ``"assets/login-screen.bmp"`` gives
        ``"login_screen_bmp"``.
    """
    return sanitize_identifier(os.path.basename(os.fspath(path)))
