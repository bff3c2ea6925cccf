"""Assembler dialect descriptor.

WHY: NASM, FASM and GNU as all accept plain byte-definition directives,
but they spell the directive, the "current position" expression and the
global-symbol declaration differently. Everything the transcoder needs to
know about a dialect fits in five strings.

HOW: DialectDescriptor is a frozen dataclass holding those strings, with
small helpers that render the non-data lines of the output.

RULES:
- Descriptors are immutable once created
- ``name`` is the exact, case-sensitive CLI selector
- Helpers return lines WITHOUT the trailing newline
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DialectDescriptor:
    """Syntax tokens for one target assembler.

    Attributes:
        name: CLI selector, e.g. ``"nasm"``.
        byte_directive: Token that starts a byte-array line, e.g. ``".byte"``.
        size_expr_prefix: Prefix of the "here minus label" expression,
                          e.g. ``"dd $-"``.
        export_prefix: Opening token of a global declaration, e.g. ``"[GLOBAL "``.
        export_suffix: Closing token of a global declaration, e.g. ``"]"``.
    """

    name: str
    byte_directive: str
    size_expr_prefix: str
    export_prefix: str
    export_suffix: str = ""

    def export_line(self, symbol: str) -> str:
        return "{}{}{}".format(self.export_prefix, symbol, self.export_suffix)

    def label_line(self, symbol: str) -> str:
        return "{}:".format(symbol)

    def size_line(self, stem: str) -> str:
        """Size definition resolved by the assembler, not by this tool."""
        return "{stem}_file_size: {prefix}{stem}_file".format(
            stem=stem, prefix=self.size_expr_prefix,
        )
