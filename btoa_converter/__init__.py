"""btoa converter: embed binary files in assembler source.

WHY: Not every assembler can include a binary file directly. Every
assembler can define bytes, so any blob (image, font, firmware) can be
embedded as a plain byte array plus a label and a size symbol.

HOW: Two-stage pipeline: pick a dialect from the dialect table, then
stream the input through the transcoder into assembler source text.

RULES:
- Output format is a compatibility contract with downstream assemblers
- Adding a dialect = one new descriptor in dialects/__init__.py, no core changes
- The transcoder never holds the whole input in memory
"""

__version__ = "0.1.0"
