"""Core conversion modules.

WHY: The core package holds the only logic with design decisions in it:
symbol stem derivation and the streaming transcoder, plus the error types
they raise.

HOW: identifiers.py turns a file path into a symbol stem, transcoder.py
writes the assembler source, errors.py defines the failure kinds.

RULES:
- Core code raises BtoaError subclasses and never exits the process
- No module-level mutable state; conversions are independent
"""
