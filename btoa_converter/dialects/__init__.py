"""Supported assembler dialects.

WHY: The CLI, usage text and tests need a single lookup to find a dialect
by name. A central table makes adding a dialect a one-line change: add a
descriptor to _DIALECT_LIST.

HOW: DIALECTS maps dialect names to DialectDescriptor instances in
definition order. It is wrapped in a MappingProxyType so nothing can
register or replace entries at runtime.

RULES:
- Names are unique; lookup is exact and case-sensitive
- list_dialects() keeps definition order (not sorted)
- Token strings are a compatibility contract; do not change them
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from btoa_converter.dialects.base import DialectDescriptor

_DIALECT_LIST = (
    DialectDescriptor(
        name="nasm",
        byte_directive="db",
        size_expr_prefix="dd $-",
        export_prefix="[GLOBAL ",
        export_suffix="]",
    ),
    DialectDescriptor(
        name="fasm",
        byte_directive="db",
        size_expr_prefix="dd $-",
        export_prefix="global ",
    ),
    DialectDescriptor(
        name="as",
        byte_directive=".byte",
        size_expr_prefix=".long .-",
        export_prefix=".globl ",
    ),
)

DIALECTS: Mapping[str, DialectDescriptor] = MappingProxyType(
    {dialect.name: dialect for dialect in _DIALECT_LIST}
)


def lookup_dialect(name: str) -> Optional[DialectDescriptor]:
    """Return the dialect registered under ``name``, or None."""
    return DIALECTS.get(name)


def list_dialects() -> List[str]:
    """Dialect names in definition order, for usage text."""
    return list(DIALECTS)


__all__ = ["DIALECTS", "DialectDescriptor", "list_dialects", "lookup_dialect"]
