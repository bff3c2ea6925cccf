"""Unit tests for the dialect table.

WHY: The directive and export tokens are copied verbatim into generated
source. A typo here silently produces files the assembler rejects.

HOW: Tests pin the exact token strings of every shipped dialect and check
lookup semantics (exact, case-sensitive, read-only).
"""

import dataclasses

import pytest

from btoa_converter.dialects import DIALECTS, list_dialects, lookup_dialect
from btoa_converter.dialects.base import DialectDescriptor


class TestDialectTable:
    """The shipped dialects and their tokens."""

    def test_definition_order(self):
        assert list_dialects() == ["nasm", "fasm", "as"]

    def test_names_are_unique(self):
        names = list_dialects()
        assert len(names) == len(set(names))

    def test_keys_match_descriptor_names(self):
        for name, dialect in DIALECTS.items():
            assert dialect.name == name

    @pytest.mark.parametrize("name,tokens", [
        ("nasm", ("db", "dd $-", "[GLOBAL ", "]")),
        ("fasm", ("db", "dd $-", "global ", "")),
        ("as", (".byte", ".long .-", ".globl ", "")),
    ])
    def test_tokens(self, name, tokens):
        dialect = lookup_dialect(name)
        assert (
            dialect.byte_directive,
            dialect.size_expr_prefix,
            dialect.export_prefix,
            dialect.export_suffix,
        ) == tokens


class TestLookup:
    """lookup_dialect() is exact and case-sensitive."""

    def test_known_name(self):
        assert lookup_dialect("fasm") is DIALECTS["fasm"]

    @pytest.mark.parametrize("name", ["NASM", "Nasm", "nas", "gas", "", " as"])
    def test_unknown_name(self, name):
        assert lookup_dialect(name) is None

    def test_miss_does_not_mutate_table(self):
        before = dict(DIALECTS)
        lookup_dialect("masm")
        assert dict(DIALECTS) == before
        assert list_dialects() == ["nasm", "fasm", "as"]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DIALECTS["masm"] = DIALECTS["nasm"]

    def test_list_is_a_copy(self):
        names = list_dialects()
        names.append("masm")
        assert "masm" not in DIALECTS


class TestDescriptor:
    """DialectDescriptor rendering helpers."""

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DIALECTS["nasm"].name = "yasm"

    def test_export_line_nasm(self):
        assert DIALECTS["nasm"].export_line("a_file") == "[GLOBAL a_file]"

    def test_export_line_gnu_as(self):
        assert DIALECTS["as"].export_line("a_file") == ".globl a_file"

    def test_label_line(self):
        assert DIALECTS["fasm"].label_line("a_file") == "a_file:"

    def test_size_line(self):
        assert DIALECTS["as"].size_line("a") == "a_file_size: .long .-a_file"

    def test_new_dialect_is_pure_data(self):
        custom = DialectDescriptor(
            name="custom",
            byte_directive="DB",
            size_expr_prefix="DW *-",
            export_prefix="PUBLIC ",
        )
        assert custom.export_line("x_file") == "PUBLIC x_file"
        assert custom.size_line("x") == "x_file_size: DW *-x_file"
