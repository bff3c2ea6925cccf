"""Streaming binary-to-assembly transcoder.

WHY: This is the heart of the converter. A binary file has to become an
assembler source fragment that any assembler can digest with nothing more
than its byte-definition directive, while the file itself may be far
larger than we want to hold in memory.

HOW: transcode() writes the label export and definition, then reads the
input in bounded chunks. Each chunk is rendered by render_data_body() and
written to the sink before the next read, so memory stays constant and
the sink always holds every literal read so far. After end of input the
size export and definition are written.

Output layout (nasm, 9-byte input ``blob.bin``, ``<TAB>`` is a tab)::

    [GLOBAL blob_bin_file]
    blob_bin_file:

    db<TAB>0x0,<TAB>0x1,<TAB>0x2,<TAB>0x3,<TAB>0x4,<TAB>0x5,<TAB>0x6,<TAB>0x7
    db<TAB>0xff

    [GLOBAL blob_bin_file_size]
    blob_bin_file_size: dd $-blob_bin_file

RULES:
- 8 literals per line; grouping is by absolute byte index, not by chunk
- Literals are ``0x`` + lowercase hex with no zero padding (10 -> 0xa)
- All five blocks are emitted even for an empty input
- A read fault aborts immediately; the size block is NOT written
- No retries; OSErrors are wrapped in ReadError / WriteError
- The returned count equals the number of literals written
"""

from __future__ import annotations

import logging
from typing import BinaryIO, TextIO

from btoa_converter.config import DEFAULT_READ_CHUNK_SIZE, ELEMS_PER_LINE
from btoa_converter.core.errors import ReadError, WriteError
from btoa_converter.dialects.base import DialectDescriptor

logger = logging.getLogger(__name__)

# Literal text for every possible byte value, indexed by the byte itself.
_HEX_LITERALS = tuple("0x{:x}".format(value) for value in range(256))


def render_data_body(data: bytes, start_index: int, directive: str) -> str:
    """Render the data-body text for one chunk of input.

    Args:
        data: The chunk's bytes.
        start_index: Absolute position of ``data[0]`` in the input stream.
            Decides where the chunk falls in the 8-per-line grouping.
        directive: The dialect's byte directive, e.g. ``"db"``.

    Returns:
        Text to append to the output. Empty for an empty chunk.
    """
    line_lead = "\n{}\t".format(directive)
    parts = []
    index = start_index
    for value in data:
        if index % ELEMS_PER_LINE:
            parts.append(",\t")
        else:
            parts.append(line_lead)
        parts.append(_HEX_LITERALS[value])
        index += 1
    return "".join(parts)


def _write(sink: TextIO, text: str, count: int) -> None:
    try:
        sink.write(text)
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(count=count) from exc


def _read(source: BinaryIO, size: int, count: int) -> bytes:
    try:
        return source.read(size)
    except OSError as exc:
        raise ReadError(count=count) from exc


def transcode(
    source: BinaryIO,
    sink: TextIO,
    dialect: DialectDescriptor,
    stem: str,
    chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
) -> int:
    """Convert a binary stream into assembler source text.

    Args:
        source: Readable binary stream, consumed once to end of file.
        sink: Writable text stream. Not closed or flushed here.
        dialect: Target assembler syntax.
        stem: Sanitized symbol stem (see core.identifiers.derive_stem).
        chunk_size: Maximum bytes per read.

    Returns:
        Number of bytes converted (equals the number of literals written).

    Raises:
        ReadError: The source failed before end of file.
        WriteError: A write to the sink failed. The output is inconsistent.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive, got {}".format(chunk_size))

    label = "{}_file".format(stem)
    size_label = "{}_file_size".format(stem)
    count = 0

    _write(sink, "{}\n{}\n".format(dialect.export_line(label), dialect.label_line(label)), count)

    while True:
        chunk = _read(source, chunk_size, count)
        if not chunk:
            break
        _write(sink, render_data_body(chunk, count, dialect.byte_directive), count)
        count += len(chunk)

    _write(
        sink,
        "\n\n{}\n{}\n".format(dialect.export_line(size_label), dialect.size_line(stem)),
        count,
    )

    logger.debug("Transcoded %d bytes as %s (stem %s)", count, dialect.name, stem)
    return count
