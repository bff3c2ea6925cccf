"""Command-line interface for the btoa converter.

WHY: Users need one command that turns a binary file into assembler
source they can drop into a build: ``btoa nasm logo.bmp logo.asm``.

HOW: Uses argparse to accept a dialect name, an input path and an
optional output path. Looks up the dialect, derives the symbol stem from
the input file name, opens the files and runs the transcoder once.
Diagnostics go to stderr; generated source goes to the output file or
to stdout so the CLI can be piped.

RULES:
- Positional arguments: dialect, input file, optional output file
- Wrong argument count or unknown dialect: usage text + error, exit 1
- Bad environment settings: error only, no usage text, exit 1
- Every failure prints one "Error: ..." line to stderr and exits 1
- Write faults warn that the output is inconsistent; the partial output
  file is left in place
- File handles are closed on every exit path; stdout is never closed.
  A failing close after a write fault never hides the WriteError
- Success prints "<N> bytes have been converted." to stderr
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from btoa_converter.config import (
    BANNER,
    PROGRAM_NAME,
    load_chunk_size,
    load_log_level,
)
from btoa_converter.core.errors import (
    BtoaError,
    ConfigError,
    OpenError,
    UsageError,
    WriteError,
)
from btoa_converter.core.identifiers import derive_stem
from btoa_converter.core.transcoder import transcode
from btoa_converter.dialects import list_dialects, lookup_dialect

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout, which may carry the generated
    source.
    """
    print(msg, file=sys.stderr, flush=True)


def _print_usage() -> None:
    _status("Format: {} <lang> <binary file name> [<assembly file name>]".format(PROGRAM_NAME))
    _status("<lang> can be one of: {}".format(" ".join(list_dialects())))
    _status("Put -- before file names that start with '-'.")
    _status("")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations as UsageError.

    argparse exits with status 2 on its own; the converter reports every
    failure through main() with status 1.
    """

    def parse_args(self, args=None, namespace=None):  # type: ignore[override]
        self._argv = list(sys.argv[1:] if args is None else args)
        return super().parse_args(args, namespace)

    def _unknown_options(self) -> List[str]:
        unknown = []
        for arg in getattr(self, "_argv", []):
            if arg == "--":
                break
            if arg.startswith("-") and arg != "-" and arg not in self._option_string_actions:
                unknown.append(arg)
        return unknown

    def error(self, message: str) -> None:  # type: ignore[override]
        logger.debug("Argument parsing failed: %s", message)
        unknown = self._unknown_options()
        if unknown:
            raise UsageError(
                "Unknown option '{}'. Put -- before file names that start "
                "with '-'.".format(unknown[0])
            )
        raise UsageError("At least two parameters are necessary.")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: dialect, input_file (required), output_file (optional)
    - Optional: -v/--verbose for debug logging
    - ``--`` ends option parsing, for file names starting with '-'
    """
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [-v] [--] <lang> <binary file name> [<assembly file name>]",
        description="Convert a binary file into assembler source that defines "
                    "its bytes, a label and a size symbol.",
        epilog="<lang> can be one of: {}. Put -- before file names that "
               "start with '-'.".format(" ".join(list_dialects())),
    )

    parser.add_argument(
        "dialect",
        help="Target assembler syntax.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the binary file to embed.",
    )

    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Path of the assembler source to create (default: stdout).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    try:
        level = load_log_level()
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _flush(sink: TextIO, count: int) -> None:
    try:
        sink.flush()
    except OSError as exc:
        raise WriteError(count=count) from exc


def _close(sink: TextIO, count: int) -> None:
    try:
        sink.close()
    except OSError as exc:
        raise WriteError(count=count) from exc


def _close_after_failure(sink: TextIO) -> None:
    """Close the output while another error is already propagating.

    Closing flushes whatever the failed write left buffered, which fails
    again; that second OSError must not replace the original error.
    """
    try:
        sink.close()
    except OSError as exc:
        logger.debug("Closing the output after a failure also failed: %s", exc)


def convert(
    dialect_name: str,
    input_path: str,
    output_path: Optional[str] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run one conversion from file paths.

    Args:
        dialect_name: Name from the dialect table, e.g. ``"nasm"``.
        input_path: Binary file to embed. Also the source of the symbol stem.
        output_path: Assembler file to create, or None for ``stdout``.
        stdout: Stream used when output_path is None (default: sys.stdout).

    Returns:
        Number of bytes converted.

    Raises:
        UsageError: Unknown dialect.
        ConfigError: Bad BTOA_READ_CHUNK_SIZE.
        OpenError: Input cannot be opened or output cannot be created.
        ReadError / WriteError: Mid-stream I/O fault.
    """
    dialect = lookup_dialect(dialect_name)
    if dialect is None:
        raise UsageError("Non-supported assembly syntax.")

    try:
        chunk_size = load_chunk_size()
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    try:
        source = open(input_path, "rb")
    except OSError as exc:
        raise OpenError("Unable to open the input file.") from exc

    with source:
        if output_path is None:
            sink = stdout if stdout is not None else sys.stdout
            count = transcode(source, sink, dialect, derive_stem(input_path), chunk_size)
            _flush(sink, count)
            return count

        try:
            sink = open(output_path, "w", encoding="ascii", newline="\n")
        except OSError as exc:
            raise OpenError("Unable to create a new file.") from exc

        try:
            logger.debug("Writing %s source to %s", dialect.name, output_path)
            count = transcode(source, sink, dialect, derive_stem(input_path), chunk_size)
            _flush(sink, count)
        except BaseException:
            _close_after_failure(sink)
            raise
        _close(sink, count)
        return count


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    _status(BANNER)
    _status("")

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)
        count = convert(args.dialect, args.input_file, args.output_file)
    except UsageError as e:
        _print_usage()
        _status("Error: {}".format(e.message))
        sys.exit(1)
    except BtoaError as e:
        _status("Error: {}".format(e.message))
        sys.exit(1)

    _status("{} bytes have been converted.".format(count))


if __name__ == "__main__":
    main()
