"""Error taxonomy for the converter.

WHY: The CLI has to tell the user exactly which stage failed, and a
write fault must be reported differently from every other failure because
it leaves a half-written output file behind. Distinct exception types let
the core raise without knowing anything about messages or exit codes.

HOW: BtoaError is the common base. Each subclass carries a default
user-facing message. ReadError and WriteError also carry ``count``, the
number of byte literals already written when the fault happened.

RULES:
- ConfigError is raised before any I/O happens; UsageError is the
  subset caused by the command line (argument count, dialect name)
- OpenError covers both the input open and the output creation
- ReadError / WriteError are raised mid-stream and wrap the OSError
- The core never catches these; only cli.main() does
"""

from __future__ import annotations


class BtoaError(Exception):
    """Base class for all converter failures."""

    default_message = "Conversion failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class ConfigError(BtoaError):
    """Bad dialect name, wrong argument count or unusable setting."""

    default_message = "Invalid configuration."


class UsageError(ConfigError):
    """The command line itself is wrong; the usage text applies."""

    default_message = "At least two parameters are necessary."


class OpenError(BtoaError):
    """Input file cannot be opened or output file cannot be created."""

    default_message = "Unable to open a file."


class ReadError(BtoaError):
    """The input source failed before reaching its natural end."""

    default_message = "Unable to read the input file."

    def __init__(self, message: str | None = None, count: int = 0) -> None:
        super().__init__(message)
        self.count = count


class WriteError(BtoaError):
    """A write to the output sink failed; the output is inconsistent."""

    default_message = (
        "Unable to write the output file. WARNING: Output data is inconsistent!"
    )

    def __init__(self, message: str | None = None, count: int = 0) -> None:
        super().__init__(message)
        self.count = count
