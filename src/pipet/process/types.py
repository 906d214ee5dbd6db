"""Data types for the process integration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a child process that exited on its own.

    Attributes:
        exit_code: Exit status reported by the shell (0 means success)
        stdout: Standard output accumulated while streams were captured;
            empty when the child inherited the parent's streams
    """

    exit_code: int
    stdout: bytes = b""
