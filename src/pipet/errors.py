"""Exceptions raised by pipet.

Every failure of an invocation is a PipetError. Components raise these and
never exit the interpreter themselves; the CLI error boundary turns them into
a single "Error: ..." line and exit status 1.
"""


class PipetError(Exception):
    """Base class for all pipet failures."""


class OptionsError(PipetError):
    """The argument vector could not be turned into a RunConfig."""


class MissingSeparator(OptionsError):
    def __init__(self) -> None:
        super().__init__('Missing command separator "--"')


class EmptyCommand(OptionsError):
    def __init__(self) -> None:
        super().__init__("No command specified")


class MissingSuccessMessage(OptionsError):
    def __init__(self) -> None:
        super().__init__("--on-success is required")


class MissingErrorMessage(OptionsError):
    def __init__(self) -> None:
        super().__init__("--on-error is required")


class UnknownOption(OptionsError):
    """An option before the separator that pipet does not recognize."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unknown option '{option}'")


class AmbiguousOptionValue(OptionsError):
    """A value option is followed by something that looks like another option.

    Values starting with a dash must use the inline form, e.g. --on-success=-x.
    """

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(
            f"Option '{option}' argument is ambiguous; "
            f"use '{option}=-VALUE' for a value starting with a dash"
        )


class CommandFailed(PipetError):
    """The command ran to completion and exited with a non-zero code."""

    def __init__(self, exit_code: int) -> None:
        self.exit_code = exit_code
        super().__init__(f"Command failed with exit code {exit_code}")


class SpawnError(PipetError):
    """The command could not be launched or did not exit normally.

    Attributes:
        cause: The underlying OS error, or None when the child was
            terminated by a signal and there is no exception to carry.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)
