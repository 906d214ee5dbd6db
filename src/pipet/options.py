"""Turn a raw argument vector into a validated RunConfig."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pipet.errors import (
    AmbiguousOptionValue,
    EmptyCommand,
    MissingErrorMessage,
    MissingSeparator,
    MissingSuccessMessage,
    UnknownOption,
)

logger = logging.getLogger(__name__)

SEPARATOR = "--"
ON_SUCCESS = "--on-success"
ON_ERROR = "--on-error"
HIDE = "--hide"


@dataclass(frozen=True)
class RunConfig:
    """Everything needed to run one command and announce its outcome.

    Construction validates the record, so a RunConfig that exists is always
    runnable: both messages are non-empty and command has an executable.

    Attributes:
        success_message: Printed to stdout when the command exits with 0
        error_message: Printed to stderr when the command exits non-zero
        command: Executable followed by its arguments, passed to the shell
        hide: Capture the command's stdout/stderr instead of inheriting them
    """

    success_message: str
    error_message: str
    command: tuple[str, ...]
    hide: bool = False

    def __post_init__(self) -> None:
        if not self.command:
            raise EmptyCommand()
        if not self.success_message:
            raise MissingSuccessMessage()
        if not self.error_message:
            raise MissingErrorMessage()

    @property
    def executable(self) -> str:
        """First command token, the program the shell runs."""
        return self.command[0]

    @property
    def arguments(self) -> tuple[str, ...]:
        """Command tokens after the executable."""
        return self.command[1:]


def parse_options(args: Sequence[str]) -> RunConfig:
    """Parse pipet's argument vector.

    Options are read only from the tokens before the first "--"; everything
    after it is the command, verbatim. Errors are raised in a fixed order:
    missing separator, empty command, unknown option or ambiguous value,
    missing --on-success, missing --on-error.

    Args:
        args: Arguments as given on the command line, without the program name

    Returns:
        The validated RunConfig

    Raises:
        OptionsError: The matching subclass for the first problem found
    """
    tokens = list(args)
    if SEPARATOR not in tokens:
        raise MissingSeparator()

    separator_index = tokens.index(SEPARATOR)
    command = tuple(tokens[separator_index + 1 :])
    if not command:
        raise EmptyCommand()

    values: dict[str, str] = {}
    hide = False
    option_tokens = tokens[:separator_index]
    index = 0
    while index < len(option_tokens):
        token = option_tokens[index]
        index += 1

        if not token.startswith("-") or token == "-":
            logger.debug("Ignoring positional argument before separator: %s", token)
            continue

        name, has_inline, inline_value = token.partition("=")
        if name == HIDE and not has_inline:
            hide = True
        elif name in (ON_SUCCESS, ON_ERROR):
            if has_inline:
                values[name] = inline_value
            elif index < len(option_tokens):
                value = option_tokens[index]
                if len(value) > 1 and value.startswith("-"):
                    raise AmbiguousOptionValue(name)
                values[name] = value
                index += 1
            else:
                # Last token before the separator: no value to take.
                values.pop(name, None)
        else:
            raise UnknownOption(token)

    success_message = values.get(ON_SUCCESS, "")
    if not success_message:
        raise MissingSuccessMessage()
    error_message = values.get(ON_ERROR, "")
    if not error_message:
        raise MissingErrorMessage()

    config = RunConfig(
        success_message=success_message,
        error_message=error_message,
        command=command,
        hide=hide,
    )
    logger.debug("Parsed options: hide=%s, command=%s", config.hide, config.command)
    return config
