"""Run the configured command and announce whether it succeeded."""

import logging

from pipet.errors import CommandFailed
from pipet.options import RunConfig
from pipet.output import machine_output, user_output
from pipet.process.abc import ProcessLauncher

logger = logging.getLogger(__name__)


def run_command(config: RunConfig, launcher: ProcessLauncher) -> bytes:
    """Run config.command once and print the matching message.

    Exit code 0 prints success_message to stdout. Any other exit code prints
    error_message to stderr and raises CommandFailed. A launch failure
    propagates as SpawnError and prints neither message.

    Args:
        config: Validated run configuration
        launcher: Process integration that runs the command

    Returns:
        Standard output captured from the command (empty unless config.hide)

    Raises:
        CommandFailed: If the command exited with a non-zero code
        SpawnError: If the command could not be launched or was killed
    """
    logger.debug("Running %s with arguments %s", config.executable, config.arguments)
    result = launcher.launch(config.command, hide=config.hide)
    logger.debug(
        "Command finished: exit_code=%d, captured=%d bytes", result.exit_code, len(result.stdout)
    )

    if result.exit_code == 0:
        machine_output(config.success_message)
        return result.stdout

    user_output(config.error_message)
    raise CommandFailed(result.exit_code)
