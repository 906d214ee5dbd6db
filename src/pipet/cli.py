import logging
import os

import click

from pipet.context import create_context
from pipet.error_boundary import cli_error_boundary
from pipet.options import ON_ERROR, ON_SUCCESS, SEPARATOR, parse_options
from pipet.runner import run_command

logger = logging.getLogger(__name__)

# Enable debug logging if PIPET_DEBUG environment variable is set
if os.getenv("PIPET_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

RAW_ARGS_KEY = "pipet.raw_args"

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    # Run options are parsed by pipet.options, not by click
    ignore_unknown_options=True,
    allow_extra_args=True,
)

RUN_OPTIONS_HELP = [
    ("--on-success TEXT", "Message printed to stdout when the command exits with 0.  [required]"),
    ("--on-error TEXT", "Message printed to stderr when the command fails.  [required]"),
    ("--hide", "Do not show the command's own stdout and stderr."),
]


def click_visible_args(args: list[str]) -> list[str]:
    """Tokens click may interpret: those before "--" that are not run-option values.

    Keeps a value such as "--on-success --version" from being taken as a
    --version request; parse_options reports it instead.
    """
    visible: list[str] = []
    takes_value = False
    for token in args:
        if token == SEPARATOR:
            break
        if takes_value:
            takes_value = False
            continue
        visible.append(token)
        takes_value = token in (ON_SUCCESS, ON_ERROR)
    return visible


class PassthroughCommand(click.Command):
    """Click command that keeps the untouched argument vector.

    Click drops the "--" separator while parsing, but pipet needs it to know
    where the wrapped command starts. The raw arguments are stored in
    ctx.meta and click only sees the tokens it may treat as --help or
    --version.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, click_visible_args(args))

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        return [
            "--on-success TEXT",
            "--on-error TEXT",
            "[--hide]",
            "--",
            "COMMAND",
            "[ARGS]...",
        ]

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        with formatter.section("Run options"):
            formatter.write_dl(RUN_OPTIONS_HELP)
        super().format_options(ctx, formatter)


@click.command(name="pipet", cls=PassthroughCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pipet")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context) -> None:
    """Run COMMAND through the shell and announce whether it succeeded.

    Everything after "--" is passed to the shell verbatim. Exits with 0 when
    the command succeeded and 1 on any failure.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    config = parse_options(ctx.meta[RAW_ARGS_KEY])
    captured = run_command(config, ctx.obj.launcher)
    logger.debug("Captured %d bytes of command output", len(captured))


def main() -> None:
    """CLI entry point used by the `pipet` console script."""
    cli()
