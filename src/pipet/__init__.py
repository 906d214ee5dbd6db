"""pipet: run a command and announce its outcome with your own messages.

Import from submodules:
- options: RunConfig, parse_options
- runner: run_command
- errors: PipetError and its subclasses
"""

from pipet.version import __version__ as __version__
