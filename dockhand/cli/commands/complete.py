"""Hidden ``__complete`` command speaking the cobra completion protocol.

``dockhand __complete run --ipc cont`` prints one candidate per line and a
final ``:<directive>`` line, so cobra-style shell scripts can drive it.
"""

from typing import Optional, Sequence, Tuple

import click

from dockhand.cli.core import get_registry
from dockhand.completion.directive import empty
from dockhand.completion.registry import long_flag_name
from dockhand.utils.errors import DockhandError
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)


def find_option(command: click.Command, word: str) -> Optional[click.Option]:
    for param in command.params:
        if isinstance(param, click.Option) and word in param.opts:
            return param
    return None


def locate_flag(command: click.Command, words: Sequence[str]) -> Tuple[Optional[str], str, str]:
    """Work out which flag value is being completed.

    Returns ``(flag, incomplete, prefix)``; ``prefix`` is ``--flag=`` when the
    value is typed inline and must be put back in front of every candidate.
    """
    incomplete = words[-1] if words else ""

    if incomplete.startswith("--") and "=" in incomplete:
        name, _, value = incomplete.partition("=")
        option = find_option(command, name)
        if option is None or option.is_flag:
            return None, incomplete, ""
        return long_flag_name(option), value, name + "="

    if len(words) >= 2:
        previous = words[-2]
        option = find_option(command, previous)
        if option is not None and not option.is_flag:
            return long_flag_name(option), incomplete, ""

    return None, incomplete, ""


@click.command(
    name="__complete",
    hidden=True,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def complete_command(ctx, words):
    """Request completion candidates for a flag value"""
    result = empty()
    prefix = ""

    root = ctx.find_root().command
    command = root.get_command(ctx, words[0]) if words and isinstance(root, click.Group) else None

    if command is not None:
        flag, incomplete, prefix = locate_flag(command, words[1:])
        if flag is not None:
            args = [w for w in words[1:-1] if not w.startswith("-")]
            try:
                result = get_registry().complete(flag, ctx, args, incomplete)
            except DockhandError as e:
                logger.debug(f"Completion of --{flag} unavailable: {e}", exc_info=True)
                result = empty()
            logger.debug(f"Completed --{flag} {incomplete!r}: {len(result.candidates)} candidates")
    else:
        logger.debug(f"No command to complete for {list(words)!r}")

    for candidate in result.candidates:
        click.echo(prefix + candidate)
    click.echo(f":{int(result.directive)}")
    click.echo(f"Completion ended with directive: {result.directive.describe()}", err=True)
