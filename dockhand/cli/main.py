import logging
import sys

import click
from rich.console import Console
from rich.panel import Panel

from dockhand.cli.commands import (
    complete_command,
    completion_command,
    create_command,
    run_command,
)
from dockhand.cli.completion import register_shells
from dockhand.utils.errors import DockhandError
from dockhand.utils.logging import get_logger, setup_logging

console = Console(stderr=True)
logger = get_logger(__name__)

_debug_mode = False


def handle_exception(e: BaseException, debug_mode: bool = False) -> None:
    """Handle exceptions with clean output."""
    exit_code = 1

    if isinstance(e, DockhandError):
        exit_code = getattr(e, "exit_code", 1)
        notes = getattr(e, "__notes__", [])
        hint_text = "\n".join([f"[dim]💡 {note}[/dim]" for note in notes])
        body = f"[red]Error[/red]: {e}"
        if hint_text:
            body += f"\n\n{hint_text}"
        console.print(Panel(body, title="[bold]dockhand error[/bold]", border_style="red"))
    elif isinstance(e, KeyboardInterrupt):
        console.print("[yellow]Interrupted[/yellow]")
        exit_code = 130
    else:
        console.print(
            Panel(
                f"[red]Unexpected Error[/red]: {e}\n\n"
                f"[dim]This is a bug. Run again with --debug and report the traceback.[/dim]",
                title="[bold]dockhand error[/bold]",
                border_style="red",
            )
        )

    if debug_mode:
        logger.exception(f"Unhandled exception: {e}")
        console.print_exception(show_locals=True)

    sys.exit(exit_code)


def excepthook(exc_type, exc_value, exc_traceback) -> None:
    """Global exception handler."""
    if exc_type is KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        sys.exit(130)
    handle_exception(exc_value, debug_mode=_debug_mode)


@click.group(context_settings=dict(help_option_names=["--help"]))
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx, debug):
    """dockhand - container command line with rich shell completion

    \b
    Examples:
      dockhand run --ipc container:web nginx        # Dry-run a container
      dockhand completion --shell zsh > _dockhand   # Install completions
      dockhand __complete run --cap-add CAP_N       # Query candidates directly
    """
    global _debug_mode
    _debug_mode = debug
    sys.excepthook = excepthook

    setup_logging(logging.DEBUG if debug else logging.WARNING)
    ctx.obj = {"debug": debug}


cli.add_command(run_command, "run")
cli.add_command(create_command, "create")
cli.add_command(completion_command, "completion")
cli.add_command(complete_command, "__complete")

register_shells()


def main():
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        handle_exception(KeyboardInterrupt(), debug_mode=_debug_mode)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except DockhandError as e:
        handle_exception(e, debug_mode=_debug_mode)


if __name__ == "__main__":
    main()
