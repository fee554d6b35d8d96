from pathlib import Path

import click
from click.shell_completion import get_completion_class
from rich.console import Console

console = Console(stderr=True)

PROG_NAME = "dockhand"
COMPLETE_VAR = "_DOCKHAND_COMPLETE"


def completion_script(cli: click.Command, shell: str) -> str:
    """Return the click completion script for shell"""
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"unsupported shell {shell!r}", param_hint="--shell")
    return comp_cls(cli, {}, PROG_NAME, COMPLETE_VAR).source().strip()


@click.command(name="completion")
@click.option(
    "--shell",
    type=click.Choice(["bash", "zsh", "fish"]),
    default="bash",
    help="Shell type",
)
@click.option("--output", "-o", type=click.Path(), help="Output file")
@click.pass_context
def completion_command(ctx, shell: str, output: str):
    """Generate shell completion scripts

    \b
    Usage:
      dockhand completion                    Generate bash completion (default)
      dockhand completion --shell=zsh        Generate zsh completion
      dockhand completion --output <file>    Write to specific file
    """
    script = completion_script(ctx.find_root().command, shell)

    if output:
        Path(output).write_text(script + "\n")
        console.print(f"[green]✓[/green] Wrote completion to {output}")
        console.print(f"[dim]Source it in your ~/.{shell}rc[/dim]")
    else:
        click.echo(script)
