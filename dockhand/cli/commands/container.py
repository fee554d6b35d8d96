import click
from rich.console import Console
from rich.table import Table

from dockhand.cli.core import get_registry
from dockhand.completion.container import NO_COMPLETE_FLAGS
from dockhand.completion.registry import attach

console = Console()

# Free-form flags that may be given more than once.
REPEATABLE_FLAGS = {
    "add-host",
    "annotation",
    "blkio-weight-device",
    "device-cgroup-rule",
    "device-read-bps",
    "device-read-iops",
    "device-write-bps",
    "device-write-iops",
    "dns",
    "dns-option",
    "dns-search",
    "expose",
    "group-add",
    "label",
    "link-local-ip",
    "log-opt",
    "mount",
    "network-alias",
}

SHORT_NAMES = {
    "label": "-l",
}


def _free_form_options(f):
    for flag in reversed(NO_COMPLETE_FLAGS):
        decls = [f"--{flag}"]
        if flag in SHORT_NAMES:
            decls.insert(0, SHORT_NAMES[flag])
        f = click.option(*decls, multiple=flag in REPEATABLE_FLAGS, default=None)(f)
    return f


def container_options(f):
    """Options shared by ``run`` and ``create``"""
    decorators = [
        click.option("-a", "--attach", multiple=True, help="Attach to STDIN, STDOUT or STDERR"),
        click.option("--cap-add", multiple=True, help="Add Linux capabilities"),
        click.option("--cap-drop", multiple=True, help="Drop Linux capabilities"),
        click.option("--cgroupns", default=None, help="Cgroup namespace to use (host|private)"),
        click.option("-e", "--env", multiple=True, help="Set environment variables"),
        click.option("--env-file", multiple=True, help="Read in a file of environment variables"),
        click.option("--ipc", default=None, help="IPC mode to use"),
        click.option("--link", multiple=True, help="Add link to another container"),
        click.option("--network", default=None, help="Connect a container to a network"),
        click.option("--platform", default=None, help="Set platform if server is multi-platform capable"),
        click.option(
            "--pull",
            default="missing",
            show_default=True,
            help='Pull image before creating ("always", "missing", "never")',
        ),
        click.option("--restart", default=None, help="Restart policy to apply when a container exits"),
        click.option("--stop-signal", default=None, help="Signal to stop the container"),
        click.option("--volumes-from", multiple=True, help="Mount volumes from the specified container(s)"),
        click.option("-i", "--interactive", is_flag=True, help="Keep STDIN open even if not attached"),
        click.option("-t", "--tty", is_flag=True, help="Allocate a pseudo-TTY"),
        click.option("--rm", is_flag=True, help="Automatically remove the container when it exits"),
        _free_form_options,
        click.argument("image"),
        click.argument("command", nargs=-1, type=click.UNPROCESSED),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def render_plan(action: str, image: str, command, options: dict) -> None:
    """Print what would be sent to the engine; nothing is executed"""
    table = Table(title=f"{action} {image} (dry run)", show_header=True)
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="green")

    for name, value in sorted(options.items()):
        if value in (None, False, ()):
            continue
        if isinstance(value, tuple):
            value = ", ".join(value)
        table.add_row("--" + name.replace("_", "-"), str(value))

    if command:
        table.add_row("command", " ".join(command))

    console.print(table)


@click.command(name="run", context_settings={"ignore_unknown_options": True})
@container_options
def run_command(image, command, **options):
    """Show the container a `run` would create and start"""
    render_plan("run", image, command, options)


@click.command(name="create", context_settings={"ignore_unknown_options": True})
@container_options
def create_command(image, command, **options):
    """Show the container a `create` would create"""
    render_plan("create", image, command, options)


attach(get_registry, run_command)
attach(get_registry, create_command)
