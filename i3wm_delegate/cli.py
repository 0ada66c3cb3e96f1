"""
i3wm-delegate command line

Usage:
    i3wm-delegate list [--json]
    i3wm-delegate watch [--json]
    i3wm-delegate goto <name>
"""

import json
import sys
from datetime import datetime
from typing import Any, List

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import DelegateConfig
from .delegate import WorkspaceDelegate
from .errors import DelegateError
from .log import setup_logging
from .models import LifecycleEvent, Workspace

EVENT_STYLES = {
    LifecycleEvent.CREATED: "green",
    LifecycleEvent.DESTROYED: "red",
    LifecycleEvent.BLURRED: "dim",
    LifecycleEvent.FOCUSED: "bold cyan",
    LifecycleEvent.URGENT: "bold yellow",
    LifecycleEvent.RENAMED: "magenta",
}


def create_workspace_table(workspaces: List[Workspace], title: str = "Workspaces") -> Table:
    """Build a Rich table of workspaces in delegate order."""
    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column("Name")
    table.add_column("Num", justify="right")
    table.add_column("Output")
    table.add_column("Focused", justify="center")
    table.add_column("Urgent", justify="center")

    for workspace in workspaces:
        table.add_row(
            Text(workspace.name, style="bold" if workspace.focused else ""),
            str(workspace.num) if workspace.num >= 0 else "-",
            workspace.output or "-",
            "●" if workspace.focused else "",
            Text("!", style="bold red") if workspace.urgent else "",
        )

    return table


def _open_delegate(ctx: click.Context) -> WorkspaceDelegate:
    config: DelegateConfig = ctx.obj["config"]
    return WorkspaceDelegate(config)


@click.group()
@click.option('--socket', 'socket_path', envvar='I3WM_DELEGATE_SOCKET', help='i3 IPC socket path (default: discover)')
@click.option('--log-level', default=None, help='Log level (default: $LOG_LEVEL or INFO)')
@click.pass_context
def cli(ctx: click.Context, socket_path: str, log_level: str):
    """Inspect and follow i3 workspaces in panel order."""
    console = Console(stderr=True)
    try:
        config = DelegateConfig.from_env()
        updates = {}
        if socket_path:
            updates["socket_path"] = socket_path
        if log_level:
            updates["log_level"] = log_level
        if updates:
            config = DelegateConfig(**{**config.model_dump(), **updates})
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    setup_logging(config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command(name="list")
@click.option('--json', 'output_json', is_flag=True, help='Output JSON instead of a formatted table')
@click.pass_context
def list_workspaces(ctx: click.Context, output_json: bool):
    """List workspaces, named ones first, then numbers from high to low."""
    console = Console()

    try:
        with _open_delegate(ctx) as i3wm:
            workspaces = i3wm.get_workspaces()
    except DelegateError as e:
        console.print(f"[red]Error: {e}[/red]")
        if e.suggestion:
            console.print(f"[dim]Tip: {e.suggestion}[/dim]")
        sys.exit(1)

    if output_json:
        click.echo(json.dumps([workspace.to_dict() for workspace in workspaces]))
    else:
        console.print(create_workspace_table(workspaces))


@cli.command()
@click.option('--json', 'output_json', is_flag=True, help='Print one JSON object per event')
@click.pass_context
def watch(ctx: click.Context, output_json: bool):
    """Print workspace lifecycle events until i3 exits (Ctrl+C to stop)."""
    console = Console()

    def report(event: LifecycleEvent):
        def handler(workspace: Workspace, data: Any) -> None:
            if output_json:
                click.echo(json.dumps({"event": event.value, "workspace": workspace.to_dict()}))
            else:
                stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
                console.print(
                    f"[dim]{stamp}[/dim] [{EVENT_STYLES[event]}]{event.value:<9}[/] "
                    f"{workspace.name} [dim]({workspace.output or '-'})[/dim]"
                )
        return handler

    def on_shutdown(i3wm: WorkspaceDelegate) -> None:
        if not output_json:
            console.print("[yellow]i3 IPC connection closed[/yellow]")
        i3wm.stop()

    try:
        with _open_delegate(ctx) as i3wm:
            i3wm.set_on_workspace_created(report(LifecycleEvent.CREATED))
            i3wm.set_on_workspace_destroyed(report(LifecycleEvent.DESTROYED))
            i3wm.set_on_workspace_blurred(report(LifecycleEvent.BLURRED))
            i3wm.set_on_workspace_focused(report(LifecycleEvent.FOCUSED))
            i3wm.set_on_workspace_urgent(report(LifecycleEvent.URGENT))
            i3wm.set_on_ipc_shutdown(on_shutdown, i3wm)

            if not output_json:
                console.print(create_workspace_table(i3wm.get_workspaces()))
                console.print("[cyan]Following workspace events (Ctrl+C to stop)...[/cyan]\n")

            i3wm.run()
    except KeyboardInterrupt:
        console.print("\n[dim]Stopped[/dim]")
    except DelegateError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('name')
@click.pass_context
def goto(ctx: click.Context, name: str):
    """Switch to workspace NAME."""
    console = Console()

    try:
        with _open_delegate(ctx) as i3wm:
            i3wm.goto_workspace(name)
    except DelegateError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
