"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.syntax import Syntax

from dockwipe.cli.common import load_config_or_exit
from dockwipe.core.config import ConfigError, DockwipeConfig, dump_config, save_config
from dockwipe.core.paths import get_config_path
from dockwipe.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the dockwipe configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    config = load_config_or_exit()
    path = get_config_path()
    source = str(path) if path.exists() else "built-in defaults"
    console.print(f"[muted]# Source: {source}[/muted]")
    console.print(Syntax(dump_config(config), "toml"))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Write to this file instead of the default."),
    ] = None,
) -> None:
    """Write the default configuration to the config file."""
    target = path or get_config_path()
    if target.exists() and not force:
        print_info(f"Config already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        written = save_config(DockwipeConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Default configuration written to {written}")
