"""Clean command implementation.

Removes user project data while keeping the engine installed and running.
"""

from typing import Annotated

import typer

from dockwipe.cli.common import exit_with, load_config_or_exit, run_preflight
from dockwipe.core.pipeline import run_pipeline
from dockwipe.core.workflow import Workflow

app = typer.Typer(
    help="Remove user project data, keeping the engine installation.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    project_only: Annotated[
        bool,
        typer.Option(
            "--project-only/--any-dir",
            help="Only offer review-root directories that look like projects.",
        ),
    ] = True,
) -> None:
    """Prune engine resources and user config, then review project directories."""
    config = load_config_or_exit()
    run_preflight(config.engine.group)

    workflow = Workflow.from_config(config)
    exit_with(run_pipeline(workflow.clean_stages(project_only=project_only)))
