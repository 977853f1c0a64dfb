"""Reset command implementation.

Wipes all local engine state and brings the engine back up clean.
"""

from typing import Annotated

import typer

from dockwipe.cli.common import exit_with, load_config_or_exit, run_preflight
from dockwipe.core.pipeline import run_pipeline
from dockwipe.core.workflow import Workflow

app = typer.Typer(
    help="Wipe all local engine state and restart the engine.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def reset(
    project_only: Annotated[
        bool,
        typer.Option(
            "--project-only/--any-dir",
            help="Only offer review-root directories that look like projects.",
        ),
    ] = False,
) -> None:
    """Stop the engine, delete all of its data, restart and verify it.

    Every destructive step asks for confirmation first.
    """
    config = load_config_or_exit()
    run_preflight(config.engine.group)

    workflow = Workflow.from_config(config)
    exit_with(run_pipeline(workflow.reset_stages(project_only=project_only)))
