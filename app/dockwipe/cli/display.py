"""Shared Rich display functions for banners and results.

Provides the warning banners shown before each operating mode and the
tables summarizing purge results and review candidates.
"""

from rich.table import Table

from dockwipe.core.config import DockwipeConfig
from dockwipe.models.purge import PurgeOutcome, PurgeResult
from dockwipe.models.review import DirectoryCandidate
from dockwipe.utils.formatting import console

_OUTCOME_STYLES: dict[PurgeOutcome, str] = {
    PurgeOutcome.REMOVED: "removed",
    PurgeOutcome.ABSENT: "absent",
    PurgeOutcome.SKIPPED: "skipped",
    PurgeOutcome.FAILED: "error",
}


def print_reset_banner(config: DockwipeConfig) -> None:
    """Print what a total reset deletes."""
    engine = config.engine
    console.print("[danger]THIS WILL PERMANENTLY DELETE ALL LOCAL ENGINE STATE:[/danger]")
    console.print(f"  - /var/lib/{engine.name}, /var/lib/{engine.runtime} and /etc/{engine.name}")
    console.print("  - All containers, images, volumes, networks and build cache")
    console.print(f"  - ~/.{engine.name} including model runner, scout and CLI plugin data")
    console.print(f"  - Cached {engine.name} data in ~/.cache and ~/.local/share")
    console.print(f"  - Directories under {config.review.root} (each one with your confirmation)")
    console.print()
    console.print(f"[info]Services will be stopped and restarted: {', '.join(engine.services)}[/]")
    console.print()


def print_clean_banner(config: DockwipeConfig) -> None:
    """Print what a scoped clean deletes and what it keeps."""
    engine = config.engine
    console.print("[danger]THIS WILL PERMANENTLY DELETE USER PROJECT DATA:[/danger]")
    console.print("  - All containers, images, volumes, and networks you've created")
    console.print(f"  - {engine.name.capitalize()} build cache")
    console.print(f"  - User configuration in ~/.{engine.name}")
    console.print(f"  - User cache in ~/.cache/{engine.name}")
    console.print(f"  - User project directories in {config.review.root} (with your confirmation)")
    console.print()
    console.print("[info]This command:[/]")
    console.print(f"  - Does not remove or modify the {engine.name} installation")
    console.print(
        f"  - Excludes system directories like '{config.review.root / engine.runtime}'"
    )
    console.print(f"  - Leaves {engine.name} fully operational after cleanup")
    console.print()


def create_purge_results_table(results: list[PurgeResult]) -> Table:
    """Create a Rich table displaying purge results.

    Args:
        results: Results in purge order.

    Returns:
        Rich Table with Subsystem, Item, Status and Details columns.
    """
    table = Table(
        title="Purge Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Subsystem", no_wrap=True)
    table.add_column("Item")
    table.add_column("Status", width=8)
    table.add_column("Details", style="muted")

    for result in results:
        style = _OUTCOME_STYLES[result.outcome]
        table.add_row(
            result.subsystem.value,
            result.item,
            f"[{style}]{result.outcome.value}[/{style}]",
            result.error or "",
        )

    return table


def create_candidates_table(candidates: list[DirectoryCandidate]) -> Table:
    """Create a Rich table listing directories offered for review.

    Args:
        candidates: Offerable candidates.

    Returns:
        Rich Table with Directory and Size columns.
    """
    table = Table(
        title="Directories Offered for Review",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Directory", no_wrap=True)
    table.add_column("Size", style="info", justify="right")

    for candidate in candidates:
        table.add_row(str(candidate.path), candidate.size_label)

    return table
