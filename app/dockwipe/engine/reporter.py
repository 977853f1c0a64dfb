"""Engine state reporter.

Lists what the engine holds after a reset, as proof that the purge worked
and the engine answers queries. Reporting is observational only; a failed
listing is a warning, never an error.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console

from dockwipe.engine.base import EngineClient, EngineError
from dockwipe.utils.formatting import console, create_table, print_warning

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceView:
    """How one resource kind is listed and displayed.

    Attributes:
        title: Table title.
        columns: Keys of the engine's JSON rows, in display order.
        fetch: Client method returning the rows.
    """

    title: str
    columns: tuple[str, ...]
    fetch: Callable[[], list[dict[str, str]]]


class StateReporter:
    """Renders engine resources as Rich tables.

    Args:
        client: Engine client to query.
        out: Console to print to. Defaults to the shared console.
    """

    def __init__(self, client: EngineClient, out: Console | None = None) -> None:
        self._client = client
        self._out = out or console

    def views(self, include_all: bool = True) -> list[ResourceView]:
        """Build the resource views to display.

        Args:
            include_all: Include volumes and networks, not just containers and images.

        Returns:
            Views in display order.
        """
        client = self._client
        views = [
            ResourceView(
                "Containers", ("Names", "Image", "Status", "Ports"), client.list_containers
            ),
            ResourceView("Images", ("Repository", "Tag", "ID", "Size"), client.list_images),
        ]
        if include_all:
            views.append(ResourceView("Volumes", ("Driver", "Name"), client.list_volumes))
            views.append(
                ResourceView("Networks", ("ID", "Name", "Driver", "Scope"), client.list_networks)
            )
        return views

    def report(self, include_all: bool = True) -> bool:
        """Print current engine resources.

        Args:
            include_all: Include volumes and networks.

        Returns:
            True if every listing succeeded.
        """
        ok = True
        for view in self.views(include_all):
            try:
                rows = view.fetch()
            except EngineError as e:
                logger.warning("Listing %s failed: %s", view.title.lower(), e)
                print_warning(f"Could not list {view.title.lower()}: {e}")
                ok = False
                continue

            if not rows:
                self._out.print(f"[muted]No {view.title.lower()}.[/muted]")
                continue

            table = create_table(view.title, list(view.columns))
            for row in rows:
                table.add_row(*(row.get(column, "") for column in view.columns))
            self._out.print(table)

        return ok
