"""dockwipe - interactive reset of a container engine's local state."""

__version__ = "0.1.0"
