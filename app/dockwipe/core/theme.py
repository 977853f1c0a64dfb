"""Console palette for dockwipe.

Defaults can be overridden per color in ``~/.config/dockwipe/theme.toml``::

    [colors]
    danger = "#ff0000"
    absent = "#444444"

An unreadable or invalid file never blocks a reset: it is logged and the
defaults are used.
"""

import logging
import re
import tomllib
from functools import cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from dockwipe.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Named colors used by banners, tables and status lines.

    Every value is a #RGB or #RRGGBB hex code.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    danger: str = "#ff2d55"

    # Purge and review outcomes
    removed: str = "#f53263"
    absent: str = "#226666"
    skipped: str = "#faf870"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        """Accept only hex color strings."""
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return value.strip()


def _read_overrides(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Args:
        path: Theme file.

    Returns:
        The raw overrides; empty if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Build the palette from defaults and user overrides.

    Args:
        path: Theme file. Defaults to ~/.config/dockwipe/theme.toml.

    Returns:
        Validated colors; defaults if the overrides are invalid.
    """
    theme_path = path or get_theme_path()
    overrides = _read_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", theme_path, e)
        return ThemeColors()

    logger.debug("Theme overrides loaded from %s", theme_path)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Map a palette to Rich style names.

    Every color becomes a style of the same name. ``error``, ``danger``
    and ``bold_header`` are rendered bold.

    Args:
        colors: Palette to map. Loaded from disk when omitted.

    Returns:
        Rich Theme for the shared consoles.
    """
    palette = (colors or load_theme()).model_dump()
    styles = dict(palette)
    styles["error"] = f"bold {palette['error']}"
    styles["danger"] = f"bold {palette['danger']}"
    styles["bold_header"] = f"bold {palette['header']}"
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Return the process-wide Rich theme, built on first use."""
    return get_rich_theme()
