"""CLI theme configuration - all colors in one place.

Colors use Rich style syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for syncscan CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    ERROR = "red"
    WARNING = "yellow"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    TEXT = ""


# Default theme instance - import this in other modules
theme = Theme()
