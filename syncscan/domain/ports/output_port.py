from typing import Protocol


class OutputSink(Protocol):
    """Destination for the user-facing lines of a scan."""

    def write_line(self, text: str) -> None:
        """Write a plain informational line."""
        ...

    def write_warning(self, text: str) -> None:
        """Write a line that needs attention but is not a failure."""
        ...

    def write_error(self, text: str) -> None:
        """Write a failure line, rendered distinctly from plain lines."""
        ...
