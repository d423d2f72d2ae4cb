from rich.console import Console

from syncscan.cli.theme import theme
from syncscan.cli.utils import sanitize_terminal_output
from syncscan.domain.ports.output_port import OutputSink


class ConsoleSink(OutputSink):
    """OutputSink writing to a rich Console.

    Lines are printed verbatim: markup, highlighting and wrapping are off so
    directory names with brackets or long paths come out unchanged. Names that
    are not valid UTF-8 are printed with replacement characters.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def write_line(self, text: str) -> None:
        self._print(text, theme.TEXT)

    def write_warning(self, text: str) -> None:
        self._print(text, theme.WARNING)

    def write_error(self, text: str) -> None:
        self._print(text, theme.ERROR)

    def _print(self, text: str, style: str) -> None:
        self.console.print(
            sanitize_terminal_output(text),
            style=style or None,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
