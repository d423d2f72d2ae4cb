import asyncio
import os
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from syncscan.application.dto.scan_options import ScanOptions
from syncscan.application.scan_coordinator import ScanCoordinator
from syncscan.cli.console_sink import ConsoleSink
from syncscan.cli.theme import theme
from syncscan.cli.utils import sanitize_terminal_output
from syncscan.infrastructure.git.git_adapter import GitAdapter

console = Console()


def get_log_dir() -> Path:
    """Return the log directory, honouring XDG_STATE_HOME."""
    state_home = os.environ.get("XDG_STATE_HOME")
    base = Path(state_home) if state_home else Path.home() / ".local" / "state"
    return base / "syncscan" / "logs"


def setup_logging(verbose: bool = False) -> Path | None:
    """Configure loguru logging and return the log file path.

    When the log directory cannot be written, warnings go to stderr instead
    and None is returned.
    """
    logger.remove()

    stderr_format = "{time:HH:mm:ss} | {level: <8} | {message}"
    if verbose:
        logger.add(sys.stderr, format=stderr_format, level="DEBUG")

    log_dir = get_log_dir()
    log_file = log_dir / "syncscan.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            retention=3,
            encoding="utf-8",
            errors="backslashreplace",
        )
    except OSError as e:
        if not verbose:
            logger.add(sys.stderr, format=stderr_format, level="WARNING")
        logger.warning(f"Logging to stderr only, cannot write to {log_dir}: {e}")
        return None

    return log_file


app = typer.Typer(
    name="syncscan",
    help="Report uncommitted and unpushed changes in the git repositories below the current directory.",
    add_completion=False,
)


@app.command()
def scan(
    jobs: int = typer.Option(
        8, "--jobs", "-j", min=1, envvar="SYNCSCAN_JOBS", help="Directories scanned at once"
    ),
    timeout: float = typer.Option(
        30.0, "--timeout", min=0.1, envvar="SYNCSCAN_TIMEOUT", help="Seconds allowed per git call"
    ),
    git: str = typer.Option("git", "--git", envvar="SYNCSCAN_GIT", help="Git executable"),
    quiet_inconclusive: bool = typer.Option(
        False,
        "--quiet-inconclusive",
        envvar="SYNCSCAN_QUIET_INCONCLUSIVE",
        help="Do not print directories git could not probe",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Scan the immediate subdirectories of the current directory."""
    setup_logging(verbose=verbose)

    options = ScanOptions(
        max_concurrency=jobs,
        command_timeout_s=timeout,
        git_executable=git,
        report_inconclusive=not quiet_inconclusive,
    )
    coordinator = ScanCoordinator(
        GitAdapter(git_executable=options.git_executable, timeout_s=options.command_timeout_s),
        ConsoleSink(console),
        options,
    )

    try:
        asyncio.run(coordinator.run(Path.cwd()))
    except OSError as e:
        console.print(
            sanitize_terminal_output(str(e)),
            style=theme.ERROR,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
