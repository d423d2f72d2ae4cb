"""User-facing line formats for scan results."""

from pathlib import Path

from syncscan.domain.entities.scan_result import ScanResult
from syncscan.domain.value_objects.sync_state import ScanOutcome, SyncState

UNCOMMITTED_ICON = "🔴"
UNPUSHED_ICON = "🟠"
INCONCLUSIVE_ICON = "⚪"


def format_banner(root: Path) -> str:
    return f">> Scanning {root}"


def format_state(directory: str, state: SyncState) -> str | None:
    if state == SyncState.UNCOMMITTED:
        return f" {UNCOMMITTED_ICON} {directory} has uncommitted changes"
    if state == SyncState.UNPUSHED:
        return f" {UNPUSHED_ICON} {directory} has unpushed changes"
    return None


def format_error(directory: str, message: str) -> str:
    return f"Error scanning {directory}: {message}"


def format_inconclusive(directory: str, reason: str | None) -> str:
    return f" {INCONCLUSIVE_ICON} {directory} could not be probed: {reason or 'unknown error'}"


def format_result(result: ScanResult) -> str | None:
    """Render a result as one line, or None when it stays silent."""
    if result.outcome == ScanOutcome.CLASSIFIED and result.state is not None:
        return format_state(result.directory, result.state)
    if result.outcome == ScanOutcome.ERRORED:
        return format_error(result.directory, result.error or "unknown error")
    if result.outcome == ScanOutcome.INCONCLUSIVE:
        return format_inconclusive(result.directory, result.error)
    return None
