from collections import Counter
from pathlib import Path

from pydantic import BaseModel, Field

from syncscan.domain.value_objects.sync_state import ScanOutcome, SyncState


class ScanResult(BaseModel, frozen=True):
    """Terminal outcome of scanning one child directory."""

    directory: str = Field(description="Directory name relative to the scan root")
    outcome: ScanOutcome
    state: SyncState | None = None
    error: str | None = None

    @classmethod
    def skipped(cls, directory: str) -> "ScanResult":
        return cls(directory=directory, outcome=ScanOutcome.SKIPPED)

    @classmethod
    def inconclusive(cls, directory: str, reason: str) -> "ScanResult":
        return cls(directory=directory, outcome=ScanOutcome.INCONCLUSIVE, error=reason)

    @classmethod
    def classified(cls, directory: str, state: SyncState) -> "ScanResult":
        return cls(directory=directory, outcome=ScanOutcome.CLASSIFIED, state=state)

    @classmethod
    def errored(cls, directory: str, error: str) -> "ScanResult":
        return cls(directory=directory, outcome=ScanOutcome.ERRORED, error=error)


class ScanSummary(BaseModel):
    """All results of one run over a root directory."""

    root: Path
    results: list[ScanResult] = Field(default_factory=list)

    def outcome_counts(self) -> dict[str, int]:
        """Count results per outcome, splitting classified results by state."""
        counts: Counter[str] = Counter()
        for result in self.results:
            key = result.state.value if result.state else result.outcome.value
            counts[key] += 1
        return dict(counts)
