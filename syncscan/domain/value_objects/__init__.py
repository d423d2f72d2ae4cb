from syncscan.domain.value_objects.sync_state import ProbeResult, ScanOutcome, SyncState

__all__ = ["ProbeResult", "ScanOutcome", "SyncState"]
