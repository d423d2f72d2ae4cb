from enum import Enum


class SyncState(str, Enum):
    CLEAN = "clean"
    UNCOMMITTED = "uncommitted"
    UNPUSHED = "unpushed"


class ProbeResult(str, Enum):
    REPOSITORY = "repository"
    NOT_REPOSITORY = "not_repository"
    INCONCLUSIVE = "inconclusive"


class ScanOutcome(str, Enum):
    SKIPPED = "skipped"
    INCONCLUSIVE = "inconclusive"
    CLASSIFIED = "classified"
    ERRORED = "errored"
