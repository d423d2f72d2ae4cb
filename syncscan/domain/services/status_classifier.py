from pathlib import Path

from loguru import logger

from syncscan.domain.ports.git_port import GitPort
from syncscan.domain.value_objects.sync_state import SyncState


class StatusClassifier:
    """Classify a confirmed repository as clean, uncommitted or unpushed.

    The working tree check runs first; when it finds changes the upstream
    comparison is skipped, so a repository is never both. Errors from either
    git call propagate to the caller, including a missing upstream branch,
    which must not read as a clean repository.
    """

    def __init__(self, git: GitPort) -> None:
        self._git = git

    async def classify(self, directory: Path) -> SyncState:
        if await self.has_uncommitted_changes(directory):
            return SyncState.UNCOMMITTED
        if await self.has_unpushed_changes(directory):
            return SyncState.UNPUSHED
        return SyncState.CLEAN

    async def has_uncommitted_changes(self, directory: Path) -> bool:
        porcelain = await self._git.status(directory)
        if porcelain:
            logger.debug(f"{directory}: {len(porcelain.splitlines())} changed entries")
        return porcelain != ""

    async def has_unpushed_changes(self, directory: Path) -> bool:
        cherry = await self._git.cherry(directory)
        if cherry:
            logger.debug(f"{directory}: {len(cherry.splitlines())} unpushed commits")
        return cherry != ""
