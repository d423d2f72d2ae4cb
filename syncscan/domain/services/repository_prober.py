"""Decide whether a directory is the root of a git working tree."""

from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from syncscan.domain.errors import SyncScanError
from syncscan.domain.ports.git_port import GitPort
from syncscan.domain.value_objects.sync_state import ProbeResult


class ProbeReport(BaseModel, frozen=True):
    """Probe verdict, with the reason when git could not answer."""

    result: ProbeResult
    reason: str | None = None


class RepositoryProber:
    """Tell repositories, plain folders and unprobeable directories apart.

    A definitive "no" from git (non-zero exit, or a folder that only sits
    inside some parent repository) is NOT_REPOSITORY. Failing to get an
    answer at all (git missing, directory not enterable, timeout) is
    INCONCLUSIVE, so the caller can choose to surface it.
    """

    def __init__(self, git: GitPort) -> None:
        self._git = git

    async def probe(self, directory: Path) -> ProbeReport:
        try:
            output = await self._git.rev_parse_work_tree(directory)
        except (OSError, SyncScanError) as e:
            logger.warning(f"Could not probe {directory}: {e}")
            return ProbeReport(result=ProbeResult.INCONCLUSIVE, reason=str(e))

        if output.returncode != 0:
            logger.debug(f"Not a git repository: {directory}")
            return ProbeReport(result=ProbeResult.NOT_REPOSITORY)

        lines = output.stdout.splitlines()
        if not lines or lines[0].strip() != "true":
            return ProbeReport(result=ProbeResult.NOT_REPOSITORY)

        # Folders nested in a parent work tree also answer "true"
        if len(lines) > 1 and not _same_path(Path(lines[1].strip()), directory):
            logger.debug(f"{directory} is inside the work tree at {lines[1].strip()}")
            return ProbeReport(result=ProbeResult.NOT_REPOSITORY)

        return ProbeReport(result=ProbeResult.REPOSITORY)


def _same_path(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a == b
