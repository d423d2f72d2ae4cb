"""Concurrent scan of the child directories of a root."""

import asyncio
from pathlib import Path

from loguru import logger

from syncscan.application.dto.scan_options import ScanOptions
from syncscan.application.messages import format_banner, format_result
from syncscan.domain.entities.scan_result import ScanResult, ScanSummary
from syncscan.domain.ports.git_port import GitPort
from syncscan.domain.ports.output_port import OutputSink
from syncscan.domain.services.repository_prober import RepositoryProber
from syncscan.domain.services.status_classifier import StatusClassifier
from syncscan.domain.value_objects.sync_state import ProbeResult, ScanOutcome
from syncscan.infrastructure.fs.directory_lister import list_child_directories


class ScanCoordinator:
    """Run probe -> classify -> render for every child directory of a root.

    Every directory runs in its own task. Failures are contained to the
    directory that raised them; only a failure to list the root itself
    escapes run().
    """

    def __init__(
        self,
        git: GitPort,
        sink: OutputSink,
        options: ScanOptions | None = None,
    ) -> None:
        self.options = options or ScanOptions()
        self._sink = sink
        self._prober = RepositoryProber(git)
        self._classifier = StatusClassifier(git)

    async def run(self, root: Path) -> ScanSummary:
        """Scan root and return one result per child directory.

        Raises:
            OSError: root could not be listed.
        """
        self._sink.write_line(format_banner(root))

        try:
            directories = await asyncio.to_thread(list_child_directories, root)
        except OSError as e:
            logger.error(f"Cannot list {root}: {e}")
            raise

        logger.info(
            f"Scanning {len(directories)} directories under {root} "
            f"(concurrency {self.options.max_concurrency})"
        )

        semaphore = asyncio.Semaphore(self.options.max_concurrency)
        results = await asyncio.gather(
            *(self._scan_gated(semaphore, root, name) for name in directories)
        )

        summary = ScanSummary(root=root, results=list(results))
        logger.info(f"Scan of {root} finished: {summary.outcome_counts()}")
        return summary

    async def _scan_gated(
        self, semaphore: asyncio.Semaphore, root: Path, name: str
    ) -> ScanResult:
        async with semaphore:
            result = await self.scan_directory(root, name)
        self._render(result)
        return result

    async def scan_directory(self, root: Path, name: str) -> ScanResult:
        """Probe and classify one directory, turning any failure into a result."""
        directory = root / name
        try:
            probe = await self._prober.probe(directory)
            if probe.result == ProbeResult.NOT_REPOSITORY:
                return ScanResult.skipped(name)
            if probe.result == ProbeResult.INCONCLUSIVE:
                return ScanResult.inconclusive(name, probe.reason or "unknown error")

            state = await self._classifier.classify(directory)
            return ScanResult.classified(name, state)
        except Exception as e:
            logger.opt(exception=e).error(f"Error scanning {name}")
            return ScanResult.errored(name, _describe(e))

    def _render(self, result: ScanResult) -> None:
        line = format_result(result)
        if line is None:
            return
        if result.outcome == ScanOutcome.ERRORED:
            self._sink.write_error(line)
        elif result.outcome == ScanOutcome.INCONCLUSIVE:
            if self.options.report_inconclusive:
                self._sink.write_warning(line)
        else:
            self._sink.write_line(line)


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
