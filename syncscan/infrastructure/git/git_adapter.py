import asyncio
import os
import signal
from pathlib import Path

from loguru import logger

from syncscan.domain.errors import GitCommandError, GitTimeoutError
from syncscan.domain.ports.git_port import GitOutput, GitPort

DEFAULT_TIMEOUT_S = 30.0


class GitAdapter(GitPort):
    """Git implementation of GitPort using subprocess calls."""

    def __init__(self, git_executable: str = "git", timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self.git_executable = git_executable
        self.timeout_s = timeout_s

    async def rev_parse_work_tree(self, repo_path: Path) -> GitOutput:
        return await self._run_git(
            repo_path, ["rev-parse", "--is-inside-work-tree", "--show-toplevel"]
        )

    async def status(self, repo_path: Path) -> str:
        return await self._run_git_checked(repo_path, ["status", "--porcelain"])

    async def cherry(self, repo_path: Path) -> str:
        return await self._run_git_checked(repo_path, ["cherry", "-v"])

    async def _run_git_checked(self, repo_path: Path, args: list[str]) -> str:
        """Execute a git command and return stripped stdout, raising on failure."""
        output = await self._run_git(repo_path, args)
        if output.returncode != 0:
            raise GitCommandError(args, output.returncode, output.stderr)
        return output.stdout.strip()

    async def _run_git(self, repo_path: Path, args: list[str]) -> GitOutput:
        """Execute a git command in repo_path within the configured timeout.

        Raises:
            OSError: git could not be started (missing executable, bad cwd).
            GitTimeoutError: git did not finish in time; it is killed first.
        """
        logger.debug(f"Running git {' '.join(args)} in {repo_path}")
        proc = await asyncio.create_subprocess_exec(
            self.git_executable,
            *args,
            cwd=str(repo_path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,  # own process group so a timeout kills helpers too
        )

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout_s)
        except TimeoutError:
            try:
                os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
            except (ProcessLookupError, OSError):
                # Process already terminated
                proc.kill()
            await proc.wait()
            raise GitTimeoutError(args, self.timeout_s) from None

        return GitOutput(
            returncode=proc.returncode or 0,
            stdout=os.fsdecode(stdout),
            stderr=stderr.decode(errors="replace"),
        )
