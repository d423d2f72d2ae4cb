from pathlib import Path
from typing import Protocol

from pydantic import BaseModel


class GitOutput(BaseModel):
    """Captured result of one git invocation."""

    returncode: int
    stdout: str
    stderr: str


class GitPort(Protocol):
    async def rev_parse_work_tree(self, repo_path: Path) -> GitOutput:
        """Run `git rev-parse --is-inside-work-tree --show-toplevel`.

        Returns the output whatever the exit status; the caller decides what
        a non-zero exit means.
        """
        ...

    async def status(self, repo_path: Path) -> str:
        """Get git status --porcelain output."""
        ...

    async def cherry(self, repo_path: Path) -> str:
        """Get git cherry -v output (local commits missing from upstream)."""
        ...
