import asyncio
import os
import subprocess
from pathlib import Path

import pytest

from syncscan.domain.ports.git_port import GitOutput

GIT_ENV = {
    **os.environ,
    "GIT_AUTHOR_NAME": "Sync Scan",
    "GIT_AUTHOR_EMAIL": "syncscan@example.com",
    "GIT_COMMITTER_NAME": "Sync Scan",
    "GIT_COMMITTER_EMAIL": "syncscan@example.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=cwd,
        env=GIT_ENV,
        check=True,
        capture_output=True,
        text=True,
        errors="surrogateescape",
    )
    return result.stdout


class GitSandbox:
    """Builds real repositories (with bare remotes) under a temp directory."""

    def __init__(self, base: Path) -> None:
        self.base = base
        self.remotes = base / "remotes"
        self.remotes.mkdir()

    def commit(self, repo: Path, filename: str, content: str = "content\n") -> None:
        (repo / filename).write_text(content)
        run_git(repo, "add", filename)
        run_git(repo, "commit", "-m", f"Add {filename}")

    def local_repo(self, path: Path) -> Path:
        """A repository with one commit and no upstream."""
        path.mkdir(parents=True)
        run_git(path, "init")
        self.commit(path, "README.md")
        return path

    def pushed_repo(self, path: Path) -> Path:
        """A clone whose only commit has been pushed to its bare remote."""
        remote = self.remotes / f"{path.name}.git"
        run_git(self.remotes, "init", "--bare", str(remote))
        run_git(path.parent, "clone", str(remote), path.name)
        self.commit(path, "README.md")
        run_git(path, "push", "-u", "origin", "HEAD")
        return path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    # Resolve symlinks (e.g., /var -> /private/var on macOS)
    return root.resolve()


@pytest.fixture
def sandbox(tmp_path: Path) -> GitSandbox:
    return GitSandbox(tmp_path)


@pytest.fixture
def scenario_workspace(workspace: Path, sandbox: GitSandbox) -> Path:
    """repoA clean, repoB untracked file, repoC unpushed commit, plainFolder no git."""
    sandbox.pushed_repo(workspace / "repoA")

    repo_b = sandbox.pushed_repo(workspace / "repoB")
    (repo_b / "notes.txt").write_text("untracked\n")

    repo_c = sandbox.pushed_repo(workspace / "repoC")
    sandbox.commit(repo_c, "feature.py", "print('hi')\n")

    plain = workspace / "plainFolder"
    plain.mkdir()
    (plain / "file.txt").write_text("no git here\n")
    return workspace


class RecordingSink:
    """OutputSink keeping every line with its kind."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def write_line(self, text: str) -> None:
        self.lines.append(("line", text))

    def write_warning(self, text: str) -> None:
        self.lines.append(("warning", text))

    def write_error(self, text: str) -> None:
        self.lines.append(("error", text))

    def texts(self) -> list[str]:
        return [text for _, text in self.lines]

    def of_kind(self, kind: str) -> list[str]:
        return [text for k, text in self.lines if k == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


class FakeGit:
    """In-memory GitPort keyed by directory name.

    Values are either the output to return or an exception to raise.
    Directories not configured are treated as plain folders.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.probes: dict[str, GitOutput | Exception | None] = {}
        self.statuses: dict[str, str | Exception] = {}
        self.cherries: dict[str, str | Exception] = {}
        self.calls: list[tuple[str, str]] = []
        self.delay = delay
        self.active = 0
        self.max_active = 0

    def repo(self, name: str, status: str | Exception = "", cherry: str | Exception = "") -> None:
        self.probes[name] = None
        self.statuses[name] = status
        self.cherries[name] = cherry

    async def _answer(self, kind: str, repo_path: Path, table: dict, default: object) -> object:
        self.calls.append((kind, repo_path.name))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.active -= 1
        value = table.get(repo_path.name, default)
        if isinstance(value, Exception):
            raise value
        return value

    async def rev_parse_work_tree(self, repo_path: Path) -> GitOutput:
        not_a_repo = GitOutput(
            returncode=128, stdout="", stderr="fatal: not a git repository\n"
        )
        output = await self._answer("rev-parse", repo_path, self.probes, not_a_repo)
        if output is None:
            # Configured repository: report its own path as toplevel, like git does
            return GitOutput(returncode=0, stdout=f"true\n{repo_path}\n", stderr="")
        return output

    async def status(self, repo_path: Path) -> str:
        return await self._answer("status", repo_path, self.statuses, "")

    async def cherry(self, repo_path: Path) -> str:
        return await self._answer("cherry", repo_path, self.cherries, "")


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()
