class SyncScanError(Exception):
    """Base class for scan failures."""


class GitCommandError(SyncScanError):
    """A git invocation exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str = "") -> None:
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._message())

    def _message(self) -> str:
        for line in self.stderr.splitlines():
            line = line.strip()
            if line:
                return line
        return f"git {' '.join(self.git_args)} exited with status {self.returncode}"


class GitTimeoutError(SyncScanError):
    """A git invocation did not finish within the allowed time."""

    def __init__(self, args: list[str], timeout_s: float) -> None:
        self.git_args = list(args)
        self.timeout_s = timeout_s
        super().__init__(f"git {' '.join(args)} timed out after {timeout_s:g}s")
