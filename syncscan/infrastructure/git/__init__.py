from syncscan.infrastructure.git.git_adapter import GitAdapter

__all__ = ["GitAdapter"]
