"""Report uncommitted and unpushed changes across sibling git repositories."""

__version__ = "0.1.0"
