from pydantic import BaseModel, Field


class ScanOptions(BaseModel):
    """Tuning knobs for one scan run."""

    max_concurrency: int = Field(
        default=8, ge=1, description="Directories scanned at the same time"
    )
    command_timeout_s: float = Field(
        default=30.0, gt=0, description="Seconds before a git call is killed"
    )
    git_executable: str = Field(default="git", min_length=1)
    report_inconclusive: bool = Field(
        default=True,
        description="Print a warning line for directories git could not probe",
    )
