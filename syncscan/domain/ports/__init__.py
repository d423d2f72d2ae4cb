from syncscan.domain.ports.git_port import GitOutput, GitPort
from syncscan.domain.ports.output_port import OutputSink

__all__ = [
    # Git port
    "GitOutput",
    "GitPort",
    # Output port
    "OutputSink",
]
