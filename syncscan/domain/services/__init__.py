from syncscan.domain.services.repository_prober import ProbeReport, RepositoryProber
from syncscan.domain.services.status_classifier import StatusClassifier

__all__ = ["ProbeReport", "RepositoryProber", "StatusClassifier"]
