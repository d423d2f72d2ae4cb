from syncscan.application.dto.scan_options import ScanOptions
from syncscan.application.scan_coordinator import ScanCoordinator

__all__ = ["ScanCoordinator", "ScanOptions"]
