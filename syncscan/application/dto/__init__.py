from syncscan.application.dto.scan_options import ScanOptions

__all__ = ["ScanOptions"]
