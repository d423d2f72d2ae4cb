from syncscan.domain.entities.scan_result import ScanResult, ScanSummary

__all__ = ["ScanResult", "ScanSummary"]
