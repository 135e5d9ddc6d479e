"""
yc_dashboard/schemas package marker.
"""

from yc_dashboard.schemas.company import RawCompanyRecord
from yc_dashboard.schemas.snapshot import SnapshotCompany, SnapshotStatistics

__all__ = [
    "RawCompanyRecord",
    "SnapshotCompany",
    "SnapshotStatistics",
]
