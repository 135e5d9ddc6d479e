"""
yc_dashboard/domain package marker.
"""

from yc_dashboard.domain.company import (
    DashboardStatistics,
    FrequencyTable,
    NormalizedCompanyRecord,
    RegionStatistics,
)
from yc_dashboard.domain.load_state import Failed, Loading, LoadState, Ready

__all__ = [
    "DashboardStatistics",
    "Failed",
    "FrequencyTable",
    "LoadState",
    "Loading",
    "NormalizedCompanyRecord",
    "Ready",
    "RegionStatistics",
]
