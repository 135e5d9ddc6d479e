"""
yc_dashboard/connectors package marker.
"""

from yc_dashboard.connectors.base import (
    BaseConnector,
    ConnectorError,
    ConnectorFetchResult,
    ConnectorPayloadError,
    ConnectorRequestError,
)
from yc_dashboard.connectors.snapshot_connector import SnapshotConnector
from yc_dashboard.connectors.yc_directory_connector import YCDirectoryConnector

__all__ = [
    "BaseConnector",
    "ConnectorError",
    "ConnectorFetchResult",
    "ConnectorPayloadError",
    "ConnectorRequestError",
    "SnapshotConnector",
    "YCDirectoryConnector",
]
