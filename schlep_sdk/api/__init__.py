"""Namespaced sub-clients, one per platform API area."""

from schlep_sdk.api.admin import AdminClient
from schlep_sdk.api.analytics import AnalyticsClient
from schlep_sdk.api.data import DataClient
from schlep_sdk.api.document import DocumentClient
from schlep_sdk.api.ml import MLClient
from schlep_sdk.api.monitoring import MonitoringClient
from schlep_sdk.api.quality import QualityClient
from schlep_sdk.api.storage import StorageClient
from schlep_sdk.api.users import UsersClient

__all__ = [
    "AdminClient",
    "AnalyticsClient",
    "DataClient",
    "DocumentClient",
    "MLClient",
    "MonitoringClient",
    "QualityClient",
    "StorageClient",
    "UsersClient",
]
