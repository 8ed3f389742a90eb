"""Application layer - sync logic over the domain contracts."""

from fleet_sync.application.collection_patcher import CollectionPatcher
from fleet_sync.application.collection_state import CollectionState, EditDraft
from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.application.paginated_view import PaginatedView
from fleet_sync.application.pagination import ELLIPSIS, PageInfo, page_window
from fleet_sync.application.query_state import ALL, QueryState
from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.application.schedule_editor import ScheduleEditor

__all__ = [
    "ALL",
    "ELLIPSIS",
    "CollectionPatcher",
    "CollectionState",
    "EditDraft",
    "LivenessClassifier",
    "PageInfo",
    "PaginatedView",
    "QueryState",
    "ResourceStore",
    "ScheduleEditor",
    "page_window",
]
