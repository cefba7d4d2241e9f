from src.families.application.queries.list_batches_query import (
    ListBatchesQuery,
    ListBatchesQueryHandler,
)
from src.families.application.queries.preview_auto_assign_query import (
    PreviewAutoAssignQuery,
    PreviewAutoAssignQueryHandler,
)

__all__ = [
    "ListBatchesQuery",
    "ListBatchesQueryHandler",
    "PreviewAutoAssignQuery",
    "PreviewAutoAssignQueryHandler",
]
