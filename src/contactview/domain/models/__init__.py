from .core import DEFAULT_ID_FIELD, DraftEdit, Record
from .view import PageResult, SortDirection, ViewState

__all__ = [
    "DEFAULT_ID_FIELD",
    "DraftEdit",
    "PageResult",
    "Record",
    "SortDirection",
    "ViewState",
]
