from .controller import ResourceController, ResourceState
from .filters import POST_SEARCH_FIELDS, USER_SEARCH_FIELDS, ListFilter, filter_records
from .presentation import Panel, select_panel
from .screens import SCREEN_CONFIG, Screen

__all__ = [
    "ListFilter",
    "POST_SEARCH_FIELDS",
    "Panel",
    "ResourceController",
    "ResourceState",
    "SCREEN_CONFIG",
    "Screen",
    "USER_SEARCH_FIELDS",
    "filter_records",
    "select_panel",
]
