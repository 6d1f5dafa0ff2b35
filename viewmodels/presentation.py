# presentation.py
from enum import Enum
from typing import Any, Optional, Sequence

from .controller import ResourceState


class Panel(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    POPULATED = "populated"


def select_panel(state: ResourceState, items: Optional[Sequence[Any]] = None, total: int = 0) -> Panel:
    """
    Picks the one panel a screen shows for `state`.

    `items` is what a list screen shows after filtering and `total` the size of
    the fetched collection; detail screens pass neither and are populated as
    soon as their record loaded. An empty listing is EMPTY when the fetch itself
    returned nothing and NO_MATCHES when the filter removed everything.
    """
    if state.is_loading:
        return Panel.LOADING
    if state.error is not None:
        return Panel.ERROR
    if items is None or len(items) > 0:
        return Panel.POPULATED
    if total > 0:
        return Panel.NO_MATCHES
    return Panel.EMPTY
