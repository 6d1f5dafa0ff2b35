# filters.py
from typing import Any, List, Optional, Sequence, Tuple

POST_SEARCH_FIELDS = ("title", "body")
USER_SEARCH_FIELDS = ("name", "username", "email", "company.name")


def _resolve(record: Any, path: str) -> Any:
    value = record
    for attr in path.split("."):
        value = getattr(value, attr)
    return value


def filter_records(records: Sequence[Any], query: Optional[str], fields: Sequence[str]) -> List[Any]:
    """
    Returns the records where any of `fields` contains `query`, case-insensitively.
    An empty or whitespace-only query returns every record. Source order is kept
    and `records` itself is never modified.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(records)
    return [
        record for record in records
        if any(needle in str(_resolve(record, field)).lower() for field in fields)
    ]


class ListFilter:
    """Holds {query, filtered} for a list screen; recomputed when the source or the query changes."""

    def __init__(self, fields: Tuple[str, ...]):
        self.fields = fields
        self._source: List[Any] = []
        self._query = ""
        self._filtered: List[Any] = []

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered(self) -> List[Any]:
        return self._filtered

    @property
    def total(self) -> int:
        return len(self._source)

    def set_source(self, records: Optional[Sequence[Any]]) -> None:
        self._source = list(records or [])
        self._recompute()

    def set_query(self, query: Optional[str]) -> None:
        self._query = query or ""
        self._recompute()

    def _recompute(self) -> None:
        self._filtered = filter_records(self._source, self._query, self.fields)
