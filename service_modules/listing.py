"""
List utilities shared by every page and list endpoint.

Each view fetches a flat list of records (dicts in wire format), narrows it
with a status/category equality filter plus a free-text search, then orders
it by one selected column. Records referencing other records (a payment's
member, a class's trainer) are resolved by linear scan.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

ALL = "All"
ASC = "asc"
DESC = "desc"

# A search field is either a record key or a function deriving the value
# (e.g. the member name behind a payment's memberId).
SearchField = Union[str, Callable[[dict], Any]]


@dataclass
class SortConfig:
    key: Optional[str] = None
    direction: str = ASC

    def toggle(self, key: str) -> "SortConfig":
        """Clicking the active column while ascending flips it; anything else sorts ascending."""
        if self.key == key and self.direction == ASC:
            return SortConfig(key, DESC)
        return SortConfig(key, ASC)

    @classmethod
    def parse(cls, key: Optional[str], direction: Optional[str],
              allowed: Optional[Iterable[str]] = None,
              default: Optional["SortConfig"] = None) -> "SortConfig":
        """Build a config from query parameters, ignoring unknown columns."""
        default = default or cls()
        if not key or (allowed is not None and key not in allowed):
            return SortConfig(default.key, default.direction)
        return cls(key, DESC if (direction or "").lower() == DESC else ASC)


def display_text(value: Any) -> str:
    """Text used for substring matching. Whole floats drop the trailing .0"""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _field_value(record: dict, field: SearchField) -> Any:
    if callable(field):
        return field(record)
    return record.get(field)


def matches_search(record: dict, term: str, fields: Sequence[SearchField]) -> bool:
    """Case-insensitive substring match over any of the given fields."""
    needle = term.lower()
    for field in fields:
        value = _field_value(record, field)
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            if v is not None and needle in display_text(v).lower():
                return True
    return False


def filter_equal(records: Iterable[dict], field: str, value: Optional[str]) -> List[dict]:
    """Keep records whose field equals value. None, '' and 'All' keep everything."""
    if not value or value == ALL:
        return list(records)
    return [r for r in records if r.get(field) == value]


def filter_contains(records: Iterable[dict], field: str, value: Optional[str]) -> List[dict]:
    """Like filter_equal, for list-valued fields (a class's days)."""
    if not value or value == ALL:
        return list(records)
    return [r for r in records if value in (r.get(field) or [])]


def search(records: Iterable[dict], term: Optional[str], fields: Sequence[SearchField]) -> List[dict]:
    if not term:
        return list(records)
    return [r for r in records if matches_search(r, term, fields)]


def apply_filters(records: Iterable[dict], *,
                  term: Optional[str] = None,
                  search_fields: Sequence[SearchField] = (),
                  status: Optional[str] = None,
                  status_field: Optional[str] = None) -> List[dict]:
    """Status equality first, then text search. The result is their intersection."""
    result = list(records)
    if status_field:
        result = filter_equal(result, status_field, status)
    return search(result, term, search_fields)


def sort_items(records: Iterable[dict], config: SortConfig) -> List[dict]:
    """
    Order records by a single column.

    Returns a new list; with no key the input order is kept. Equal values
    keep their input order in both directions. Missing values sort last
    ascending and first descending.
    """
    items = list(records)
    if not config.key:
        return items

    def sort_key(record):
        value = record.get(config.key)
        if value is None:
            return (1, "")
        return (0, value)

    try:
        return sorted(items, key=sort_key, reverse=config.direction == DESC)
    except TypeError:
        # Mixed column types: fall back to comparing display text
        return sorted(
            items,
            key=lambda r: (r.get(config.key) is None, display_text(r.get(config.key, ""))),
            reverse=config.direction == DESC,
        )


def find_by_id(records: Iterable[dict], record_id: Any) -> Optional[dict]:
    """Linear scan for the record with the given id."""
    for record in records:
        if record.get("id") == record_id:
            return record
    return None


def lookup_field(records: Iterable[dict], record_id: Any, field: str, default: str) -> Any:
    record = find_by_id(records, record_id)
    return record.get(field) if record else default
