from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

_MISSING = object()


class InvalidQuery(ValueError):
    """Raised when list parameters cannot be turned into a valid page request."""

    def __init__(self, message: str, *, field_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.field_name = field_name


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, raw: Any) -> "SortDirection":
        return cls.DESC if str(raw or "").strip().upper() == "DESC" else cls.ASC


@dataclass(frozen=True)
class Search:
    """Case-insensitive substring match OR-ed across several text fields."""

    term: str
    fields: tuple[str, ...]

    def matches(self, item: Mapping[str, Any]) -> bool:
        needle = str(self.term or "").strip().lower()
        if not needle:
            return True
        for path in self.fields:
            for value in _flatten(_resolve(item, path)):
                if isinstance(value, str) and needle in value.lower():
                    return True
        return False


@dataclass(frozen=True)
class QuerySpec:
    filters: Mapping[str, Any] = field(default_factory=dict)
    sort_field: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1
    per_page: int = 15
    timestamp_fields: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Page:
    items: tuple[Any, ...]
    total_count: int
    page_count: int
    current_page: int
    per_page: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.per_page


def _resolve(item: Any, path: str) -> Any:
    current = item
    for part in str(path).split("."):
        if isinstance(current, list):
            collected = []
            for entry in current:
                value = _resolve(entry, part)
                if value is not _MISSING:
                    collected.append(value)
            if not collected:
                return _MISSING
            current = collected
            continue
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _flatten(value: Any) -> Iterable[Any]:
    if value is _MISSING:
        return
    if isinstance(value, list):
        for entry in value:
            yield from _flatten(entry)
        return
    yield value


def _value_matches(actual: Any, expected: Any) -> bool:
    if isinstance(expected, (list, tuple, set, frozenset)):
        return any(_value_matches(actual, option) for option in expected)
    return any(value == expected for value in _flatten(actual))


def _is_known_field(items: Sequence[Any], path: str) -> bool:
    return any(_resolve(item, path) is not _MISSING for item in items)


def _item_matches(item: Any, key: str, expected: Any) -> bool:
    if isinstance(expected, Search):
        return expected.matches(item)
    actual = _resolve(item, key)
    if callable(expected):
        if actual is _MISSING:
            return False
        return bool(expected(actual))
    if actual is _MISSING:
        return False
    return _value_matches(actual, expected)


def filter_items(items: Sequence[Any], filters: Mapping[str, Any] | None) -> list[Any]:
    result = list(items)
    for key, expected in (filters or {}).items():
        if expected is None:
            continue
        if not isinstance(expected, Search) and not _is_known_field(items, key):
            continue
        result = [item for item in result if _item_matches(item, key, expected)]
    return result


def _parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(path: str, chronological: bool) -> Callable[[Any], tuple]:
    # Ranks keep mixed-type columns totally ordered: missing < numbers < timestamps < strings.
    def _key(item: Any) -> tuple:
        value = _resolve(item, path)
        if value is _MISSING or value is None:
            return (0,)
        if chronological:
            parsed = _parse_timestamp(value)
            if parsed is not None:
                return (2, parsed)
        if isinstance(value, (int, float)):
            return (1, value)
        if isinstance(value, str):
            return (3, value)
        return (0,)

    return _key


def sort_items(
    items: Sequence[Any],
    sort_field: str | None,
    direction: SortDirection = SortDirection.ASC,
    timestamp_fields: Iterable[str] = (),
) -> list[Any]:
    result = list(items)
    if not sort_field or not _is_known_field(result, sort_field):
        return result
    key = _sort_key(sort_field, sort_field in set(timestamp_fields))
    # sorted() keeps equal keys in input order for reverse=True as well.
    return sorted(result, key=key, reverse=direction == SortDirection.DESC)


def paginate(items: Sequence[Any], page: int, per_page: int) -> Page:
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page <= 0:
        raise InvalidQuery("per_page must be a positive integer", field_name="limit")
    try:
        current_page = int(page)
    except (TypeError, ValueError):
        current_page = 1
    current_page = max(current_page, 1)
    total = len(items)
    offset = (current_page - 1) * per_page
    return Page(
        items=tuple(items[offset : offset + per_page]),
        total_count=total,
        page_count=math.ceil(total / per_page),
        current_page=current_page,
        per_page=per_page,
    )


def execute(source: Iterable[Any], spec: QuerySpec) -> Page:
    materialized = list(source)
    filtered = filter_items(materialized, spec.filters)
    ordered = sort_items(filtered, spec.sort_field, spec.sort_direction, spec.timestamp_fields)
    return paginate(ordered, spec.page, spec.per_page)
