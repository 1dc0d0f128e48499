from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Literal, Mapping

from app.services.envelope import EnvelopeStyle
from app.services.list_query import InvalidQuery, QuerySpec, Search, SortDirection

FilterKind = Literal["exact", "int", "bool", "min", "max", "csv"]


@dataclass(frozen=True)
class FilterParam:
    param: str
    field: str
    kind: FilterKind = "exact"


@dataclass(frozen=True)
class ListConfig:
    default_per_page: int = 50
    default_order_by: str = "created_at"
    default_sorted_by: SortDirection = SortDirection.DESC
    search_fields: tuple[str, ...] = ()
    filters: tuple[FilterParam, ...] = ()
    timestamp_fields: frozenset[str] = frozenset({"created_at", "updated_at"})
    envelope: EnvelopeStyle = EnvelopeStyle.LARAVEL


def _bad_filter_value(param: str, kind: str) -> InvalidQuery:
    return InvalidQuery(f'Invalid value for filter "{param}" ({kind})', field_name=param)


def _coerce_bool(param: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value or "").strip().lower()
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"0", "false", "no", "n"}:
        return False
    raise _bad_filter_value(param, "boolean")


def _coerce_int(param: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value or "").strip()
    try:
        return int(text)
    except ValueError:
        raise _bad_filter_value(param, "integer")


def _coerce_number(param: str, value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value or "").strip()
    if not text:
        raise _bad_filter_value(param, "number")
    try:
        return float(Decimal(text.replace(",", ".")))
    except (InvalidOperation, ValueError):
        raise _bad_filter_value(param, "number")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _build_filter(spec: FilterParam, raw: Any) -> Any:
    if spec.kind == "bool":
        return _coerce_bool(spec.param, raw)
    if spec.kind == "int":
        return _coerce_int(spec.param, raw)
    if spec.kind == "min":
        bound = _coerce_number(spec.param, raw)
        return lambda value: _is_number(value) and value >= bound
    if spec.kind == "max":
        bound = _coerce_number(spec.param, raw)
        return lambda value: _is_number(value) and value <= bound
    if spec.kind == "csv":
        options = tuple(part.strip() for part in str(raw).split(",") if part.strip())
        return options or None
    return str(raw)


def _parse_per_page(raw: Any, default: int) -> int:
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidQuery('Invalid value for "limit"', field_name="limit")


def _parse_page(raw: Any) -> int:
    try:
        return max(int(str(raw).strip()), 1)
    except (TypeError, ValueError):
        return 1


def build_query_spec(params: Mapping[str, Any], config: ListConfig) -> QuerySpec:
    filters: dict[str, Any] = {}
    for spec in config.filters:
        raw = params.get(spec.param)
        if raw is None or str(raw).strip() == "":
            continue
        if spec.kind in {"min", "max"}:
            filters[spec.field] = _combine(filters.get(spec.field), _build_filter(spec, raw))
            continue
        filters[spec.field] = _build_filter(spec, raw)

    search = str(params.get("search") or "").strip()
    if search and config.search_fields:
        filters["search"] = Search(term=search, fields=config.search_fields)

    order_by = str(params.get("orderBy") or "").strip() or config.default_order_by
    sorted_by_raw = params.get("sortedBy")
    direction = SortDirection.parse(sorted_by_raw) if sorted_by_raw else config.default_sorted_by

    return QuerySpec(
        filters=filters,
        sort_field=order_by,
        sort_direction=direction,
        page=_parse_page(params.get("page")),
        per_page=_parse_per_page(params.get("limit"), config.default_per_page),
        timestamp_fields=config.timestamp_fields,
    )


def _combine(existing: Any, predicate: Any) -> Any:
    if existing is None:
        return predicate
    if callable(existing):
        return lambda value: existing(value) and predicate(value)
    return lambda value: existing == value and predicate(value)
