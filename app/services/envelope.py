from __future__ import annotations

from enum import Enum
from typing import Any

from app.services.list_query import Page


class EnvelopeStyle(str, Enum):
    LARAVEL = "laravel"
    SIMPLE = "simple"


def _page_url(path: str, number: int) -> str:
    return f"{path}?page={number}"


def _meta(page: Page) -> dict[str, Any]:
    shown = len(page.items)
    return {
        "current_page": page.current_page,
        "from": page.offset + 1 if shown else None,
        "to": page.offset + shown if shown else None,
        "last_page": page.page_count,
        "per_page": page.per_page,
        "total": page.total_count,
    }


def format_laravel_style(page: Page, path: str) -> dict[str, Any]:
    prev_page = page.current_page - 1
    next_page = page.current_page + 1
    meta = _meta(page)
    meta["path"] = path
    return {
        "data": list(page.items),
        "links": {
            "first": _page_url(path, 1),
            "last": _page_url(path, page.page_count),
            "prev": _page_url(path, prev_page) if 1 <= prev_page <= page.page_count else None,
            "next": _page_url(path, next_page) if 1 <= next_page <= page.page_count else None,
        },
        "meta": meta,
    }


def format_simple_style(page: Page) -> dict[str, Any]:
    return {"data": list(page.items), "meta": _meta(page)}


def format_page(page: Page, path: str, style: EnvelopeStyle) -> dict[str, Any]:
    if style == EnvelopeStyle.SIMPLE:
        return format_simple_style(page)
    return format_laravel_style(page, path)
