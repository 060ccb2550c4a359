"""
Pagination and filtering over in-memory lists.

These helpers never raise on bad input: unparseable page numbers fall
back to defaults and items lacking a field simply do not match it.
"""

import math
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any, default: int) -> int:
    """Parse a leading integer from ``value`` or return ``default``.

    Behaves like ``parseInt(value, 10) || default``: ``"12abc"`` gives
    12, while ``"abc"``, ``None`` and ``"0"`` give the default.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value) or default
    if not isinstance(value, str):
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1)) or default


def clamp_page(value: Any) -> int:
    return max(1, parse_int(value, DEFAULT_PAGE))


def clamp_limit(value: Any) -> int:
    return max(1, min(MAX_LIMIT, parse_int(value, DEFAULT_LIMIT)))


def paginate(items: Sequence[Any], page: Any = None, limit: Any = None) -> Dict[str, Any]:
    """Slice ``items`` into one page and describe the whole result set.

    Returns ``{"page", "limit", "total", "pages", "data"}`` where
    ``pages`` is ``ceil(total / limit)``.  A page past the end yields an
    empty ``data`` list.
    """
    p = clamp_page(page)
    lim = clamp_limit(limit)
    total = len(items)
    start = (p - 1) * lim
    return {
        "page": p,
        "limit": lim,
        "total": total,
        "pages": math.ceil(total / lim),
        "data": list(items[start:start + lim]),
    }


def filter_by_substring(
    items: Iterable[Dict[str, Any]],
    fields: Union[str, Sequence[str]],
    query: Optional[str],
) -> List[Dict[str, Any]]:
    """Keep items where any of ``fields`` contains ``query``, ignoring case.

    A falsy ``query`` keeps everything.  Missing or non-string field
    values never match.
    """
    if isinstance(fields, str):
        fields = (fields,)
    if not query:
        return list(items)
    needle = query.lower()
    matches = []
    for item in items:
        for field in fields:
            value = item.get(field)
            if isinstance(value, str) and needle in value.lower():
                matches.append(item)
                break
    return matches


def filter_by_field(items: Iterable[Dict[str, Any]], field: str, value: Optional[str]) -> List[Dict[str, Any]]:
    """Keep items whose ``field`` equals ``value`` exactly; no-op when ``value`` is falsy."""
    if not value:
        return list(items)
    return [item for item in items if item.get(field) == value]
