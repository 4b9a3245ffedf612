"""Page/limit parsing and paging metadata."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ats.crud.storage import EntityRepository, OrderBy

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")

# Largest offset handed to the database, well inside a 64-bit SQL integer
_MAX_SKIP = 2**53 - 1
# Longer digit runs saturate instead of being converted
_MAX_DIGITS = 18


def parse_int(value: Any) -> int | None:
    """
    Parse the leading integer of a query-string value.

    Trailing garbage is ignored, so ``"5abc"`` parses as 5. Values too long
    to be a sensible page or limit saturate at ``10**18``.

    Examples:
        >>> parse_int("12")
        12
        >>> parse_int(" -3 ")
        -3
        >>> parse_int("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    number = 10**_MAX_DIGITS if len(digits) > _MAX_DIGITS else int(digits)
    return -number if sign == "-" else number


@dataclass(frozen=True)
class Paging:
    """Resolved page number and page size."""

    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def resolve_paging(page: Any, limit: Any, default_limit: int, max_limit: int) -> Paging:
    """
    Turn raw ``page``/``limit`` query values into a ``Paging``.

    ``page`` falls back to 1 and is floored at 1. ``limit`` falls back to
    ``default_limit`` when absent, unparsable or zero, then is clamped to
    ``[1, max_limit]``. Pages past the largest storable offset are clamped
    to it, which yields an empty page.
    """
    limit_num = min(max_limit, max(1, parse_int(limit) or default_limit))
    page_num = min(max(1, parse_int(page) or 1), _MAX_SKIP // limit_num + 1)
    return Paging(page=page_num, limit=limit_num)


def paging_meta(total: int, paging: Paging) -> dict[str, int]:
    """Paging block returned alongside a page of records."""
    return {
        "total": total,
        "page": paging.page,
        "limit": paging.limit,
        "totalPages": math.ceil(total / paging.limit),
    }


def paginate(
    repo: EntityRepository,
    paging: Paging,
    order_by: OrderBy,
    where: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Fetch one page plus a total counted with the same filter."""
    records = repo.find_many(skip=paging.skip, take=paging.limit, order_by=order_by, where=where)
    total = repo.count(where=where)
    return {"data": records, "paging": paging_meta(total, paging)}
