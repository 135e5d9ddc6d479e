"""
yc_dashboard/services/search_service.py

Free-text search and fixed-size pagination for the company table.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from yc_dashboard.domain.company import NormalizedCompanyRecord

T = TypeVar("T")


def _matches(record: NormalizedCompanyRecord, term: str) -> bool:
    haystacks = (
        record.name,
        record.batch,
        record.country or "",
        record.status or "",
        record.location or "",
    )
    return any(term in value.lower() for value in haystacks)


def filter_companies(
    records: Sequence[NormalizedCompanyRecord],
    query: str,
) -> Sequence[NormalizedCompanyRecord]:
    """
    Return records whose name, batch, country, status or location contains
    ``query`` (case-insensitive).

    An empty query returns ``records`` itself. Relative order is kept.
    """

    if not query:
        return records
    term = query.lower()
    return [record for record in records if _matches(record, term)]


def total_pages(item_count: int, page_size: int) -> int:
    """
    Return ``ceil(item_count / page_size)``.
    """

    if page_size < 1:
        raise ValueError("page_size must be a positive integer.")
    return math.ceil(item_count / page_size)


def clamp_page(page_number: int, page_count: int) -> int:
    """
    Clamp a requested page into ``[1, max(page_count, 1)]``.

    The paginator never clamps; callers apply this after the filtered
    sequence changes length.
    """

    return max(1, min(page_number, max(page_count, 1)))


def paginate(records: Sequence[T], page_size: int, page_number: int) -> list[T]:
    """
    Return page ``page_number`` (1-based) of ``records``.

    Pages beyond the last one are empty.
    """

    if page_size < 1:
        raise ValueError("page_size must be a positive integer.")
    if page_number < 1:
        raise ValueError("page_number must be a positive integer.")
    start = (page_number - 1) * page_size
    return list(records[start : start + page_size])


@dataclass(frozen=True)
class PageWindow:
    """
    Position of one page inside a result set, for "showing X to Y of Z".

    ``first_index`` and ``last_index`` are 1-based and inclusive; both are
    0 when the result set is empty.
    """

    page_number: int
    total_pages: int
    first_index: int
    last_index: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


def page_window(item_count: int, page_size: int, page_number: int) -> PageWindow:
    """
    Describe ``page_number`` of a result set with ``item_count`` items.
    """

    if page_number < 1:
        raise ValueError("page_number must be a positive integer.")
    page_count = total_pages(item_count, page_size)
    start = (page_number - 1) * page_size
    if item_count == 0 or start >= item_count:
        return PageWindow(
            page_number=page_number,
            total_pages=page_count,
            first_index=0,
            last_index=0,
            total_items=item_count,
        )
    return PageWindow(
        page_number=page_number,
        total_pages=page_count,
        first_index=start + 1,
        last_index=min(start + page_size, item_count),
        total_items=item_count,
    )
