"""Pagination descriptor and pager window calculation."""
import math

from .constants import PAGER_MAX_PAGES

# Marker for a collapsed run of pages in a pager window
ELLIPSIS = None


def _to_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Pagination:
    """Server-supplied paging metadata for one list page."""

    def __init__(self, current_page=1, per_page=30, total=0, total_pages=1):
        self.current_page = current_page
        self.per_page = per_page
        self.total = total
        self.total_pages = total_pages

    def __repr__(self):
        return (
            f"Pagination(current_page={self.current_page}, per_page={self.per_page}, "
            f"total={self.total}, total_pages={self.total_pages})"
        )

    @classmethod
    def from_payload(cls, raw, count=0, page=1, per_page=30):
        """
        Build a descriptor from the backend ``pagination`` block.

        Missing or malformed values fall back to a single page holding
        ``count`` records. ``current_page`` is clamped to ``[1, total_pages]``.
        """
        raw = raw if isinstance(raw, dict) else {}

        per_page = max(_to_int(raw.get('per_page'), per_page), 1)
        total = max(_to_int(raw.get('total'), count), 0)
        total_pages = _to_int(raw.get('total_pages'), None)
        if total_pages is None:
            total_pages = math.ceil(total / per_page)
        total_pages = max(total_pages, 1)

        current_page = _to_int(raw.get('current_page'), page)
        current_page = min(max(current_page, 1), total_pages)

        return cls(
            current_page=current_page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
        )

    @property
    def has_prev_page(self):
        return self.current_page > 1

    @property
    def has_next_page(self):
        return self.current_page < self.total_pages

    @property
    def previous_page(self):
        return max(self.current_page - 1, 1)

    @property
    def next_page(self):
        return min(self.current_page + 1, self.total_pages)

    @property
    def first_index(self):
        """1-based index of the first record on this page ("Showing x ...")."""
        if not self.total:
            return 0
        return (self.current_page - 1) * self.per_page + 1

    @property
    def last_index(self):
        return min(self.current_page * self.per_page, self.total)

    @property
    def window(self):
        return page_window(self.current_page, self.total_pages)


def page_window(current, total):
    """
    Page numbers to show in the pager, with ``ELLIPSIS`` for collapsed runs.

    The first and last page are always present; in between, a three-page
    window follows the current page.

        >>> page_window(10, 20)
        [1, None, 9, 10, 11, None, 20]
    """
    if total <= PAGER_MAX_PAGES:
        return list(range(1, total + 1))

    current = min(max(current, 1), total)

    start = max(2, current - 1)
    end = min(total - 1, current + 1)
    if current <= 2:
        end = 3
    if current >= total - 1:
        start = total - 2

    pages = [1]
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total - 1:
        pages.append(ELLIPSIS)
    pages.append(total)
    return pages
