"""Paged List — immutable page of a larger ordered result set.

Invariants:
    - page_index > 0, page_size > 0, total_count >= 0 (checked before the
      source is materialized; a failing construction leaves nothing behind)
    - total_pages = ceil(total_count / page_size)
    - has_previous_page = page_index > 1
    - has_next_page = page_index + 1 < total_pages
    - Every field is computed once in __init__; instances are read-only

Design Decisions:
    - has_next_page uses the strict "page_index + 1 < total_pages" comparison
      existing callers rely on. It reports no next page when standing on the
      second-to-last page; kept as-is until product confirms the intended rule
    - Items stored as a tuple: the page cannot be mutated through the view
"""

import logging
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

from vernacular.core.domain_types import PageIndex, PageSize
from vernacular.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PagedList(Generic[T]):
    """One page of items plus the counts needed to render page navigation."""

    __slots__ = (
        "_items", "_page_index", "_page_size", "_total_count", "_total_pages",
        "_has_previous_page", "_has_next_page",
    )

    def __init__(
        self,
        source: Iterable[T],
        page_index: int,
        page_size: int,
        total_count: int,
    ):
        if source is None:
            raise InvalidArgumentError("source", "must not be None")
        if page_index <= 0:
            raise InvalidArgumentError("page_index", f"must be > 0, got {page_index}")
        if page_size <= 0:
            raise InvalidArgumentError("page_size", f"must be > 0, got {page_size}")
        if total_count < 0:
            raise InvalidArgumentError("total_count", f"must be >= 0, got {total_count}")

        total_pages = -(-total_count // page_size)  # ceil division
        _set = object.__setattr__
        _set(self, "_page_index", PageIndex(page_index))
        _set(self, "_page_size", PageSize(page_size))
        _set(self, "_total_count", total_count)
        _set(self, "_total_pages", total_pages)
        _set(self, "_has_previous_page", page_index > 1)
        _set(self, "_has_next_page", page_index + 1 < total_pages)
        _set(self, "_items", tuple(source))
        logger.debug(
            f"Built page {page_index}/{total_pages} with {len(self._items)} item(s)",
            extra={"page_index": page_index, "page_size": page_size},
        )

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def page_index(self) -> PageIndex:
        return self._page_index

    @property
    def page_size(self) -> PageSize:
        return self._page_size

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def has_previous_page(self) -> bool:
        return self._has_previous_page

    @property
    def has_next_page(self) -> bool:
        return self._has_next_page

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PagedList):
            return NotImplemented
        return (
            self._items == other._items
            and self._page_index == other._page_index
            and self._page_size == other._page_size
            and self._total_count == other._total_count
        )

    def __hash__(self) -> int:
        return hash((self._items, self._page_index, self._page_size, self._total_count))

    def __repr__(self) -> str:
        return (
            f"PagedList(page_index={self._page_index}, page_size={self._page_size}, "
            f"total_count={self._total_count}, total_pages={self._total_pages}, "
            f"items={len(self._items)})"
        )


def paginate(source: Sequence[T], page_index: int, page_size: int) -> PagedList[T]:
    """Cut page `page_index` out of a fully materialized sequence.

    Page index and size checks are left to PagedList, which runs them before
    the slice is stored.
    """
    if source is None:
        raise InvalidArgumentError("source", "must not be None")
    start = (page_index - 1) * page_size
    return PagedList(source[start:start + page_size], page_index, page_size, len(source))
