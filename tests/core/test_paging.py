"""Paged List — tests for page-count invariants and argument checks.

Tests cover:
    - total_pages is the ceiling of total_count / page_size
    - has_previous_page / has_next_page boundary behavior (strict next-page comparison)
    - Non-positive page_index/page_size and negative total_count raise InvalidArgumentError
      before the source is consumed
    - Instances are read-only; paginate() slices a full sequence
"""

import pytest

from vernacular.core.errors import InvalidArgumentError
from vernacular.core.paging import PagedList, paginate


# ─── total_pages ─────────────────────────────────────────────────

def test_total_pages_rounds_up():
    assert PagedList([], 1, 3, 10).total_pages == 4


def test_total_pages_exact_division():
    assert PagedList([], 1, 3, 9).total_pages == 3


def test_total_pages_zero_when_empty():
    page = PagedList([], 1, 10, 0)
    assert page.total_pages == 0
    assert not page.has_previous_page
    assert not page.has_next_page


def test_total_pages_never_exceeds_total_count():
    for total_count in range(0, 30):
        for page_size in range(1, 8):
            page = PagedList([], 1, page_size, total_count)
            assert page.total_pages <= total_count


# ─── Navigation flags ────────────────────────────────────────────

def test_first_page_flags():
    page = PagedList(range(5), 1, 5, 12)
    assert page.total_pages == 3
    assert not page.has_previous_page
    assert page.has_next_page


def test_last_page_flags():
    page = PagedList(range(2), 3, 5, 12)
    assert page.has_previous_page
    assert not page.has_next_page


def test_second_to_last_page_reports_no_next_page():
    page = PagedList(range(5), 2, 5, 12)
    assert page.has_previous_page
    assert not page.has_next_page


def test_page_beyond_total_is_allowed():
    page = PagedList([], 9, 5, 12)
    assert page.items == ()
    assert page.has_previous_page
    assert not page.has_next_page


# ─── Argument checks ─────────────────────────────────────────────

def test_zero_page_index_raises():
    with pytest.raises(InvalidArgumentError) as exc_info:
        PagedList([], 0, 3, 10)
    assert exc_info.value.argument == "page_index"


def test_zero_page_size_raises():
    with pytest.raises(InvalidArgumentError) as exc_info:
        PagedList([], 1, 0, 10)
    assert exc_info.value.argument == "page_size"


def test_negative_total_count_raises():
    with pytest.raises(InvalidArgumentError) as exc_info:
        PagedList([], 1, 3, -1)
    assert exc_info.value.argument == "total_count"


def test_none_source_raises():
    with pytest.raises(InvalidArgumentError) as exc_info:
        PagedList(None, 1, 3, 0)
    assert exc_info.value.argument == "source"


def test_invalid_arguments_do_not_consume_source():
    consumed = []

    def source():
        for i in range(3):
            consumed.append(i)
            yield i

    with pytest.raises(InvalidArgumentError):
        PagedList(source(), 1, 0, 3)
    assert consumed == []


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        PagedList([], -1, 3, 10)


# ─── Immutability & container behavior ───────────────────────────

def test_items_materialized_from_iterable():
    page = PagedList((i * 2 for i in range(3)), 1, 3, 3)
    assert page.items == (0, 2, 4)
    assert list(page) == [0, 2, 4]
    assert len(page) == 3
    assert page[1] == 2


def test_source_mutation_does_not_leak_into_page():
    source = [1, 2]
    page = PagedList(source, 1, 2, 2)
    source.append(3)
    assert page.items == (1, 2)


def test_attributes_are_read_only():
    page = PagedList([1], 1, 1, 1)
    with pytest.raises(AttributeError):
        page.page_index = 2
    with pytest.raises(AttributeError):
        page.total_pages = 10
    with pytest.raises(AttributeError):
        del page.items


def test_equality_and_hash():
    assert PagedList([1, 2], 1, 2, 4) == PagedList((1, 2), 1, 2, 4)
    assert PagedList([1, 2], 1, 2, 4) != PagedList([1, 2], 1, 2, 5)
    assert hash(PagedList([1], 1, 1, 1)) == hash(PagedList([1], 1, 1, 1))


def test_repr_summarizes_page():
    assert repr(PagedList([1, 2], 1, 2, 5)) == (
        "PagedList(page_index=1, page_size=2, total_count=5, total_pages=3, items=2)"
    )


# ─── paginate ────────────────────────────────────────────────────

def test_paginate_slices_requested_page():
    page = paginate(list(range(12)), 3, 5)
    assert page.items == (10, 11)
    assert page.total_count == 12
    assert page.total_pages == 3


def test_paginate_first_page():
    page = paginate("abcdefg", 1, 3)
    assert page.items == ("a", "b", "c")
    assert not page.has_previous_page


def test_paginate_rejects_bad_arguments():
    with pytest.raises(InvalidArgumentError):
        paginate([1, 2, 3], 0, 2)
    with pytest.raises(InvalidArgumentError):
        paginate([1, 2, 3], 1, 0)


def test_paginate_rejects_none_source():
    with pytest.raises(InvalidArgumentError) as exc_info:
        paginate(None, 1, 3)
    assert exc_info.value.argument == "source"
