"""Pagination — page index is from // size, offset is a whole page."""

from ewm.core.pagination import Page, make_page


def test_first_page():
    assert make_page(0, 10) == Page(offset=0, limit=10)


def test_from_aligned_to_page():
    assert make_page(20, 10) == Page(offset=20, limit=10)


def test_from_inside_page_rounds_down():
    assert make_page(15, 10) == Page(offset=10, limit=10)


def test_from_smaller_than_size_is_first_page():
    assert make_page(3, 5) == Page(offset=0, limit=5)


def test_size_one():
    assert make_page(7, 1) == Page(offset=7, limit=1)
