"""Tests for page info and the page-number window."""

import pytest

from fleet_sync.application.pagination import ELLIPSIS, PageInfo, page_window


@pytest.mark.parametrize(
    ("current", "total_pages", "expected"),
    [
        (0, 10, [0, 1, 2, 3, ELLIPSIS, 9]),
        (2, 10, [0, 1, 2, 3, ELLIPSIS, 9]),
        (9, 10, [0, ELLIPSIS, 6, 7, 8, 9]),
        (7, 10, [0, ELLIPSIS, 6, 7, 8, 9]),
        (5, 10, [0, ELLIPSIS, 4, 5, 6, ELLIPSIS, 9]),
        (3, 10, [0, ELLIPSIS, 2, 3, 4, ELLIPSIS, 9]),
    ],
)
def test_page_window(current: int, total_pages: int, expected: list) -> None:
    """Given more than five pages, when windowing, then first/last and neighbours are shown."""
    assert page_window(current, total_pages) == expected


@pytest.mark.parametrize("total_pages", [0, 1, 3, 5])
def test_page_window_shows_all_pages_when_few(total_pages: int) -> None:
    """Given at most five pages, when windowing, then every page is shown without ellipsis."""
    for current in range(max(total_pages, 1)):
        assert page_window(current, total_pages) == list(range(total_pages))


@pytest.mark.parametrize("total", [1, 49, 50, 51, 127, 1000])
def test_item_range_within_total(total: int) -> None:
    """Given any non-empty total, when on any page, then 1 <= start <= end <= total."""
    for page in range(PageInfo.for_page(0, 50, total).total_pages):
        info = PageInfo.for_page(page, 50, total)
        assert 1 <= info.start_item <= info.end_item <= total


def test_empty_collection_hides_controls() -> None:
    """Given no records, when building page info, then controls are hidden."""
    info = PageInfo.for_page(0, 50, 0)

    assert info.show_controls is False
    assert info.summary == ""


def test_single_page_shows_all() -> None:
    """Given fewer records than a page, when building page info, then it shows all."""
    info = PageInfo.for_page(0, 50, 12)

    assert info.shows_all is True
    assert info.summary == "Showing all 12 items"
    assert info.has_next is False


def test_scenario_127_items() -> None:
    """Given 127 records at 50 per page, when paging to the end, then ranges match."""
    first = PageInfo.for_page(0, 50, 127)

    assert first.summary == "Showing 1 to 50 of 127 items"
    assert first.window == [0, 1, 2]
    assert first.position == "Page 1 of 3"
    assert first.has_previous is False

    last = PageInfo.for_page(2, 50, 127)

    assert last.summary == "Showing 101 to 127 of 127 items"
    assert last.has_next is False
    assert last.has_previous is True


def test_page_beyond_total_is_clamped() -> None:
    """Given a page past the end, when building page info, then the last page is used."""
    assert PageInfo.for_page(7, 50, 127).page == 2
