"""
Test suite for SearchClassifieds use case.

Verifies:
- Paging is validated before the repository is called
- The filter is always pinned to LIVE
- Pagination metadata is derived from the total count
- The visitor's favourite ids are attached when a session id is given
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from car_dealer.adapters.in_memory_classified_repository import InMemoryClassifiedRepository
from car_dealer.adapters.in_memory_key_value_store import InMemoryKeyValueStore
from car_dealer.domain.classified import Classified, ClassifiedStatus
from car_dealer.domain.classified_filter import ClassifiedFilter, build_classified_filter
from car_dealer.domain.paging import Paging, PagingValidationError
from car_dealer.ports.classified_repository import ClassifiedRepository, SearchResult
from car_dealer.ports.key_value_store import KeyValueStore
from car_dealer.use_cases.search_classifieds import (
    SearchClassifieds,
    SearchClassifiedsRequest,
)


@pytest.fixture
def mock_repository() -> Mock:
    repository = Mock(spec=ClassifiedRepository)
    repository.search.return_value = SearchResult(classifieds=[], total_count=0)
    return repository


def test_delegates_filter_and_paging(mock_repository: Mock) -> None:
    classified_filter = build_classified_filter({"make": "4"})
    paging = Paging(page=2, page_size=3)

    SearchClassifieds(mock_repository, InMemoryKeyValueStore()).execute(
        SearchClassifiedsRequest(classified_filter=classified_filter, paging=paging)
    )

    mock_repository.search.assert_called_once_with(
        classified_filter=classified_filter, paging=paging
    )


def test_status_is_pinned_to_live(mock_repository: Mock) -> None:
    request = SearchClassifiedsRequest(
        classified_filter=ClassifiedFilter(status=ClassifiedStatus.DRAFT),
        paging=Paging(),
    )

    SearchClassifieds(mock_repository, InMemoryKeyValueStore()).execute(request)

    passed = mock_repository.search.call_args.kwargs["classified_filter"]
    assert passed.status == ClassifiedStatus.LIVE


def test_invalid_paging_raises_before_search(mock_repository: Mock) -> None:
    request = SearchClassifiedsRequest(
        classified_filter=ClassifiedFilter(),
        paging=Paging(page=0),
    )

    with pytest.raises(PagingValidationError):
        SearchClassifieds(mock_repository, InMemoryKeyValueStore()).execute(request)

    mock_repository.search.assert_not_called()


@pytest.mark.parametrize(
    "total, expected_pages",
    [(0, 0), (1, 1), (3, 1), (7, 3)],
)
def test_total_pages(mock_repository: Mock, total: int, expected_pages: int) -> None:
    mock_repository.search.return_value = SearchResult(classifieds=[], total_count=total)

    result = SearchClassifieds(mock_repository, InMemoryKeyValueStore()).execute(
        SearchClassifiedsRequest(classified_filter=ClassifiedFilter(), paging=Paging())
    )

    assert result.total_count == total
    assert result.total_pages == expected_pages
    assert result.page == 1
    assert result.page_size == 3


def test_pages_through_live_stock(make_classified: Callable[..., Classified]) -> None:
    repository = InMemoryClassifiedRepository(
        [make_classified(i) for i in range(1, 8)]
        + [make_classified(8, status=ClassifiedStatus.DRAFT)]
    )
    use_case = SearchClassifieds(repository, InMemoryKeyValueStore())

    pages = [
        use_case.execute(
            SearchClassifiedsRequest(classified_filter=ClassifiedFilter(), paging=Paging(page=p))
        )
        for p in (1, 2, 3)
    ]

    assert [[c.id for c in page.classifieds] for page in pages] == [[1, 2, 3], [4, 5, 6], [7]]
    assert {page.total_pages for page in pages} == {3}


def test_attaches_visitor_favourite_ids(mock_repository: Mock) -> None:
    store = InMemoryKeyValueStore({"favourites:abc": {"ids": [4, 1]}})

    result = SearchClassifieds(mock_repository, store).execute(
        SearchClassifiedsRequest(
            classified_filter=ClassifiedFilter(), paging=Paging(), source_id="abc"
        )
    )

    assert result.favourite_ids == [4, 1]


def test_without_source_id_skips_store(mock_repository: Mock) -> None:
    store = Mock(spec=KeyValueStore)

    result = SearchClassifieds(mock_repository, store).execute(
        SearchClassifiedsRequest(classified_filter=ClassifiedFilter(), paging=Paging())
    )

    assert result.favourite_ids == []
    store.get.assert_not_called()
