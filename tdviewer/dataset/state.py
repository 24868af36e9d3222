"""
Viewer state controller.

Owns the loaded dataset, the language filter and pagination as one
immutable snapshot. Every public operation builds the next snapshot in
full and swaps it in with a single assignment, so readers never observe a
half-applied change.

What recomputes when:
- load_*      -> stats, labels, filtered view, totals; filter="all", page=1
- set_filter  -> filtered view, totals; page=1
- set_page    -> page only
- set_page_size -> total_pages from the existing filtered view; page=1
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from tdviewer.config import ALL_LANGUAGES, DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from tdviewer.dataset.filters import filter_dataset
from tdviewer.dataset.ingestion import parse_records
from tdviewer.dataset.language import (
    get_all_languages,
    get_language_stats,
    sorted_language_stats,
)
from tdviewer.dataset.pagination import (
    has_next_page,
    has_previous_page,
    is_valid_page_size,
    item_range,
    page_info,
    paginate,
    total_pages,
)
from tdviewer.dataset.samples import sample_dataset
from tdviewer.dataset.types import Conversation, ParsedDataset
from tdviewer.observability.logging import get_logger
from tdviewer.observability.telemetry import counter, log_event, time_block

logger = get_logger(__name__)


@dataclass(frozen=True)
class PaginationState:
    current_page: int = 1
    items_per_page: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 0


@dataclass(frozen=True)
class PageView:
    """Read model handed to the presentation layer."""

    conversations: tuple[Conversation, ...]
    indices: tuple[int, ...]
    pagination: PaginationState
    current_filter: str
    language_stats: dict[str, int]
    sorted_stats: list[tuple[str, int]]
    languages: list[str]
    total_conversations: int

    @property
    def has_previous(self) -> bool:
        return has_previous_page(self.pagination.current_page)

    @property
    def has_next(self) -> bool:
        return has_next_page(self.pagination.current_page, self.pagination.total_pages)

    @property
    def page_info(self) -> str:
        return page_info(self.pagination.current_page, self.pagination.total_pages)

    @property
    def item_range(self) -> tuple[int, int]:
        return item_range(
            self.pagination.current_page,
            self.pagination.items_per_page,
            self.pagination.total_items,
        )

    def pairs(self) -> list[tuple[int, Conversation]]:
        return list(zip(self.indices, self.conversations))


@dataclass(frozen=True)
class _Snapshot:
    dataset: ParsedDataset = field(default_factory=ParsedDataset)
    filtered: ParsedDataset = field(default_factory=ParsedDataset)
    current_filter: str = ALL_LANGUAGES
    pagination: PaginationState = field(default_factory=PaginationState)
    language_stats: dict[str, int] = field(default_factory=dict)
    languages: list[str] = field(default_factory=list)


class ViewerState:
    """
    Single owner of the viewer's canonical state.

    Usage:
        state = ViewerState()
        state.load_text(raw, line_delimited=True)
        state.set_filter("python")
        view = state.get_current_page_view()
    """

    def __init__(self, items_per_page: int = DEFAULT_PAGE_SIZE):
        if not is_valid_page_size(items_per_page):
            raise ValueError(
                f"items_per_page must be one of {PAGE_SIZE_OPTIONS}, got {items_per_page}"
            )
        self._snapshot = _Snapshot(pagination=PaginationState(items_per_page=items_per_page))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def dataset(self) -> ParsedDataset:
        return self._snapshot.dataset

    @property
    def filtered(self) -> ParsedDataset:
        return self._snapshot.filtered

    @property
    def current_filter(self) -> str:
        return self._snapshot.current_filter

    @property
    def pagination(self) -> PaginationState:
        return self._snapshot.pagination

    @property
    def language_stats(self) -> dict[str, int]:
        return dict(self._snapshot.language_stats)

    @property
    def languages(self) -> list[str]:
        return list(self._snapshot.languages)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_data(self, conversations: Sequence[Conversation], indices: Sequence[int]) -> None:
        """Replace the dataset wholesale and reset filter and page."""
        self.load_dataset(ParsedDataset.from_sequences(conversations, indices))

    def load_dataset(self, dataset: ParsedDataset) -> None:
        current = self._snapshot
        items_per_page = current.pagination.items_per_page

        self._snapshot = _Snapshot(
            dataset=dataset,
            filtered=dataset,
            current_filter=ALL_LANGUAGES,
            pagination=PaginationState(
                current_page=1,
                items_per_page=items_per_page,
                total_items=len(dataset),
                total_pages=total_pages(len(dataset), items_per_page),
            ),
            language_stats=get_language_stats(dataset.conversations),
            languages=get_all_languages(dataset.conversations),
        )
        counter("viewer.loads")
        log_event(
            "viewer.dataset_loaded",
            conversations=len(dataset),
            languages=len(self._snapshot.languages),
        )

    def load_text(self, raw_text: str, line_delimited: bool) -> ParsedDataset:
        """
        Parse raw file text and load it.

        Raises:
            ParseError: If the text is malformed. State is left untouched.
        """
        with time_block("viewer.parse.latency"):
            dataset = parse_records(raw_text, line_delimited)
        self.load_dataset(dataset)
        return dataset

    def load_sample(self) -> ParsedDataset:
        dataset = sample_dataset()
        self.load_dataset(dataset)
        return dataset

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def set_filter(self, criterion: str) -> None:
        """Filter by language label (or "all") and go back to page 1."""
        current = self._snapshot
        filtered = filter_dataset(current.dataset, criterion)
        items_per_page = current.pagination.items_per_page

        self._snapshot = replace(
            current,
            filtered=filtered,
            current_filter=criterion,
            pagination=PaginationState(
                current_page=1,
                items_per_page=items_per_page,
                total_items=len(filtered),
                total_pages=total_pages(len(filtered), items_per_page),
            ),
        )
        logger.debug("Filter set to %s (%d matches)", criterion, len(filtered))

    def set_page(self, page: int) -> None:
        """Set the current page verbatim; out-of-range pages render empty."""
        current = self._snapshot
        self._snapshot = replace(
            current, pagination=replace(current.pagination, current_page=page)
        )

    def set_page_size(self, items_per_page: int) -> None:
        """
        Change page size and go back to page 1.

        Raises:
            ValueError: If items_per_page is not one of PAGE_SIZE_OPTIONS
        """
        if not is_valid_page_size(items_per_page):
            raise ValueError(
                f"items_per_page must be one of {PAGE_SIZE_OPTIONS}, got {items_per_page}"
            )

        current = self._snapshot
        total_items = len(current.filtered)
        self._snapshot = replace(
            current,
            pagination=PaginationState(
                current_page=1,
                items_per_page=items_per_page,
                total_items=total_items,
                total_pages=total_pages(total_items, items_per_page),
            ),
        )

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    def get_current_page_view(self) -> PageView:
        snapshot = self._snapshot
        page = snapshot.pagination.current_page
        size = snapshot.pagination.items_per_page

        return PageView(
            conversations=tuple(paginate(snapshot.filtered.conversations, page, size)),
            indices=tuple(paginate(snapshot.filtered.indices, page, size)),
            pagination=snapshot.pagination,
            current_filter=snapshot.current_filter,
            language_stats=dict(snapshot.language_stats),
            sorted_stats=sorted_language_stats(snapshot.language_stats),
            languages=list(snapshot.languages),
            total_conversations=len(snapshot.dataset),
        )
