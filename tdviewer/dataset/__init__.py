"""
Viewer dataset pipeline - ingestion, language inference, filtering,
pagination, tag highlighting and the state controller that ties them together.
"""

from tdviewer.dataset.filters import (
    filter_conversations,
    filter_dataset,
    filter_indices,
    matches_language,
)
from tdviewer.dataset.highlight import PALETTE, extract_tag_names, has_tags, highlight_tags
from tdviewer.dataset.ingestion import (
    DatasetLoadError,
    IngestionError,
    ParseError,
    is_line_delimited,
    parse_records,
    read_dataset_file,
)
from tdviewer.dataset.language import (
    EXTENSION_LANGUAGES,
    extract_language,
    get_all_languages,
    get_language_stats,
)
from tdviewer.dataset.pagination import paginate, total_pages
from tdviewer.dataset.samples import sample_dataset
from tdviewer.dataset.state import PageView, PaginationState, ViewerState
from tdviewer.dataset.types import Conversation, Message, ParsedDataset, Role

__all__ = [
    # Types
    "Conversation",
    "Message",
    "ParsedDataset",
    "Role",
    # Ingestion
    "DatasetLoadError",
    "IngestionError",
    "ParseError",
    "is_line_delimited",
    "parse_records",
    "read_dataset_file",
    "sample_dataset",
    # Language
    "EXTENSION_LANGUAGES",
    "extract_language",
    "get_all_languages",
    "get_language_stats",
    # Filters
    "filter_conversations",
    "filter_dataset",
    "filter_indices",
    "matches_language",
    # Pagination
    "paginate",
    "total_pages",
    # Highlighting
    "PALETTE",
    "extract_tag_names",
    "has_tags",
    "highlight_tags",
    # State
    "PageView",
    "PaginationState",
    "ViewerState",
]
