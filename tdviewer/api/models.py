"""Pydantic request/response models for the viewer API.

Response models are built from the controller's PageView; request models
carry the user actions (load, filter, page, page size).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tdviewer.config import MAX_UPLOAD_CHARS, PAGE_SIZE_OPTIONS
from tdviewer.dataset.state import PageView
from tdviewer.dataset.types import Conversation, Message

# =============================================================================
# REQUEST MODELS
# =============================================================================


class LoadRequest(BaseModel):
    """File contents read client-side; the extension picks JSON vs JSONL."""

    filename: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., max_length=MAX_UPLOAD_CHARS)

    @field_validator("filename")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not (v.endswith(".json") or v.endswith(".jsonl")):
            raise ValueError("Only .json and .jsonl files are supported")
        return v


class FilterRequest(BaseModel):
    # No upper bound: unknown extensions become labels verbatim, at any length
    criterion: str = Field(..., min_length=1)


class PageRequest(BaseModel):
    page: int


class PageSizeRequest(BaseModel):
    # Checked against PAGE_SIZE_OPTIONS by the controller (400 on mismatch)
    items_per_page: int


# =============================================================================
# RESPONSE MODELS
# =============================================================================


class MessageResponse(BaseModel):
    role: str
    content: str

    @classmethod
    def from_message(cls, message: Message) -> MessageResponse:
        return cls(role=message.role, content=message.content)


class ConversationResponse(BaseModel):
    """One conversation on the current page, labeled with its source position."""

    global_index: int
    messages: list[MessageResponse]

    @classmethod
    def from_conversation(cls, global_index: int, conversation: Conversation) -> ConversationResponse:
        return cls(
            global_index=global_index,
            messages=[MessageResponse.from_message(m) for m in conversation.messages],
        )


class PaginationResponse(BaseModel):
    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    has_previous: bool
    has_next: bool
    page_info: str
    first_item: int
    last_item: int


class LanguageStatResponse(BaseModel):
    language: str
    count: int


class PageViewResponse(BaseModel):
    """API response for the current page of the viewer."""

    conversations: list[ConversationResponse]
    indices: list[int]
    pagination: PaginationResponse
    current_filter: str
    language_stats: list[LanguageStatResponse]
    languages: list[str]
    total_conversations: int
    page_size_options: list[int] = Field(default_factory=lambda: list(PAGE_SIZE_OPTIONS))

    @classmethod
    def from_view(cls, view: PageView) -> PageViewResponse:
        """Convert the controller read model to an API response."""
        first_item, last_item = view.item_range
        pagination = view.pagination
        return cls(
            conversations=[
                ConversationResponse.from_conversation(index, c) for index, c in view.pairs()
            ],
            indices=list(view.indices),
            pagination=PaginationResponse(
                current_page=pagination.current_page,
                items_per_page=pagination.items_per_page,
                total_items=pagination.total_items,
                total_pages=pagination.total_pages,
                has_previous=view.has_previous,
                has_next=view.has_next,
                page_info=view.page_info,
                first_item=first_item,
                last_item=last_item,
            ),
            current_filter=view.current_filter,
            language_stats=[
                LanguageStatResponse(language=language, count=count)
                for language, count in view.sorted_stats
            ],
            languages=list(view.languages),
            total_conversations=view.total_conversations,
        )


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_count: int = 1
    invalid_fields: list[str] = []
