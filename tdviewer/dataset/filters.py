"""
Language filter over conversations.

A conversation matches a label when at least one of its user messages
infers that label. The whole conversation (system and assistant turns
included) is kept. "all" passes everything through untouched.

filter_conversations and filter_indices share one predicate so that the
k-th surviving conversation always lines up with the k-th surviving index.
"""

from __future__ import annotations

from collections.abc import Sequence

from tdviewer.config import ALL_LANGUAGES
from tdviewer.dataset.language import extract_language
from tdviewer.dataset.types import Conversation, ParsedDataset


def matches_language(conversation: Conversation, criterion: str) -> bool:
    if criterion == ALL_LANGUAGES:
        return True
    return any(
        extract_language(message.content) == criterion
        for message in conversation.user_messages()
    )


def filter_conversations(
    conversations: Sequence[Conversation], criterion: str
) -> list[Conversation]:
    """Stable filter of conversations by language label."""
    if criterion == ALL_LANGUAGES:
        return list(conversations)
    return [c for c in conversations if matches_language(c, criterion)]


def filter_indices(
    conversations: Sequence[Conversation],
    indices: Sequence[int],
    criterion: str,
) -> list[int]:
    """Global indices of the conversations filter_conversations keeps, same order."""
    if criterion == ALL_LANGUAGES:
        return list(indices)
    return [
        index
        for conversation, index in zip(conversations, indices)
        if matches_language(conversation, criterion)
    ]


def filter_dataset(dataset: ParsedDataset, criterion: str) -> ParsedDataset:
    """Filter conversations and indices together."""
    if criterion == ALL_LANGUAGES:
        return dataset
    return ParsedDataset.from_sequences(
        filter_conversations(dataset.conversations, criterion),
        filter_indices(dataset.conversations, dataset.indices, criterion),
    )
