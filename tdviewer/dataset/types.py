"""
Module: types
Purpose: Shared domain types for the viewer pipeline.
Dependencies: none

Leaf module: ingestion, language, filters, pagination and state all import
from here, so it must not import any of them back.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Message author role.

    Extends str so ``message.role == Role.USER`` holds for plain strings
    read straight from JSON.
    """

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single role-tagged message."""

    role: str
    content: str

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Message:
        role = raw.get("role")
        content = raw.get("content")
        return cls(
            role="" if role is None else str(role),
            content=_as_text(content),
        )


@dataclass(frozen=True)
class Conversation:
    """One display unit: an ordered tuple of messages."""

    messages: tuple[Message, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> Conversation:
        """
        Build a Conversation from one parsed JSON value.

        Shape problems are tolerated, not rejected: anything without a
        ``messages`` list becomes an empty conversation and non-object
        entries inside ``messages`` are skipped.
        """
        if not isinstance(raw, dict):
            return cls()

        raw_messages = raw.get("messages")
        if not isinstance(raw_messages, list):
            return cls()

        return cls(
            messages=tuple(Message.from_raw(m) for m in raw_messages if isinstance(m, dict))
        )

    def user_messages(self) -> list[Message]:
        return [m for m in self.messages if m.role == Role.USER]


@dataclass(frozen=True)
class ParsedDataset:
    """
    Conversations paired 1:1 with their global indices.

    indices[k] is the source position of conversations[k]: the 0-based
    line number for JSONL input, the array position for a JSON array.
    """

    conversations: tuple[Conversation, ...] = field(default_factory=tuple)
    indices: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.conversations) != len(self.indices):
            raise ValueError(
                f"conversations/indices length mismatch: "
                f"{len(self.conversations)} != {len(self.indices)}"
            )

    @classmethod
    def from_sequences(
        cls, conversations: Sequence[Conversation], indices: Sequence[int]
    ) -> ParsedDataset:
        return cls(conversations=tuple(conversations), indices=tuple(indices))

    def __len__(self) -> int:
        return len(self.conversations)

    def pairs(self) -> list[tuple[int, Conversation]]:
        """(global index, conversation) pairs in order."""
        return list(zip(self.indices, self.conversations))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
