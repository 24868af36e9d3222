"""Built-in sample conversations, shown when no file has been loaded."""

from __future__ import annotations

from tdviewer.dataset.types import Conversation, Message, ParsedDataset, Role

SAMPLE_CONVERSATIONS: tuple[Conversation, ...] = (
    Conversation(
        messages=(
            Message(role=Role.SYSTEM.value, content="You are a helpful assistant."),
            Message(role=Role.USER.value, content="Hello, can you help me with something?"),
            Message(
                role=Role.ASSISTANT.value,
                content="Of course! What can I help you with today?",
            ),
        )
    ),
    Conversation(
        messages=(
            Message(role=Role.SYSTEM.value, content="You are a coding expert."),
            Message(role=Role.USER.value, content="How do I reverse a string in Python?"),
            Message(
                role=Role.ASSISTANT.value,
                content=(
                    "You can reverse a string in Python using slicing: "
                    "`reversed_string = original_string[::-1]`"
                ),
            ),
        )
    ),
)


def sample_dataset() -> ParsedDataset:
    return ParsedDataset.from_sequences(
        SAMPLE_CONVERSATIONS, range(len(SAMPLE_CONVERSATIONS))
    )
