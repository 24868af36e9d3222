"""
Language inference from file-path hints embedded in user messages.

A user message may carry a line such as ``current_file_path: src/app.py``.
The extension of that path is mapped to a language label; unknown
extensions are used verbatim as their own label.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from tdviewer.dataset.types import Conversation

# Keys are lower-case extensions
EXTENSION_LANGUAGES: dict[str, str] = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "java": "java",
    "cpp": "cpp",
    "c": "c",
    "cs": "csharp",
    "php": "php",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
    "swift": "swift",
    "kt": "kotlin",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "xml": "xml",
    "md": "markdown",
    "sql": "sql",
    "sh": "shell",
    "bash": "shell",
    "yml": "yaml",
    "yaml": "yaml",
    "ipynb": "jupyter",
}

_PATH_HINT_RE = re.compile(r"current_file_path:\s*(\S+)")


def extract_language(content: str) -> str | None:
    """
    Infer a language label from the first ``current_file_path:`` hint.

    Examples:
        >>> extract_language("current_file_path: src/app.py#cell1\\nhello")
        'python'
        >>> extract_language("current_file_path: notes.foo")
        'foo'
        >>> extract_language("no hint here") is None
        True
    """
    match = _PATH_HINT_RE.search(content)
    if not match:
        return None

    # Strip fragments such as project_1.ipynb#W1sZmlsZQ==
    path = match.group(1).split("#", 1)[0]
    if "." not in path:
        return None

    extension = path.rsplit(".", 1)[1].lower()
    if not extension:
        return None

    return EXTENSION_LANGUAGES.get(extension, extension)


def iter_user_languages(conversations: Iterable[Conversation]) -> Iterator[str]:
    """Yield the inferred label of every user message that has one."""
    for conversation in conversations:
        for message in conversation.user_messages():
            language = extract_language(message.content)
            if language:
                yield language


def get_language_stats(conversations: Iterable[Conversation]) -> dict[str, int]:
    """
    Count inferred labels across all user messages.

    Each user message counts once, so a conversation with two python hints
    adds 2 to ``python``.
    """
    counts: dict[str, int] = {}
    for language in iter_user_languages(conversations):
        counts[language] = counts.get(language, 0) + 1
    return counts


def get_all_languages(conversations: Iterable[Conversation]) -> list[str]:
    """Distinct labels in ascending lexical order."""
    return sorted(set(iter_user_languages(conversations)))


def sorted_language_stats(stats: dict[str, int]) -> list[tuple[str, int]]:
    """Sidebar order: count descending, ties broken lexically."""
    return sorted(stats.items(), key=lambda item: (-item[1], item[0]))


def display_label(language: str) -> str:
    # "python" -> "Python"
    return language[:1].upper() + language[1:]
