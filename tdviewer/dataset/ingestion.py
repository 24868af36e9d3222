"""
Record ingestion: raw file text -> ParsedDataset.

Two encodings are accepted:
- JSONL: one conversation per non-blank line; the global index of each
  conversation is its 0-based source line number, so blank lines leave gaps.
- JSON: one top-level array; global indices are 0..n-1.

Ingestion is all-or-nothing. Any malformed record fails the whole file and
nothing partial is returned.
"""

from __future__ import annotations

import json
from pathlib import Path

from tdviewer.dataset.types import Conversation, ParsedDataset
from tdviewer.observability.logging import get_logger

logger = get_logger(__name__)

LINE_DELIMITED_SUFFIX = ".jsonl"
_BOM = "\ufeff"


class DatasetLoadError(Exception):
    """Base class for anything that stops a dataset from loading."""


class ParseError(DatasetLoadError, ValueError):
    """Input text is not valid JSON / JSONL."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number


class IngestionError(DatasetLoadError, OSError):
    """The file could not be read or decoded."""


def is_line_delimited(filename: str) -> bool:
    """Mode selection by extension: ``.jsonl`` is line-delimited, anything else JSON."""
    return filename.endswith(LINE_DELIMITED_SUFFIX)


def parse_records(raw_text: str, line_delimited: bool) -> ParsedDataset:
    """
    Parse raw file text into conversations plus their global indices.

    Args:
        raw_text: Full decoded file content
        line_delimited: True for JSONL, False for a whole-document JSON array

    Returns:
        ParsedDataset with len(conversations) == len(indices)

    Raises:
        ParseError: If any line (JSONL) or the document (JSON) is malformed
    """
    raw_text = raw_text.removeprefix(_BOM)
    if line_delimited:
        return _parse_jsonl(raw_text)
    return _parse_json_array(raw_text)


def _parse_jsonl(raw_text: str) -> ParsedDataset:
    conversations: list[Conversation] = []
    indices: list[int] = []

    for line_number, line in enumerate(raw_text.split("\n")):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            value = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON on line {line_number + 1}: {e.msg}",
                line_number=line_number,
            ) from e
        except RecursionError as e:
            raise ParseError(
                f"JSON nested too deeply on line {line_number + 1}",
                line_number=line_number,
            ) from e
        conversations.append(Conversation.from_raw(value))
        indices.append(line_number)

    return ParsedDataset.from_sequences(conversations, indices)


def _parse_json_array(raw_text: str) -> ParsedDataset:
    try:
        value = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON document: {e.msg}", line_number=e.lineno - 1) from e
    except RecursionError as e:
        raise ParseError("JSON document nested too deeply") from e

    if not isinstance(value, list):
        raise ParseError("Expected a JSON array of conversations")

    conversations = [Conversation.from_raw(item) for item in value]
    return ParsedDataset.from_sequences(conversations, range(len(conversations)))


def read_dataset_file(path: Path) -> ParsedDataset:
    """
    Read a .json/.jsonl file from disk and parse it.

    Raises:
        IngestionError: If the file cannot be read as UTF-8 text
        ParseError: If the content is malformed
    """
    try:
        raw_text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read dataset file %s: %s", path, e)
        raise IngestionError(f"Could not read {path.name}") from e

    return parse_records(raw_text, is_line_delimited(path.name))
