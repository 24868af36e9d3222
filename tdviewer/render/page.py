"""
HTML rendering for the viewer page.

A pure function of the controller's PageView: sidebar with language counts,
file controls, language filter, pagination controls (top and bottom) and
the current page of conversations.

Message bodies follow one rule: content with markup tokens is emitted as
highlighted markup in full, content without tokens is HTML-escaped text.
Controls talk to the JSON API with fetch() and reload the page.
"""

from __future__ import annotations

import html

from tdviewer.config import ALL_LANGUAGES, PAGE_SIZE_OPTIONS, SERVICE_NAME
from tdviewer.dataset.highlight import has_tags, highlight_tags
from tdviewer.dataset.language import display_label
from tdviewer.dataset.state import PageView
from tdviewer.dataset.types import Conversation, Message


def render_page(view: PageView) -> str:
    """Render the full viewer page for one PageView."""
    body = ""
    if view.total_conversations > 0:
        body = (
            _render_filter_controls(view)
            + _render_pagination(view, bottom=False)
            + _render_conversations(view)
            + _render_pagination(view, bottom=True)
        )

    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{html.escape(SERVICE_NAME)}</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        {_get_page_css()}
    </style>
</head>
<body>
<div class="app">
    {_render_sidebar(view)}
    <div class="container">
        <h1>{html.escape(SERVICE_NAME)}</h1>
        <p>Supports both JSON arrays and JSONL (line-delimited JSON) files</p>
        <div class="controls">
            <input id="fileInput" type="file" accept=".json,.jsonl">
            <button id="loadSample">Load Sample Data</button>
        </div>
        {body}
    </div>
</div>
<script>
{_get_page_script()}
</script>
</body>
</html>
"""


def render_message_content(content: str) -> str:
    """Markup for one message body."""
    if has_tags(content):
        return highlight_tags(content)
    return html.escape(content)


def _render_sidebar(view: PageView) -> str:
    items = [
        _render_stat_item(ALL_LANGUAGES, "All Languages", view.total_conversations, view)
    ]
    for language, count in view.sorted_stats:
        items.append(_render_stat_item(language, language, count, view))
    items_html = "".join(items)

    return f"""
    <div class="sidebar">
        <h3>Language Statistics</h3>
        <div class="language-stats">
            {items_html}
        </div>
    </div>
    """


def _render_stat_item(value: str, label: str, count: int, view: PageView) -> str:
    active = " active" if view.current_filter == value else ""
    return (
        f'<div class="language-stat-item clickable{active}" data-filter="{html.escape(value)}">'
        f'<span class="language-name">{html.escape(label)}</span>'
        f'<span class="language-count">{count}</span>'
        "</div>"
    )


def _render_filter_controls(view: PageView) -> str:
    if not view.languages:
        return ""

    options = [_render_option(ALL_LANGUAGES, "All Languages", view.current_filter)]
    for language in view.languages:
        options.append(_render_option(language, display_label(language), view.current_filter))
    options_html = "".join(options)

    return f"""
    <div class="filter-controls">
        <label for="languageFilter">Filter by Language:</label>
        <select id="languageFilter">
            {options_html}
        </select>
    </div>
    """


def _render_option(value: str, label: str, selected_value: str) -> str:
    selected = " selected" if value == selected_value else ""
    return f'<option value="{html.escape(value)}"{selected}>{html.escape(label)}</option>'


def _render_pagination(view: PageView, bottom: bool) -> str:
    pagination = view.pagination
    if pagination.total_items == 0:
        return ""

    first, last = view.item_range
    prev_disabled = "" if view.has_previous else " disabled"
    next_disabled = "" if view.has_next else " disabled"

    page_size = ""
    if not bottom:
        options = "".join(
            f'<option value="{size}"{" selected" if size == pagination.items_per_page else ""}>'
            f"{size}</option>"
            for size in PAGE_SIZE_OPTIONS
        )
        page_size = f"""
        <div class="items-per-page">
            <label for="itemsPerPage">Items per page:</label>
            <select id="itemsPerPage">{options}</select>
        </div>
        """

    css_class = "pagination-controls bottom" if bottom else "pagination-controls"
    return f"""
    <div class="{css_class}">
        <div class="pagination-info">
            Showing {first}-{last} of {pagination.total_items} conversations
        </div>
        <div class="pagination-buttons">
            <button data-page="1"{prev_disabled}>First</button>
            <button data-page="{pagination.current_page - 1}"{prev_disabled}>Previous</button>
            <span class="page-info">{html.escape(view.page_info)}</span>
            <button data-page="{pagination.current_page + 1}"{next_disabled}>Next</button>
            <button data-page="{pagination.total_pages}"{next_disabled}>Last</button>
        </div>
        {page_size}
    </div>
    """


def _render_conversations(view: PageView) -> str:
    if not view.conversations:
        return '<div class="no-conversations">No conversations to display</div>'

    return (
        '<div class="messages-container">'
        + "".join(_render_conversation(index, c) for index, c in view.pairs())
        + "</div>"
    )


def _render_conversation(global_index: int, conversation: Conversation) -> str:
    messages = "".join(_render_message(m) for m in conversation.messages)
    return f"""
    <div class="conversation">
        <div class="conversation-header"><h3>Conversation {global_index}</h3></div>
        <div class="messages">{messages}</div>
    </div>
    """


def _render_message(message: Message) -> str:
    role = html.escape(message.role)
    return (
        f'<div class="message {role}">'
        f'<div class="message-header"><span class="message-role">{role}</span></div>'
        f'<div class="message-content preserve-whitespace">'
        f"{render_message_content(message.content)}</div>"
        "</div>"
    )


def _get_page_script() -> str:
    """Client glue: every control posts to the JSON API, then reloads."""
    return """
async function post(path, payload) {
    const response = await fetch(path, {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify(payload || {}),
    });
    if (!response.ok) {
        const error = await response.json().catch(() => ({}));
        alert(error.detail || "Request failed");
        return;
    }
    window.location.reload();
}

document.getElementById("fileInput").addEventListener("change", (event) => {
    const file = event.target.files[0];
    if (!file) return;
    const reader = new FileReader();
    reader.onload = () => post("/api/load", {filename: file.name, content: reader.result});
    reader.onerror = () => alert("Invalid file format. Please check the file.");
    reader.readAsText(file);
});

document.getElementById("loadSample").addEventListener("click", () => post("/api/sample"));

document.querySelectorAll("[data-filter]").forEach((item) => {
    item.addEventListener("click", () => post("/api/filter", {criterion: item.dataset.filter}));
});

const languageFilter = document.getElementById("languageFilter");
if (languageFilter) {
    languageFilter.addEventListener("change", () => post("/api/filter", {criterion: languageFilter.value}));
}

document.querySelectorAll("button[data-page]").forEach((button) => {
    button.addEventListener("click", () => post("/api/page", {page: parseInt(button.dataset.page, 10)}));
});

const itemsPerPage = document.getElementById("itemsPerPage");
if (itemsPerPage) {
    itemsPerPage.addEventListener("change", () => post("/api/page-size", {items_per_page: parseInt(itemsPerPage.value, 10)}));
}
"""


def _get_page_css() -> str:
    """Page CSS styles"""
    return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            margin: 0;
            background: #f5f5f5;
        }
        .app {
            display: flex;
            min-height: 100vh;
        }
        .sidebar {
            width: 240px;
            background: white;
            padding: 20px;
            box-shadow: 2px 0 4px rgba(0,0,0,0.1);
        }
        .language-stat-item {
            display: flex;
            justify-content: space-between;
            padding: 6px 8px;
            border-radius: 4px;
            cursor: pointer;
        }
        .language-stat-item.active {
            background: #4CAF50;
            color: white;
        }
        .container {
            flex: 1;
            max-width: 1200px;
            padding: 20px 40px;
        }
        .controls, .filter-controls, .pagination-controls {
            margin: 16px 0;
        }
        .pagination-controls {
            display: flex;
            gap: 16px;
            align-items: center;
            flex-wrap: wrap;
        }
        .conversation {
            background: white;
            padding: 20px;
            border-radius: 8px;
            margin: 20px 0;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .message {
            border-left: 4px solid #ccc;
            margin: 10px 0;
            padding: 8px 12px;
        }
        .message.system { border-color: #FF9800; }
        .message.user { border-color: #2196F3; }
        .message.assistant { border-color: #4CAF50; }
        .message-role {
            font-weight: bold;
            text-transform: uppercase;
            font-size: 0.8em;
            color: #666;
        }
        .preserve-whitespace {
            white-space: pre-wrap;
            word-break: break-word;
        }
        .tag-highlight {
            border-radius: 3px;
            padding: 0 2px;
        }
        .no-conversations {
            color: #666;
            padding: 20px;
        }
    """
