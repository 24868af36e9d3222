"""Unit tests for the HTML page renderer."""

from __future__ import annotations

import pytest

from tdviewer.dataset.highlight import PALETTE
from tdviewer.dataset.state import ViewerState
from tdviewer.dataset.types import Conversation, Message
from tdviewer.render.page import render_message_content, render_page


class TestRenderMessageContent:
    """Plain text is escaped; tagged content is emitted as highlight markup"""

    def test_plain_text_is_escaped(self):
        assert render_message_content("<script>alert(1)</script>") == (
            "&lt;script&gt;alert(1)&lt;/script&gt;"
        )

    def test_tagged_content_is_markup(self):
        result = render_message_content("<|code|>x<|/code|>")

        assert result.count(f"background-color: {PALETTE[0]}") == 2
        assert "<|code|>" in result


class TestRenderPage:
    @pytest.fixture
    def state(self, mixed_jsonl) -> ViewerState:
        state = ViewerState()
        state.load_text(mixed_jsonl, line_delimited=True)
        return state

    def test_empty_state_shows_only_file_controls(self):
        page = render_page(ViewerState().get_current_page_view())

        assert 'id="fileInput"' in page
        assert '<div class="pagination-controls' not in page
        assert '<select id="languageFilter">' not in page
        assert "No conversations to display" not in page

    def test_conversations_labeled_with_global_index(self, state):
        state.set_filter("javascript")

        page = render_page(state.get_current_page_view())

        for index in (1, 6, 10, 14):
            assert f"<h3>Conversation {index}</h3>" in page
        assert "<h3>Conversation 0</h3>" not in page

    def test_sidebar_counts_and_active_filter(self, state):
        state.set_filter("rust")

        page = render_page(state.get_current_page_view())

        assert '<span class="language-name">All Languages</span><span class="language-count">12</span>' in page
        assert 'clickable active" data-filter="rust"' in page

    def test_filter_dropdown_lists_labels(self, state):
        page = render_page(state.get_current_page_view())

        assert '<option value="all" selected>All Languages</option>' in page
        assert '<option value="python">Python</option>' in page

    def test_pagination_summary(self, state):
        state.set_page(3)

        page = render_page(state.get_current_page_view())

        assert "Showing 11-12 of 12 conversations" in page
        assert "Page 3 of 3" in page

    def test_empty_page_message(self, state):
        state.set_page(9)

        page = render_page(state.get_current_page_view())

        assert "No conversations to display" in page

    def test_message_bodies_follow_escape_rule(self):
        state = ViewerState()
        state.load_data(
            [
                Conversation(
                    messages=(
                        Message(role="user", content="<b>bold?</b>"),
                        Message(role="assistant", content="<|tool|>run<|/tool|>"),
                    )
                )
            ],
            [0],
        )

        page = render_page(state.get_current_page_view())

        assert "&lt;b&gt;bold?&lt;/b&gt;" in page
        assert "<b>bold?</b>" not in page
        assert f'style="background-color: {PALETTE[0]}"><|tool|></span>' in page
