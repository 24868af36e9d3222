"""
HTML renderer for the viewer page.

Public API:
- render_page
- render_message_content
"""

from .page import render_message_content, render_page

__all__ = ["render_message_content", "render_page"]
