"""
Inline markup-token highlighting.

Tokens look like ``<|name|>``; ``<|/name|>`` is the closing variant and shares
the color of ``name``. Colors are handed out per call in first-seen order of
base names, cycling through PALETTE. Nothing is remembered between calls, so
the same tag may get different colors in different messages.

The returned string is markup: callers render it as HTML only when
has_tags() is true and render the original text escaped otherwise.
"""

from __future__ import annotations

import re

# Order matters: base name k gets PALETTE[k % len(PALETTE)]
PALETTE: tuple[str, ...] = (
    "#FFD700",  # Gold
    "#98FB98",  # PaleGreen
    "#87CEEB",  # SkyBlue
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # LightPink
    "#20B2AA",  # LightSeaGreen
    "#FFA07A",  # LightSalmon
    "#B0C4DE",  # LightSteelBlue
    "#FFE4B5",  # Moccasin
    "#D3D3D3",  # LightGray
    "#F5DEB3",  # Wheat
    "#E0E0E0",  # Gainsboro
    "#AFEEEE",  # PaleTurquoise
    "#DB7093",  # PaleVioletRed
    "#90EE90",  # LightGreen
    "#FFE4E1",  # MistyRose
    "#FAFAD2",  # LightGoldenrodYellow
    "#E6E6FA",  # Lavender
    "#FFC0CB",  # Pink
)

TAG_RE = re.compile(r"<\|([^|]+)\|>")


def base_name(tag_name: str) -> str:
    return tag_name[1:] if tag_name.startswith("/") else tag_name


def extract_tag_names(content: str) -> list[str]:
    """
    Distinct tag names in first-seen order.

    A closing tag also contributes its base name, so ``<|/a|>`` alone
    yields ``["/a", "a"]``.
    """
    names: dict[str, None] = {}
    for match in TAG_RE.finditer(content):
        name = match.group(1)
        names.setdefault(name, None)
        if name.startswith("/"):
            names.setdefault(base_name(name), None)
    return list(names)


def has_tags(content: str) -> bool:
    return TAG_RE.search(content) is not None


def assign_colors(content: str) -> dict[str, str]:
    """Base name -> color for this content only."""
    colors: dict[str, str] = {}
    for name in extract_tag_names(content):
        base = base_name(name)
        if base not in colors:
            colors[base] = PALETTE[len(colors) % len(PALETTE)]
    return colors


def highlight_tags(content: str) -> str:
    """
    Wrap every ``<|name|>`` token in a colored span, keeping the token text.

    Content without tokens is returned unchanged.
    """
    colors = assign_colors(content)
    if not colors:
        return content

    def _wrap(match: re.Match[str]) -> str:
        color = colors[base_name(match.group(1))]
        return f'<span class="tag-highlight" style="background-color: {color}">{match.group(0)}</span>'

    return TAG_RE.sub(_wrap, content)
