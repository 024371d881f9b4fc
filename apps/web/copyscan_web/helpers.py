from __future__ import annotations

from html import escape
import math
from urllib.parse import quote

from copyscan_core import SimilarityMatch, WebCitation

GAUGE_RADIUS = 50
GAUGE_TRACK_COLOR = "#374151"


def gauge_color(percentage: float) -> str:
    if percentage > 75:
        return "#ef4444"
    if percentage > 50:
        return "#fb923c"
    if percentage > 25:
        return "#facc15"
    return "#4ade80"


def gauge_label(percentage: float) -> str:
    # Half-up rounding to match the percentage shown elsewhere in the UI.
    return f"{math.floor(percentage + 0.5)}%"


def gauge_svg(percentage: float) -> str:
    circumference = 2 * math.pi * GAUGE_RADIUS
    offset = circumference - (percentage / 100) * circumference
    color = gauge_color(percentage)
    return (
        '<div class="gauge">'
        '<svg viewBox="0 0 120 120" width="160" height="160">'
        f'<circle r="{GAUGE_RADIUS}" cx="60" cy="60" fill="transparent" '
        f'stroke="{GAUGE_TRACK_COLOR}" stroke-width="10"/>'
        f'<circle r="{GAUGE_RADIUS}" cx="60" cy="60" fill="transparent" '
        f'stroke="{color}" stroke-width="10" stroke-linecap="round" '
        f'stroke-dasharray="{circumference:.3f}" stroke-dashoffset="{offset:.3f}" '
        'transform="rotate(-90 60 60)"/>'
        f'<text x="60" y="60" text-anchor="middle" dominant-baseline="central" '
        f'fill="{color}" font-size="26" font-weight="700">{gauge_label(percentage)}</text>'
        "</svg></div>"
    )


def match_card_html(match: SimilarityMatch, index: int) -> str:
    return (
        '<div class="match-card">'
        f"<h4>Match #{index + 1}</h4>"
        f'<p class="explanation">"{escape(match.explanation)}"</p>'
        '<div class="match-grid">'
        f'<div><h5>Source Text</h5><p class="snippet source">{escape(match.source_text)}</p></div>'
        f'<div><h5>Checked Text</h5><p class="snippet checked">{escape(match.checked_text)}</p></div>'
        "</div></div>"
    )


# Reserved characters stay intact; parentheses, spaces and brackets are encoded.
_URI_SAFE = ":/?#@!$&'*+,;=%~"


def citation_markdown(citation: WebCitation) -> str:
    title = citation.title.replace("[", "\\[").replace("]", "\\]")
    uri = quote(citation.uri, safe=_URI_SAFE)
    return f"- [{title}]({uri})  \n  `{uri}`"


def source_placeholder(use_web_search: bool) -> str:
    if use_web_search:
        return "Source text is optional when searching the web..."
    return "Paste the original text here..."
