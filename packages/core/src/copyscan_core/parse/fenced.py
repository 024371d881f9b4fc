from __future__ import annotations

import re

_FENCED_JSON_RE = re.compile(r"```json\r?\n(?P<body>.*?)\r?\n```", re.DOTALL)


def extract_fenced_json(text: str) -> str | None:
    """Return the body of the first ```json fenced block in ``text``."""
    match = _FENCED_JSON_RE.search(text or "")
    if match is None:
        return None
    body = match.group("body")
    if not body.strip():
        return None
    return body
