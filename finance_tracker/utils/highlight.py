"""Search match highlighting."""
import html
from typing import Optional, Pattern


def highlight(text: str, pattern: Optional[Pattern] = None) -> str:
    """
    Wrap pattern matches in ``<mark>`` tags.

    Both matched and unmatched text is HTML escaped. Without a pattern the
    text is only escaped; empty matches are ignored.

    Args:
        text: Text to render
        pattern: Compiled search pattern

    Returns:
        HTML string
    """
    if not text:
        return ""
    if pattern is None:
        return html.escape(text)

    parts = []
    last_end = 0
    for match in pattern.finditer(text):
        start, end = match.span()
        if start == end:
            continue
        parts.append(html.escape(text[last_end:start]))
        parts.append(f"<mark>{html.escape(match.group(0))}</mark>")
        last_end = end
    parts.append(html.escape(text[last_end:]))

    return "".join(parts)
