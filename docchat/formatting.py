"""Assistant response formatting.

A line whose first non-blank character is ``#`` or ``*`` is shown in bold
with that marker removed. Everything else is shown as-is. This is a single
leading-character check, not a markdown parser.
"""

from docchat.models import FormattedLine

EMPHASIS_MARKERS = ("#", "*")


def format_line(line: str) -> FormattedLine:
    """Format a single response line."""
    stripped = line.strip()
    if stripped.startswith(EMPHASIS_MARKERS):
        text = stripped.removeprefix("#").removeprefix("*").strip()
        return FormattedLine(text=text, emphasized=True)
    return FormattedLine(text=line)


def format_response(response: str) -> list[FormattedLine]:
    """Split a backend response into formatted lines.

    Args:
        response: Raw response text.

    Returns:
        One FormattedLine per input line, in order.
    """
    return [format_line(line) for line in response.splitlines()]


def escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def lines_to_html(lines: list[FormattedLine] | tuple[FormattedLine, ...]) -> str:
    """Render formatted lines as HTML, each followed by a line break."""
    parts = []
    for line in lines:
        text = escape_html(line.text)
        parts.append(f"<strong>{text}</strong><br>" if line.emphasized else f"{text}<br>")
    return "".join(parts)


def format_response_html(response: str) -> str:
    """Format a backend response straight to HTML for chat display."""
    return lines_to_html(format_response(response))
