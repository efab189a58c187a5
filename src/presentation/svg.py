import re
import textwrap

import structlog

from src.core.models import RepoStatsResult

logger = structlog.get_logger()

ERROR_CARD_LENGTH = 576.5
REPO_CARD_WIDTH = 400
REPO_CARD_HEIGHT = 120

FULL_WIDTH_COMMA = "，"

_ENCODE_PATTERN = re.compile(r"[\u00A0-\u9999<>&](?!#)")
_BACKSPACE_PATTERN = re.compile("\u0008")


def encode_html(text: str) -> str:
    """Encode non-ASCII and markup characters as numeric entities; backspaces are dropped."""
    encoded = _ENCODE_PATTERN.sub(lambda match: f"&#{ord(match.group(0))};", text)
    return _BACKSPACE_PATTERN.sub("", encoded)


def wrap_text_multiline(text: str, width: int = 59, max_lines: int = 3) -> list[str]:
    """
    Split text over multiple lines based on the card width.

    Args:
        text: Text to split.
        width: Line width in number of characters.
        max_lines: Maximum number of lines.

    Returns:
        The encoded lines; the last kept line ends with "..." when the text
        did not fit.
    """
    encoded = encode_html(text)

    if FULL_WIDTH_COMMA in encoded:
        # Chinese full punctuation
        wrapped = encoded.split(FULL_WIDTH_COMMA)
    else:
        wrapped = textwrap.wrap(encoded, width=width, break_long_words=False, break_on_hyphens=False)

    lines = [line.strip() for line in wrapped][:max_lines]

    if len(wrapped) > max_lines:
        lines[max_lines - 1] += "..."

    return [line for line in lines if line]


def render_error(message: str, secondary_message: str = "") -> str:
    """
    Renders error message on the card.

    Args:
        message: Main error message, HTML-encoded before rendering.
        secondary_message: Hint shown in gray below the main message.

    Returns:
        The SVG markup.
    """
    return f"""
    <svg width="{ERROR_CARD_LENGTH}" height="120" viewBox="0 0 {ERROR_CARD_LENGTH} 120" fill="none" xmlns="http://www.w3.org/2000/svg">
    <style>
    .text {{ font: 600 16px 'Segoe UI', Ubuntu, Sans-Serif; fill: #2F80ED }}
    .small {{ font: 600 12px 'Segoe UI', Ubuntu, Sans-Serif; fill: #252525 }}
    .gray {{ fill: #858585 }}
    </style>
    <rect x="0.5" y="0.5" width="{ERROR_CARD_LENGTH - 1}" height="99%" rx="4.5" fill="#FFFEFE" stroke="#E4E2E2"/>
    <text x="25" y="45" class="text">Something went wrong! Could not render the repository card.</text>
    <text data-testid="message" x="25" y="55" class="text small">
      <tspan x="25" dy="18">{encode_html(message)}</tspan>
      <tspan x="25" dy="18" class="gray">{encode_html(secondary_message)}</tspan>
    </text>
    </svg>
  """


def _format_count(value: int) -> str:
    """1234 -> 1.2k, 999 -> 999."""
    if value >= 1000:
        return f"{value / 1000:.1f}".rstrip("0").rstrip(".") + "k"
    return str(value)


def render_repo_card(stats: RepoStatsResult) -> str:
    """Render repository stats as an SVG card."""
    name = wrap_text_multiline(stats.name or "unknown", width=40, max_lines=1)
    title = name[0] if name else ""
    language = encode_html(stats.primary_language or "Unknown")
    created = encode_html((stats.created_at or "")[:10]) or "-"

    rows = [
        ("Stars", _format_count(stats.total_stars), "stars"),
        ("Language", language, "language"),
        ("Collaborators", _format_count(stats.total_collaborators), "collaborators"),
        ("Created", created, "created"),
    ]

    body = "\n".join(
        f'      <text x="25" y="{55 + 16 * index}" class="stat" data-testid="{test_id}">'
        f'{label}: <tspan class="bold">{value}</tspan></text>'
        for index, (label, value, test_id) in enumerate(rows)
    )

    logger.debug("repo_card_rendered", repo=stats.name)

    return f"""
    <svg width="{REPO_CARD_WIDTH}" height="{REPO_CARD_HEIGHT}" viewBox="0 0 {REPO_CARD_WIDTH} {REPO_CARD_HEIGHT}" fill="none" xmlns="http://www.w3.org/2000/svg">
    <style>
    .header {{ font: 600 16px 'Segoe UI', Ubuntu, Sans-Serif; fill: #2F80ED }}
    .stat {{ font: 400 12px 'Segoe UI', Ubuntu, Sans-Serif; fill: #434D58 }}
    .bold {{ font-weight: 700 }}
    </style>
    <rect x="0.5" y="0.5" width="{REPO_CARD_WIDTH - 1}" height="99%" rx="4.5" fill="#FFFEFE" stroke="#E4E2E2"/>
    <text x="25" y="30" class="header" data-testid="header">{title}</text>
{body}
    </svg>
  """
