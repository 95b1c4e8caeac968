"""Frontmatter detection: delimited `---` blocks and implicit leading key/value lines"""

from typing import Optional


DELIMITER = "---"
QUOTES = ('"', "'")
BOM = "\ufeff"


def split_lines(text: str) -> list[str]:
    """Split on newlines only; a trailing newline yields a final empty line."""
    return text.split("\n")


def strip_bom(text: str) -> str:
    """Drop a leading byte-order mark left by editors that save UTF-8 with a signature."""
    return text[1:] if text.startswith(BOM) else text


def strip_quotes(value: str) -> str:
    """Remove one enclosing pair of matching quotes, if both ends agree."""
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def split_pair(line: str) -> Optional[tuple[str, str]]:
    """Split a `key: value` line at its first colon; None if either side is empty."""
    idx = line.find(":")
    if idx <= 0:
        return None
    key = line[:idx].strip()
    value = strip_quotes(line[idx + 1:].strip())
    if not key or not value:
        return None
    return key, value


def _is_key_value_line(line: str) -> bool:
    return line.find(":") > 0 and not line.strip().startswith("-")


def delimited_frontmatter(lines: list[str]) -> tuple[dict[str, str], int]:
    """Parse a `---` fenced block at line 0. Returns (mapping, body_start).

    An unclosed block yields no metadata and a body starting at line 0.
    """
    end = next(
        (i for i, line in enumerate(lines) if i > 0 and line.strip() == DELIMITER),
        None,
    )
    if end is None:
        return {}, 0

    meta: dict[str, str] = {}
    for line in lines[1:end]:
        pair = split_pair(line)
        if pair:
            key, value = pair
            meta[key] = value
    return meta, end + 1


def implicit_frontmatter(lines: list[str]) -> tuple[dict[str, str], int]:
    """Consume the contiguous run of `key: value` lines at the top of the text.

    Scanning stops, without consuming the line, at a blank line, a line
    starting with `<`, a line without a colon, or a `-` list item.
    """
    meta: dict[str, str] = {}
    consumed = 0
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("<") or not _is_key_value_line(line):
            break
        pair = split_pair(line)
        if pair:
            key, value = pair
            meta[key] = value
        consumed += 1
    return meta, consumed


def extract_frontmatter(text: str) -> tuple[dict[str, str], int]:
    """Return (mapping, body_start_line) for text, picking the strategy by line 0."""
    lines = split_lines(strip_bom(text))
    if lines[0].strip() == DELIMITER:
        return delimited_frontmatter(lines)
    return implicit_frontmatter(lines)
