"""Extraction of top-level `<tag>...</tag>` sections from a resource body"""

import re

from palette.core.models import Section


# Non-greedy up to the first close tag with the same name; nesting is not supported.
SECTION_RE = re.compile(r"<(\w+)>(.*?)</\1>", re.DOTALL | re.ASCII)


def extract_sections(body: str) -> tuple[list[Section], str]:
    """Return (sections in order of appearance, body with matched regions removed)."""
    sections = [
        Section(tag=m.group(1), content=m.group(2).strip())
        for m in SECTION_RE.finditer(body)
    ]
    remaining = SECTION_RE.sub("", body).strip()
    return sections, remaining
