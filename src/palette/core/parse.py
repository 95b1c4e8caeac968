"""Resource content parsing: frontmatter, tagged sections, and remaining markdown"""

import logging
from pathlib import Path

from palette.core.frontmatter import extract_frontmatter, split_lines, strip_bom
from palette.core.models import ParsedContent
from palette.core.sections import extract_sections
from palette.errors import ContentReadError


logger = logging.getLogger(__name__)


def parse_content(text: str) -> ParsedContent:
    """Decompose raw resource text into frontmatter, sections and remaining content.

    Never raises: input without recognizable structure comes back as
    remaining content only.
    """
    text = strip_bom(text)
    frontmatter, body_start = extract_frontmatter(text)
    body = "\n".join(split_lines(text)[body_start:]).strip()
    sections, remaining = extract_sections(body)
    return ParsedContent(
        frontmatter=frontmatter or None,
        sections=sections,
        remaining_content=remaining,
    )


def read_content(path: Path, encoding: str = "utf-8-sig") -> str:
    """Return the text of a resource file, raising ContentReadError on failure."""
    path = Path(path)
    logger.debug("reading %s", path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        logger.warning("resource not found: %s", path)
        raise ContentReadError(str(path), f"Resource not found: {path}") from e
    except UnicodeDecodeError as e:
        logger.warning("cannot decode %s as %s", path, encoding)
        raise ContentReadError(str(path), f"Cannot decode {path} as {encoding}") from e
    except OSError as e:
        logger.warning("cannot read %s: %s", path, e)
        raise ContentReadError(str(path), f"Cannot read {path}: {e.strerror or e}") from e


def parse_file(path: Path, encoding: str = "utf-8-sig") -> ParsedContent:
    """Read and parse a single resource file."""
    return parse_content(read_content(path, encoding))
