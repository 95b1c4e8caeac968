"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from palette.config import Settings, load_config
from palette.core.clipboard import format_resources, resource_from_path, resource_name
from palette.core.labels import describe, format_resource_name, section_label, type_label
from palette.core.models import ParsedContent, ResourceType
from palette.core.parse import parse_content, read_content
from palette.errors import ConfigError, ContentReadError
from palette.logging import get_logger


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ConfigError as e:
        _fail(str(e))
    get_logger(verbose=settings.verbose)
    return settings


def _read(path: Path, settings: Settings) -> str:
    try:
        return read_content(path, settings.encoding)
    except ContentReadError as e:
        _fail(str(e))


def render_preview(parsed: ParsedContent, settings: Settings, title: str = None) -> str:
    """Plain-text preview: title, metadata lines, labeled sections, remaining content."""
    parts = []
    if title:
        parts.append(title)
    if parsed.frontmatter:
        parts.append("\n".join(f"{k}: {v}" for k, v in parsed.frontmatter.items()))
    for s in parsed.sections:
        label = section_label(s.tag, settings.section_labels)
        parts.append(f"== {label} ==\n{s.content}".rstrip())
    if parsed.remaining_content:
        parts.append(parsed.remaining_content)
    return "\n\n".join(parts)


def parse_cmd(
    path: Annotated[Path, typer.Argument(help="Resource file to parse")],
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="File encoding")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Print frontmatter, sections and remaining content as JSON."""
    settings = _settings(overrides={"encoding": encoding, "verbose": verbose or None})
    parsed = parse_content(_read(path, settings))
    typer.echo(parsed.model_dump_json(by_alias=True, indent=2))


def preview_cmd(
    path: Annotated[Path, typer.Argument(help="Resource file to preview")],
    kind: Annotated[Optional[ResourceType], typer.Option("--type", help="Resource kind shown in the title")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="File encoding")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Print a plain-text preview with labeled sections."""
    settings = _settings(overrides={"encoding": encoding, "verbose": verbose or None})
    parsed = parse_content(_read(path, settings))
    title = None
    if kind is not None:
        prefix = "/" if kind == ResourceType.command else ""
        title = f"[{type_label(kind)}] {prefix}{resource_name(path)}"
    typer.echo(render_preview(parsed, settings, title))


def ref_cmd(
    kind: Annotated[ResourceType, typer.Argument(help="Resource kind")],
    paths: Annotated[list[Path], typer.Argument(help="Resource files, in selection order")],
    project_root: Annotated[Optional[str], typer.Option("--project-root", help="Project root for relative paths")] = None,
    ):
    """Print clipboard text for the given resources, one per line, repeats dropped."""
    settings = _settings(overrides={"project_root": project_root})
    root = str(Path(settings.project_root).resolve()) if settings.project_root else None
    unique = dict.fromkeys(p.resolve() for p in paths)
    resources = [resource_from_path(p, kind, root) for p in unique]
    typer.echo(format_resources(resources, root))


def describe_cmd(
    paths: Annotated[list[Path], typer.Argument(help="Resource files to describe")],
    width: Annotated[Optional[int], typer.Option("--width", help="Max description length")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="File encoding")] = None,
    ):
    """Print the display name and one-line description of each resource."""
    settings = _settings(overrides={"description_width": width, "encoding": encoding})
    for p in paths:
        desc = describe(_read(p, settings), settings.description_width)
        typer.echo(f"{format_resource_name(resource_name(p))}: {desc or ''}".rstrip())
