"""Display labels, names and one-line descriptions for resources and sections"""

import re
from typing import Mapping, Optional

from palette.core.frontmatter import DELIMITER, strip_bom
from palette.core.models import ResourceType


SECTION_LABELS: dict[str, str] = {
    "role":             "Role",
    "constraints":      "Constraints",
    "workflow":         "Workflow",
    "task_format":      "Task Format",
    "output_format":    "Output Format",
    "success_criteria": "Success Criteria",
    "examples":         "Examples",
    "context":          "Context",
    "instructions":     "Instructions",
    "guidelines":       "Guidelines",
    "prompt":           "Prompt",
}

TYPE_LABELS: dict[ResourceType, str] = {
    ResourceType.agent:   "Agent",
    ResourceType.command: "Slash Command",
    ResourceType.skill:   "Skill",
    ResourceType.plan:    "Plan",
    ResourceType.hook:    "Hook",
    ResourceType.plugin:  "Plugin",
}


def section_label(tag: str, extra: Optional[Mapping[str, str]] = None) -> str:
    """Return the display label for a section tag, falling back to the tag itself."""
    if extra and tag in extra:
        return extra[tag]
    return SECTION_LABELS.get(tag, tag)


def type_label(kind: str) -> str:
    """Return the display label for a resource kind; unknown kinds pass through."""
    try:
        return TYPE_LABELS[ResourceType(kind)]
    except ValueError:
        return kind


def format_resource_name(name: str) -> str:
    """'create-agent-skill' -> 'Create Agent Skill', 'commit_push_pr' -> 'Commit Push Pr'."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in re.split(r"[-_]", name))


def describe(content: str, width: int = 100) -> Optional[str]:
    """Return the first prose line outside `---` blocks and headings, truncated to width."""
    in_frontmatter = False
    for line in strip_bom(content).splitlines():
        stripped = line.strip()
        if stripped == DELIMITER:
            in_frontmatter = not in_frontmatter
            continue
        if in_frontmatter or stripped.startswith("#") or not stripped:
            continue
        return f"{stripped[:width]}..." if len(stripped) > width else stripped
    return None
