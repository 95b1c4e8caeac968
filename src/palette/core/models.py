"""Data models for parsed resource content and catalog resources"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceType(str, Enum):
    agent = "agent"
    command = "command"
    skill = "skill"
    hook = "hook"
    plan = "plan"
    plugin = "plugin"


class ResourceScope(str, Enum):
    project = "project"
    global_ = "global"


class Section(BaseModel):
    """A named, tag-delimited region of a resource body."""
    model_config = ConfigDict(frozen=True)

    tag: str
    content: str


class ParsedContent(BaseModel):
    """Structured projection of one resource file's text.

    frontmatter is None when no metadata was found; it is never an empty dict.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frontmatter:       Optional[dict[str, str]] = None
    sections:          list[Section] = Field(default_factory=list)
    remaining_content: str = Field(default="", alias="remainingContent")


class Resource(BaseModel):
    """A single catalog entry backed by a file."""
    model_config = ConfigDict(populate_by_name=True)

    id:          str
    name:        str
    type:        ResourceType
    path:        str
    description: Optional[str] = None
    source:      str = "user"           # "user" or "plugin"
    plugin_name: Optional[str] = Field(default=None, alias="pluginName")
    scope:       ResourceScope = ResourceScope.global_
