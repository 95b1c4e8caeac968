"""Shared fixtures for core unit tests"""

import pytest

from palette.core.models import Resource, ResourceScope, ResourceType


AGENT_MD = """\
name: code-reviewer
description: "Reviews diffs for style: naming, layout"
model: sonnet

<role>
You review code.
</role>

<workflow>
1. Read the diff.
2. Comment.
</workflow>

## Notes

Keep feedback short.
"""

SKILL_MD = """\
---
name: build
description: 'Builds the project'
---

# Build

Run the build script.
"""


@pytest.fixture(name="agent_md")
def agent_md_fixture():
    return AGENT_MD


@pytest.fixture(name="skill_md")
def skill_md_fixture():
    return SKILL_MD


@pytest.fixture(name="project_root")
def project_root_fixture():
    return "/home/dev/proj"


@pytest.fixture(name="command")
def command_fixture():
    return Resource(
        id="command-user-global-user-deploy",
        name="deploy",
        type=ResourceType.command,
        path="/home/dev/.claude/commands/deploy.md",
    )


@pytest.fixture(name="skill")
def skill_fixture(project_root):
    return Resource(
        id="skill-user-project-user-build",
        name="build",
        type=ResourceType.skill,
        path=f"{project_root}/tools/build.md",
        scope=ResourceScope.project,
    )


@pytest.fixture(name="agent")
def agent_fixture():
    return Resource(
        id="agent-user-global-user-code-reviewer",
        name="code-reviewer",
        type=ResourceType.agent,
        path="/home/dev/.claude/agents/code-reviewer.md",
    )
