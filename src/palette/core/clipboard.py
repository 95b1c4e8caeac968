"""Plain-text clipboard and drag payloads for resources and multi-selections"""

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional

from palette.core.labels import describe
from palette.core.models import Resource, ResourceScope, ResourceType


_LEADING_SEP_RE = re.compile(r"^[/\\]")


def resource_path(resource: Resource, project_root: Optional[str] = None) -> str:
    """Project-relative path for project-scoped resources when the root is known, else absolute."""
    if resource.scope == ResourceScope.project and project_root:
        return _LEADING_SEP_RE.sub("", resource.path.replace(project_root, "", 1))
    return resource.path


def format_resource(resource: Resource, project_root: Optional[str] = None) -> str:
    """`/name` for commands, `<kind>path</kind>` for every other kind."""
    if resource.type == ResourceType.command:
        return f"/{resource.name}"
    kind = resource.type.value
    return f"<{kind}>{resource_path(resource, project_root).strip()}</{kind}>"


def format_resources(resources: Iterable[Resource], project_root: Optional[str] = None) -> str:
    """One representation per line, in the given order."""
    return "\n".join(format_resource(r, project_root) for r in resources)


class Selection:
    """Multi-select set of resources that remembers click order (first click first)."""

    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._items: dict[str, Resource] = {}
        for r in resources:
            self.add(r)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._items.values()))

    def __contains__(self, resource: object) -> bool:
        rid = resource.id if isinstance(resource, Resource) else resource
        return rid in self._items

    def add(self, resource: Resource) -> None:
        self._items.setdefault(resource.id, resource)

    def discard(self, resource: Resource) -> None:
        self._items.pop(resource.id, None)

    def toggle(self, resource: Resource) -> bool:
        """Add or remove resource; returns True when it is selected afterwards."""
        if resource.id in self._items:
            del self._items[resource.id]
            return False
        self._items[resource.id] = resource
        return True

    def clear(self) -> None:
        self._items.clear()

    def resources(self) -> list[Resource]:
        return list(self._items.values())

    def format(self, project_root: Optional[str] = None) -> str:
        return format_resources(self._items.values(), project_root)

    def drag_payload(self, resource: Resource, project_root: Optional[str] = None) -> str:
        """Whole selection when the dragged resource is part of it, else just that resource."""
        if resource.id in self._items:
            return self.format(project_root)
        return format_resource(resource, project_root)


def resource_name(path: Path) -> str:
    """File stem, or the directory name for skills stored as <name>/SKILL.md."""
    path = Path(path)
    return path.parent.name if path.name == "SKILL.md" else path.stem


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def resource_from_path(
    path: Path,
    kind: ResourceType,
    project_root: Optional[str] = None,
    content: Optional[str] = None,
    source: str = "user",
    plugin_name: Optional[str] = None,
    ) -> Resource:
    """Build a Resource for a file, scoped to the project when it lies under project_root."""
    path = Path(path)
    kind = ResourceType(kind)
    name = resource_name(path)
    scope = (
        ResourceScope.project
        if project_root and _is_within(path, Path(project_root))
        else ResourceScope.global_
    )
    return Resource(
        id=f"{kind.value}-{source}-{scope.value}-{plugin_name or 'user'}-{name}",
        name=name,
        type=kind,
        path=str(path),
        description=describe(content) if content is not None else None,
        source=source,
        plugin_name=plugin_name,
        scope=scope,
    )
