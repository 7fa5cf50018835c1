"""Resource discovery.

A :class:`ResourceRoot` is the searchable namespace assets are loaded from.
It wraps either a filesystem directory or an ``importlib.resources``
traversable (bundled package data) and answers two questions: which resource
names exist under a scope with a given suffix, and what bytes a name holds.

Resource names are POSIX-style paths relative to the root, e.g.
``"images/red/20x20_red.png"``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from bundled_assets.exceptions import InvalidScopeError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def normalize_scope(scope: str) -> str:
    """Normalize a scope string to slash-separated segments without edges.

    ``""``, ``"/"`` and ``"."`` all mean the whole root.

    Raises:
        InvalidScopeError: If the scope contains ``..`` segments.
    """
    parts = [p for p in scope.replace("\\", "/").split("/") if p and p != "."]
    if ".." in parts:
        raise InvalidScopeError(scope)
    return "/".join(parts)


class ResourceRoot:
    """Searchable root of bundled resources."""

    def __init__(self, base: Path | Traversable | str) -> None:
        """Initialize root.

        Args:
            base: Directory path or importlib.resources traversable.
        """
        self.base: Path | Traversable = Path(base) if isinstance(base, str) else base

    @classmethod
    def from_package(cls, package: str) -> ResourceRoot:
        """Build a root over the data files shipped inside a Python package."""
        return cls(resources.files(package))

    def __repr__(self) -> str:
        return f"ResourceRoot({str(self.base)!r})"

    def _node(self, name: str) -> Traversable:
        node: Traversable = self.base
        for part in normalize_scope(name).split("/"):
            if part:
                node = node.joinpath(part)
        return node

    def _walk(self, node: Traversable, prefix: str) -> Iterator[str]:
        for child in node.iterdir():
            child_name = f"{prefix}/{child.name}" if prefix else child.name
            if child.is_dir():
                yield from self._walk(child, child_name)
            elif child.is_file():
                yield child_name

    def discover(self, scope: str = "", suffixes: Iterable[str] = ()) -> list[str]:
        """List resource names under ``scope`` ending in one of ``suffixes``.

        Suffix matching is case-sensitive; list both cases explicitly to match
        either. An empty suffix collection matches every file.

        Args:
            scope: Directory-like namespace, ``""`` for the whole root.
            suffixes: Accepted name endings such as ``".png"``.

        Returns:
            Sorted list of matching resource names.
        """
        scope = normalize_scope(scope)
        node = self._node(scope)
        if not node.is_dir():
            logger.debug("Scope %r does not exist under %r", scope, self)
            return []

        wanted = tuple(suffixes)
        found = [
            name
            for name in self._walk(node, scope)
            if not wanted or name.endswith(wanted)
        ]
        found.sort()
        logger.debug("Discovered %d resources under %r", len(found), scope or "/")
        return found

    def exists(self, name: str) -> bool:
        """Return True if ``name`` refers to a file under this root."""
        try:
            return self._node(name).is_file()
        except InvalidScopeError:
            return False

    def read_bytes(self, name: str) -> bytes:
        """Return the raw content of resource ``name``.

        Raises:
            ResourceNotFoundError: If no such file exists.
        """
        node = self._node(name)
        if not node.is_file():
            raise ResourceNotFoundError(name, details={"root": str(self.base)})
        return node.read_bytes()
