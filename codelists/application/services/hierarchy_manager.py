"""Hierarchy rules and tree reads for the building classification (KSO).

The tree has four levels. Level 1 nodes are roots; every deeper node must
point at an existing parent. Parent level is deliberately not checked
against level - 1: mismatches are accepted and logged.
"""

from __future__ import annotations

from codelists.application.interfaces.repositories import IClassificationRepository
from codelists.domain.entities.classification import ClassificationNode, build_forest
from codelists.domain.enums import ClassificationLevel
from codelists.domain.exceptions import (
    HasChildrenException,
    HierarchyCycleException,
    ParentNotFoundException,
    ParentRequiredException,
    ValidationException,
)
from codelists.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class HierarchyManager:
    """Validates parent links and assembles classification trees."""

    def __init__(self, repo: IClassificationRepository) -> None:
        self.repo = repo

    async def validate_and_resolve_parent(
        self,
        level: int,
        parent_id: int | None,
        node_id: int | None = None,
    ) -> ClassificationNode | None:
        """Return the parent node a node at level should hang under.

        Args:
            level: Level of the node being saved (1..4).
            parent_id: Requested parent; ignored for level 1.
            node_id: Id of the node being updated, to reject cycles.

        Returns:
            The resolved parent, or None for level 1.

        Raises:
            ValidationException: level is outside 1..4.
            ParentRequiredException: level > 1 without a parent.
            ParentNotFoundException: parent_id does not exist.
            HierarchyCycleException: parent is the node itself or one of its descendants.
        """
        if not ClassificationLevel.is_valid(level):
            raise ValidationException(
                f"Level must be between {ClassificationLevel.PODSKUPINA} and "
                f"{max(ClassificationLevel)}, got {level}",
                field="level",
            )
        if level == ClassificationLevel.PODSKUPINA:
            return None
        if parent_id is None:
            raise ParentRequiredException(level)

        parent = await self.repo.get_by_id(parent_id)
        if parent is None:
            raise ParentNotFoundException(parent_id)

        if parent.level != level - 1:
            logger.warning(
                "Classification at level %s placed under parent %s at level %s",
                level,
                parent.code,
                parent.level,
            )
        if node_id is not None:
            await self._ensure_not_ancestor(node_id, parent)
        return parent

    async def _ensure_not_ancestor(
        self, node_id: int, parent: ClassificationNode
    ) -> None:
        """Walk up from parent; reaching node_id means the move would close a cycle."""
        seen: set[int] = set()
        current: ClassificationNode | None = parent
        while current is not None and current.id not in seen:
            if current.id == node_id:
                raise HierarchyCycleException(node_id, parent.id)
            seen.add(current.id)
            if current.parent_id is None:
                return
            current = await self.repo.get_by_id(current.parent_id)

    async def get_possible_parents(self, level: int | None) -> list[ClassificationNode]:
        """Nodes one level above level; empty for None or level <= 1."""
        if level is None or level <= ClassificationLevel.PODSKUPINA:
            return []
        return await self.repo.list_by_level(level - 1)

    async def find_tree(self) -> list[ClassificationNode]:
        """All roots with their complete subtrees, ordered by code at every level."""
        return build_forest(await self.repo.list_all())

    async def find_entity_with_children(
        self, node_id: int
    ) -> ClassificationNode | None:
        """One node with its complete subtree, or None when absent."""
        forest = build_forest(await self.repo.list_all(), root_id=node_id)
        return forest[0] if forest else None

    async def find_roots(self) -> list[ClassificationNode]:
        return await self.repo.list_roots()

    async def find_children(self, parent_id: int) -> list[ClassificationNode]:
        return await self.repo.list_by_parent(parent_id)

    async def find_by_level(self, level: int) -> list[ClassificationNode]:
        return await self.repo.list_by_level(level)

    async def search(self, query: str | None) -> list[ClassificationNode]:
        """Case-insensitive substring search; blank query returns nothing."""
        if query is None or not query.strip():
            return []
        return await self.repo.search(query.strip())

    async def guard_deletion(self, node_id: int) -> None:
        """Raise HasChildrenException when node_id still has direct children."""
        if await self.repo.has_children(node_id):
            raise HasChildrenException(node_id)
