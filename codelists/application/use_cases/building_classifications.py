"""Building classification (KSO) use cases: reads, tree reads and audited mutations."""

from __future__ import annotations

from codelists.application.dtos.classification import ClassificationNodeData
from codelists.application.interfaces.repositories import IClassificationRepository
from codelists.application.interfaces.services import IAuditRecorder, IChangePublisher
from codelists.application.services.hierarchy_manager import HierarchyManager
from codelists.domain.entities.classification import ClassificationNode
from codelists.domain.enums import ChangeType
from codelists.domain.exceptions import (
    CodeAlreadyExistsException,
    ResourceNotFoundException,
)
from codelists.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ENTITY_TYPE = "BuildingClassification"
CODELIST_NAME = "Klasifikace staveb (KSO)"
CODELIST_CODE = "BUILDING_CLASSIFICATION"


class BuildingClassificationService:
    """Coordinates uniqueness, hierarchy rules, persistence, audit and notification.

    The business transaction commits before the audit entry is written;
    the audit entry uses its own transaction, then subscribers are notified.
    """

    def __init__(
        self,
        repo: IClassificationRepository,
        hierarchy: HierarchyManager,
        recorder: IAuditRecorder,
        publisher: IChangePublisher,
    ) -> None:
        self.repo = repo
        self.hierarchy = hierarchy
        self.recorder = recorder
        self.publisher = publisher

    async def find_all(self) -> list[ClassificationNode]:
        return await self.repo.list_all()

    async def find_tree(self) -> list[ClassificationNode]:
        return await self.hierarchy.find_tree()

    async def find_roots(self) -> list[ClassificationNode]:
        return await self.hierarchy.find_roots()

    async def find_children(self, parent_id: int) -> list[ClassificationNode]:
        return await self.hierarchy.find_children(parent_id)

    async def find_by_level(self, level: int) -> list[ClassificationNode]:
        return await self.hierarchy.find_by_level(level)

    async def search(self, query: str | None) -> list[ClassificationNode]:
        return await self.hierarchy.search(query)

    async def get_possible_parents(self, level: int | None) -> list[ClassificationNode]:
        return await self.hierarchy.get_possible_parents(level)

    async def find_by_id(self, node_id: int) -> ClassificationNode:
        node = await self.repo.get_by_id(node_id)
        if node is None:
            raise ResourceNotFoundException(ENTITY_TYPE, node_id)
        return node

    async def find_by_code(self, code: str) -> ClassificationNode:
        node = await self.repo.get_by_code(code)
        if node is None:
            raise ResourceNotFoundException(ENTITY_TYPE, code)
        return node

    async def find_subtree(self, node_id: int) -> ClassificationNode:
        node = await self.hierarchy.find_entity_with_children(node_id)
        if node is None:
            raise ResourceNotFoundException(ENTITY_TYPE, node_id)
        return node

    async def create(
        self, data: ClassificationNodeData, actor: str | None = None
    ) -> ClassificationNode:
        """Create a node after code and hierarchy checks; audit and announce it."""
        async with self.repo.transaction():
            if await self.repo.exists_by_code(data.code):
                raise CodeAlreadyExistsException(ENTITY_TYPE, data.code)
            parent = await self.hierarchy.validate_and_resolve_parent(
                data.level, data.parent_id
            )
            node = await self.repo.create(data, parent.id if parent else None)

        await self.recorder.log_create(
            ENTITY_TYPE, node.id, node.code, node.to_snapshot(), actor
        )
        await self._announce(ChangeType.CREATE, node, actor)
        logger.info("Created building classification %s (id=%s)", node.code, node.id)
        return node

    async def update(
        self, node_id: int, data: ClassificationNodeData, actor: str | None = None
    ) -> ClassificationNode:
        """Overwrite a node; re-parenting under its own subtree is rejected."""
        async with self.repo.transaction():
            existing = await self.find_by_id(node_id)
            if data.code != existing.code and await self.repo.exists_by_code(data.code):
                raise CodeAlreadyExistsException(ENTITY_TYPE, data.code)
            parent = await self.hierarchy.validate_and_resolve_parent(
                data.level, data.parent_id, node_id=node_id
            )
            before = existing.to_snapshot()
            node = await self.repo.update(node_id, data, parent.id if parent else None)

        await self.recorder.log_update(
            ENTITY_TYPE, node.id, node.code, before, node.to_snapshot(), actor
        )
        await self._announce(ChangeType.UPDATE, node, actor)
        return node

    async def delete(self, node_id: int, actor: str | None = None) -> None:
        """Delete a leaf node. Nodes with children are refused, never cascaded."""
        async with self.repo.transaction():
            existing = await self.find_by_id(node_id)
            await self.hierarchy.guard_deletion(node_id)
            await self.repo.delete(node_id)

        await self.recorder.log_delete(
            ENTITY_TYPE, existing.id, existing.code, existing.to_snapshot(), actor
        )
        await self._announce(ChangeType.DELETE, existing, actor)
        logger.info(
            "Deleted building classification %s (id=%s)", existing.code, existing.id
        )

    async def _announce(
        self, change_type: ChangeType, node: ClassificationNode, actor: str | None
    ) -> None:
        await self.publisher.publish_change(
            codelist_name=CODELIST_NAME,
            codelist_code=CODELIST_CODE,
            change_type=change_type,
            entity_id=node.id,
            entity_code=node.code,
            entity_name=node.name_cs,
            changed_by=self.recorder.resolve_actor(actor),
        )
