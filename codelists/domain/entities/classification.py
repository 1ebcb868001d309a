"""Building classification (KSO) domain entity and tree assembly.

Nodes are kept in a flat arena keyed by id; children are derived from a
parent_id index instead of live parent/child object references. This keeps
the model serializable and makes cycles impossible to materialize.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from codelists.domain.value_objects import ValueSnapshot


@dataclass
class ClassificationNode:
    """One node of the building classification tree.

    children is populated only by explicit tree reads; flat reads leave it empty.
    """

    id: int
    code: str
    name_cs: str
    name_en: str
    level: int
    parent_id: int | None = None
    description_cs: str | None = None
    description_en: str | None = None
    valid_from: date | None = None
    valid_to: date | None = None
    sort_order: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    parent_code: str | None = None
    parent_name: str | None = None
    children: list[ClassificationNode] = field(default_factory=list)

    def to_snapshot(self) -> ValueSnapshot:
        """Audit snapshot of the node's own fields (children excluded)."""
        return ValueSnapshot.of(
            [
                ("code", self.code),
                ("nameCs", self.name_cs),
                ("nameEn", self.name_en),
                ("descriptionCs", self.description_cs),
                ("descriptionEn", self.description_en),
                ("level", self.level),
                ("parentId", self.parent_id),
                ("validFrom", self.valid_from),
                ("validTo", self.valid_to),
                ("sortOrder", self.sort_order),
            ]
        )

    def walk(self) -> Iterable[ClassificationNode]:
        """Yield this node and every materialized descendant, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def build_forest(
    nodes: Iterable[ClassificationNode],
    root_id: int | None = None,
) -> list[ClassificationNode]:
    """Attach children to copies of nodes and return the requested roots.

    Sibling order follows the input order, so pass nodes already sorted by code.
    Input nodes are not mutated.

    Args:
        nodes: Every node that may appear in the result.
        root_id: When set, return only that node with its subtree (empty list
            when absent). Otherwise return all nodes without a parent.

    Returns:
        Root nodes with children populated recursively.
    """
    arena: dict[int, ClassificationNode] = {}
    children_of: defaultdict[int | None, list[int]] = defaultdict(list)
    for node in nodes:
        arena[node.id] = replace(node, children=[])
        children_of[node.parent_id].append(node.id)

    if root_id is not None:
        if root_id not in arena:
            return []
        root_ids = [root_id]
    else:
        root_ids = children_of[None]

    visited: set[int] = set()
    stack = list(root_ids)
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        parent = arena[node_id]
        for child_id in children_of.get(node_id, []):
            if child_id not in visited:
                parent.children.append(arena[child_id])
                stack.append(child_id)
    return [arena[node_id] for node_id in root_ids]

