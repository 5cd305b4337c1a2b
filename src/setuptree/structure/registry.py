"""
Registry for managing every SetupNode of a forest.

This module contains the node registry that indexes all nodes by node id,
resolves parents by node or context identity, anchors path lookups at the
forest roots, and reconciles each node's live parent with the parent its
context declares.
"""

import logging
from collections.abc import Iterator
from enum import Enum
from uuid import UUID

from attrs import frozen

from setuptree.core.node import SetupNode
from setuptree.core.path_utils import PathResolver, tokenize_path
from setuptree.core.types import ContextId, NodeId, ParentRef
from setuptree.exceptions import (
    DuplicateKeyError,
    InconsistencyError,
    InvalidArgumentError,
    NodeNotFoundError,
)

logger = logging.getLogger(__name__)


class RepairKind(Enum):
    """How reconciliation brings a node back in line with its context."""

    DETACH = "detach"  # context has no parent, node has one
    ATTACH = "attach"  # context has a parent, node has none
    REPARENT = "reparent"  # node sits under a different parent than declared


@frozen
class Repair:
    """A single planned reconciliation step."""

    node: SetupNode
    kind: RepairKind
    parent: SetupNode | None = None

    def __str__(self) -> str:
        target = self.parent.name if self.parent is not None else "<root>"
        return f"{self.kind.value} {self.node.name} ({self.node.id}) -> {target}"


class SetupNodeRegistry:
    """Identifier-indexed registry of all nodes in a setup forest.

    Every node is registered, not only roots. Nodes are kept in registration
    order, which is also the iteration order. There is no context-id index:
    context lookups scan the registered nodes.

    Two representations of parenthood coexist: the node graph (`node.parent`
    and the parent's children) and the id each context declares in
    `parent_context_id`. Insertions only touch the node graph; callers may
    change context fields directly. `reconcile` repairs the node graph so that
    for every node:
      - `context.parent_context_id is None` iff `node.parent is None`
      - otherwise `node.parent.context.id == context.parent_context_id`

    Usage:
        registry = SetupNodeRegistry()
        registry.add_root(chassis)
        registry.add_child(gearbox, chassis.id)
        registry.add_child_by_parent_context_id(driver, chassis.context.id)
        registry.reconcile()
        registry.lookup_by_path("Chassis.Gearbox")
    """

    def __init__(self):
        self._nodes: dict[NodeId, SetupNode] = {}

    def add_root(self, node: SetupNode) -> None:
        """
        Register a node without assigning a parent.

        Params:
            node: Node to register

        Raises:
            DuplicateKeyError: If a node with the same id is already registered
        """
        if node.id in self._nodes:
            raise DuplicateKeyError(node.id)
        self._nodes[node.id] = node
        logger.debug("Registered root %r", node)

    def add_child(self, node: SetupNode, parent: ParentRef) -> None:
        """
        Register a node as child of an already registered parent.

        The node's parent is set and the node is appended to the parent's
        children unless it is already one of them. All checks happen before
        any mutation.

        Params:
            node: Node to register
            parent: Parent node, or the parent's node id

        Raises:
            DuplicateKeyError: If a node with the same id is already registered
            NodeNotFoundError: If the parent is not registered
        """
        if node.id in self._nodes:
            raise DuplicateKeyError(node.id)
        parent_node = self._resolve_parent(parent)

        node.parent = parent_node
        if not parent_node.contains(node):
            parent_node.add(node)
        self._nodes[node.id] = node
        logger.debug("Registered %r under %r", node, parent_node)

    def add_child_by_parent_context_id(
        self, node: SetupNode, parent_context_id: ContextId
    ) -> None:
        """
        Register a node under the node whose context has the given id.

        Params:
            node: Node to register
            parent_context_id: Context id of the wanted parent

        Raises:
            NodeNotFoundError: If no registered node carries that context
            DuplicateKeyError: If a node with the same id is already registered
        """
        parent_node = self.find_by_context_id(parent_context_id)
        if parent_node is None:
            raise NodeNotFoundError(parent_context_id, kind="context")
        self.add_child(node, parent_node.id)

    def lookup_by_node_id(self, node_id: NodeId) -> SetupNode:
        """
        Get a registered node by node id.

        Raises:
            NodeNotFoundError: If no node with that id is registered
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def find_by_context_id(self, context_id: ContextId) -> SetupNode | None:
        """
        Find the first registered node whose context has the given id.

        Params:
            context_id: Context id to search for

        Returns:
            The node in registration order if found; otherwise None
        """
        for node in self._nodes.values():
            if node.context.id == context_id:
                return node
        return None

    def lookup_by_path(self, path: str) -> SetupNode | None:
        """
        Resolve a path anchored at the forest roots.

        The first token names a root (a registered node without a parent,
        first in registration order); the remaining tokens resolve from there.

        Params:
            path: Dotted, optionally indexed path (e.g., "Chassis.BumpStops[2].xSpring")

        Returns:
            The addressed node, or None if the path does not match

        Raises:
            InvalidArgumentError: If the path is blank
        """
        if PathResolver.is_blank(path):
            raise InvalidArgumentError("path")

        tokens = tokenize_path(path)
        if not tokens:
            raise InvalidArgumentError("path", "contains no path segments")

        root = next(
            (n for n in self._nodes.values() if n.parent is None and n.name == tokens[0]),
            None,
        )
        if root is None:
            return None
        return root.lookup_by_path(PathResolver.join(tokens[1:]))

    find_by_path = lookup_by_path

    def roots(self) -> list[SetupNode]:
        """Registered nodes without a parent, in registration order."""
        return [node for node in self._nodes.values() if node.parent is None]

    def plan_repairs(self) -> list[Repair]:
        """
        Compute the repairs `reconcile` would apply, without applying them.

        Each node falls into at most one case, checked in this order:
          - DETACH: context declares no parent but the node has one
          - ATTACH: context declares a parent but the node has none
          - REPARENT: the node's parent carries a different context id

        Returns:
            Planned repairs in registration order

        Raises:
            InconsistencyError: If a declared parent context id matches no registered node
        """
        repairs = []
        for node in self._nodes.values():
            declared = node.context.parent_context_id
            actual = node.parent

            if declared is None:
                if actual is not None:
                    repairs.append(Repair(node, RepairKind.DETACH))
            elif actual is None:
                repairs.append(
                    Repair(node, RepairKind.ATTACH, self._require_context(node, declared))
                )
            elif actual.context.id != declared:
                repairs.append(
                    Repair(node, RepairKind.REPARENT, self._require_context(node, declared))
                )
        return repairs

    def reconcile(self) -> int:
        """
        Repair divergence between node parents and declared context parents.

        All repairs are planned before any is applied, so a fatal
        inconsistency leaves the forest untouched. Running it again without
        intervening mutation returns 0.

        Returns:
            Number of repaired nodes

        Raises:
            InconsistencyError: If a declared parent context id matches no registered node
        """
        repairs = self.plan_repairs()
        for repair in repairs:
            self._apply(repair)
            logger.debug("Reconciled: %s", repair)
        logger.debug("Reconciliation repaired %d of %d nodes", len(repairs), len(self._nodes))
        return len(repairs)

    ensure_consistency = reconcile

    def reparent(self, node: SetupNode, parent: ParentRef | None) -> None:
        """
        Move a registered node, updating the node graph and its context together.

        Params:
            node: Registered node to move
            parent: New parent node or node id, None to make the node a root

        Raises:
            NodeNotFoundError: If the node or the new parent is not registered
            InvalidArgumentError: If the new parent is the node itself or one of its descendants
        """
        if node.id not in self._nodes:
            raise NodeNotFoundError(node.id)

        if parent is None:
            new_parent = None
            node.context.parent_context_id = None
            kind = RepairKind.DETACH
        else:
            new_parent = self._resolve_parent(parent)
            if self._is_within(new_parent, node):
                raise InvalidArgumentError("parent", "would place the node under itself")
            node.context.parent_context_id = new_parent.context.id
            kind = RepairKind.ATTACH if node.parent is None else RepairKind.REPARENT
        repair = Repair(node, kind, new_parent)
        self._apply(repair)
        logger.debug("Moved: %s", repair)

    def _resolve_parent(self, parent: ParentRef) -> SetupNode:
        if isinstance(parent, SetupNode):
            if self._nodes.get(parent.id) is not parent:
                raise NodeNotFoundError(parent.id)
            return parent
        return self.lookup_by_node_id(parent)

    @staticmethod
    def _is_within(candidate: SetupNode, ancestor: SetupNode) -> bool:
        # Reconciled contexts may declare each other as parents, so the
        # parent chain is not guaranteed to reach a root
        seen: set[NodeId] = set()
        current: SetupNode | None = candidate
        while current is not None and current.id not in seen:
            if current is ancestor:
                return True
            seen.add(current.id)
            current = current.parent
        return False

    def _require_context(self, node: SetupNode, context_id: ContextId) -> SetupNode:
        parent = self.find_by_context_id(context_id)
        if parent is None:
            raise InconsistencyError(node.name, node.id, context_id)
        return parent

    def _apply(self, repair: Repair) -> None:
        node = repair.node
        current = node.parent
        if current is not None:
            current.remove(node)
        node.parent = repair.parent
        if repair.parent is not None and not repair.parent.contains(node):
            repair.parent.add(node)

    def __getitem__(self, key: NodeId | str) -> SetupNode | None:
        if isinstance(key, str):
            return self.lookup_by_path(key)
        if isinstance(key, UUID):
            return self.lookup_by_node_id(key)
        raise TypeError(
            f"Registry keys must be a node id or a path, not {type(key).__name__}"
        )

    def __contains__(self, item: object) -> bool:
        if isinstance(item, SetupNode):
            return self._nodes.get(item.id) is item
        return item in self._nodes

    def __iter__(self) -> Iterator[SetupNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)
