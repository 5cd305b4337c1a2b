"""
SetupNode tree vertex for SetupTree.

A node owns one SetupContext and an ordered list of child nodes, and keeps a
non-owning reference to its parent. The children list is the only ownership
edge of the tree.
"""

import weakref
from collections.abc import Iterator
from typing import Optional, overload
from uuid import UUID, uuid4

from setuptree.core.context import SetupContext
from setuptree.core.path_utils import PathResolver, tokenize_path
from setuptree.exceptions import InvalidArgumentError


class SetupNode:
    """
    Tree vertex wrapping a SetupContext.

    The node id is generated at construction and is independent of the
    context id: node identity and context identity are separate namespaces.

    Besides path and id lookups, the node exposes its children through plain
    list-style methods (add, remove, insert_at, ...). Indexing dispatches on
    the key type:

        node["Gearbox.Ratio 1"]   # path lookup, None if absent
        node[child.id]            # direct child by node id, None if absent
        node[0]                   # positional child access
    """

    def __init__(self, context: SetupContext):
        if context is None:
            raise InvalidArgumentError("context", "is required")
        self._id = uuid4()
        self.context = context
        self._parent_ref: weakref.ref["SetupNode"] | None = None
        self._children: list[SetupNode] = []

    @property
    def id(self) -> UUID:
        """Node identifier, fixed for the node's lifetime."""
        return self._id

    @property
    def name(self) -> str:
        """Display name, taken from the context."""
        return self.context.name

    @property
    def parent(self) -> Optional["SetupNode"]:
        """Parent node, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional["SetupNode"]) -> None:
        self._parent_ref = None if value is None else weakref.ref(value)

    @property
    def children(self) -> list["SetupNode"]:
        """Owned child nodes in insertion order."""
        return self._children

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    def lookup_child(self, node_id: UUID) -> Optional["SetupNode"]:
        """
        Find a direct child by node id.

        Only direct children are scanned; the first match in insertion order
        is returned.

        Params:
            node_id: Node id of the wanted child

        Returns:
            The child node if present; otherwise None
        """
        for child in self._children:
            if child.id == node_id:
                return child
        return None

    def lookup_by_path(self, path: str) -> Optional["SetupNode"]:
        """
        Resolve a path relative to this node.

        A blank path resolves to this node. Otherwise the leading segment is
        matched against direct children (first match in insertion order wins)
        and the remaining tokens are resolved recursively on the matched child.

        Params:
            path: Dotted, optionally indexed path (e.g., "BumpStops[2].xSpring")

        Returns:
            The addressed node, or None if any segment does not match
        """
        if PathResolver.is_blank(path):
            return self

        tokens = tokenize_path(path)
        if not tokens:
            return self

        segment, consumed = PathResolver.match_segment(tokens)
        if segment is None:
            return None

        matched = next((c for c in self._children if segment.matches(c)), None)
        if matched is None:
            return None

        return matched.lookup_by_path(PathResolver.join(tokens[consumed:]))

    find_by_path = lookup_by_path

    # Children collection

    def add(self, node: "SetupNode") -> None:
        self._children.append(node)

    def remove(self, node: "SetupNode") -> bool:
        """Remove a child, returning False if it was not a child."""
        try:
            self._children.remove(node)
        except ValueError:
            return False
        return True

    def contains(self, node: "SetupNode") -> bool:
        return node in self._children

    def index_of(self, node: "SetupNode") -> int:
        """Position of a child, or -1 if it is not a child."""
        try:
            return self._children.index(node)
        except ValueError:
            return -1

    def insert_at(self, index: int, node: "SetupNode") -> None:
        if not 0 <= index <= len(self._children):
            raise IndexError(f"Insert index {index} out of range")
        self._children.insert(index, node)

    def remove_at(self, index: int) -> None:
        del self._children[index]

    def clear(self) -> None:
        self._children.clear()

    @property
    def count(self) -> int:
        return len(self._children)

    @overload
    def __getitem__(self, key: int) -> "SetupNode": ...

    @overload
    def __getitem__(self, key: slice) -> list["SetupNode"]: ...

    @overload
    def __getitem__(self, key: UUID) -> Optional["SetupNode"]: ...

    @overload
    def __getitem__(self, key: str) -> Optional["SetupNode"]: ...

    def __getitem__(self, key):
        if isinstance(key, str):
            return self.lookup_by_path(key)
        if isinstance(key, UUID):
            return self.lookup_child(key)
        if isinstance(key, (int, slice)):
            return self._children[key]
        raise TypeError(
            f"SetupNode indices must be str, UUID, int or slice, not {type(key).__name__}"
        )

    def __setitem__(self, index: int, node: "SetupNode") -> None:
        self._children[index] = node

    def __contains__(self, node: object) -> bool:
        return node in self._children

    def __iter__(self) -> Iterator["SetupNode"]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # A leaf node is still a node
        return True

    def __repr__(self) -> str:
        return f"SetupNode({self.name!r}, id={self._id})"
