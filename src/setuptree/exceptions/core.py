"""
Exception classes for SetupTree node management.

This module defines specific exception types for the error conditions that
can occur while registering, looking up and reconciling setup nodes.
"""

from uuid import UUID


class SetupTreeError(Exception):
    """Base exception for all SetupTree-related errors."""

    pass


class InvalidArgumentError(SetupTreeError, ValueError):
    """Raised when a required argument is empty, blank or missing."""

    def __init__(self, argument: str, reason: str = "cannot be empty or whitespace"):
        """
        Initialize the exception.

        Params:
            argument: Name of the offending argument
            reason: Why the argument was rejected
        """
        self.argument = argument
        self.reason = reason
        super().__init__(f"'{argument}' {reason}")


class DuplicateKeyError(SetupTreeError):
    """Raised when attempting to register a node id that already exists."""

    def __init__(self, node_id: UUID):
        """
        Initialize the exception.

        Params:
            node_id: The node id that is already registered
        """
        self.node_id = node_id
        super().__init__(f"Node with id {node_id} is already registered")


class NodeNotFoundError(SetupTreeError, LookupError):
    """Raised when a referenced node or context does not exist in the registry."""

    def __init__(self, key: UUID, kind: str = "node"):
        """
        Initialize the exception.

        Params:
            key: The node id or context id that could not be resolved
            kind: What the key identifies ("node" or "context")
        """
        self.key = key
        self.kind = kind
        if kind == "context":
            message = f"No node for context {key} found"
        else:
            message = f"Node with id {key} was not found"
        super().__init__(message)


class InconsistencyError(SetupTreeError):
    """Raised when a context declares a parent context that no registered node carries.

    This is a data-integrity violation of the whole forest. Reconciliation
    aborts without applying any repair when it is raised.
    """

    def __init__(self, node_name: str, node_id: UUID, parent_context_id: UUID):
        """
        Initialize the exception.

        Params:
            node_name: Name of the node whose context is inconsistent
            node_id: Id of that node
            parent_context_id: The declared parent context id that was not found
        """
        self.node_name = node_name
        self.node_id = node_id
        self.parent_context_id = parent_context_id
        super().__init__(
            f"Node {node_name} ({node_id}) has context with parent {parent_context_id}, "
            f"but this context was not found in the registry"
        )
