"""
Core SetupTree components.

This package provides the fundamental building blocks for SetupTree: the
context record, the node, path utilities and type definitions.
"""

from setuptree.core.context import SetupContext
from setuptree.core.node import SetupNode
from setuptree.core.path_utils import PathResolver, PathSegment, tokenize_path
from setuptree.core.types import ContextId, NodeId, ParentRef

__all__ = [
    "SetupContext",
    "SetupNode",
    "PathResolver",
    "PathSegment",
    "tokenize_path",
    "ContextId",
    "NodeId",
    "ParentRef",
]
