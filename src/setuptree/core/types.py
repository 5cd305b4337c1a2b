"""
Core type definitions for SetupTree.

This module contains type aliases used throughout SetupTree to keep the two
identifier namespaces (node identity vs. context identity) apart in signatures.
"""

from typing import TYPE_CHECKING, Union
from uuid import UUID

if TYPE_CHECKING:
    from setuptree.core.node import SetupNode

NodeId = UUID

ContextId = UUID

# A parent given either directly or by its node id
ParentRef = Union["SetupNode", NodeId]
