"""
SetupTree structure components.

This package provides the node registry and the reconciliation of node
parents with declared context parents.
"""

from setuptree.structure.registry import Repair, RepairKind, SetupNodeRegistry

__all__ = [
    "SetupNodeRegistry",
    "Repair",
    "RepairKind",
]
