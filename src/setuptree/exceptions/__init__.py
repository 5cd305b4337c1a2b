"""
SetupTree exception classes.

This package provides all exception types used throughout SetupTree for
consistent error handling and reporting.
"""

from setuptree.exceptions.core import (
    DuplicateKeyError,
    InconsistencyError,
    InvalidArgumentError,
    NodeNotFoundError,
    SetupTreeError,
)

__all__ = [
    "SetupTreeError",
    "InvalidArgumentError",
    "DuplicateKeyError",
    "NodeNotFoundError",
    "InconsistencyError",
]
