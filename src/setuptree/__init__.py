"""
SetupTree - A forest of setup nodes addressable by id, context id and path

SetupTree keeps each node's live parent in line with the parent its context
declares, and resolves dotted, optionally indexed paths such as
"Chassis.BumpStops[2].xSpring".
"""

from importlib.metadata import version

from setuptree.core import SetupContext, SetupNode
from setuptree.structure import SetupNodeRegistry

__version__ = version("setuptree")

__all__ = [
    "__version__",
    "SetupContext",
    "SetupNode",
    "SetupNodeRegistry",
]
