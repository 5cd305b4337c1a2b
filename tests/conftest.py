"""
Shared test fixtures and utilities for the setuptree test suite.
"""

from dataclasses import dataclass, field
from uuid import UUID

import pytest

from setuptree import SetupContext, SetupNode, SetupNodeRegistry

CHASSIS_CONTEXT_ID = UUID("1A28B39E-771B-4105-B006-4AC3051D5F92")
GEARBOX_CONTEXT_ID = UUID("0F4ED5C7-0FDE-43E0-8632-8199698142F6")
DRIVER_CONTEXT_ID = UUID("64626B55-8544-4233-8A74-B52F1A5AF80B")
BUMPSTOPS_CONTEXT_ID = UUID("7AC55434-5BC8-4BBE-8882-7E5E9680E2A4")


@dataclass
class ChassisForest:
    """Sample vehicle setup forest and handles on its interesting nodes."""

    registry: SetupNodeRegistry
    chassis: SetupNode
    gearbox: SetupNode
    driver: SetupNode
    bumpstops: SetupNode
    ratios: list[SetupNode] = field(default_factory=list)
    teeth: list[SetupNode] = field(default_factory=list)
    springs: list[SetupNode] = field(default_factory=list)


def make_node(context_id: UUID, name: str, **context_fields) -> SetupNode:
    """Build a node around a freshly created context."""
    return SetupNode(SetupContext(context_id, name, **context_fields))


@pytest.fixture
def registry() -> SetupNodeRegistry:
    return SetupNodeRegistry()


@pytest.fixture
def chassis_forest() -> ChassisForest:
    """Chassis root with a gearbox of eight ratios, a driver and three bump stop springs.

    Every node is added consistently with its context, so the forest needs
    no reconciliation.
    """
    registry = SetupNodeRegistry()

    chassis = make_node(CHASSIS_CONTEXT_ID, "Chassis")
    registry.add_root(chassis)

    gearbox = make_node(
        GEARBOX_CONTEXT_ID, "Gearbox", parent_context_id=CHASSIS_CONTEXT_ID
    )
    registry.add_child(gearbox, chassis.id)

    ratios = []
    teeth = []
    for i in range(1, 9):
        ratio_context_id = UUID(f"CF81059E-0CE9-4648-9FFB-E44EDB4E000{i}")
        ratio = make_node(
            ratio_context_id, f"Ratio {i}", parent_context_id=GEARBOX_CONTEXT_ID
        )
        registry.add_child(ratio, gearbox.id)
        ratios.append(ratio)

        n_teeth = make_node(
            UUID(f"75E02183-0CE9-4648-9FFB-E44EDB4E000{i}"),
            "NTeeth",
            parent_context_id=ratio_context_id,
        )
        registry.add_child(n_teeth, ratio.id)
        teeth.append(n_teeth)

    driver = make_node(DRIVER_CONTEXT_ID, "Driver_", parent_context_id=CHASSIS_CONTEXT_ID)
    registry.add_child_by_parent_context_id(driver, CHASSIS_CONTEXT_ID)

    bumpstops = make_node(
        BUMPSTOPS_CONTEXT_ID, "BumpStops", parent_context_id=CHASSIS_CONTEXT_ID
    )
    registry.add_child(bumpstops, chassis.id)

    springs = []
    for i in range(1, 4):
        spring = make_node(
            UUID(f"926F47AD-0EDF-41AA-B0A2-C633035D000{i}"),
            "xSpring",
            parent_context_id=BUMPSTOPS_CONTEXT_ID,
            parent_ordinal=i,
        )
        registry.add_child(spring, bumpstops.id)
        springs.append(spring)

    return ChassisForest(
        registry=registry,
        chassis=chassis,
        gearbox=gearbox,
        driver=driver,
        bumpstops=bumpstops,
        ratios=ratios,
        teeth=teeth,
        springs=springs,
    )
